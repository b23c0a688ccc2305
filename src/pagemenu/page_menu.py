"""Build a page menu from a document path or string.

Loads the document, runs the anchor injector, then renders the menu from the
recorded anchors. All usage checks run before the document is parsed, so a
failure never produces a half-built result.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from pagemenu.config import Settings
from pagemenu.errors import ErrorCode, PageMenuError
from pagemenu.injector import inject, normalize_targets
from pagemenu.menu import build_menu
from pagemenu.models.anchors import PageMenu

if TYPE_CHECKING:
    from collections.abc import Iterable


def load_document(path: str | Path) -> str:
    """Read a whole HTML file as UTF-8."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PageMenuError(
            code=ErrorCode.INPUT_UNREADABLE,
            message=f"Could not read input file <{path}>: {exc}",
            suggestion="Check that the path exists, is readable, and is UTF-8 encoded.",
            recoverable=False,
        ) from exc


def build_page_menu(
    *,
    html: str | None = None,
    path: str | Path | None = None,
    targets: Iterable[str] | None = None,
    settings: Settings | None = None,
) -> PageMenu:
    """Inject anchors into a page and build its menu.

    Exactly one of ``html`` or ``path`` must be given. ``targets`` falls back
    to ``settings.injector.targets`` when omitted.
    """
    settings = settings or Settings()
    log = structlog.get_logger().bind(source="path" if path is not None else "string")

    if html is None and path is None:
        raise PageMenuError(
            code=ErrorCode.MISSING_DOCUMENT,
            message="No document was supplied.",
            suggestion="Pass either html=<document string> or path=<file path>.",
            recoverable=False,
        )
    if html is not None and path is not None:
        raise PageMenuError(
            code=ErrorCode.INVALID_INPUT,
            message="Both html and path were supplied.",
            suggestion="Pass only one of html or path.",
            recoverable=False,
        )

    target_set = normalize_targets(targets if targets is not None else settings.injector.targets)

    if html is None:
        html = load_document(path)
        log.info("document_loaded", path=str(path), length=len(html))

    injected = inject(
        html,
        target_set,
        unique_ids=settings.injector.unique_ids,
        preserve_whitespace=settings.injector.preserve_whitespace,
    )
    menu = build_menu(injected.anchors, settings.menu)
    log.info("page_menu_built", targets=sorted(target_set), entries=len(injected.anchors))
    return PageMenu(html=injected.html, menu=menu, anchors=injected.anchors)
