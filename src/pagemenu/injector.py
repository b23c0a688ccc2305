"""Anchor injection.

Single forward pass over the token stream. A stack of open target elements
decides whether a text token sits inside a target region; each such text is
prefixed with ``<A name="{id}"></A>`` and recorded as an :class:`AnchorEntry`.
Every other token is copied through using its literal source.

Region tracking is lenient: any end tag naming a target pops one
frame, whether or not it matches the innermost open target, and a stray end
tag on an empty stack is ignored. Mismatched nesting is tolerated, not
reported.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from pagemenu.errors import ErrorCode, PageMenuError
from pagemenu.identifiers import AnchorIdAllocator
from pagemenu.models.anchors import AnchorEntry, InjectionResult
from pagemenu.models.tokens import (
    EndTag,
    MarkupLiteral,
    ProcessingInstruction,
    StartTag,
    Text,
)
from pagemenu.tokenizer import TokenStream

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pagemenu.protocols import TokenSourceFactory

log = structlog.get_logger()

ANCHOR_TEMPLATE = '<A name="{anchor_id}"></A>'


def normalize_targets(targets: Iterable[str] | None) -> frozenset[str]:
    """Lower-case and de-duplicate target element names, dropping blanks.

    Raises PageMenuError(MISSING_TARGETS) if nothing is left.
    """
    names = frozenset(name.strip().lower() for name in targets or () if name and name.strip())
    if not names:
        raise PageMenuError(
            code=ErrorCode.MISSING_TARGETS,
            message="No target elements were given.",
            suggestion="Pass at least one element name to index, e.g. targets=['H1', 'H2'].",
            recoverable=False,
        )
    return names


def inject(
    document: str,
    targets: Iterable[str],
    *,
    unique_ids: bool = False,
    preserve_whitespace: bool = False,
    stream_factory: TokenSourceFactory = TokenStream,
) -> InjectionResult:
    """Insert an anchor before every text run inside a target element.

    Returns the rewritten document and the (text, anchor id) pairs in
    document order. Text is trimmed before it is written back; text outside
    target regions is also trimmed unless ``preserve_whitespace`` is set.
    """
    target_set = normalize_targets(targets)
    stream = stream_factory(document)
    allocator = AnchorIdAllocator(unique=unique_ids)

    parts: list[str] = []
    anchors: list[AnchorEntry] = []
    open_regions: list[str] = []
    token_count = 0

    while (token := stream.get_token()) is not None:
        token_count += 1

        if isinstance(token, Text):
            if open_regions:
                stream.unget_token(token)
                text = stream.get_trimmed_text()
                escaped = allocator.allocate(text)
                parts.append(ANCHOR_TEMPLATE.format(anchor_id=escaped))
                parts.append(f"{text} ")
                anchors.append(AnchorEntry(text=text, anchor_id=escaped))
                log.debug("anchor_injected", text=text, anchor_id=escaped, depth=len(open_regions))
            elif preserve_whitespace:
                parts.append(token.source)
            else:
                stream.unget_token(token)
                parts.append(stream.get_trimmed_text())
        elif isinstance(token, StartTag):
            if token.name in target_set and not token.self_closing:
                open_regions.append(token.name)
            parts.append(token.source)
        elif isinstance(token, EndTag):
            if token.name in target_set and open_regions:
                open_regions.pop()
            parts.append(token.source)
        elif isinstance(token, (MarkupLiteral, ProcessingInstruction)):
            parts.append(token.source)
        else:
            log.error("unexpected_token", token_type=type(token).__name__)
            raise PageMenuError(
                code=ErrorCode.UNEXPECTED_TOKEN,
                message=f"Tokenizer produced an unknown token kind: {type(token).__name__}",
                suggestion="The token source is incompatible with the anchor injector.",
                recoverable=False,
            )

    log.info(
        "anchors_injected",
        anchors=len(anchors),
        tokens=token_count,
        unclosed_regions=len(open_regions),
    )
    return InjectionResult(html="".join(parts), anchors=tuple(anchors))
