"""Command-line entrypoint.

Responsibilities (and nothing more):
- Configure structlog
- Merge command-line options over Settings
- Write the modified page and the menu to files or stdout
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import structlog

from pagemenu import __version__
from pagemenu.config import Settings
from pagemenu.errors import PageMenuError
from pagemenu.page_menu import build_page_menu

log = structlog.get_logger()


def _setup_logging(settings: Settings) -> None:
    """Configure structlog. Called once at startup before any log statements."""
    log_level = logging.getLevelNamesMapping()[settings.logging.level]

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.logging.format == "json":
        processors = [*shared_processors, structlog.processors.JSONRenderer()]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # Logs go to stderr; stdout carries the page and menu
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagemenu",
        description="Insert anchors before the text of target elements and print a menu of links.",
    )
    parser.add_argument("input", type=Path, help="HTML file to process")
    parser.add_argument(
        "-t",
        "--target",
        dest="targets",
        action="append",
        metavar="ELEMENT",
        help="element whose text is indexed (repeatable, case-insensitive), e.g. -t H1 -t H2",
    )
    parser.add_argument("-o", "--output", type=Path, help="write the modified page here")
    parser.add_argument("-m", "--menu-output", type=Path, help="write the menu fragment here")
    parser.add_argument("--list-open", help="markup opening the menu (default <UL>)")
    parser.add_argument("--list-close", help="markup closing the menu (default </UL>)")
    parser.add_argument("--item-open", help="markup opening each entry (default <LI>)")
    parser.add_argument("--item-close", help="markup closing each entry (default </LI>)")
    parser.add_argument("--unique-ids", action="store_true", default=None, help="suffix repeated anchor ids")
    parser.add_argument(
        "--preserve-whitespace",
        action="store_true",
        default=None,
        help="keep text outside target elements untrimmed",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    menu_overrides = {
        field: value
        for field in ("list_open", "list_close", "item_open", "item_close")
        if (value := getattr(args, field)) is not None
    }
    injector_overrides = {
        field: value
        for field in ("targets", "unique_ids", "preserve_whitespace")
        if (value := getattr(args, field)) is not None
    }
    return settings.model_copy(
        update={
            "menu": settings.menu.model_copy(update=menu_overrides),
            "injector": settings.injector.model_copy(update=injector_overrides),
        }
    )


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = _apply_overrides(Settings(), args)
    _setup_logging(settings)

    try:
        result = build_page_menu(path=args.input, settings=settings)
    except PageMenuError as exc:
        log.error("page_menu_failed", code=exc.code, message=exc.message)
        print(json.dumps(exc.to_dict()), file=sys.stderr)
        return 1

    if args.output is not None:
        args.output.write_text(result.html, encoding="utf-8")
        log.info("page_written", path=str(args.output))
    else:
        print(result.html)

    if args.menu_output is not None:
        args.menu_output.write_text(result.menu, encoding="utf-8")
        log.info("menu_written", path=str(args.menu_output))
    else:
        print(result.menu)

    return 0


if __name__ == "__main__":
    sys.exit(main())
