from __future__ import annotations

from pagemenu.models.anchors import AnchorEntry, InjectionResult, PageMenu
from pagemenu.models.tokens import (
    EndTag,
    MarkupLiteral,
    ProcessingInstruction,
    StartTag,
    Text,
    Token,
)

__all__ = [
    # anchors
    "AnchorEntry",
    "InjectionResult",
    "PageMenu",
    # tokens
    "Token",
    "StartTag",
    "EndTag",
    "Text",
    "MarkupLiteral",
    "ProcessingInstruction",
]
