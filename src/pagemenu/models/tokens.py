"""Lexical tokens of an HTML document.

Every token keeps the literal ``source`` text it was read from, so a document
can be rebuilt byte for byte by concatenating token sources in order. Tag
names are lower-cased.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StartTag:
    name: str
    source: str
    self_closing: bool = False


@dataclass(frozen=True, slots=True)
class EndTag:
    name: str
    source: str


@dataclass(frozen=True, slots=True)
class Text:
    source: str


@dataclass(frozen=True, slots=True)
class MarkupLiteral:
    """A comment, declaration (``<!DOCTYPE ...>``) or marked section."""

    source: str


@dataclass(frozen=True, slots=True)
class ProcessingInstruction:
    source: str


Token = StartTag | EndTag | Text | MarkupLiteral | ProcessingInstruction
