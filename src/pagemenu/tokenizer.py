"""HTML tokenizer built on the standard library ``html.parser``.

HTMLParser reports structure through callbacks but discards most of the
original markup. ``_SourceTrackingParser`` records which callback fired and
then takes the token's literal source from the span the parser consumed,
which ``updatepos(i, j)`` receives right after every callback. Concatenating
the ``source`` of every token therefore reproduces the input exactly.
"""

from __future__ import annotations

from collections import deque
from html.parser import HTMLParser
from typing import TYPE_CHECKING

from pagemenu.models.tokens import (
    EndTag,
    MarkupLiteral,
    ProcessingInstruction,
    StartTag,
    Text,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pagemenu.models.tokens import Token


class _SourceTrackingParser(HTMLParser):
    def __init__(self) -> None:
        # Character references stay as written; Text.source must be literal.
        super().__init__(convert_charrefs=False)
        self.tokens: list[Token] = []
        self._pending: tuple[str, str] | None = None  # (kind, tag name)

    # -- callbacks ---------------------------------------------------------

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._pending = ("start", tag)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._pending = ("startend", tag)

    def handle_endtag(self, tag: str) -> None:
        self._pending = ("end", tag)

    def handle_data(self, data: str) -> None:
        self._pending = ("text", "")

    def handle_entityref(self, name: str) -> None:
        self._pending = ("text", "")

    def handle_charref(self, name: str) -> None:
        self._pending = ("text", "")

    def handle_comment(self, data: str) -> None:
        self._pending = ("markup", "")

    def handle_decl(self, decl: str) -> None:
        self._pending = ("markup", "")

    def unknown_decl(self, data: str) -> None:
        self._pending = ("markup", "")

    def handle_pi(self, data: str) -> None:
        self._pending = ("pi", "")

    # -- source tracking ---------------------------------------------------

    def updatepos(self, i: int, j: int) -> int:
        if i < j:
            self._emit(self.rawdata[i:j])
        return super().updatepos(i, j)

    def _emit(self, source: str) -> None:
        kind, name = self._pending or ("text", "")
        self._pending = None

        # Spans consumed without a callback (e.g. "</>") are kept as text.
        if kind == "text":
            if self.tokens and isinstance(self.tokens[-1], Text):
                source = self.tokens.pop().source + source
            self.tokens.append(Text(source))
        elif kind == "start":
            self.tokens.append(StartTag(name, source))
        elif kind == "startend":
            self.tokens.append(StartTag(name, source, self_closing=True))
        elif kind == "end":
            self.tokens.append(EndTag(name, source))
        elif kind == "markup":
            self.tokens.append(MarkupLiteral(source))
        else:
            self.tokens.append(ProcessingInstruction(source))

    def finish(self) -> list[Token]:
        self.close()
        # close() leaves the body of an unterminated <script>/<style> unread.
        if self.rawdata:
            self._pending = None
            self._emit(self.rawdata)
            self.rawdata = ""
        return self.tokens


def tokenize(document: str) -> list[Token]:
    """Split ``document`` into tokens whose sources concatenate back to it."""
    parser = _SourceTrackingParser()
    parser.feed(document)
    return parser.finish()


class TokenStream:
    """Pull interface over :func:`tokenize` with one-token push back.

    The whole document is tokenized up front; the stream only hands tokens
    out in order.
    """

    def __init__(self, document: str) -> None:
        self._tokens: deque[Token] = deque(tokenize(document))

    def get_token(self) -> Token | None:
        """Return the next token, or None once the stream is exhausted."""
        if not self._tokens:
            return None
        return self._tokens.popleft()

    def unget_token(self, token: Token) -> None:
        self._tokens.appendleft(token)

    def get_trimmed_text(self) -> str:
        """Consume the next token if it is text and return it stripped.

        Returns an empty string, consuming nothing, when the next token is
        not text.
        """
        token = self.get_token()
        if token is None:
            return ""
        if not isinstance(token, Text):
            self.unget_token(token)
            return ""
        return token.source.strip()

    def __iter__(self) -> Iterator[Token]:
        while (token := self.get_token()) is not None:
            yield token
