"""Protocol interfaces for swappable components.

The anchor injector depends on these protocols, not on the concrete
html.parser-backed stream. Tests substitute scripted token sources to drive
edge cases the real tokenizer never produces.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pagemenu.models.tokens import Token


class TokenSource(Protocol):
    """Pull-based token stream with one-token push back."""

    def get_token(self) -> Token | None: ...

    def unget_token(self, token: Token) -> None: ...

    def get_trimmed_text(self) -> str: ...


class TokenSourceFactory(Protocol):
    def __call__(self, document: str) -> TokenSource: ...
