"""Anchor identifiers derived from heading text."""

from __future__ import annotations

from urllib.parse import quote


def anchor_id(text: str) -> str:
    """Percent-encode ``text`` for use as an anchor name and URL fragment.

    Only RFC 3986 unreserved characters (letters, digits, ``-._~``) survive
    unescaped; everything else, including spaces and ``/``, becomes ``%XX``
    of its UTF-8 encoding.  ``"A & B"`` -> ``"A%20%26%20B"``.
    """
    return quote(text, safe="")


class AnchorIdAllocator:
    """Hands out anchor ids, optionally disambiguating repeats.

    With ``unique=False`` identical texts share one id, so their menu links
    all land on the first anchor. With ``unique=True`` the second and later
    occurrences get ``-2``, ``-3``, ... appended, skipping any id already
    issued.
    """

    def __init__(self, *, unique: bool = False) -> None:
        self.unique = unique
        self._issued: set[str] = set()

    def allocate(self, text: str) -> str:
        base = anchor_id(text)
        if not self.unique:
            return base
        candidate = base
        suffix = 2
        while candidate in self._issued:
            candidate = f"{base}-{suffix}"
            suffix += 1
        self._issued.add(candidate)
        return candidate
