from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AnchorEntry(BaseModel):
    """One menu entry: the visible heading text and the anchor it links to."""

    model_config = ConfigDict(frozen=True)

    text: str  # Trimmed literal text, not percent-encoded
    anchor_id: str  # Value of the injected <A name="..."> attribute


class InjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    html: str
    anchors: tuple[AnchorEntry, ...] = ()


class PageMenu(BaseModel):
    """The modified page plus the menu fragment that links into it."""

    model_config = ConfigDict(frozen=True)

    html: str
    menu: str
    anchors: tuple[AnchorEntry, ...] = ()
