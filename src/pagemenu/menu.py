"""Menu fragment builder."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pagemenu.config import MenuSettings

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pagemenu.models.anchors import AnchorEntry

LINK_TEMPLATE = '<a href="#{anchor_id}">{text}</a>'


def build_menu(anchors: Iterable[AnchorEntry], fragments: MenuSettings | None = None) -> str:
    """Render anchors as a list of links wrapped in the configured markup.

    No anchors gives ``list_open + list_close``.
    """
    fragments = fragments or MenuSettings()
    parts = [fragments.list_open]
    for entry in anchors:
        parts.append(fragments.item_open)
        parts.append(LINK_TEMPLATE.format(anchor_id=entry.anchor_id, text=entry.text))
        parts.append(fragments.item_close)
    parts.append(fragments.list_close)
    return "".join(parts)
