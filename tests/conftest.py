"""Shared test fixtures for the pagemenu test suite."""

from __future__ import annotations

import pytest

from pagemenu.config import MenuSettings
from pagemenu.models.anchors import AnchorEntry


@pytest.fixture()
def sample_document() -> str:
    """A small page with two heading levels, a comment and a doctype."""
    return (
        "<!DOCTYPE html>"
        "<HTML><BODY>"
        "<H1>Introduction</H1>"
        "<P>Some text.</P>"
        "<!-- section break -->"
        "<H2>A &amp; B</H2>"
        "<P>More text.</P>"
        "<H2>Summary</H2>"
        "</BODY></HTML>"
    )


@pytest.fixture()
def sample_anchors() -> list[AnchorEntry]:
    return [
        AnchorEntry(text="A", anchor_id="A"),
        AnchorEntry(text="B", anchor_id="B"),
    ]


@pytest.fixture()
def ordered_list_fragments() -> MenuSettings:
    return MenuSettings(
        list_open='<ol class="toc">',
        list_close="</ol>",
        item_open="<li>",
        item_close="</li>\n",
    )
