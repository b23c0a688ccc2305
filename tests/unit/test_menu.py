"""Unit tests for the menu fragment builder."""

from __future__ import annotations

from pagemenu.config import MenuSettings
from pagemenu.menu import build_menu
from pagemenu.models.anchors import AnchorEntry


class TestBuildMenu:
    def test_default_markup(self, sample_anchors: list[AnchorEntry]) -> None:
        assert build_menu(sample_anchors) == (
            '<UL><LI><a href="#A">A</a></LI><LI><a href="#B">B</a></LI></UL>'
        )

    def test_empty_anchors(self) -> None:
        assert build_menu([]) == "<UL></UL>"

    def test_empty_anchors_custom_wrapper(self, ordered_list_fragments: MenuSettings) -> None:
        assert build_menu([], ordered_list_fragments) == '<ol class="toc"></ol>'

    def test_custom_fragments(
        self,
        sample_anchors: list[AnchorEntry],
        ordered_list_fragments: MenuSettings,
    ) -> None:
        assert build_menu(sample_anchors, ordered_list_fragments) == (
            '<ol class="toc">'
            '<li><a href="#A">A</a></li>\n'
            '<li><a href="#B">B</a></li>\n'
            "</ol>"
        )

    def test_closes_with_list_close(self, sample_anchors: list[AnchorEntry]) -> None:
        menu = build_menu(sample_anchors)
        assert menu.count("<UL>") == 1
        assert menu.endswith("</UL>")

    def test_display_text_not_encoded(self) -> None:
        entry = AnchorEntry(text="A & B", anchor_id="A%20%26%20B")
        assert build_menu([entry]) == '<UL><LI><a href="#A%20%26%20B">A & B</a></LI></UL>'

    def test_one_link_per_anchor_in_order(self) -> None:
        anchors = [AnchorEntry(text=f"T{n}", anchor_id=f"id{n}") for n in range(10)]
        menu = build_menu(anchors)
        assert menu.count("<a href=") == 10
        assert menu.count("<LI>") == menu.count("</LI>") == 10
        positions = [menu.index(f'href="#id{n}"') for n in range(10)]
        assert positions == sorted(positions)

    def test_duplicate_ids_produce_duplicate_links(self) -> None:
        anchors = [
            AnchorEntry(text="Intro", anchor_id="Intro"),
            AnchorEntry(text="Intro", anchor_id="Intro"),
        ]
        assert build_menu(anchors).count('<a href="#Intro">Intro</a>') == 2

    def test_accepts_generator(self, sample_anchors: list[AnchorEntry]) -> None:
        assert build_menu(entry for entry in sample_anchors) == build_menu(sample_anchors)
