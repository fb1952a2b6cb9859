"""
Unit tests for mapping blocks to HTML.
"""

import pytest

from notemark.core.rendering import (
    Heading,
    LineBreak,
    ListBlock,
    ListItem,
    Paragraph,
    Quote,
    block_to_html,
    blocks_to_html,
    render,
    render_not_found_page,
    render_page,
)


class TestBlockToHtml:
    @pytest.mark.parametrize(
        "level, expected",
        [
            (1, '<h1 class="text-2xl font-bold my-2">T</h1>'),
            (2, '<h2 class="text-xl font-bold my-2">T</h2>'),
            (3, '<h3 class="text-lg font-bold my-2">T</h3>'),
        ],
    )
    def test_headings(self, level, expected):
        assert block_to_html(Heading(line=0, level=level, html="T")) == expected

    def test_paragraph(self):
        assert block_to_html(Paragraph(line=0, html="<em>x</em>")) == '<p class="my-1"><em>x</em></p>'

    def test_quote(self):
        assert block_to_html(Quote(line=0, html="q")) == (
            '<blockquote class="border-l-4 border-gray-300 pl-4 my-2 italic">q</blockquote>'
        )

    def test_line_break(self):
        assert block_to_html(LineBreak(line=3)) == "<br />"

    def test_unordered_list(self):
        block = ListBlock(
            line=0,
            ordered=False,
            items=[ListItem(line=0, html="a"), ListItem(line=1, html="b")],
        )
        assert block_to_html(block) == (
            '<ul class="my-2 list-disc list-inside"><li>a</li><li>b</li></ul>'
        )

    def test_ordered_list(self):
        block = ListBlock(line=0, ordered=True, items=[ListItem(line=0, html="a")])
        assert block_to_html(block) == '<ol class="my-2 list-decimal list-inside"><li>a</li></ol>'

    def test_unknown_block_rejected(self):
        with pytest.raises(TypeError):
            block_to_html(object())


class TestPages:
    def test_blocks_joined_in_order(self):
        html = blocks_to_html(render("# A\nb"))
        assert html == '<h1 class="text-2xl font-bold my-2">A</h1>\n<p class="my-1">b</p>'

    def test_page_contains_title_and_body(self):
        page = render_page("My note", render("**hi**"))

        assert "<title>My note</title>" in page
        assert '<h1 class="text-2xl font-bold mb-4">My note</h1>' in page
        assert "<strong>hi</strong>" in page

    def test_page_title_escaped(self):
        page = render_page("<script>", [])
        assert "<script>" not in page
        assert "&lt;script&gt;" in page

    def test_untitled_fallback(self):
        assert "<title>Untitled</title>" in render_page("", [])
        assert "<title>No name</title>" in render_page(None, [], untitled="No name")

    def test_not_found_page(self):
        page = render_not_found_page()
        assert "Note Not Found" in page
        assert "This share link is invalid or the note has been deleted." in page
