"""
Unit tests for rendering request/response schemas.
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from notemark.core.rendering import Block, Heading, LineBreak, ListBlock, render
from notemark.core.schemas.notes import FormatRequest, PreviewRequest, RenderedNoteResponse


class TestFormatRequest:
    def test_valid(self):
        req = FormatRequest(content="abc", start=0, end=2, format="italic")
        assert req.format.value == "italic"

    def test_format_optional(self):
        assert FormatRequest(content="abc", start=0, end=3).format is None

    def test_reversed_selection(self):
        with pytest.raises(ValidationError, match="Selection end must not be before start"):
            FormatRequest(content="abc", start=2, end=1)

    def test_negative_offsets(self):
        with pytest.raises(ValidationError):
            FormatRequest(content="abc", start=-1, end=1)

    def test_unknown_format(self):
        with pytest.raises(ValidationError):
            FormatRequest(content="abc", start=0, end=1, format="sparkle")


def test_preview_request_safe_optional():
    assert PreviewRequest(content="x").safe is None


def test_blocks_round_trip_through_json():
    blocks = render("# T\n- **a**\n\n> q")
    resp = RenderedNoteResponse(blocks=blocks, html="")

    restored = RenderedNoteResponse.model_validate_json(resp.model_dump_json())
    assert restored.blocks == blocks


def test_block_union_discriminates_on_kind():
    adapter = TypeAdapter(Block)

    assert isinstance(adapter.validate_python({"kind": "line_break", "line": 2}), LineBreak)
    heading = adapter.validate_python({"kind": "heading", "line": 0, "level": 2, "html": "x"})
    assert isinstance(heading, Heading) and heading.level == 2
    listing = adapter.validate_python({"kind": "list", "line": 0, "ordered": True, "items": []})
    assert isinstance(listing, ListBlock)


def test_heading_level_is_bounded():
    with pytest.raises(ValidationError):
        Heading(line=0, level=4, html="x")


def test_blocks_are_immutable():
    [block] = render("text")
    with pytest.raises(ValidationError):
        block.html = "changed"
