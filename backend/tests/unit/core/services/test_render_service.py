"""
Unit tests for RenderService.
"""

import time
from datetime import datetime

import pytest
from fastapi import HTTPException

from notemark.config import Settings
from notemark.core.content import build_note_document
from notemark.core.rendering import FormatKind, Heading, ListBlock
from notemark.core.schemas.notes import FormatRequest, PreviewRequest
from notemark.core.services import InMemoryNoteStore, RenderService, StoredNote


@pytest.fixture
def service(note_store, test_settings):
    return RenderService(note_store, settings=test_settings)


@pytest.mark.asyncio
async def test_preview_uses_safe_mode_setting(service):
    resp = await service.preview(PreviewRequest(content="<b>x</b>"))

    assert resp.blocks[0].html == "&lt;b&gt;x&lt;/b&gt;"
    assert resp.html == '<p class="my-1">&lt;b&gt;x&lt;/b&gt;</p>'


@pytest.mark.asyncio
async def test_preview_request_can_opt_out_of_escaping(service):
    resp = await service.preview(PreviewRequest(content="<b>x</b>", safe=False))
    assert resp.blocks[0].html == "<b>x</b>"


@pytest.mark.asyncio
async def test_preview_defaults_follow_settings(note_store):
    service = RenderService(note_store, settings=Settings(render_safe_mode=False))
    resp = await service.preview(PreviewRequest(content="<i>"))
    assert resp.blocks[0].html == "<i>"


@pytest.mark.asyncio
async def test_preview_renders_structure(service):
    resp = await service.preview(PreviewRequest(content="# T\n- a\n- b"))

    assert isinstance(resp.blocks[0], Heading)
    assert isinstance(resp.blocks[1], ListBlock)
    assert resp.blocks[1].item_html == ["a", "b"]


@pytest.mark.asyncio
async def test_preview_rejects_oversized_content(service, test_settings):
    with pytest.raises(HTTPException) as exc_info:
        await service.preview(PreviewRequest(content="x" * (test_settings.max_note_chars + 1)))

    assert exc_info.value.status_code == 413


@pytest.mark.asyncio
async def test_preview_of_unclosed_links_is_fast(service, test_settings):
    content = "[](" * (test_settings.max_note_chars // 3)
    started = time.perf_counter()

    resp = await service.preview(PreviewRequest(content=content))

    assert time.perf_counter() - started < 1.0
    assert resp.blocks[0].html == content


@pytest.mark.asyncio
async def test_format_selection(service):
    resp = await service.format_selection(
        FormatRequest(content="make this bold", start=10, end=14, format=FormatKind.BOLD)
    )

    assert resp.content == "make this **bold**"
    assert (resp.start, resp.end) == (10, 18)


@pytest.mark.asyncio
async def test_format_selection_out_of_range(service):
    with pytest.raises(HTTPException) as exc_info:
        await service.format_selection(FormatRequest(content="abc", start=1, end=10, format="bold"))

    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_get_shared_note(service):
    note = await service.get_shared_note("share-abc")

    assert note.title == "Meeting notes"
    assert note.content.startswith("# Agenda")
    assert [block.kind for block in note.blocks] == ["heading", "list", "line_break", "paragraph"]
    assert 'href="https://docs.example.com"' in note.html


@pytest.mark.asyncio
async def test_get_shared_note_untitled(service):
    note = await service.get_shared_note("share-blog")
    assert note.title == "Untitled"


@pytest.mark.asyncio
async def test_get_shared_note_missing(service):
    with pytest.raises(HTTPException) as exc_info:
        await service.get_shared_note("nope")

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "Note not found"


@pytest.mark.asyncio
async def test_shared_note_escaped_in_safe_mode(test_settings):
    store = InMemoryNoteStore(
        [StoredNote(id="n", title="t", content=build_note_document("<img src=x onerror=y>"), sharing_link="l")]
    )
    note = await RenderService(store, settings=test_settings).get_shared_note("l")

    assert "<img" not in note.html
    assert "&lt;img" in note.html


@pytest.mark.asyncio
async def test_oversized_stored_note_still_renders(test_settings):
    body = "y" * (test_settings.max_note_chars + 10)
    store = InMemoryNoteStore([StoredNote(id="n", content=body, sharing_link="big")])

    note = await RenderService(store, settings=test_settings).get_shared_note("big")
    assert note.blocks[0].html == body


@pytest.mark.asyncio
async def test_list_blog_posts_newest_first(service):
    resp = await service.list_blog_posts()

    assert [post.id for post in resp.blogs] == ["blog-new", "blog-old"]
    assert resp.blogs[0].title == "Untitled"
    assert resp.blogs[1].content == "Hello **world**"
    assert resp.blogs[1].owner_id == "user-1"


@pytest.mark.asyncio
async def test_list_blog_posts_empty(test_settings):
    resp = await RenderService(InMemoryNoteStore(), settings=test_settings).list_blog_posts()
    assert resp.blogs == []


@pytest.mark.asyncio
async def test_list_blog_posts_with_naive_timestamp(test_settings):
    store = InMemoryNoteStore(
        [
            StoredNote(id="old", title="Old", is_blog=True, created_at=datetime(2020, 1, 1)),
            StoredNote(id="new", title="New", is_blog=True),
        ]
    )

    resp = await RenderService(store, settings=test_settings).list_blog_posts()

    assert [post.id for post in resp.blogs] == ["new", "old"]
