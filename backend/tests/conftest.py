"""Shared pytest fixtures: test settings, a seeded in-memory note store and an API client."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from notemark.config import Settings
from notemark.core.content import build_note_document
from notemark.core.services import InMemoryNoteStore, StoredNote, get_note_store
from notemark.main import app

BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def test_settings():
    """Settings used by service-level tests."""
    return Settings(render_safe_mode=True, max_note_chars=1_000, untitled_title="Untitled")


@pytest.fixture
def note_store():
    """Store with one shared note and two blog posts."""
    return InMemoryNoteStore(
        [
            StoredNote(
                id="note-1",
                title="Meeting notes",
                content=build_note_document("# Agenda\n- one\n- two\n\nSee [docs](https://docs.example.com)"),
                sharing_link="share-abc",
                owner_id="user-1",
                created_at=BASE_TIME,
                updated_at=BASE_TIME,
            ),
            StoredNote(
                id="blog-old",
                title="First post",
                content=build_note_document("Hello **world**"),
                is_blog=True,
                owner_id="user-1",
                created_at=BASE_TIME,
                updated_at=BASE_TIME,
            ),
            StoredNote(
                id="blog-new",
                title="",
                content=build_note_document("Second post"),
                is_blog=True,
                sharing_link="share-blog",
                owner_id="user-2",
                created_at=BASE_TIME + timedelta(days=1),
                updated_at=BASE_TIME + timedelta(days=2),
            ),
        ]
    )


@pytest.fixture
def client(note_store):
    """API client backed by the seeded store."""
    app.dependency_overrides[get_note_store] = lambda: note_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_note_store, None)
