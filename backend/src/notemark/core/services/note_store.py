"""In-memory note store."""

from typing import Dict, Iterable, List, Optional

from ..logging import get_logger
from .interfaces import INoteStore, StoredNote

logger = get_logger("note_store")


class InMemoryNoteStore(INoteStore):
    """Dict-backed store, used when no hosted backend is wired in and in tests."""

    def __init__(self, notes: Optional[Iterable[StoredNote]] = None):
        self._notes: Dict[str, StoredNote] = {}
        for note in notes or ():
            self.add(note)

    def add(self, note: StoredNote) -> StoredNote:
        self._notes[note.id] = note
        logger.debug("Stored note", extra={"note_id": note.id, "is_blog": note.is_blog})
        return note

    async def get_by_sharing_link(self, sharing_link: str) -> Optional[StoredNote]:
        if not sharing_link:
            return None
        for note in self._notes.values():
            if note.sharing_link == sharing_link:
                return note
        return None

    async def list_blog_posts(self) -> List[StoredNote]:
        posts = [note for note in self._notes.values() if note.is_blog]
        return sorted(posts, key=lambda note: note.created_at, reverse=True)

    async def ping(self) -> bool:
        return True


_store: Optional[INoteStore] = None


def get_note_store() -> INoteStore:
    """Get the process-wide note store (FastAPI dependency)."""
    global _store
    if _store is None:
        _store = InMemoryNoteStore()
    return _store


def set_note_store(store: Optional[INoteStore]) -> None:
    """Replace the process-wide note store. ``None`` resets to a fresh in-memory one."""
    global _store
    _store = store
