"""
Service layer interfaces and implementations.
"""

from .interfaces import IHealthService, INoteStore, IRenderService, StoredNote
from .health_service import HealthService
from .note_store import InMemoryNoteStore, get_note_store, set_note_store
from .render_service import RenderService

__all__ = [
    # Interfaces
    "INoteStore",
    "IRenderService",
    "IHealthService",
    "StoredNote",

    # Implementations
    "InMemoryNoteStore",
    "RenderService",
    "HealthService",
    "get_note_store",
    "set_note_store",
]
