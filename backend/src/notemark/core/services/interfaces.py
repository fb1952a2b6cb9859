"""
Service interfaces for NoteMark.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..schemas.common import HealthCheckResponse
from ..schemas.notes import (
    BlogListResponse,
    FormatRequest,
    FormatResponse,
    PreviewRequest,
    RenderedNoteResponse,
    SharedNoteResponse,
)


class StoredNote(BaseModel):
    """A note as the hosted backend keeps it."""

    model_config = ConfigDict(validate_assignment=True)

    id: str
    title: str = ""
    content: Any = Field(default=None, description="Rich-document JSON or plain text")
    is_blog: bool = False
    sharing_link: Optional[str] = None
    owner_id: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("created_at", "updated_at")
    @classmethod
    def validate_timezone(cls, v):
        """Treat timestamps without a zone as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class INoteStore(ABC):
    """Read access to stored notes."""

    @abstractmethod
    async def get_by_sharing_link(self, sharing_link: str) -> Optional[StoredNote]:
        """Get the note published under a share link."""
        pass

    @abstractmethod
    async def list_blog_posts(self) -> List[StoredNote]:
        """List notes marked as blog posts, newest first."""
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Check the store is reachable."""
        pass


class IRenderService(ABC):
    """Rendering of note bodies for preview and public views."""

    @abstractmethod
    async def preview(self, request: PreviewRequest) -> RenderedNoteResponse:
        """Render editor content."""
        pass

    @abstractmethod
    async def format_selection(self, request: FormatRequest) -> FormatResponse:
        """Apply toolbar formatting to a selection."""
        pass

    @abstractmethod
    async def get_shared_note(self, sharing_link: str) -> SharedNoteResponse:
        """Render a shared note."""
        pass

    @abstractmethod
    async def list_blog_posts(self) -> BlogListResponse:
        """List blog posts."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get overall health."""
        pass

    @abstractmethod
    async def check_note_store_health(self) -> Dict[str, Any]:
        """Check note store connectivity."""
        pass
