"""
Note rendering schemas.

These schemas define the API contracts for the editor preview, toolbar
formatting, the public share view and the blog listing.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..rendering import Block, FormatKind


class PreviewRequest(BaseModel):
    """Editor preview request schema."""

    content: str = Field(description="Note body in markdown")
    safe: Optional[bool] = Field(
        default=None, description="Escape the note before rendering (defaults to server setting)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "content": "# Agenda\n\n1. Review **Q3**\n2. Plan *Q4*\n\n> See [wiki](https://wiki.example.com)",
            }
        }
    )


class RenderedNoteResponse(BaseModel):
    """Rendered note body."""

    blocks: List[Block]
    html: str = Field(description="Markup for the whole body")


class FormatRequest(BaseModel):
    """Toolbar formatting request schema."""

    content: str = Field(description="Full note body")
    start: int = Field(ge=0, description="Selection start offset")
    end: int = Field(ge=0, description="Selection end offset")
    format: Optional[FormatKind] = Field(
        default=None, description="Formatting to apply; omit to clear formatting"
    )

    @model_validator(mode="after")
    def validate_range(self):
        """Selection must not be reversed."""
        if self.end < self.start:
            raise ValueError("Selection end must not be before start")
        return self

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"content": "make this bold", "start": 10, "end": 14, "format": "bold"}
        }
    )


class FormatResponse(BaseModel):
    """Formatted note body and the new selection."""

    content: str
    start: int
    end: int


class SharedNoteResponse(BaseModel):
    """Public view of a shared note."""

    title: str
    content: str = Field(description="Note body in markdown")
    blocks: List[Block]
    html: str


class BlogPostItem(BaseModel):
    """Blog post entry in listings."""

    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    owner_id: Optional[str] = None


class BlogListResponse(BaseModel):
    """All published blog posts, newest first."""

    blogs: List[BlogPostItem]
