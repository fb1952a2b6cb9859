"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .common import HealthCheckResponse
from .notes import (
    BlogListResponse,
    BlogPostItem,
    FormatRequest,
    FormatResponse,
    PreviewRequest,
    RenderedNoteResponse,
    SharedNoteResponse,
)

__all__ = [
    # Note schemas
    "PreviewRequest",
    "RenderedNoteResponse",
    "FormatRequest",
    "FormatResponse",
    "SharedNoteResponse",
    "BlogPostItem",
    "BlogListResponse",
    # Common schemas
    "HealthCheckResponse",
]
