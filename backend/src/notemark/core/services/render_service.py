"""Render service implementation."""

from typing import List, Optional

from fastapi import HTTPException, status

from ...config import Settings, get_settings
from ..content import extract_note_text
from ..logging import get_logger
from ..rendering import Block, blocks_to_html, format_selection, render
from ..schemas.notes import (
    BlogListResponse,
    BlogPostItem,
    FormatRequest,
    FormatResponse,
    PreviewRequest,
    RenderedNoteResponse,
    SharedNoteResponse,
)
from .interfaces import INoteStore, IRenderService

logger = get_logger("render_service")


class RenderService(IRenderService):
    """Render service implementation."""

    def __init__(self, store: INoteStore, settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or get_settings()

    async def preview(self, request: PreviewRequest) -> RenderedNoteResponse:
        """Render editor content for the preview pane."""
        self._check_size(request.content)
        safe = self.settings.render_safe_mode if request.safe is None else request.safe

        blocks = render(request.content, safe=safe)
        logger.debug(
            "Rendered preview",
            extra={"chars": len(request.content), "blocks": len(blocks), "safe": safe},
        )
        return RenderedNoteResponse(blocks=blocks, html=blocks_to_html(blocks))

    async def format_selection(self, request: FormatRequest) -> FormatResponse:
        """Apply toolbar formatting (or clear it) on the selected range."""
        try:
            selection = format_selection(request.content, request.start, request.end, request.format)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        return FormatResponse(content=selection.content, start=selection.start, end=selection.end)

    async def get_shared_note(self, sharing_link: str) -> SharedNoteResponse:
        """Render the note behind a public share link."""
        note = await self.store.get_by_sharing_link(sharing_link)
        if not note:
            logger.info("Share link not found", extra={"sharing_link": sharing_link})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")

        content = extract_note_text(note.content)
        blocks = self._render_stored(content, note_id=note.id)
        return SharedNoteResponse(
            title=note.title or self.settings.untitled_title,
            content=content,
            blocks=blocks,
            html=blocks_to_html(blocks),
        )

    async def list_blog_posts(self) -> BlogListResponse:
        """List published blog posts, newest first."""
        notes = await self.store.list_blog_posts()
        return BlogListResponse(
            blogs=[
                BlogPostItem(
                    id=note.id,
                    title=note.title or self.settings.untitled_title,
                    content=extract_note_text(note.content),
                    created_at=note.created_at,
                    updated_at=note.updated_at,
                    owner_id=note.owner_id,
                )
                for note in notes
            ]
        )

    def _render_stored(self, content: str, note_id: str) -> List[Block]:
        if len(content) > self.settings.max_note_chars:
            # Stored notes are rendered anyway, the limit only guards incoming text
            logger.warning(
                "Stored note exceeds render size limit",
                extra={"note_id": note_id, "chars": len(content)},
            )
        return render(content, safe=self.settings.render_safe_mode)

    def _check_size(self, content: str) -> None:
        if len(content) > self.settings.max_note_chars:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"Note content exceeds {self.settings.max_note_chars} characters",
            )
