"""Public share view endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse

from ..config import get_settings
from ..core.rendering import render_not_found_page, render_page
from ..core.schemas.notes import SharedNoteResponse
from ..core.services import INoteStore, RenderService, get_note_store

router = APIRouter(prefix="/share", tags=["share"])

# Served at the site root, not under /api
page_router = APIRouter(tags=["share"])


@router.get("/{sharing_link}", response_model=SharedNoteResponse)
async def get_shared_note(sharing_link: str, store: INoteStore = Depends(get_note_store)):
    """Get a shared note rendered for display."""
    render_service = RenderService(store)
    return await render_service.get_shared_note(sharing_link)


@page_router.get("/share/{sharing_link}", response_class=HTMLResponse)
async def shared_note_page(sharing_link: str, store: INoteStore = Depends(get_note_store)):
    """Public viewer page for a shared note."""
    render_service = RenderService(store)
    try:
        note = await render_service.get_shared_note(sharing_link)
    except HTTPException as e:
        if e.status_code != status.HTTP_404_NOT_FOUND:
            raise
        return HTMLResponse(render_not_found_page(), status_code=status.HTTP_404_NOT_FOUND)

    return HTMLResponse(render_page(note.title, note.blocks, untitled=get_settings().untitled_title))
