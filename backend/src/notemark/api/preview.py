"""Editor preview API endpoints."""

from fastapi import APIRouter, Depends

from ..core.schemas.notes import FormatRequest, FormatResponse, PreviewRequest, RenderedNoteResponse
from ..core.services import INoteStore, RenderService, get_note_store

router = APIRouter(prefix="/preview", tags=["preview"])


@router.post("/", response_model=RenderedNoteResponse)
async def preview_note(request: PreviewRequest, store: INoteStore = Depends(get_note_store)):
    """Render note content for the editor preview pane."""
    render_service = RenderService(store)
    return await render_service.preview(request)


@router.post("/format", response_model=FormatResponse)
async def format_text(request: FormatRequest, store: INoteStore = Depends(get_note_store)):
    """Apply toolbar formatting to the selected text."""
    render_service = RenderService(store)
    return await render_service.format_selection(request)
