"""Blog listing API endpoints."""

from fastapi import APIRouter, Depends

from ..core.schemas.notes import BlogListResponse
from ..core.services import INoteStore, RenderService, get_note_store

router = APIRouter(prefix="/blog", tags=["blog"])


@router.get("/", response_model=BlogListResponse)
async def list_blog_posts(store: INoteStore = Depends(get_note_store)):
    """List all notes published as blog posts."""
    render_service = RenderService(store)
    return await render_service.list_blog_posts()
