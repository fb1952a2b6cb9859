"""API routers for NoteMark."""

from .blog import router as blog_router
from .health import router as health_router
from .preview import router as preview_router
from .share import page_router as share_page_router
from .share import router as share_router

__all__ = ["preview_router", "share_router", "share_page_router", "blog_router", "health_router"]
