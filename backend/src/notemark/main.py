# Main application entry point
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import blog_router, health_router, preview_router, share_page_router, share_router
from .config import get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.services import get_note_store

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting NoteMark application",
        extra={
            "version": settings.app_version,
            "environment": settings.environment,
            "debug": settings.debug,
            "render_safe_mode": settings.render_safe_mode,
        },
    )

    store = get_note_store()
    if await store.ping():
        logger.info("Note store reachable", extra={"store": type(store).__name__})
    else:
        logger.warning("Note store did not answer ping. Shared views will return 404s")

    yield

    logger.info("Shutting down NoteMark application")


app = FastAPI(
    title="NoteMark",
    description="Markdown rendering for note previews, shared notes and blog posts",
    version=settings.app_version,
    lifespan=lifespan,
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(preview_router, prefix="/api")
app.include_router(share_router, prefix="/api")
app.include_router(blog_router, prefix="/api")
app.include_router(health_router, prefix="/api")
app.include_router(share_page_router)


# Root endpoint
@app.get("/")
async def root():
    return {"message": "NoteMark API"}


# API root endpoint for better navigation
@app.get("/api/")
async def api_root():
    return {
        "message": "NoteMark API",
        "version": settings.app_version,
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_json": "/openapi.json"
        },
        "endpoints": {
            "preview": "/api/preview/",
            "share": "/api/share/{sharing_link}",
            "blog": "/api/blog/",
            "health": "/api/health/"
        }
    }


# Basic unprefixed health endpoint
@app.get("/health")
async def basic_health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("notemark.main:app", host=settings.host, port=settings.port, reload=settings.reload)
