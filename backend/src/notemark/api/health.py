"""Health check API endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..core.schemas.common import HealthCheckResponse
from ..core.services import HealthService, INoteStore, get_note_store

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", response_model=HealthCheckResponse)
async def health_check(store: INoteStore = Depends(get_note_store)):
    """Get overall system health status."""
    health_service = HealthService(store)
    return await health_service.get_health_status()


@router.get("/store", response_model=Dict[str, Any])
async def note_store_health(store: INoteStore = Depends(get_note_store)):
    """Check note store connectivity."""
    health_service = HealthService(store)
    return await health_service.check_note_store_health()
