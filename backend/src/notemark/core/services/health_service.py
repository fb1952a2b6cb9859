"""Health service implementation."""

import time
from datetime import datetime, timezone
from typing import Any, Dict

from ...config import get_settings
from ..rendering import render
from ..schemas.common import HealthCheckResponse
from .interfaces import IHealthService, INoteStore


class HealthService(IHealthService):
    """Health check service implementation."""

    def __init__(self, store: INoteStore):
        self.store = store
        self.settings = get_settings()

    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        store_health = await self.check_note_store_health()
        renderer_health = self.check_renderer_health()

        overall_status = "healthy"
        if not store_health["connected"] or renderer_health["status"] != "healthy":
            overall_status = "unhealthy"

        return HealthCheckResponse(
            status=overall_status,
            timestamp=datetime.now(timezone.utc),
            version=self.settings.app_version,
            checks={"note_store": store_health, "renderer": renderer_health},
        )

    async def check_note_store_health(self) -> Dict[str, Any]:
        """Check the note store answers."""
        try:
            start_time = time.perf_counter()
            connected = await self.store.ping()
            response_time = (time.perf_counter() - start_time) * 1000

            return {
                "connected": bool(connected),
                "status": "healthy" if connected else "unhealthy",
                "response_time_ms": round(response_time, 2),
            }
        except Exception as e:
            return {
                "connected": False,
                "status": "unhealthy",
                "error": str(e),
                "response_time_ms": None,
            }

    def check_renderer_health(self) -> Dict[str, Any]:
        """Render a small sample note."""
        blocks = render("# ok\n- a\n- b")
        if len(blocks) == 2:
            return {"status": "healthy"}
        return {"status": "unhealthy", "blocks": len(blocks)}
