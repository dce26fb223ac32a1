"""
Health Check Endpoints

Provides health and liveness checks for orchestration systems.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    version: str
    environment: str
    timestamp: datetime
    checks: Dict[str, Any]


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    Health check endpoint.

    The dashboard keeps serving placeholder data when the collection store
    is down, so an unreachable store reports ``degraded`` rather than
    ``unhealthy``.
    """
    settings = request.app.state.settings
    service = request.app.state.dashboard_service
    checks = {}
    overall_status = "healthy"

    try:
        await service.client.list_documents("users", limit=1)
        checks["collection_store"] = {"status": "healthy"}
    except Exception as e:
        checks["collection_store"] = {"status": "unhealthy", "error": str(e)}
        overall_status = "degraded"

    return HealthResponse(
        status=overall_status,
        version=settings.version,
        environment=settings.app_env,
        timestamp=datetime.now(timezone.utc),
        checks=checks,
    )


@router.get("/health/live")
async def liveness_check() -> Dict[str, str]:
    """
    Kubernetes liveness probe endpoint.

    Returns 200 if the application is running.
    """
    return {"status": "alive"}
