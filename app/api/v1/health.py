"""
Health check endpoints
"""
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.api.deps import DatabaseDep
from app.core.config import settings
from app.core.logging import log
from app.schemas.common import HealthCheckResponse


router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Basic health check"""
    return HealthCheckResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.VERSION,
    )


@router.get("/health/ready", response_model=Dict[str, Any])
async def readiness_probe(db: DatabaseDep):
    """
    Readiness probe - checks the database
    """
    checks = {"database": False}

    try:
        result = await db.command("ping")
        checks["database"] = bool(result.get("ok"))
    except Exception as e:
        log.error(f"Database health check failed: {e}")

    all_healthy = all(checks.values())
    content = {
        "status": "ok" if all_healthy else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": checks,
    }
    return JSONResponse(status_code=200 if all_healthy else 503, content=content)
