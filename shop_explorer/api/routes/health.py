"""Health check endpoints."""

from fastapi import APIRouter

from shop_explorer.api.responses import json_response
from shop_explorer.database import check_db_connection

router = APIRouter()


@router.get("/health")
async def health():
    """Basic health check."""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness():
    """Readiness check: the credential store must be reachable."""
    checks = {
        "database": await check_db_connection(),
    }

    all_healthy = all(checks.values())

    return json_response(
        {
            "status": "ready" if all_healthy else "not_ready",
            "checks": checks,
        },
        status_code=200 if all_healthy else 503,
    )


@router.get("/health/live")
async def liveness():
    """Liveness check for container orchestration."""
    return {"status": "alive"}
