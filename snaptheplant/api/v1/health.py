# 📄 File: snaptheplant/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# A quick checkup for SnapThePlant: is the app up, can it reach its database, and which
# outside services (payments, email, plant recognition) are switched on.
# 🧪 Purpose (Technical Summary):
# Liveness and detailed health endpoints. The detailed check aggregates the container's
# storage/redis/collaborator status with psutil process metrics and answers 503 only when
# storage is unhealthy.
# 🔗 Dependencies:
# FastAPI, psutil, snaptheplant.shared.core.container
# 🔄 Connected Modules / Calls From:
# snaptheplant.main, load balancers and monitoring

import platform
from datetime import datetime, timezone
from typing import Any, Dict

import psutil
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from snaptheplant.shared.core.container import ServiceContainer
from snaptheplant.shared.core.dependencies import get_container
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)

health_router = APIRouter()

_app_start_time = datetime.now(timezone.utc)


@health_router.get(
    "/health",
    summary="Basic Health Check",
    description="Basic health check endpoint for load balancers and monitoring",
)
async def health_check(container: ServiceContainer = Depends(get_container)) -> JSONResponse:
    """Simple OK status for quick health verification."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "snaptheplant-api",
            "version": container.settings.APP_VERSION,
        },
    )


@health_router.get(
    "/health/detailed",
    summary="Detailed Health Check",
    description="Health of storage, cache, configured collaborators and the host process",
)
async def detailed_health_check(container: ServiceContainer = Depends(get_container)) -> JSONResponse:
    """
    Comprehensive health check for all system components

    Checks:
    - Storage backend connectivity
    - Redis (when sessions live there)
    - Which external collaborators are configured
    - Trial sweep scheduler state
    - Process and host resources
    """
    started = datetime.now(timezone.utc)
    overall_status = "healthy"

    try:
        components = await container.health_check()
    except Exception as e:
        logger.error(f"Health check failed: {e}", exc_info=True)
        components = {"storage": {"status": "unhealthy", "error": str(e)}}

    if components.get("storage", {}).get("status") != "healthy":
        overall_status = "unhealthy"
    elif components.get("redis", {}).get("status", "healthy") != "healthy":
        overall_status = "degraded"

    components["system"] = _get_system_metrics()
    if components["system"].get("status") == "degraded" and overall_status == "healthy":
        overall_status = "degraded"

    now = datetime.now(timezone.utc)
    return JSONResponse(
        status_code=503 if overall_status == "unhealthy" else 200,
        content={
            "status": overall_status,
            "timestamp": now.isoformat(),
            "service": "snaptheplant-api",
            "version": container.settings.APP_VERSION,
            "environment": container.settings.ENVIRONMENT,
            "uptime_seconds": (now - _app_start_time).total_seconds(),
            "response_time_seconds": (now - started).total_seconds(),
            "components": components,
        },
    )


def _get_system_metrics() -> Dict[str, Any]:
    """Get basic process and host metrics"""
    try:
        memory = psutil.virtual_memory()
        disk = psutil.disk_usage("/")
        process = psutil.Process()

        metrics = {
            "status": "healthy",
            "platform": platform.platform(),
            "cpu_percent": psutil.cpu_percent(interval=None),
            "memory_percent": memory.percent,
            "disk_percent": round((disk.used / disk.total) * 100, 2),
            "process_memory_mb": round(process.memory_info().rss / (1024 * 1024), 2),
        }
        if metrics["memory_percent"] > 90 or metrics["disk_percent"] > 95:
            metrics["status"] = "degraded"
        return metrics

    except Exception as e:
        return {"status": "error", "error": str(e)}
