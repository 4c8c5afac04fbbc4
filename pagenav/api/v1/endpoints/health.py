"""Health check endpoints for liveness and readiness probes."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import APIRouter, Response, status
from pydantic import BaseModel, Field

from pagenav.core.config import get_settings, settings
from pagenav.core.logging import get_logger
from pagenav.exceptions import PagerException
from pagenav.models.pager import PaginationState
from pagenav.pager.builder import build_sequence

logger = get_logger(__name__)

router = APIRouter()

# Track application start time
APP_START_TIME = datetime.now(timezone.utc)


class HealthStatus(BaseModel):
    """Health check response model."""

    status: str = Field(..., description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    uptime_seconds: float = Field(..., description="Application uptime in seconds")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Application environment")
    checks: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict, description="Individual component health checks"
    )


class ReadinessStatus(BaseModel):
    """Readiness check response model."""

    ready: bool = Field(..., description="Whether the application is ready")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    checks: Dict[str, bool] = Field(
        default_factory=dict, description="Individual readiness checks"
    )
    message: Optional[str] = Field(None, description="Additional status message")


def check_component_health(component: str) -> Dict[str, Any]:
    """Check health of a specific component."""
    current = get_settings()
    try:
        if component == "logging":
            logger.debug("Health check test log")
            return {"status": "healthy", "message": "Logging operational"}

        elif component == "config":
            if current.default_page_size > current.max_page_size:
                return {
                    "status": "degraded",
                    "message": "default_page_size exceeds max_page_size",
                }
            return {"status": "healthy", "message": "Configuration loaded"}

        elif component == "pager":
            state = PaginationState.from_records(
                0, current.default_page_size * 2, current.default_page_size,
                **current.pager_options(),
            )
            build_sequence(state)
            return {"status": "healthy", "message": "Pager defaults are valid"}

        return {"status": "unknown", "message": f"No health check for {component}"}

    except PagerException as e:
        logger.error(f"Health check failed for {component}: {e.message}")
        return {"status": "unhealthy", "message": e.message}


@router.get(
    settings.health_check_path,
    response_model=HealthStatus,
    responses={
        200: {"description": "Application is healthy"},
        503: {"description": "Application is unhealthy"},
    },
    summary="Health Check",
    description="Liveness probe endpoint",
)
async def health_check(response: Response) -> HealthStatus:
    """
    Health check endpoint for liveness probes.

    Returns overall application health status and individual component checks.
    """
    current = get_settings()
    uptime = (datetime.now(timezone.utc) - APP_START_TIME).total_seconds()

    checks = {
        "logging": check_component_health("logging"),
        "config": check_component_health("config"),
        "pager": check_component_health("pager"),
    }

    statuses = [check["status"] for check in checks.values()]
    if "unhealthy" in statuses:
        overall_status = "unhealthy"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    elif "degraded" in statuses:
        overall_status = "degraded"
    else:
        overall_status = "healthy"

    if overall_status != "healthy":
        logger.warning(
            "Health check failed", extra={"status": overall_status, "checks": checks}
        )

    return HealthStatus(
        status=overall_status,
        uptime_seconds=uptime,
        version=current.app_version,
        environment=current.environment.value,
        checks=checks,
    )


@router.get(
    settings.readiness_check_path,
    response_model=ReadinessStatus,
    responses={
        200: {"description": "Application is ready"},
        503: {"description": "Application is not ready"},
    },
    summary="Readiness Check",
    description="Readiness probe endpoint",
)
async def readiness_check(response: Response) -> ReadinessStatus:
    """Checks if the application is ready to receive traffic."""
    checks = {
        "config": check_component_health("config")["status"] != "unhealthy",
        "pager": check_component_health("pager")["status"] == "healthy",
    }

    is_ready = all(checks.values())

    if not is_ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        message = "Application not ready"
        logger.warning("Readiness check failed", extra={"checks": checks})
    else:
        message = "Application ready to receive traffic"

    return ReadinessStatus(ready=is_ready, checks=checks, message=message)
