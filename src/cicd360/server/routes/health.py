"""
This module defines the health check endpoint for the CICD360 server.

It provides a simple way to verify that the server is running and responsive,
and reports how long the process has been up.
"""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, Response

from cicd360.config import ServiceConfig
from cicd360.timefmt import format_duration, format_rfc3339

from ..dependencies import get_service_config
from ..models.response import HealthResponse
from .common import ANY_METHODS, json_response

router = APIRouter(tags=["health"])


def build_health_response(config: ServiceConfig, now: datetime | None = None) -> HealthResponse:
    """
    Builds the health payload for the current instant.

    Args:
        config: The service configuration.
        now: The time to report; defaults to the current UTC time.

    Returns:
        A `HealthResponse` with status ``"OK"`` and the current uptime.
    """
    return HealthResponse(
        status="OK",
        timestamp=format_rfc3339(now or datetime.now(UTC)),
        version=config.version,
        uptime=format_duration(config.uptime()),
    )


@router.api_route("/health", methods=ANY_METHODS, response_model=HealthResponse)
async def health_check(config: ServiceConfig = Depends(get_service_config)) -> Response:
    """
    Provides a health check endpoint for monitoring the server's status.

    Returns:
        A JSON `HealthResponse` containing the status, version, and uptime.
    """
    return json_response(build_health_response(config), "health")
