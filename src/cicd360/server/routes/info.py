"""The `/info` endpoint, reporting build and runtime details."""

import platform

from fastapi import APIRouter, Depends, Response

from cicd360.config import ServiceConfig

from ..dependencies import get_service_config
from ..models.response import InfoResponse
from .common import ANY_METHODS, json_response

router = APIRouter(tags=["info"])


def build_info_response(config: ServiceConfig) -> InfoResponse:
    """Builds the info payload from the startup configuration."""
    return InfoResponse(
        application=config.app_name,
        version=config.version,
        runtime_version=platform.python_version(),
        build_time=config.build_time,
        environment=config.environment,
    )


@router.api_route("/info", methods=ANY_METHODS, response_model=InfoResponse)
async def app_info(config: ServiceConfig = Depends(get_service_config)) -> Response:
    """Returns the application name, version, runtime, build time and environment."""
    return json_response(build_info_response(config), "info")
