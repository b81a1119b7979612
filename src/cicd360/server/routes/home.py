from fastapi import APIRouter, Depends, Response

from cicd360.config import ServiceConfig

from ..dependencies import get_service_config
from ..models.response import HomeMessage
from .common import ANY_METHODS, json_response

router = APIRouter(tags=["home"])


def build_home_message(config: ServiceConfig) -> HomeMessage:
    return HomeMessage(
        message=f"Welcome to {config.app_name}! 🚀",
        description="Automated Python Deployment Pipeline",
        endpoints="/health, /info",
        version=config.version,
    )


@router.api_route("/", methods=ANY_METHODS, response_model=HomeMessage)
async def home(config: ServiceConfig = Depends(get_service_config)) -> Response:
    """Root endpoint describing the service."""
    return json_response(build_home_message(config), "home")
