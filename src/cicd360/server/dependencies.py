from fastapi import Request

from cicd360.config import ServiceConfig


def get_service_config(request: Request) -> ServiceConfig:
    return request.app.state.config  # type: ignore[no-any-return]
