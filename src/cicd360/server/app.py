"""
This module configures and initializes the FastAPI application for the CICD360 server.

`create_app` composes the application from an explicit `ServiceConfig`, so the
handlers never read process globals and tests can build an app with any
configuration they like.

Key responsibilities include:
- Storing the configuration on `app.state` for the route dependencies.
- Configuring middleware: CORS innermost, request logging outermost.
- Including the home, health and info routers.
"""

from fastapi import FastAPI

from cicd360.config import ServiceConfig

from .middleware.cors import add_cors_middleware
from .middleware.logging import add_logging_middleware
from .routes import health, home, info


def create_app(config: ServiceConfig) -> FastAPI:
    """
    Creates the FastAPI application for the service.

    Args:
        config: The process-wide configuration captured at startup.

    Returns:
        The configured `FastAPI` instance.
    """
    app = FastAPI(
        title=f"{config.app_name} Server",
        description="Health and build information service",
        version=config.version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config

    # Middleware registered later wraps the earlier ones.
    add_cors_middleware(app)
    add_logging_middleware(app)

    app.include_router(home.router)
    app.include_router(health.router)
    app.include_router(info.router)

    return app
