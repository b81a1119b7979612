"""
Runs the FastAPI application under uvicorn.

The listener uses fixed timeouts and treats any failure to bind or serve as
fatal: the error is logged and the process exits with status 1.
"""

import logging

import uvicorn
from fastapi import FastAPI

from cicd360.banner import print_server_banner
from cicd360.config import ServiceConfig

from .app import create_app

logger = logging.getLogger(__name__)

READ_TIMEOUT = 15
WRITE_TIMEOUT = 15
IDLE_TIMEOUT = 60


def create_server(config: ServiceConfig, app: FastAPI | None = None) -> uvicorn.Server:
    """
    Builds a uvicorn server for the application.

    uvicorn exposes the idle keep-alive timeout directly; it has no separate
    read or write deadline, so `READ_TIMEOUT` and `WRITE_TIMEOUT` are only
    reported in the startup banner.

    Args:
        config: The service configuration providing host and port.
        app: The application to serve; built from ``config`` when omitted.

    Returns:
        An unstarted `uvicorn.Server`.
    """
    server_config = uvicorn.Config(
        app or create_app(config),
        host=config.host,
        port=config.port,
        timeout_keep_alive=IDLE_TIMEOUT,
        access_log=False,
        log_config=None,
    )
    return uvicorn.Server(server_config)


def serve(config: ServiceConfig) -> None:
    """
    Starts the server and blocks until it stops.

    Args:
        config: The service configuration.

    Raises:
        SystemExit: With status 1 if the server cannot bind or serve.
    """
    print_server_banner(config, read_timeout=READ_TIMEOUT, write_timeout=WRITE_TIMEOUT, idle_timeout=IDLE_TIMEOUT)

    server = create_server(config)
    try:
        server.run()
    except SystemExit as e:
        # uvicorn logs bind errors itself and exits with its own non-zero code.
        if not e.code:
            raise
        logger.critical(f"❌ Server failed to start on {config.host}:{config.port}")
        raise SystemExit(1) from e
