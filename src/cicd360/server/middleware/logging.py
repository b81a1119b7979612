"""
This module provides the request logging middleware for FastAPI.

It times each request and, once the downstream chain has finished writing its
response (the final body message has been handed to the server), logs one line
with the method, request URI, client address and elapsed time.

It is a plain ASGI middleware rather than an `@app.middleware("http")`
function: `call_next` returns before the response is sent, so only wrapping
`send` can observe the end of the response.
"""

import logging
import time
from datetime import timedelta

from fastapi import FastAPI, Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from cicd360.timefmt import format_duration

logger = logging.getLogger(__name__)


def request_uri(request: Request) -> str:
    """Returns the path and query string as sent by the client."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def remote_address(request: Request) -> str:
    """Returns ``host:port`` of the client, or ``-`` when unknown."""
    if request.client is None:
        return "-"
    return f"{request.client.host}:{request.client.port}"


class RequestLoggingMiddleware:
    """
    ASGI middleware that logs each HTTP request after its response is written.

    Messages are forwarded to the server unchanged; the log line is emitted
    right after the last `http.response.body` message has been sent.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        start_time = time.perf_counter()

        async def send_and_log(message: Message) -> None:
            await send(message)
            if message["type"] == "http.response.body" and not message.get("more_body", False):
                elapsed = timedelta(seconds=time.perf_counter() - start_time)
                logger.info(f"{request.method} {request_uri(request)} {remote_address(request)} {format_duration(elapsed)}")

        await self.app(scope, receive, send_and_log)


def add_logging_middleware(app: FastAPI) -> None:
    """
    Adds the request logging middleware to the FastAPI application.

    Register it last so it wraps every other middleware and the logged latency
    covers the whole chain.

    Args:
        app: The `FastAPI` application instance.
    """
    app.add_middleware(RequestLoggingMiddleware)
