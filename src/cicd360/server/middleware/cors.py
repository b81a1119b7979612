"""
This module configures the Cross-Origin Resource Sharing (CORS) middleware.

CORS headers let browser-based clients served from other origins call the
service. The policy here is fully permissive: every response carries the same
three headers, and pre-flight `OPTIONS` requests are answered directly without
reaching the routes.
"""

from collections.abc import Callable
from typing import Any, cast

from fastapi import FastAPI, Request, Response, status

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def add_cors_middleware(app: FastAPI) -> None:
    """
    Adds the CORS middleware to the FastAPI application.

    Unlike Starlette's `CORSMiddleware`, the headers are set unconditionally,
    whether or not the request carries an `Origin` header, and any `OPTIONS`
    request is treated as a pre-flight.

    Args:
        app: The `FastAPI` application instance.
    """

    @app.middleware("http")
    async def apply_cors(request: Request, call_next: Callable[[Request], Any]) -> Response:
        """
        Middleware function that sets CORS headers and short-circuits pre-flights.

        Args:
            request: The incoming `Request` object.
            call_next: The next middleware or endpoint in the processing chain.

        Returns:
            An empty 200 response for `OPTIONS`, otherwise the downstream
            response with the CORS headers applied.
        """
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

        response = cast(Response, await call_next(request))
        response.headers.update(CORS_HEADERS)
        return response
