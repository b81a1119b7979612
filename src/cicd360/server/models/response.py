"""
This module defines the Pydantic models for API responses.

These models are used to serialize the output of the service endpoints into
JSON. Each one mirrors a single endpoint: `/health`, `/info`, and the root
path `/`.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """
    Represents the response model for the health check endpoint.

    Attributes:
        status: Always ``"OK"`` while the process is serving requests.
        timestamp: RFC3339 time at which the response was built.
        version: The application version.
        uptime: Human-readable time since process start (e.g. ``"3m12.5s"``).
    """

    status: str = Field("OK", description="Service health status")
    timestamp: str = Field(..., description="RFC3339 time of the health check")
    version: str = Field(..., description="Application version")
    uptime: str = Field(..., description="Time elapsed since process start")

    model_config = {
        "json_schema_extra": {"examples": [{"status": "OK", "timestamp": "2025-01-31T09:30:00Z", "version": "1.0.0", "uptime": "1h2m3.5s"}]}
    }


class InfoResponse(BaseModel):
    """
    Represents the response model for the application info endpoint.

    Attributes:
        application: The application name.
        version: The application version.
        runtime_version: The Python interpreter version serving the request.
        build_time: RFC3339 timestamp captured once at process start.
        environment: The deployment environment label.
    """

    application: str = Field(..., description="Application name")
    version: str = Field(..., description="Application version")
    runtime_version: str = Field(..., description="Python runtime version")
    build_time: str = Field(..., description="RFC3339 build timestamp")
    environment: str = Field(..., description="Deployment environment")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "application": "CICD360",
                    "version": "1.0.0",
                    "runtime_version": "3.12.4",
                    "build_time": "2025-01-31T09:30:00Z",
                    "environment": "development",
                }
            ]
        }
    }


class HomeMessage(BaseModel):
    """Welcome payload served from the root path."""

    message: str = Field(..., description="Greeting")
    description: str = Field(..., description="What the service is")
    endpoints: str = Field(..., description="Comma separated list of informational endpoints")
    version: str = Field(..., description="Application version")
