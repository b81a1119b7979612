"""Configuration management for CICD360."""

import os
import time
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any

from . import __version__
from .timefmt import format_rfc3339

APP_NAME = "CICD360"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_PORT = "8080"
DEFAULT_HOST = "0.0.0.0"


class ConfigError(ValueError):
    """Raised when the process environment holds an unusable value."""


def get_env(key: str, fallback: str) -> str:
    """
    Reads an environment variable, falling back to a default.

    Args:
        key: The variable name.
        fallback: Returned when the variable is unset or empty.

    Returns:
        The variable's value, or ``fallback``.
    """
    value = os.environ.get(key)
    if value:
        return value
    return fallback


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError as e:
        raise ConfigError(f"PORT must be an integer, got {raw!r}") from e
    if not 1 <= port <= 65535:
        raise ConfigError(f"PORT must be between 1 and 65535, got {port}")
    return port


@dataclass(frozen=True)
class ServiceConfig:
    """
    Process-wide service settings, captured once at startup.

    Instances are immutable and shared by every request, so handlers can read
    them concurrently without locking.

    Attributes:
        app_name: The application name reported by ``/info``.
        version: The application version.
        environment: The deployment environment label (``ENVIRONMENT``).
        host: The interface the server binds.
        port: The TCP port the server binds (``PORT``).
        start_time: Wall-clock time at which the process started.
        build_time: RFC3339 timestamp fixed at startup.
    """

    app_name: str = APP_NAME
    version: str = __version__
    environment: str = DEFAULT_ENVIRONMENT
    host: str = DEFAULT_HOST
    port: int = int(DEFAULT_PORT)
    start_time: datetime = field(default_factory=lambda: datetime.now(UTC))
    build_time: str = ""
    _started_monotonic: float = field(default_factory=time.monotonic, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.build_time:
            object.__setattr__(self, "build_time", format_rfc3339(self.start_time))

    @classmethod
    def load(cls) -> "ServiceConfig":
        """Load configuration from the process environment."""
        return cls(
            environment=get_env("ENVIRONMENT", DEFAULT_ENVIRONMENT),
            port=_parse_port(get_env("PORT", DEFAULT_PORT)),
        )

    def uptime(self) -> timedelta:
        """Time elapsed since startup, measured on the monotonic clock."""
        return timedelta(seconds=time.monotonic() - self._started_monotonic)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        data = asdict(self)
        data.pop("_started_monotonic")
        data["start_time"] = format_rfc3339(self.start_time)
        return data


# Global config instance
_config: ServiceConfig | None = None


def get_config() -> ServiceConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServiceConfig.load()
    return _config


def reload_config() -> ServiceConfig:
    """Reload configuration from the environment."""
    global _config
    _config = ServiceConfig.load()
    return _config
