"""CICD360 - a minimal HTTP service reporting its health and build information."""

__version__ = "1.0.0"

from .config import ConfigError, ServiceConfig, get_config, get_env

__all__ = [
    "ConfigError",
    "ServiceConfig",
    "get_config",
    "get_env",
]
