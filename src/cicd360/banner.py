"""
This module defines the startup banner for the CICD360 server.

It prints the application identity and where to reach it, using `rich` for
styled output on stderr.
"""

import platform

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .config import ServiceConfig

console = Console(stderr=True)


def build_startup_lines(config: ServiceConfig) -> list[str]:
    """
    Builds the startup information lines for the server.

    Args:
        config: The service configuration.

    Returns:
        One line per fact: name and version, environment, runtime, build time,
        port, and the health and info URLs.
    """
    return [
        f"🚀 Starting {config.app_name} v{config.version}",
        f"🌍 Environment: {config.environment}",
        f"🔧 Python version: {platform.python_version()}",
        f"📅 Build time: {config.build_time}",
        f"🌐 Server starting on port {config.port}",
        f"🔗 Health check: http://localhost:{config.port}/health",
        f"ℹ️  App info: http://localhost:{config.port}/info",
    ]


def timeout_summary(read_timeout: int, write_timeout: int, idle_timeout: int) -> str:
    """Describes the timeouts, separating the enforced idle timeout from the nominal read/write ones."""
    return f"⏱️  Idle timeout: {idle_timeout}s (read {read_timeout}s / write {write_timeout}s not enforced by uvicorn)"


def print_server_banner(config: ServiceConfig, read_timeout: int, write_timeout: int, idle_timeout: int) -> None:
    """
    Prints the banner for server mode.

    Args:
        config: The service configuration.
        read_timeout: Read timeout in seconds.
        write_timeout: Write timeout in seconds.
        idle_timeout: Idle keep-alive timeout in seconds.
    """
    body = Text("\n".join(build_startup_lines(config)), style="green")
    body.append(f"\n{timeout_summary(read_timeout, write_timeout, idle_timeout)}", style="dim")
    console.print(Panel(body, title=f"[bold cyan]{config.app_name}[/bold cyan]", expand=False))
