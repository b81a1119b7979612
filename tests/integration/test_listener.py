"""Integration tests that run the service on a real uvicorn listener."""

import socket
import threading
import time
from collections.abc import Generator

import pytest
import requests

from cicd360.config import ServiceConfig
from cicd360.server.runner import IDLE_TIMEOUT, create_server, serve


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return int(sock.getsockname()[1])


@pytest.fixture
def running_server(monkeypatch: pytest.MonkeyPatch) -> Generator[ServiceConfig, None, None]:
    """Start the server on a free port taken from the PORT variable."""
    monkeypatch.setenv("PORT", str(_free_port()))
    config = ServiceConfig(host="127.0.0.1", port=ServiceConfig.load().port)
    server = create_server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline or not thread.is_alive():
            pytest.fail("server did not start")
        time.sleep(0.05)

    yield config

    server.should_exit = True
    thread.join(timeout=10)


def test_create_server_uses_configured_port(monkeypatch: pytest.MonkeyPatch):
    """Test that PORT=9090 makes the server bind port 9090."""
    monkeypatch.setenv("PORT", "9090")

    server = create_server(ServiceConfig.load())

    assert server.config.port == 9090
    assert server.config.host == "0.0.0.0"
    assert server.config.timeout_keep_alive == IDLE_TIMEOUT
    assert server.config.access_log is False


def test_health_over_http(running_server: ServiceConfig):
    """Test that the running server answers /health on the configured port."""
    response = requests.get(f"http://127.0.0.1:{running_server.port}/health", timeout=5)

    assert response.status_code == 200
    assert response.json()["status"] == "OK"
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_preflight_over_http(running_server: ServiceConfig):
    """Test that OPTIONS is answered with an empty 200 by the running server."""
    response = requests.options(f"http://127.0.0.1:{running_server.port}/anything", timeout=5)

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["Access-Control-Allow-Methods"] == "GET, POST, PUT, DELETE, OPTIONS"


def test_bind_failure_is_fatal():
    """Test that a port already in use terminates with exit status 1."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        sock.listen()
        port = sock.getsockname()[1]

        with pytest.raises(SystemExit) as exc_info:
            serve(ServiceConfig(host="127.0.0.1", port=port))

    assert exc_info.value.code == 1


@pytest.mark.parametrize("uvicorn_code", [1, 3])
def test_startup_failure_exit_code_is_normalized(monkeypatch: pytest.MonkeyPatch, uvicorn_code: int):
    """Test that any non-zero exit from uvicorn becomes exit status 1."""

    def _fail(self) -> None:
        raise SystemExit(uvicorn_code)

    monkeypatch.setattr("uvicorn.Server.run", _fail)

    with pytest.raises(SystemExit) as exc_info:
        serve(ServiceConfig(host="127.0.0.1", port=_free_port()))

    assert exc_info.value.code == 1


def test_clean_exit_is_preserved(monkeypatch: pytest.MonkeyPatch):
    """Test that a zero exit from uvicorn is passed through unchanged."""

    def _stop(self) -> None:
        raise SystemExit(0)

    monkeypatch.setattr("uvicorn.Server.run", _stop)

    with pytest.raises(SystemExit) as exc_info:
        serve(ServiceConfig(host="127.0.0.1", port=_free_port()))

    assert exc_info.value.code == 0
