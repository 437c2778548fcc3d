"""Shared fixtures: a `Podman` client wired to `httpx.MockTransport`."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from podman_api.adapters.podman import Podman

Handler = Callable[[httpx.Request], httpx.Response]

PING_HEADERS = {
    "API-Version": "1.41",
    "Libpod-API-Version": "4.2.0",
    "Libpod-Buildah-Version": "1.27.0",
    "BuildKit-Version": "",
    "Cache-Control": "no-cache",
    "Docker-Experimental": "true",
    "Pragma": "no-cache",
}


class RecordingHandler:
    """MockTransport handler that keeps every request it served."""

    def __init__(self, respond: Handler) -> None:
        self._respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_podman() -> Callable[[Handler], tuple[Podman, RecordingHandler]]:
    def factory(respond: Handler) -> tuple[Podman, RecordingHandler]:
        handler = RecordingHandler(respond)
        podman = Podman.unix("/run/podman/podman.sock", http_transport=httpx.MockTransport(handler))
        return podman, handler

    return factory


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the user's real config and PODMAN_API_* variables out of the tests."""

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for key in ("PODMAN_API_URI", "PODMAN_API_API_VERSION", "PODMAN_API_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def ping_headers() -> dict[str, str]:
    return dict(PING_HEADERS)
