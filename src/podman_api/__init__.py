"""Async client for the Podman (libpod) REST API.

Why this layout:
- `core` holds the pure parts: option builders, filters, wire encoding,
  domain models, errors and settings. It performs no I/O.
- `adapters` talks to the daemon over HTTP (unix socket or TCP).
- `cli` is a thin typer front end over the adapters.
"""

from podman_api.adapters.podman import Podman
from podman_api.core.domain.id import Id
from podman_api.core.domain.version import LATEST_API_VERSION, ApiVersion
from podman_api.core.errors import PodmanError

__all__ = [
    "ApiVersion",
    "Id",
    "LATEST_API_VERSION",
    "Podman",
    "PodmanError",
]
