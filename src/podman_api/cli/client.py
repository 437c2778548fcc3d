"""Client construction shared by the commands.

Why a separate module:
- `main` and `doctor` both talk to the daemon; keeping the factory here avoids
  an import cycle between them.
- Tests replace `get_client` to run commands against `httpx.MockTransport`.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, TypeVar

import typer
from rich.console import Console

from podman_api.adapters.podman import Podman
from podman_api.core.config import PodmanSettings
from podman_api.core.errors import PodmanError

_T = TypeVar("_T")

_err_console = Console(stderr=True)


def get_client(settings: PodmanSettings | None = None) -> Podman:
    return Podman.from_settings(settings or PodmanSettings())


def run_with_client(
    fn: Callable[[Podman], Awaitable[_T]],
    settings: PodmanSettings | None = None,
) -> _T:
    """Run `fn` against a fresh client; daemon errors exit with code 1."""

    async def runner() -> Any:
        async with get_client(settings) as podman:
            return await fn(podman)

    try:
        return asyncio.run(runner())
    except PodmanError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
