"""Doctor command for connection diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from podman_api.adapters.http_client import parse_uri
from podman_api.adapters.podman import Podman
from podman_api.cli import client
from podman_api.cli.ui_components import print_banner
from podman_api.core.config import ENV_PREFIX, PodmanSettings, get_user_env_file, write_user_env_vars
from podman_api.core.domain.version import ApiVersion
from podman_api.core.errors import PodmanError

app = typer.Typer(no_args_is_help=True, help="Connection diagnostics and configuration checks.")

_console = Console()


async def _ping(podman: Podman) -> str:
    info = await podman.ping()
    return f"libpod API {info.libpod_api_version}"


def _check_daemon(settings: PodmanSettings) -> tuple[bool, str]:
    try:
        return True, client.run_with_client(_ping, settings)
    except typer.Exit:
        return False, "daemon did not answer the ping (see error above)"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = PodmanSettings()
    print_banner(_console)

    table = Table(title="podman-api doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    try:
        scheme, authority = parse_uri(settings.uri)
        table.add_row("URI", "OK", f"{scheme} -> {authority}")
        uri_ok = True
    except PodmanError as exc:
        table.add_row("URI", "FAIL", str(exc))
        uri_ok = False

    table.add_row("API version", "OK", f"v{ApiVersion.parse(settings.api_version)}")
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    ok_ping = False
    if uri_ok:
        ok_ping, detail = _check_daemon(settings)
        table.add_row("Ping", "OK" if ok_ping else "FAIL", detail)

    _console.print(table)

    if not ok_ping:
        _console.print(
            "\n[yellow]Note:[/yellow] Start the service with `podman system service` "
            "or run `podman-api doctor setup` to point at another socket."
        )


@app.command()
def setup() -> None:
    """Interactive connection setup (stored in the user config .env)."""

    settings = PodmanSettings()
    uri = typer.prompt("Podman URI", default=settings.uri, show_default=True).strip()
    try:
        parse_uri(uri)
    except PodmanError as exc:
        raise typer.BadParameter(str(exc)) from exc

    api_version = typer.prompt("API version", default=settings.api_version, show_default=True).strip()
    try:
        ApiVersion.parse(api_version)
    except PodmanError as exc:
        raise typer.BadParameter(str(exc)) from exc

    env_path = write_user_env_vars(
        {
            f"{ENV_PREFIX}URI": uri,
            f"{ENV_PREFIX}API_VERSION": api_version,
        }
    )

    _console.print(f"[green]Saved connection config to:[/green] {env_path}")
