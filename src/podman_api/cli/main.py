"""`podman-api` command line entry point.

Every listing command builds its request through the options builders, so the
CLI doubles as a readable example of the library API.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from podman_api.adapters.podman import Podman
from podman_api.cli import client, doctor
from podman_api.cli.ui_components import (
    build_containers_table,
    build_images_table,
    build_key_value_table,
    build_networks_table,
    build_ping_table,
    build_pods_table,
    build_prune_table,
    build_secrets_table,
    build_volumes_table,
)
from podman_api.core.config import PodmanSettings
from podman_api.core.domain.models import ContainerStatus, PodStatus
from podman_api.core.opts import (
    ContainerListFilter,
    ContainerListOpts,
    ImageListFilter,
    ImageListOpts,
    NetworkListFilter,
    NetworkListOpts,
    PodListFilter,
    PodListOpts,
    SecretListFilter,
    SecretListOpts,
    VolumeListFilter,
    VolumeListOpts,
    VolumePruneFilter,
    VolumePruneOpts,
)
from podman_api.core.opts.filters import Filter

app = typer.Typer(no_args_is_help=True, help="Client for the Podman (libpod) REST API.")
app.add_typer(doctor.app, name="doctor")

volumes_app = typer.Typer(help="List or prune volumes.")
app.add_typer(volumes_app, name="volumes")

_console = Console()

_F = TypeVar("_F", bound=Filter)

LABEL_HELP = "Label filter, `KEY` or `KEY=VAL`. Repeatable."


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def label_filters(filter_cls: type[_F], labels: Iterable[str] | None) -> list[_F]:
    """`KEY` -> `label_key`, `KEY=VAL` -> `label_key_val`."""

    out: list[_F] = []
    for label in labels or ():
        key, sep, value = label.partition("=")
        if not key:
            raise typer.BadParameter(f"invalid label filter `{label}`", param_hint="--label")
        out.append(filter_cls.label_key_val(key, value) if sep else filter_cls.label_key(key))
    return out


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests (DEBUG).")) -> None:
    settings = PodmanSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def ping() -> None:
    """Check that the daemon answers and show its versions."""

    async def call(podman: Podman):
        return await podman.ping()

    _console.print(build_ping_table(client.run_with_client(call)))


@app.command()
def version() -> None:
    """Component versions reported by the daemon."""

    async def call(podman: Podman):
        return await podman.version()

    data = client.run_with_client(call) or {}
    rows = [(k, v) for k, v in data.items() if not isinstance(v, (dict, list))]
    _console.print(build_key_value_table("Version", rows))


@app.command()
def containers(
    all_: bool = typer.Option(False, "--all", "-a", help="Include stopped containers."),
    label: Optional[List[str]] = typer.Option(None, "--label", "-l", help=LABEL_HELP),
    status: Optional[ContainerStatus] = typer.Option(None, "--status", case_sensitive=False),
    name: Optional[str] = typer.Option(None, "--name"),
    pod: Optional[str] = typer.Option(None, "--pod", help="Pod name or ID."),
) -> None:
    """List containers."""

    filters = label_filters(ContainerListFilter, label)
    if status:
        filters.append(ContainerListFilter.status(status))
    if name:
        filters.append(ContainerListFilter.name(name))
    if pod:
        filters.append(ContainerListFilter.pod(pod))
    opts = ContainerListOpts.builder().all(all_).filter(filters).build()

    async def call(podman: Podman):
        return await podman.containers().list(opts)

    _console.print(build_containers_table(client.run_with_client(call)))


@app.command()
def pods(
    label: Optional[List[str]] = typer.Option(None, "--label", "-l", help=LABEL_HELP),
    status: Optional[PodStatus] = typer.Option(None, "--status", case_sensitive=False),
    name: Optional[str] = typer.Option(None, "--name"),
) -> None:
    """List pods."""

    filters = label_filters(PodListFilter, label)
    if status:
        filters.append(PodListFilter.status(status))
    if name:
        filters.append(PodListFilter.name(name))
    opts = PodListOpts.builder().filter(filters).build()

    async def call(podman: Podman):
        return await podman.pods().list(opts)

    _console.print(build_pods_table(client.run_with_client(call)))


@volumes_app.callback(invoke_without_command=True)
def volumes(
    ctx: typer.Context,
    label: Optional[List[str]] = typer.Option(None, "--label", "-l", help=LABEL_HELP),
    driver: Optional[str] = typer.Option(None, "--driver"),
    name: Optional[str] = typer.Option(None, "--name"),
) -> None:
    """List volumes (or run a subcommand)."""

    if ctx.invoked_subcommand is not None:
        return

    filters = label_filters(VolumeListFilter, label)
    if driver:
        filters.append(VolumeListFilter.driver(driver))
    if name:
        filters.append(VolumeListFilter.name(name))
    opts = VolumeListOpts.builder().filter(filters).build()

    async def call(podman: Podman):
        return await podman.volumes().list(opts)

    _console.print(build_volumes_table(client.run_with_client(call)))


@volumes_app.command("prune")
def volumes_prune(
    label: Optional[List[str]] = typer.Option(None, "--label", "-l", help=LABEL_HELP),
    until: Optional[str] = typer.Option(None, "--until", help="Timestamp or duration, e.g. `24h`."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
) -> None:
    """Remove unused volumes."""

    filters = label_filters(VolumePruneFilter, label)
    if until:
        filters.append(VolumePruneFilter.until(until))
    opts = VolumePruneOpts.builder().filter(filters).build()

    if not yes and not typer.confirm("Remove all unused volumes?"):
        raise typer.Abort()

    async def call(podman: Podman):
        return await podman.volumes().prune(opts)

    _console.print(build_prune_table("Pruned volumes", client.run_with_client(call)))


@app.command()
def images(
    all_: bool = typer.Option(False, "--all", "-a", help="Include intermediate images."),
    label: Optional[List[str]] = typer.Option(None, "--label", "-l", help=LABEL_HELP),
    dangling: Optional[bool] = typer.Option(None, "--dangling/--no-dangling"),
    reference: Optional[str] = typer.Option(None, "--reference", help="Image name, optionally `name:tag`."),
) -> None:
    """List images."""

    filters = label_filters(ImageListFilter, label)
    if dangling is not None:
        filters.append(ImageListFilter.dangling(dangling))
    if reference:
        image, sep, tag = reference.partition(":")
        filters.append(ImageListFilter.reference(image, tag if sep else None))
    opts = ImageListOpts.builder().all(all_).filter(filters).build()

    async def call(podman: Podman):
        return await podman.images().list(opts)

    _console.print(build_images_table(client.run_with_client(call)))


@app.command()
def networks(
    label: Optional[List[str]] = typer.Option(None, "--label", "-l", help=LABEL_HELP),
    name: Optional[str] = typer.Option(None, "--name"),
    driver: Optional[str] = typer.Option(None, "--driver"),
) -> None:
    """List networks."""

    filters = label_filters(NetworkListFilter, label)
    if name:
        filters.append(NetworkListFilter.name(name))
    if driver:
        filters.append(NetworkListFilter.driver(driver))
    opts = NetworkListOpts.builder().filter(filters).build()

    async def call(podman: Podman):
        return await podman.networks().list(opts)

    _console.print(build_networks_table(client.run_with_client(call)))


@app.command()
def secrets(
    name: Optional[str] = typer.Option(None, "--name"),
    id_: Optional[str] = typer.Option(None, "--id"),
) -> None:
    """List secrets."""

    filters: list[SecretListFilter] = []
    if name:
        filters.append(SecretListFilter.name(name))
    if id_:
        filters.append(SecretListFilter.id(id_))
    opts = SecretListOpts.builder().filter(filters).build()

    async def call(podman: Podman):
        return await podman.secrets().list(opts)

    _console.print(build_secrets_table(client.run_with_client(call)))


def run() -> None:
    app()
