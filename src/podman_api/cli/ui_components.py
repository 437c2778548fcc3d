"""Rich UI components for the CLI.

Why separate components:
- Keeps command logic apart from presentation details.
- Tables are reused by several commands (list and prune share columns).
"""

from __future__ import annotations

from typing import Any, Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from podman_api.core.domain.models import (
    ImageSummary,
    LibpodPingInfo,
    ListContainer,
    ListPodsReport,
    NetworkInfo,
    PruneReport,
    SecretInfoReport,
    VolumeInfo,
)

SHORT_ID = 12


def print_banner(console: Console) -> None:
    title = Text("podman-api", style="bold cyan")
    subtitle = Text("Podman REST API client", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def short_id(value: str | None) -> str:
    return (value or "")[:SHORT_ID]


def human_size(size: int | None) -> str:
    if size is None:
        return "-"
    value = float(size)
    for unit in ("B", "kB", "MB", "GB"):
        if value < 1000:
            return f"{value:.0f}{unit}" if unit == "B" else f"{value:.1f}{unit}"
        value /= 1000
    return f"{value:.1f}TB"


def build_key_value_table(title: str, rows: Iterable[tuple[str, Any]]) -> Table:
    table = Table(title=title)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key, value in rows:
        table.add_row(key, "-" if value is None else str(value))
    return table


def build_ping_table(info: LibpodPingInfo) -> Table:
    return build_key_value_table(
        "Ping",
        [
            ("API version", info.api_version),
            ("Libpod API version", info.libpod_api_version),
            ("Buildah version", info.libpod_buildah_version),
            ("BuildKit version", info.buildkit_version),
            ("Docker experimental", info.docker_experimental),
        ],
    )


def build_containers_table(containers: Iterable[ListContainer]) -> Table:
    table = Table(title="Containers")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Names", style="white")
    table.add_column("Image", style="magenta")
    table.add_column("State", style="green")
    table.add_column("Status", style="dim")
    for c in containers:
        table.add_row(short_id(c.id), ", ".join(c.names), c.image or "-", c.state or "-", c.status or "-")
    return table


def build_pods_table(pods: Iterable[ListPodsReport]) -> Table:
    table = Table(title="Pods")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Status", style="green")
    table.add_column("Containers", style="dim", justify="right")
    for pod in pods:
        table.add_row(short_id(pod.id), pod.name or "-", pod.status or "-", str(len(pod.containers)))
    return table


def build_volumes_table(volumes: Iterable[VolumeInfo]) -> Table:
    table = Table(title="Volumes")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Driver", style="white")
    table.add_column("Mountpoint", style="dim")
    for volume in volumes:
        table.add_row(volume.name, volume.driver or "-", volume.mountpoint or "-")
    return table


def build_images_table(images: Iterable[ImageSummary]) -> Table:
    table = Table(title="Images")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Tags", style="white")
    table.add_column("Size", style="green", justify="right")
    for image in images:
        tags = ", ".join(image.repo_tags) or "<none>"
        table.add_row(short_id(image.id.removeprefix("sha256:")), tags, human_size(image.size))
    return table


def build_networks_table(networks: Iterable[NetworkInfo]) -> Table:
    table = Table(title="Networks")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Driver", style="green")
    for network in networks:
        table.add_row(short_id(network.id), network.name, network.driver or "-")
    return table


def build_secrets_table(secrets: Iterable[SecretInfoReport]) -> Table:
    table = Table(title="Secrets")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Driver", style="green")
    table.add_column("Created", style="dim")
    for secret in secrets:
        spec = secret.spec
        name = spec.name if spec else None
        driver = spec.driver.name if spec and spec.driver else None
        table.add_row(short_id(secret.id), name or "-", driver or "-", secret.created_at or "-")
    return table


def build_prune_table(title: str, reports: Iterable[PruneReport]) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Size", style="green", justify="right")
    table.add_column("Error", style="red")
    for report in reports:
        table.add_row(report.id or "-", human_size(report.size), report.err or "")
    return table
