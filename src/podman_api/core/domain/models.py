"""Libpod data models (Pydantic v2).

Why Pydantic here:
- Response bodies are validated at the edge and exposed as typed objects.
- Aliases keep the daemon's key casing verbatim (`Id`, `Warnings`, `nsmode`...)
  so request bodies built from these models match the remote schema exactly.

Only the records this client reads or sends are modeled; unknown keys are
ignored. Arrays and maps the daemon may send as `null` use the
`NonOptionalList` / `NonOptionalDict` field types.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from podman_api.core.domain.normalize import NonOptionalDict, NonOptionalList
from podman_api.core.errors import InvalidResponseError


class _Model(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict with the remote key casing."""

        return self.model_dump(mode="json", by_alias=True)


# -- enums ---------------------------------------------------------------------


class ContainerStatus(str, Enum):
    CREATED = "created"
    CONFIGURED = "configured"
    RESTARTING = "restarting"
    RUNNING = "running"
    REMOVING = "removing"
    PAUSED = "paused"
    EXITED = "exited"
    DEAD = "dead"


class ContainerHealth(str, Enum):
    STARTING = "starting"
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    NONE = "none"


class PodStatus(str, Enum):
    CREATED = "created"
    DEAD = "dead"
    DEGRADED = "degraded"
    EXITED = "exited"
    PAUSED = "paused"
    RUNNING = "running"
    STOPPED = "stopped"


# -- request side records ------------------------------------------------------


class Namespace(_Model):
    """Namespace configuration (`nsmode` is e.g. `host`, `private`, `ns`, `bridge`)."""

    nsmode: str | None = None
    value: str | None = None


class PortMapping(_Model):
    container_port: int | None = None
    host_ip: str | None = None
    host_port: int | None = None
    protocol: str | None = None
    range: int | None = None


class NamedVolume(_Model):
    name: str = Field(..., alias="Name")
    dest: str = Field(..., alias="Dest")
    options: list[str] | None = Field(default=None, alias="Options")


class IdMap(_Model):
    container_id: int | None = None
    host_id: int | None = None
    size: int | None = None


class ContainerMount(_Model):
    """Mount type accepted by the container create endpoint."""

    destination: str | None = None
    options: list[str] | None = None
    source: str | None = None
    type: str | None = None
    uid_mappings: list[IdMap] | None = Field(default=None, alias="UIDMappings")
    gid_mappings: list[IdMap] | None = Field(default=None, alias="GIDMappings")


class LinuxResources(_Model):
    """Subset of the OCI runtime resource constraints."""

    cpu: dict[str, Any] | None = None
    memory: dict[str, Any] | None = None
    pids: dict[str, Any] | None = None
    block_io: dict[str, Any] | None = Field(default=None, alias="blockIO")


# -- responses -----------------------------------------------------------------


class IdResponse(_Model):
    id: str = Field(..., alias="Id")


class ContainerCreateResponse(_Model):
    id: str = Field(..., alias="Id")
    warnings: NonOptionalList[str] = Field(alias="Warnings")


class ListContainer(_Model):
    id: str = Field(..., alias="Id")
    names: NonOptionalList[str] = Field(alias="Names")
    image: str | None = Field(default=None, alias="Image")
    image_id: str | None = Field(default=None, alias="ImageID")
    command: NonOptionalList[str] = Field(alias="Command")
    state: str | None = Field(default=None, alias="State")
    status: str | None = Field(default=None, alias="Status")
    labels: NonOptionalDict[str, str] = Field(alias="Labels")
    pod: str | None = Field(default=None, alias="Pod")
    pod_name: str | None = Field(default=None, alias="PodName")
    exited: bool | None = Field(default=None, alias="Exited")
    exit_code: int | None = Field(default=None, alias="ExitCode")
    networks: NonOptionalList[str] = Field(alias="Networks")


class ListPodContainer(_Model):
    id: str = Field(..., alias="Id")
    names: str | None = Field(default=None, alias="Names")
    status: str | None = Field(default=None, alias="Status")


class ListPodsReport(_Model):
    id: str = Field(..., alias="Id")
    name: str | None = Field(default=None, alias="Name")
    status: str | None = Field(default=None, alias="Status")
    infra_id: str | None = Field(default=None, alias="InfraId")
    labels: NonOptionalDict[str, str] = Field(alias="Labels")
    networks: NonOptionalList[str] = Field(alias="Networks")
    containers: NonOptionalList[ListPodContainer] = Field(alias="Containers")


class PodActionReport(_Model):
    """Report returned by pod start/stop/kill/pause/unpause/restart."""

    id: str = Field(..., alias="Id")
    errs: NonOptionalList[str] = Field(alias="Errs")


class ImageSummary(_Model):
    id: str = Field(..., alias="Id")
    repo_tags: NonOptionalList[str] = Field(alias="RepoTags")
    repo_digests: NonOptionalList[str] = Field(alias="RepoDigests")
    names: NonOptionalList[str] = Field(alias="Names")
    labels: NonOptionalDict[str, str] = Field(alias="Labels")
    size: int | None = Field(default=None, alias="Size")
    created: int | None = Field(default=None, alias="Created")
    dangling: bool | None = Field(default=None, alias="Dangling")


class ImagesRemoveReport(_Model):
    deleted: NonOptionalList[str] = Field(alias="Deleted")
    untagged: NonOptionalList[str] = Field(alias="Untagged")
    errors: NonOptionalList[str] = Field(alias="Errors")
    exit_code: int | None = Field(default=None, alias="ExitCode")


class PruneReport(_Model):
    id: str | None = Field(default=None, alias="Id")
    err: str | None = Field(default=None, alias="Err")
    size: int | None = Field(default=None, alias="Size")


class VolumeInfo(_Model):
    name: str = Field(..., alias="Name")
    driver: str | None = Field(default=None, alias="Driver")
    mountpoint: str | None = Field(default=None, alias="Mountpoint")
    created_at: str | None = Field(default=None, alias="CreatedAt")
    scope: str | None = Field(default=None, alias="Scope")
    labels: NonOptionalDict[str, str] = Field(alias="Labels")
    options: NonOptionalDict[str, str] = Field(alias="Options")


class NetworkInfo(_Model):
    name: str
    id: str | None = None
    driver: str | None = None
    network_interface: str | None = None
    created: str | None = None
    ipv6_enabled: bool | None = None
    internal: bool | None = None
    dns_enabled: bool | None = None
    subnets: NonOptionalList[dict[str, Any]]
    labels: NonOptionalDict[str, str]
    options: NonOptionalDict[str, str]
    ipam_options: NonOptionalDict[str, str]


class SecretDriver(_Model):
    name: str | None = Field(default=None, alias="Name")
    options: NonOptionalDict[str, str] = Field(alias="Options")


class SecretSpec(_Model):
    name: str | None = Field(default=None, alias="Name")
    driver: SecretDriver | None = Field(default=None, alias="Driver")


class SecretInfoReport(_Model):
    id: str = Field(..., alias="ID")
    created_at: str | None = Field(default=None, alias="CreatedAt")
    updated_at: str | None = Field(default=None, alias="UpdatedAt")
    spec: SecretSpec | None = Field(default=None, alias="Spec")


class SecretCreateResponse(_Model):
    id: str | None = Field(default=None, alias="ID")


class ManifestRemoveReport(_Model):
    id: str | None = Field(default=None, alias="Id")
    errors: NonOptionalList[str] = Field(alias="Errors")


class Actor(_Model):
    id: str = Field(..., alias="ID")
    attributes: NonOptionalDict[str, str] = Field(alias="Attributes")


class Event(_Model):
    type: str = Field(..., alias="Type")
    action: str = Field(..., alias="Action")
    actor: Actor = Field(..., alias="Actor")
    status: str | None = None
    id: str | None = None
    from_: str | None = Field(default=None, alias="from")
    time: int | None = None
    time_nano: int | None = Field(default=None, alias="timeNano")


class JsonErrorDetail(_Model):
    message: str | None = None


class JsonError(_Model):
    """Error record found in streamed build/pull output."""

    error: str | None = None
    error_detail: JsonErrorDetail | None = Field(default=None, alias="errorDetail")

    def __str__(self) -> str:
        error = self.error or ""
        detail = (self.error_detail.message if self.error_detail else None) or ""
        sep = "-" if error else ""
        return f"{error}{sep}{detail}"


class LibpodPingInfo(_Model):
    """Data returned in the headers of the `/_ping` endpoint."""

    api_version: str
    libpod_api_version: str
    libpod_buildah_version: str
    buildkit_version: str | None = None
    cache_control: str
    docker_experimental: bool
    pragma: str

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> LibpodPingInfo:
        lowered = {k.lower(): v for k, v in headers.items()}

        def required(name: str) -> str:
            if name not in lowered:
                raise InvalidResponseError(f"expected `{name}` field in headers")
            return lowered[name]

        experimental = required("docker-experimental").strip().lower()
        if experimental not in ("true", "false"):
            raise InvalidResponseError(f"expected header value to be bool - {experimental}")

        return cls(
            api_version=required("api-version"),
            libpod_api_version=required("libpod-api-version"),
            libpod_buildah_version=required("libpod-buildah-version"),
            buildkit_version=lowered.get("buildkit-version"),
            cache_control=required("cache-control"),
            docker_experimental=experimental == "true",
            pragma=required("pragma"),
        )


class ApiResource(str, Enum):
    """Categories of libpod endpoints (`/libpod/<resource>/...`)."""

    CONTAINERS = "containers"
    EXEC = "exec"
    IMAGES = "images"
    MANIFESTS = "manifests"
    NETWORKS = "networks"
    PODS = "pods"
    SECRETS = "secrets"
    VOLUMES = "volumes"
    SYSTEM = "system"
