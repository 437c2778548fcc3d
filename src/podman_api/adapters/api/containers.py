"""Container endpoints."""

from __future__ import annotations

from typing import Any, AsyncIterator

from podman_api.adapters.api.base import ApiCollection, ApiHandle
from podman_api.adapters.api.exec import Exec
from podman_api.adapters.podman import loads_line, parse_as
from podman_api.core.domain.models import ApiResource, ContainerCreateResponse, IdResponse, ListContainer, PruneReport
from podman_api.core.opts.common import ChangesOpts, SystemdUnitsOpts
from podman_api.core.opts.containers import (
    ContainerAttachOpts,
    ContainerCheckpointOpts,
    ContainerCommitOpts,
    ContainerCreateOpts,
    ContainerDeleteOpts,
    ContainerListOpts,
    ContainerLogsOpts,
    ContainerPruneOpts,
    ContainerRestoreOpts,
    ContainerStatsOpts,
    ContainerStopOpts,
    ContainerTopOpts,
    ContainerWaitOpts,
)
from podman_api.core.opts.encoding import construct_ep, encoded_pair
from podman_api.core.opts.exec import ExecCreateOpts


class Container(ApiHandle):
    resource = ApiResource.CONTAINERS

    async def start(self, detach_keys: str | None = None) -> None:
        query = encoded_pair("detachKeys", detach_keys) if detach_keys is not None else None
        await self._podman.post(construct_ep(self._ep("/start"), query))

    async def stop(self, opts: ContainerStopOpts | None = None) -> None:
        opts = opts or ContainerStopOpts()
        await self._podman.post(construct_ep(self._ep("/stop"), opts.serialize()))

    async def inspect(self) -> dict[str, Any]:
        return await self._podman.get_json(construct_ep(self._ep("/json"), encoded_pair("size", True)))

    async def send_signal(self, signal: str) -> None:
        await self._podman.post(construct_ep(self._ep("/kill"), encoded_pair("signal", signal)))

    async def kill(self) -> None:
        await self.send_signal("SIGKILL")

    async def pause(self) -> None:
        await self._podman.post(self._ep("/pause"))

    async def unpause(self) -> None:
        await self._podman.post(self._ep("/unpause"))

    async def restart(self) -> None:
        await self._podman.post(self._ep("/restart"))

    async def restart_with_timeout(self, seconds: int) -> None:
        await self._podman.post(construct_ep(self._ep("/restart"), encoded_pair("t", seconds)))

    async def delete(self, opts: ContainerDeleteOpts | None = None) -> None:
        opts = opts or ContainerDeleteOpts()
        await self._podman.delete(construct_ep(self._ep(), opts.serialize()))

    async def remove(self) -> None:
        """Force remove the container."""

        await self.delete(ContainerDeleteOpts.builder().force(True).build())

    async def mount(self) -> str:
        """Mount the root filesystem and return the host path."""

        return str(await self._podman.post_json(self._ep("/mount")))

    async def unmount(self) -> None:
        await self._podman.post(self._ep("/unmount"))

    async def checkpoint(self, opts: ContainerCheckpointOpts | None = None) -> Any:
        opts = opts or ContainerCheckpointOpts()
        return await self._podman.post_json(construct_ep(self._ep("/checkpoint"), opts.serialize()))

    async def checkpoint_export(self, opts: ContainerCheckpointOpts | None = None) -> bytes:
        """Checkpoint and return the exported tar.gz archive."""

        opts = (opts or ContainerCheckpointOpts()).for_export()
        response = await self._podman.post(construct_ep(self._ep("/checkpoint"), opts.serialize()))
        return response.content

    async def restore(self, opts: ContainerRestoreOpts | None = None) -> Any:
        opts = opts or ContainerRestoreOpts()
        return await self._podman.post_json(construct_ep(self._ep("/restore"), opts.serialize()))

    async def commit(self, opts: ContainerCommitOpts | None = None) -> IdResponse:
        """Create a new image from this container."""

        opts = (opts or ContainerCommitOpts()).for_container(self._id)
        data = await self._podman.post_json(construct_ep("/libpod/commit", opts.serialize()))
        return parse_as(IdResponse, data)

    async def create_exec(self, opts: ExecCreateOpts | None = None) -> Exec:
        opts = opts or ExecCreateOpts()
        data = await self._podman.post_body(self._ep("/exec"), opts.serialize())
        return Exec(self._podman, parse_as(IdResponse, data).id)

    async def rename(self, new_name: str) -> None:
        await self._podman.post(construct_ep(self._ep("/rename"), encoded_pair("name", new_name)))

    async def init(self) -> None:
        await self._podman.post(self._ep("/init"))

    async def wait(self, opts: ContainerWaitOpts | None = None) -> int:
        """Block until one of the conditions is met; returns the exit code."""

        opts = opts or ContainerWaitOpts()
        data = await self._podman.post_json(construct_ep(self._ep("/wait"), opts.serialize()))
        return int(data) if data is not None else 0

    async def changes(self, opts: ChangesOpts | None = None) -> list[dict[str, Any]]:
        opts = opts or ChangesOpts()
        return await self._podman.get_json(construct_ep(self._ep("/changes"), opts.serialize())) or []

    async def logs(self, opts: ContainerLogsOpts | None = None) -> AsyncIterator[str]:
        opts = opts or ContainerLogsOpts()
        async for line in self._podman.stream_lines("GET", construct_ep(self._ep("/logs"), opts.serialize())):
            yield line

    async def attach(self, opts: ContainerAttachOpts | None = None) -> AsyncIterator[str]:
        """Read-only attach: output lines of the container until it exits."""

        opts = (opts or ContainerAttachOpts()).stream()
        async for line in self._podman.stream_lines("POST", construct_ep(self._ep("/attach"), opts.serialize())):
            yield line

    async def stats(self, opts: ContainerStatsOpts | None = None) -> Any:
        """One report of resource usage for this container."""

        opts = opts or ContainerStatsOpts.builder().containers([self._id]).build()
        return await self._podman.get_json(construct_ep("/libpod/containers/stats", opts.oneshot().serialize()))

    async def top(self, opts: ContainerTopOpts | None = None) -> Any:
        opts = (opts or ContainerTopOpts()).oneshot()
        return await self._podman.get_json(construct_ep(self._ep("/top"), opts.serialize()))

    async def top_stream(self, opts: ContainerTopOpts | None = None) -> AsyncIterator[str]:
        opts = (opts or ContainerTopOpts()).stream()
        async for line in self._podman.stream_lines("GET", construct_ep(self._ep("/top"), opts.serialize())):
            yield line

    async def generate_systemd_units(self, opts: SystemdUnitsOpts | None = None) -> dict[str, str]:
        opts = opts or SystemdUnitsOpts()
        return await self._podman.get_json(construct_ep(f"/libpod/generate/{self._id}/systemd", opts.serialize()))

    async def generate_kube_yaml(self, service: bool = False) -> str:
        query = encoded_pair("names", self._id) + "&" + encoded_pair("service", service)
        response = await self._podman.request("GET", construct_ep("/libpod/generate/kube", query))
        return response.text


class Containers(ApiCollection):
    handle_class = Container

    def get(self, name_or_id: str) -> Container:
        return Container(self._podman, name_or_id)

    async def create(self, opts: ContainerCreateOpts) -> ContainerCreateResponse:
        data = await self._podman.post_body("/libpod/containers/create", opts.serialize())
        return parse_as(ContainerCreateResponse, data)

    async def list(self, opts: ContainerListOpts | None = None) -> list[ListContainer]:
        opts = opts or ContainerListOpts()
        data = await self._podman.get_json(construct_ep("/libpod/containers/json", opts.serialize()))
        return parse_as(list[ListContainer], data or [])

    async def prune(self, opts: ContainerPruneOpts | None = None) -> list[PruneReport]:
        opts = opts or ContainerPruneOpts()
        data = await self._podman.post_json(construct_ep("/libpod/containers/prune", opts.serialize()))
        return parse_as(list[PruneReport], data or [])

    async def stats(self, opts: ContainerStatsOpts | None = None) -> AsyncIterator[dict[str, Any]]:
        """Streamed resource usage reports of many containers."""

        opts = (opts or ContainerStatsOpts()).stream()
        async for line in self._podman.stream_lines("GET", construct_ep("/libpod/containers/stats", opts.serialize())):
            yield loads_line(line)

