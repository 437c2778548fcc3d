"""Pod endpoints."""

from __future__ import annotations

from typing import Any, AsyncIterator

from podman_api.adapters.api.base import ApiCollection, ApiHandle
from podman_api.adapters.podman import loads_line, parse_as
from podman_api.core.domain.models import ApiResource, IdResponse, ListPodsReport, PodActionReport, PruneReport
from podman_api.core.opts.common import SystemdUnitsOpts
from podman_api.core.opts.encoding import construct_ep, encoded_pair
from podman_api.core.opts.pods import PodCreateOpts, PodListOpts, PodPruneOpts, PodStatsOpts, PodTopOpts


class Pod(ApiHandle):
    resource = ApiResource.PODS

    async def _action(self, action: str, query: str | None = None) -> PodActionReport:
        data = await self._podman.post_json(construct_ep(self._ep(f"/{action}"), query))
        return parse_as(PodActionReport, data)

    async def start(self) -> PodActionReport:
        return await self._action("start")

    async def stop(self) -> PodActionReport:
        return await self._action("stop")

    async def stop_with_timeout(self, seconds: int) -> PodActionReport:
        return await self._action("stop", encoded_pair("t", seconds))

    async def restart(self) -> PodActionReport:
        return await self._action("restart")

    async def pause(self) -> PodActionReport:
        return await self._action("pause")

    async def unpause(self) -> PodActionReport:
        return await self._action("unpause")

    async def send_signal(self, signal: str) -> PodActionReport:
        return await self._action("kill", encoded_pair("signal", signal))

    async def kill(self) -> PodActionReport:
        return await self.send_signal("SIGKILL")

    async def inspect(self) -> dict[str, Any]:
        return await self._podman.get_json(self._ep("/json"))

    async def delete(self, force: bool = False) -> dict[str, Any]:
        query = encoded_pair("force", True) if force else None
        return await self._podman.delete_json(construct_ep(self._ep(), query))

    async def remove(self) -> dict[str, Any]:
        """Force remove the pod and its containers."""

        return await self.delete(force=True)

    async def top(self, opts: PodTopOpts | None = None) -> dict[str, Any]:
        opts = opts or PodTopOpts()
        return await self._podman.get_json(construct_ep(self._ep("/top"), opts.serialize()))

    async def top_stream(self, opts: PodTopOpts | None = None) -> AsyncIterator[dict[str, Any]]:
        opts = (opts or PodTopOpts()).stream()
        async for line in self._podman.stream_lines("GET", construct_ep(self._ep("/top"), opts.serialize())):
            yield loads_line(line)

    async def generate_systemd_units(self, opts: SystemdUnitsOpts | None = None) -> dict[str, str]:
        opts = opts or SystemdUnitsOpts()
        return await self._podman.get_json(construct_ep(f"/libpod/generate/{self._id}/systemd", opts.serialize()))

    async def generate_kube_yaml(self, service: bool = False) -> str:
        query = encoded_pair("names", self._id) + "&" + encoded_pair("service", service)
        response = await self._podman.request("GET", construct_ep("/libpod/generate/kube", query))
        return response.text


class Pods(ApiCollection):
    handle_class = Pod

    def get(self, name_or_id: str) -> Pod:
        return Pod(self._podman, name_or_id)

    async def create(self, opts: PodCreateOpts) -> Pod:
        data = await self._podman.post_body("/libpod/pods/create", opts.serialize())
        return Pod(self._podman, parse_as(IdResponse, data).id)

    async def list(self, opts: PodListOpts | None = None) -> list[ListPodsReport]:
        opts = opts or PodListOpts()
        data = await self._podman.get_json(construct_ep("/libpod/pods/json", opts.serialize()))
        return parse_as(list[ListPodsReport], data or [])

    async def prune(self, opts: PodPruneOpts | None = None) -> list[PruneReport]:
        opts = opts or PodPruneOpts()
        data = await self._podman.post_json(construct_ep("/libpod/pods/prune", opts.serialize()))
        return parse_as(list[PruneReport], data or [])

    async def stats(self, opts: PodStatsOpts | None = None) -> list[dict[str, Any]]:
        opts = opts or PodStatsOpts()
        return await self._podman.get_json(construct_ep("/libpod/pods/stats", opts.serialize())) or []

    async def stats_stream(self, opts: PodStatsOpts | None = None) -> AsyncIterator[list[dict[str, Any]]]:
        opts = (opts or PodStatsOpts()).stream()
        async for line in self._podman.stream_lines("GET", construct_ep("/libpod/pods/stats", opts.serialize())):
            yield loads_line(line)
