"""Network endpoints."""

from __future__ import annotations

from typing import Any

from podman_api.adapters.api.base import ApiCollection, ApiHandle
from podman_api.adapters.podman import parse_as
from podman_api.core.domain.models import ApiResource, NetworkInfo
from podman_api.core.opts.encoding import construct_ep, dumps_compact, encoded_pair
from podman_api.core.opts.networks import NetworkCreateOpts, NetworkListOpts, NetworkPruneOpts


class Network(ApiHandle):
    resource = ApiResource.NETWORKS

    async def inspect(self) -> NetworkInfo:
        return parse_as(NetworkInfo, await self._podman.get_json(self._ep("/json")))

    async def delete(self, force: bool = False) -> list[dict[str, Any]]:
        query = encoded_pair("force", True) if force else None
        return await self._podman.delete_json(construct_ep(self._ep(), query)) or []

    async def connect(self, container: str) -> None:
        await self._podman.post_body(self._ep("/connect"), dumps_compact({"container": container}))

    async def disconnect(self, container: str, force: bool = False) -> None:
        body = dumps_compact({"Container": container, "Force": force})
        await self._podman.post_body(self._ep("/disconnect"), body)


class Networks(ApiCollection):
    handle_class = Network

    def get(self, name_or_id: str) -> Network:
        return Network(self._podman, name_or_id)

    async def create(self, opts: NetworkCreateOpts | None = None) -> NetworkInfo:
        opts = opts or NetworkCreateOpts()
        data = await self._podman.post_body("/libpod/networks/create", opts.serialize())
        return parse_as(NetworkInfo, data)

    async def list(self, opts: NetworkListOpts | None = None) -> list[NetworkInfo]:
        opts = opts or NetworkListOpts()
        data = await self._podman.get_json(construct_ep("/libpod/networks/json", opts.serialize()))
        return parse_as(list[NetworkInfo], data or [])

    async def prune(self, opts: NetworkPruneOpts | None = None) -> list[dict[str, Any]]:
        opts = opts or NetworkPruneOpts()
        return await self._podman.post_json(construct_ep("/libpod/networks/prune", opts.serialize())) or []
