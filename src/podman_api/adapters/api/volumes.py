"""Volume endpoints."""

from __future__ import annotations

from podman_api.adapters.api.base import ApiCollection, ApiHandle
from podman_api.adapters.podman import parse_as
from podman_api.core.domain.models import ApiResource, PruneReport, VolumeInfo
from podman_api.core.opts.encoding import construct_ep, encoded_pair
from podman_api.core.opts.volumes import VolumeCreateOpts, VolumeListOpts, VolumePruneOpts


class Volume(ApiHandle):
    resource = ApiResource.VOLUMES

    async def inspect(self) -> VolumeInfo:
        return parse_as(VolumeInfo, await self._podman.get_json(self._ep("/json")))

    async def delete(self, force: bool = False) -> None:
        query = encoded_pair("force", True) if force else None
        await self._podman.delete(construct_ep(self._ep(), query))

    async def remove(self) -> None:
        """Force remove the volume."""

        await self.delete(force=True)


class Volumes(ApiCollection):
    handle_class = Volume

    def get(self, name: str) -> Volume:
        return Volume(self._podman, name)

    async def create(self, opts: VolumeCreateOpts | None = None) -> VolumeInfo:
        opts = opts or VolumeCreateOpts()
        data = await self._podman.post_body("/libpod/volumes/create", opts.serialize())
        return parse_as(VolumeInfo, data)

    async def list(self, opts: VolumeListOpts | None = None) -> list[VolumeInfo]:
        opts = opts or VolumeListOpts()
        data = await self._podman.get_json(construct_ep("/libpod/volumes/json", opts.serialize()))
        return parse_as(list[VolumeInfo], data or [])

    async def prune(self, opts: VolumePruneOpts | None = None) -> list[PruneReport]:
        opts = opts or VolumePruneOpts()
        data = await self._podman.post_json(construct_ep("/libpod/volumes/prune", opts.serialize()))
        return parse_as(list[PruneReport], data or [])
