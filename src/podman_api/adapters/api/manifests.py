"""Manifest list endpoints."""

from __future__ import annotations

from typing import Any

from podman_api.adapters.api.base import ApiCollection, ApiHandle
from podman_api.adapters.podman import parse_as
from podman_api.core.domain.models import ApiResource, IdResponse, ManifestRemoveReport
from podman_api.core.opts.encoding import construct_ep, encoded_pair
from podman_api.core.opts.manifests import ManifestCreateOpts, ManifestImageAddOpts, ManifestPushOpts


class Manifest(ApiHandle):
    resource = ApiResource.MANIFESTS

    async def inspect(self) -> dict[str, Any]:
        return await self._podman.get_json(self._ep("/json"))

    async def add_image(self, opts: ManifestImageAddOpts) -> IdResponse:
        data = await self._podman.post_body(self._ep("/add"), opts.serialize())
        return parse_as(IdResponse, data)

    async def remove_image(self, digest: str) -> ManifestRemoveReport:
        """Remove the image with `digest` from this list."""

        data = await self._podman.delete_json(construct_ep(self._ep(), encoded_pair("digest", digest)))
        return parse_as(ManifestRemoveReport, data or {})

    async def push(self, opts: ManifestPushOpts) -> Any:
        return await self._podman.post_json(construct_ep(self._ep("/push"), opts.serialize()))

    async def delete(self) -> ManifestRemoveReport:
        data = await self._podman.delete_json(self._ep())
        return parse_as(ManifestRemoveReport, data or {})


class Manifests(ApiCollection):
    handle_class = Manifest

    def get(self, name_or_id: str) -> Manifest:
        return Manifest(self._podman, name_or_id)

    async def create(self, opts: ManifestCreateOpts) -> Manifest:
        """Create a manifest list and return a handle to it."""

        ep = construct_ep(f"/libpod/manifests/{opts.name}", opts.serialize())
        data = await self._podman.post_json(ep)
        return Manifest(self._podman, parse_as(IdResponse, data).id)
