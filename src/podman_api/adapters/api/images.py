"""Image endpoints.

Build and pull answer with a stream of JSON records. A record carrying an
`error` key ends the operation; it is raised as `StreamError` instead of being
yielded.
"""

from __future__ import annotations

from typing import Any, AsyncIterator

from podman_api.adapters.api.base import ApiCollection, ApiHandle
from podman_api.adapters.podman import loads_line, parse_as
from podman_api.core.domain.models import ApiResource, ImagesRemoveReport, ImageSummary, JsonError, PruneReport
from podman_api.core.errors import StreamError
from podman_api.core.opts.common import ChangesOpts
from podman_api.core.opts.encoding import construct_ep, encoded_pair
from podman_api.core.opts.images import (
    ImageBuildOpts,
    ImageExportOpts,
    ImageImportOpts,
    ImageListOpts,
    ImagePruneOpts,
    ImagePushOpts,
    ImageSearchOpts,
    ImagesExportOpts,
    ImagesRemoveOpts,
    ImageTagOpts,
    ImageTreeOpts,
    PullOpts,
)

TAR_HEADERS = {"Content-Type": "application/x-tar"}
REGISTRY_AUTH_HEADER = "X-Registry-Auth"


def _auth_headers(auth: str | None) -> dict[str, str] | None:
    return {REGISTRY_AUTH_HEADER: auth} if auth is not None else None


def check_chunk(chunk: Any) -> Any:
    """Raise `StreamError` when a streamed record reports a failure."""

    if isinstance(chunk, dict) and (chunk.get("error") or chunk.get("errorDetail")):
        raise StreamError(str(parse_as(JsonError, chunk)))
    return chunk


class Image(ApiHandle):
    resource = ApiResource.IMAGES

    async def inspect(self) -> dict[str, Any]:
        return await self._podman.get_json(self._ep("/json"))

    async def history(self) -> list[dict[str, Any]]:
        return await self._podman.get_json(self._ep("/history")) or []

    async def delete(self, force: bool = False) -> ImagesRemoveReport:
        query = encoded_pair("force", True) if force else None
        data = await self._podman.delete_json(construct_ep(self._ep(), query))
        return parse_as(ImagesRemoveReport, data or {})

    async def remove(self) -> ImagesRemoveReport:
        """Force remove the image."""

        return await self.delete(force=True)

    async def tag(self, opts: ImageTagOpts | None = None) -> None:
        opts = opts or ImageTagOpts()
        await self._podman.post(construct_ep(self._ep("/tag"), opts.serialize()))

    async def untag(self, opts: ImageTagOpts | None = None) -> None:
        """Without a repo and tag every name of the image is removed."""

        opts = opts or ImageTagOpts()
        await self._podman.post(construct_ep(self._ep("/untag"), opts.serialize()))

    async def export(self, opts: ImageExportOpts | None = None) -> bytes:
        """The image as a tarball."""

        opts = opts or ImageExportOpts()
        response = await self._podman.request("GET", construct_ep(self._ep("/get"), opts.serialize()))
        return response.content

    async def changes(self, opts: ChangesOpts | None = None) -> list[dict[str, Any]]:
        opts = opts or ChangesOpts()
        return await self._podman.get_json(construct_ep(self._ep("/changes"), opts.serialize())) or []

    async def tree(self, opts: ImageTreeOpts | None = None) -> dict[str, Any]:
        opts = opts or ImageTreeOpts()
        return await self._podman.get_json(construct_ep(self._ep("/tree"), opts.serialize()))

    async def push(self, opts: ImagePushOpts | None = None) -> str:
        """Push to a registry; returns the daemon's progress output."""

        opts = opts or ImagePushOpts()
        ep = construct_ep(self._ep("/push"), opts.serialize())
        response = await self._podman.request("POST", ep, None, _auth_headers(opts.auth_header()))
        return response.text


class Images(ApiCollection):
    handle_class = Image

    def get(self, name_or_id: str) -> Image:
        return Image(self._podman, name_or_id)

    async def build(self, opts: ImageBuildOpts, context: bytes) -> AsyncIterator[dict[str, Any]]:
        """Build from a tar archive of the build context and yield progress records.

        `opts.path` names the context on the caller side; the archive itself
        is sent as the request body.
        """

        ep = construct_ep("/libpod/build", opts.serialize())
        async for line in self._podman.stream_lines("POST", ep, context, TAR_HEADERS):
            yield check_chunk(loads_line(line))

    async def list(self, opts: ImageListOpts | None = None) -> list[ImageSummary]:
        opts = opts or ImageListOpts()
        data = await self._podman.get_json(construct_ep("/libpod/images/json", opts.serialize()))
        return parse_as(list[ImageSummary], data or [])

    async def pull(self, opts: PullOpts) -> AsyncIterator[dict[str, Any]]:
        """Pull an image and yield progress records."""

        ep = construct_ep("/libpod/images/pull", opts.serialize())
        headers = _auth_headers(opts.auth_header())
        async for line in self._podman.stream_lines("POST", ep, None, headers):
            yield check_chunk(loads_line(line))

    async def load(self, image: bytes) -> dict[str, Any]:
        """Load images from a tarball (as produced by `export`)."""

        return await self._podman.post_json("/libpod/images/load", image, TAR_HEADERS)

    async def import_(self, opts: ImageImportOpts, image: bytes) -> dict[str, Any]:
        """Create an image from a root filesystem tarball."""

        ep = construct_ep("/libpod/images/import", opts.serialize())
        return await self._podman.post_json(ep, image, TAR_HEADERS)

    async def remove(self, opts: ImagesRemoveOpts | None = None) -> ImagesRemoveReport:
        opts = opts or ImagesRemoveOpts()
        data = await self._podman.delete_json(construct_ep("/libpod/images/remove", opts.serialize()))
        return parse_as(ImagesRemoveReport, data or {})

    async def prune(self, opts: ImagePruneOpts | None = None) -> list[PruneReport]:
        opts = opts or ImagePruneOpts()
        data = await self._podman.post_json(construct_ep("/libpod/images/prune", opts.serialize()))
        return parse_as(list[PruneReport], data or [])

    async def search(self, opts: ImageSearchOpts | None = None) -> list[dict[str, Any]]:
        opts = opts or ImageSearchOpts()
        return await self._podman.get_json(construct_ep("/libpod/images/search", opts.serialize())) or []

    async def export(self, opts: ImagesExportOpts | None = None) -> bytes:
        """Several images in one tarball."""

        opts = opts or ImagesExportOpts()
        response = await self._podman.request("GET", construct_ep("/libpod/images/export", opts.serialize()))
        return response.content
