"""Exec session endpoints."""

from __future__ import annotations

from typing import Any, AsyncIterator

from podman_api.adapters.api.base import ApiCollection, ApiHandle
from podman_api.adapters.podman import JSON_HEADERS
from podman_api.core.domain.models import ApiResource
from podman_api.core.opts.encoding import construct_ep, encoded_pair
from podman_api.core.opts.exec import ExecStartOpts


class Exec(ApiHandle):
    """An exec session created with `Container.create_exec`."""

    resource = ApiResource.EXEC

    async def start(self, opts: ExecStartOpts | None = None) -> AsyncIterator[str]:
        """Start the session and yield its output lines.

        With `detach(True)` the daemon answers immediately and nothing is yielded.
        """

        opts = opts or ExecStartOpts()
        payload = opts.serialize().encode("utf-8")
        async for line in self._podman.stream_lines("POST", self._ep("/start"), payload, JSON_HEADERS):
            yield line

    async def inspect(self) -> dict[str, Any]:
        return await self._podman.get_json(self._ep("/json"))

    async def resize(self, width: int, height: int) -> None:
        query = encoded_pair("h", height) + "&" + encoded_pair("w", width)
        await self._podman.post(construct_ep(self._ep("/resize"), query))


class Execs(ApiCollection):
    handle_class = Exec

    def get(self, exec_id: str) -> Exec:
        return Exec(self._podman, exec_id)
