"""Secret endpoints."""

from __future__ import annotations

from podman_api.adapters.api.base import ApiCollection, ApiHandle
from podman_api.adapters.podman import parse_as
from podman_api.core.domain.models import ApiResource, SecretCreateResponse, SecretInfoReport
from podman_api.core.opts.encoding import construct_ep
from podman_api.core.opts.secrets import SecretCreateOpts, SecretListOpts


class Secret(ApiHandle):
    resource = ApiResource.SECRETS

    async def inspect(self) -> SecretInfoReport:
        return parse_as(SecretInfoReport, await self._podman.get_json(self._ep("/json")))

    async def delete(self) -> None:
        await self._podman.delete(self._ep())


class Secrets(ApiCollection):
    handle_class = Secret

    def get(self, name_or_id: str) -> Secret:
        return Secret(self._podman, name_or_id)

    async def create(self, opts: SecretCreateOpts, secret: bytes | str) -> Secret:
        """Store `secret` under `opts.name`; the value is the raw request body."""

        payload = secret.encode("utf-8") if isinstance(secret, str) else secret
        ep = construct_ep("/libpod/secrets/create", opts.serialize())
        data = await self._podman.post_json(ep, payload)
        return Secret(self._podman, parse_as(SecretCreateResponse, data).id or opts.name)

    async def list(self, opts: SecretListOpts | None = None) -> list[SecretInfoReport]:
        opts = opts or SecretListOpts()
        data = await self._podman.get_json(construct_ep("/libpod/secrets/json", opts.serialize()))
        return parse_as(list[SecretInfoReport], data or [])
