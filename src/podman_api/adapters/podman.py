"""Main entry point for talking to the Podman daemon.

Why one class:
- Holds the API version and the transport; every endpoint handle goes through
  its request helpers, so versioning, logging and error mapping live in one
  place.
- Handles (`containers()`, `images()`...) are cheap views over the client.
"""

from __future__ import annotations

import json
import logging
from typing import Any, AsyncIterator, Mapping, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from podman_api.adapters.http_client import HttpTransport, build_async_client
from podman_api.core.config import PodmanSettings
from podman_api.core.domain.models import ApiResource, Event, LibpodPingInfo
from podman_api.core.domain.version import LATEST_API_VERSION, ApiVersion
from podman_api.core.errors import FaultError, InvalidResponseError
from podman_api.core.interfaces.transport import RawResponse, Transport
from podman_api.core.opts.common import EventsOpts, PlayKubernetesYamlOpts
from podman_api.core.opts.encoding import construct_ep

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

JSON_HEADERS = {"Content-Type": "application/json"}


def parse_as(tp: type[_T] | Any, data: Any) -> _T:
    """Validate decoded JSON into `tp` (a model, `list[Model]`...)."""

    try:
        return TypeAdapter(tp).validate_python(data)
    except ValidationError as exc:
        raise InvalidResponseError(f"unexpected response shape - {exc}") from exc


class Podman:
    """Client of one Podman daemon."""

    def __init__(self, transport: Transport, version: ApiVersion = LATEST_API_VERSION) -> None:
        self._transport = transport
        self._version = version

    # -- constructors ----------------------------------------------------------

    @classmethod
    def new(
        cls,
        uri: str,
        version: ApiVersion = LATEST_API_VERSION,
        *,
        settings: PodmanSettings | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> Podman:
        """Pick the connection type from the URI scheme.

        Supported: `unix://<socket path>`, `tcp://<host:port>`,
        `http://<host:port>` and `https://<host:port>`.
        """

        client = build_async_client(uri, settings, transport=http_transport)
        return cls(HttpTransport(client), version)

    @classmethod
    def unix(cls, socket_path: str, version: ApiVersion = LATEST_API_VERSION, **kwargs: Any) -> Podman:
        """`socket_path` is the part after `unix://`, e.g. `/run/podman/podman.sock`."""

        return cls.new(f"unix://{socket_path}", version, **kwargs)

    @classmethod
    def tcp(cls, host: str, version: ApiVersion = LATEST_API_VERSION, **kwargs: Any) -> Podman:
        """`host` is the authority part, e.g. `127.0.0.1:8080`."""

        return cls.new(f"tcp://{host}", version, **kwargs)

    @classmethod
    def from_settings(cls, settings: PodmanSettings | None = None, **kwargs: Any) -> Podman:
        settings = settings or PodmanSettings()
        version = ApiVersion.parse(settings.api_version)
        return cls.new(settings.uri, version, settings=settings, **kwargs)

    @property
    def api_version(self) -> ApiVersion:
        return self._version

    @property
    def transport(self) -> Transport:
        return self._transport

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> Podman:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # -- handles ---------------------------------------------------------------

    def containers(self):
        from podman_api.adapters.api.containers import Containers

        return Containers(self)

    def execs(self):
        from podman_api.adapters.api.exec import Execs

        return Execs(self)

    def images(self):
        from podman_api.adapters.api.images import Images

        return Images(self)

    def manifests(self):
        from podman_api.adapters.api.manifests import Manifests

        return Manifests(self)

    def networks(self):
        from podman_api.adapters.api.networks import Networks

        return Networks(self)

    def pods(self):
        from podman_api.adapters.api.pods import Pods

        return Pods(self)

    def secrets(self):
        from podman_api.adapters.api.secrets import Secrets

        return Secrets(self)

    def volumes(self):
        from podman_api.adapters.api.volumes import Volumes

        return Volumes(self)

    # -- system ----------------------------------------------------------------

    async def info(self) -> dict[str, Any]:
        """Host, store and registry information."""

        return await self.get_json("/libpod/info")

    async def ping(self) -> LibpodPingInfo:
        response = await self.request("GET", "/libpod/_ping")
        return LibpodPingInfo.from_headers(response.headers)

    async def version(self) -> dict[str, Any]:
        """Component versions reported by the daemon (`/libpod/version`)."""

        return await self.get_json("/libpod/version")

    async def data_usage(self) -> dict[str, Any]:
        return await self.get_json("/libpod/system/df")

    async def prune(self) -> dict[str, Any]:
        """Remove unused pods, containers, images, networks and volumes."""

        return await self.post_json("/libpod/system/prune")

    async def events(self, opts: EventsOpts | None = None) -> AsyncIterator[Event]:
        """Stream daemon events, one parsed `Event` per line."""

        opts = opts or EventsOpts()
        ep = construct_ep("/libpod/events", opts.serialize())
        async for line in self.stream_lines("GET", ep):
            yield parse_as(Event, loads_line(line))

    async def play_kubernetes_yaml(self, yaml: str, opts: PlayKubernetesYamlOpts | None = None) -> dict[str, Any]:
        opts = opts or PlayKubernetesYamlOpts()
        ep = construct_ep("/libpod/play/kube", opts.serialize())
        return await self.post_json(ep, yaml.encode("utf-8"), {"Content-Type": "application/x-yaml"})

    async def remove_kubernetes_pods(self) -> dict[str, Any]:
        """Tear down pods created by `play_kubernetes_yaml`."""

        return await self.delete_json("/libpod/play/kube")

    async def adjust_api_version(self) -> ApiVersion:
        """Lower the client API version to the server's when the server is older."""

        info = await self.version()
        raw = (info or {}).get("Version")
        if not raw:
            raise InvalidResponseError("expected `Version` in version response")
        server_version = ApiVersion.parse(str(raw))
        if server_version <= self._version:
            logger.info("adjusting API version %s -> %s", self._version, server_version)
            self._version = server_version
        return self._version

    async def resource_exists(self, resource: ApiResource, name_or_id: str) -> bool:
        """`204 -> True`, `404 -> False`, anything else is an error."""

        ep = f"/libpod/{ApiResource(resource).value}/{name_or_id}/exists"
        try:
            response = await self.request("GET", ep)
        except FaultError as exc:
            if exc.code == 404:
                return False
            raise
        if response.status_code == 204:
            return True
        raise InvalidResponseError(f"unexpected status {response.status_code} from {ep}")

    # -- request helpers -------------------------------------------------------

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> RawResponse:
        return await self._transport.request(method, self._version.make_endpoint(endpoint), payload, headers)

    def stream_lines(
        self,
        method: str,
        endpoint: str,
        payload: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> AsyncIterator[str]:
        return self._transport.stream_lines(method, self._version.make_endpoint(endpoint), payload, headers)

    async def get_json(self, endpoint: str) -> Any:
        response = await self.request("GET", endpoint)
        return _json_or_none(response)

    async def post_json(
        self,
        endpoint: str,
        payload: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        response = await self.request("POST", endpoint, payload, headers)
        return _json_or_none(response)

    async def post_body(self, endpoint: str, body: BaseModel | str | None) -> Any:
        """POST a JSON body (`JsonOpts.serialize()` text or a model)."""

        if isinstance(body, BaseModel):
            body = body.model_dump_json(by_alias=True, exclude_none=True)
        payload = body.encode("utf-8") if body is not None else None
        return await self.post_json(endpoint, payload, JSON_HEADERS)

    async def post(self, endpoint: str, payload: bytes | None = None) -> RawResponse:
        return await self.request("POST", endpoint, payload)

    async def delete(self, endpoint: str) -> RawResponse:
        return await self.request("DELETE", endpoint)

    async def delete_json(self, endpoint: str) -> Any:
        response = await self.request("DELETE", endpoint)
        return _json_or_none(response)

    def __repr__(self) -> str:
        return f"Podman(version={self._version})"


def loads_line(line: str) -> Any:
    try:
        return json.loads(line)
    except ValueError as exc:
        raise InvalidResponseError(f"expected a JSON line - {exc}") from exc


def _json_or_none(response: RawResponse) -> Any:
    if not response.content.strip():
        return None
    return response.json()
