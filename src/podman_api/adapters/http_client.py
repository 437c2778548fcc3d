"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and logging for every request to the daemon.
- Hides the connection flavor: a unix socket and a TCP host both become an
  `httpx.AsyncClient` with a base URL.
- Easy to test: any `httpx.AsyncBaseTransport` (e.g. `httpx.MockTransport`)
  can replace the socket.
"""

from __future__ import annotations

import json
import logging
from typing import AsyncIterator, Mapping

import httpx

from podman_api.core.config import PodmanSettings
from podman_api.core.errors import FaultError, MissingAuthorityError, TransportError, UnsupportedSchemeError
from podman_api.core.interfaces.transport import RawResponse

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("unix", "tcp", "http", "https")

# Host name used in request URLs sent over a unix socket; the daemon ignores it.
UNIX_SOCKET_HOST = "http://d"


def parse_uri(uri: str) -> tuple[str, str]:
    """Split `scheme://authority`.

    `unix:///run/podman/podman.sock` -> (`unix`, `/run/podman/podman.sock`).
    """

    scheme, sep, authority = uri.partition("://")
    if scheme not in SUPPORTED_SCHEMES:
        raise UnsupportedSchemeError(scheme)
    if not sep or not authority:
        raise MissingAuthorityError()
    return scheme, authority


def build_async_client(
    uri: str,
    settings: PodmanSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` bound to the daemon at `uri`.

    Why a builder:
    - Centralizes timeouts/headers so every endpoint behaves the same.
    - `transport` lets tests bypass the network entirely.
    """

    settings = settings or PodmanSettings()
    scheme, authority = parse_uri(uri)

    if scheme == "unix":
        base_url = UNIX_SOCKET_HOST
        transport = transport or httpx.AsyncHTTPTransport(uds=authority)
    elif scheme == "https":
        base_url = f"https://{authority}"
    else:
        base_url = f"http://{authority}"

    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=base_url,
        transport=transport,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
    )


def _fault_message(response: RawResponse) -> str:
    """Best human readable message of a libpod error body."""

    try:
        body = json.loads(response.content)
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("message", "cause", "error"):
            value = body.get(key)
            if value:
                return str(value)
    text = response.text.strip()
    return text or "no error message"


def raise_for_status(response: RawResponse) -> None:
    if response.status_code >= 400:
        raise FaultError(response.status_code, _fault_message(response))


class HttpTransport:
    """`Transport` implementation on top of `httpx.AsyncClient`."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> RawResponse:
        logger.debug("%s %s", method, endpoint)
        try:
            response = await self._client.request(method, endpoint, content=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {endpoint} failed: {exc}") from exc

        raw = RawResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            content=response.content,
        )
        logger.debug("%s %s -> %s (%d bytes)", method, endpoint, raw.status_code, len(raw.content))
        raise_for_status(raw)
        return raw

    async def stream_lines(
        self,
        method: str,
        endpoint: str,
        payload: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> AsyncIterator[str]:
        logger.debug("%s %s (stream)", method, endpoint)
        try:
            # No timeout: followed streams (events, logs) stay open indefinitely.
            async with self._client.stream(
                method, endpoint, content=payload, headers=headers, timeout=None
            ) as response:
                if response.status_code >= 400:
                    content = await response.aread()
                    raise_for_status(RawResponse(response.status_code, dict(response.headers), content))
                async for line in response.aiter_lines():
                    if line.strip():
                        yield line
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {endpoint} failed: {exc}") from exc

    async def aclose(self) -> None:
        await self._client.aclose()
