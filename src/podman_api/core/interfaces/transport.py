"""Transport contract.

Why Protocol:
- The endpoint handles only build `(method, endpoint, payload, headers)`;
  how bytes reach the daemon (unix socket, TCP, a test double) is an adapter
  concern.
- Tests can plug any object with these methods, no inheritance required.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Mapping, Protocol, runtime_checkable

from podman_api.core.errors import InvalidResponseError


@dataclass(frozen=True)
class RawResponse:
    """Status, headers and full body of a daemon response."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        try:
            return json.loads(self.content)
        except ValueError as exc:
            raise InvalidResponseError(f"expected a JSON body - {exc}") from exc


@runtime_checkable
class Transport(Protocol):
    """Minimal contract of an HTTP transport to the daemon.

    Rules:
    - `endpoint` is already versioned and carries its query string.
    - Status codes >= 400 raise `FaultError`; connection problems raise
      `TransportError`.
    """

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> RawResponse:
        ...

    def stream_lines(
        self,
        method: str,
        endpoint: str,
        payload: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> AsyncIterator[str]:
        """Yield the non-empty lines of a streamed body (events, build, pull)."""

        ...

    async def aclose(self) -> None:
        ...
