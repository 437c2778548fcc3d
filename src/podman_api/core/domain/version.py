"""API version handling.

The libpod API is mounted under `/v{major}.{minor}/libpod/...`; the client
keeps one `ApiVersion` and prefixes every endpoint with it.
"""

from __future__ import annotations

from dataclasses import dataclass

from podman_api.core.errors import MalformedVersionError


@dataclass(frozen=True, order=True)
class ApiVersion:
    """Version used to determine compatibility between client and server."""

    major: int
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, text: str) -> ApiVersion:
        """Parse `major.minor.patch`.

        All three components are required; extra components are rejected.
        """

        parts = text.strip().split(".")
        names = ("major", "minor", "patch")
        if len(parts) < 3:
            raise MalformedVersionError(f"expected {names[len(parts)]} version")
        if len(parts) > 3:
            raise MalformedVersionError("unexpected extra tokens")
        try:
            major, minor, patch = (int(p) for p in parts)
        except ValueError as exc:
            raise MalformedVersionError(str(exc)) from exc
        return cls(major, minor, patch)

    def make_endpoint(self, endpoint: str) -> str:
        sep = "" if endpoint.startswith("/") else "/"
        return f"/v{self}{sep}{endpoint}"

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


LATEST_API_VERSION = ApiVersion(3, 4, 4)
