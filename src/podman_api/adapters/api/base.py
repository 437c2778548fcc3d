"""Shared pieces of the endpoint handles."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from podman_api.core.domain.id import Id
from podman_api.core.domain.models import ApiResource

if TYPE_CHECKING:
    from podman_api.adapters.podman import Podman


class ApiHandle:
    """A single named object on the daemon (container, image, pod...)."""

    resource: ClassVar[ApiResource]

    def __init__(self, podman: Podman, name_or_id: str) -> None:
        self._podman = podman
        self._id = Id(name_or_id)

    @property
    def id(self) -> Id:
        return self._id

    def _ep(self, suffix: str = "") -> str:
        return f"/libpod/{self.resource.value}/{self._id}{suffix}"

    async def exists(self) -> bool:
        """Quick way to determine if the object exists by name or id."""

        return await self._podman.resource_exists(self.resource, self._id)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._id == other._id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id!r})"


class ApiCollection:
    """Entry point for the endpoints of one resource kind."""

    handle_class: ClassVar[type[ApiHandle]]

    def __init__(self, podman: Podman) -> None:
        self._podman = podman

    def get(self, name_or_id: str) -> ApiHandle:
        return self.handle_class(self._podman, name_or_id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
