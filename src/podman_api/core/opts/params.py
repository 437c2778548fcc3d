"""Parameter bag: the ordered store behind every options builder.

Why a tagged union instead of `dict[str, Any]`:
- The wire encoder has to render each kind differently (bare key, repeated
  pairs, nested JSON...). Keeping the kind explicit makes every branch of the
  encoder visible and total.
- Values are converted once, when a setter runs, so encoding can never meet
  an unexpected Python type.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Iterator, Union


@dataclass(frozen=True)
class StrParam:
    value: str


@dataclass(frozen=True)
class BoolParam:
    value: bool


@dataclass(frozen=True)
class IntParam:
    value: int


@dataclass(frozen=True)
class ListParam:
    value: tuple[str, ...]


@dataclass(frozen=True)
class JsonParam:
    """Arbitrary JSON data (maps, nested models, list of objects)."""

    value: Any


ParamValue = Union[StrParam, BoolParam, IntParam, ListParam, JsonParam]


class ParameterBag:
    """Insertion ordered `key -> ParamValue` mapping.

    A key inserted twice keeps its original position and takes the new value
    (last write wins). Keys are never duplicated.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: dict[str, ParamValue] | None = None) -> None:
        self._entries: dict[str, ParamValue] = dict(entries) if entries else {}

    def insert(self, key: str, value: ParamValue) -> None:
        self._entries[key] = value

    def remove(self, key: str) -> None:
        self._entries.pop(key, None)

    def get(self, key: str) -> ParamValue | None:
        return self._entries.get(key)

    def items(self) -> list[tuple[str, ParamValue]]:
        return list(self._entries.items())

    def copy(self) -> ParameterBag:
        """Deep copy. Nested JSON values are copied too."""

        return ParameterBag(copy.deepcopy(self._entries))

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterBag):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    def __repr__(self) -> str:
        return f"ParameterBag({self._entries!r})"
