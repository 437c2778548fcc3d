"""Non-optional collection fields.

The libpod schema documents several arrays and maps as required, yet the
daemon sends `null` (or nothing) when they are empty, e.g. `Warnings` or
`Labels`. These hooks make such fields always present in memory:

- `null` or absent -> empty list / empty dict
- populated        -> validated as usual

Serialization is left to pydantic, so an empty field is written back as
`[]` / `{}`, never `null`.
"""

from __future__ import annotations

from typing import Annotated, Any, TypeVar

from pydantic import BeforeValidator, Field

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")


def none_as_empty_list(value: Any) -> Any:
    return [] if value is None else value


def none_as_empty_dict(value: Any) -> Any:
    return {} if value is None else value


NonOptionalList = Annotated[list[T], BeforeValidator(none_as_empty_list), Field(default_factory=list)]
NonOptionalDict = Annotated[dict[K, V], BeforeValidator(none_as_empty_dict), Field(default_factory=dict)]
