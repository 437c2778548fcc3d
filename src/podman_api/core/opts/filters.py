"""Filter predicates and the `filters` combinator.

The daemon expects list/prune filters as a single `filters` query parameter
holding a JSON object `key -> [values]`. Predicates hide that convention:
each one knows its single `(key, value)` term and the combinator groups them.

Every resource defines its own closed predicate class (see the per-resource
modules). Instances are only created through its named constructors, e.g.
`VolumeListFilter.label_key_val("env", "prod")`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from podman_api.core.opts.encoding import dumps_compact, wire_str

logger = logging.getLogger(__name__)

FILTERS_KEY = "filters"
LABEL_KEY = "label"


class Equality(str, Enum):
    EQUAL = "="
    NOT_EQUAL = "!="


@dataclass(frozen=True)
class FilterItem:
    """One term of the daemon's filter language."""

    key: str
    value: str
    equality: Equality = Equality.EQUAL

    @property
    def query_key(self) -> str:
        # Negated terms travel under `<key>!` in the filters map.
        if self.equality is Equality.NOT_EQUAL:
            return f"{self.key}!"
        return self.key

    def as_pair(self) -> tuple[str, str]:
        return self.query_key, self.value

    def __str__(self) -> str:
        return f"{self.key}{self.equality.value}{self.value}"


class Filter:
    """Base class of every per-resource predicate set.

    Predicates come only from the named constructors of each subclass, so the
    set of terms a resource accepts stays closed.
    """

    __slots__ = ("_item",)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError(f"use the named constructors of {type(self).__name__}")

    @classmethod
    def _make(cls, key: str, value: Any, equality: Equality = Equality.EQUAL):
        predicate = cls.__new__(cls)
        predicate._item = FilterItem(key=key, value=wire_str(value), equality=equality)
        return predicate

    def query_item(self) -> FilterItem:
        return self._item

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._item == other._item  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._item))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._item})"


def group_filters(filters: Iterable[Filter]) -> dict[str, list[str]]:
    """Multi-map of filter terms. Repeated keys keep every value in order."""

    grouped: dict[str, list[str]] = {}
    for predicate in filters:
        key, value = predicate.query_item().as_pair()
        grouped.setdefault(key, []).append(value)
    return grouped


def encode_filters(filters: Iterable[Filter]) -> str | None:
    """JSON text for the `filters` parameter, `None` for no predicates.

    A rendering failure yields an empty value instead of an exception.
    """

    grouped = group_filters(filters)
    if not grouped:
        return None
    try:
        return dumps_compact(grouped)
    except (TypeError, ValueError) as exc:
        logger.warning("could not encode filters %r: %s", grouped, exc)
        return ""


class LabelFilterMixin:
    """`label` predicates shared by most resources."""

    __slots__ = ()

    @classmethod
    def label_key(cls, key: str):
        return cls._make(LABEL_KEY, key)

    @classmethod
    def label_key_val(cls, key: str, value: str):
        return cls._make(LABEL_KEY, f"{key}={value}")


class NegatedLabelFilterMixin(LabelFilterMixin):
    """Adds the `label!` (does not carry the label) predicates."""

    __slots__ = ()

    @classmethod
    def no_label_key(cls, key: str):
        return cls._make(LABEL_KEY, key, Equality.NOT_EQUAL)

    @classmethod
    def no_label_key_val(cls, key: str, value: str):
        return cls._make(LABEL_KEY, f"{key}={value}", Equality.NOT_EQUAL)
