"""Options builders: fluent construction of request parameters.

Why builders:
- Every endpoint gets the same contract: `XOpts.builder(...)`, chained typed
  setters, `build()` returning an immutable `XOpts`.
- The encoding flavor is part of the type. A `UrlOptsBuilder` always yields a
  `UrlOpts` (query string) and a `JsonOptsBuilder` a `JsonOpts` (request body),
  so an option set cannot be rendered with the wrong encoder.

Setters are declared as class attributes with the field factories below
(`bool_field("all")`, `map_field("Labels")`...). Each factory produces a method
that converts its argument into a `ParamValue`, stores it under the wire key
and returns the builder for chaining. Setting a field again overwrites it.
"""

from __future__ import annotations

import copy
from enum import Enum
from typing import Any, Callable, ClassVar, Iterable, Mapping, TypeVar

from pydantic import BaseModel

from podman_api.core.opts.encoding import encode_json, encode_json_object, encode_query
from podman_api.core.opts.filters import FILTERS_KEY, Filter, encode_filters
from podman_api.core.opts.params import (
    BoolParam,
    IntParam,
    JsonParam,
    ListParam,
    ParameterBag,
    ParamValue,
    StrParam,
)

_O = TypeVar("_O", bound="Opts")
_B = TypeVar("_B", bound="OptsBuilder")


class Opts:
    """Finalized, read-only parameters of one request."""

    builder_class: ClassVar[type[OptsBuilder]]

    __slots__ = ("_params",)

    def __init__(self, params: ParameterBag | None = None) -> None:
        self._params = params.copy() if params is not None else ParameterBag()

    @classmethod
    def builder(cls, *required: Any) -> Any:
        """Return a new builder; mandatory fields are passed positionally."""

        return cls.builder_class(*required)

    @property
    def params(self) -> ParameterBag:
        return self._params.copy()

    def get(self, key: str) -> ParamValue | None:
        return self._params.get(key)

    def is_empty(self) -> bool:
        return not len(self._params)

    def _with(self: _O, key: str, value: ParamValue) -> _O:
        """Copy of these options with one more parameter."""

        bag = self._params.copy()
        bag.insert(key, value)
        new = copy.copy(self)
        new._params = bag
        return new

    def _required(self, key: str) -> str:
        param = self._params.get(key)
        return param.value if isinstance(param, StrParam) else ""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._params == other._params  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._params!r})"


class UrlOpts(Opts):
    """Options sent as the query string of the request URL."""

    __slots__ = ()

    def serialize(self) -> str | None:
        return encode_query(self._params)


class JsonOpts(Opts):
    """Options sent as a JSON object in the request body."""

    __slots__ = ()

    def serialize(self) -> str:
        return encode_json(self._params)

    def to_dict(self) -> dict[str, Any]:
        return encode_json_object(self._params)


class OptsBuilder:
    """Accumulates parameters in a `ParameterBag` until `build()`."""

    opts_class: ClassVar[type[Opts]]
    opts_base: ClassVar[type[Opts]] = Opts

    def __init_subclass__(cls, opts: type[Opts] | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if opts is not None:
            if not issubclass(opts, cls.opts_base):
                raise TypeError(f"{cls.__name__} must build a {cls.opts_base.__name__}, got {opts.__name__}")
            cls.opts_class = opts
            opts.builder_class = cls
        for name, attr in list(vars(cls).items()):
            if callable(attr) and hasattr(attr, "_param_key"):
                attr.__name__ = name
                attr.__qualname__ = f"{cls.__name__}.{name}"

    def __init__(self) -> None:
        self._params = ParameterBag()

    def _require(self, key: str, value: Any) -> None:
        self._params.insert(key, StrParam(str(value)))

    def clone(self: _B) -> _B:
        """Independent copy of this builder (the bag is deep copied)."""

        new = self.__class__.__new__(self.__class__)
        new.__dict__.update(self.__dict__)
        new._params = self._params.copy()
        return new

    def build(self) -> Any:
        """Finalize into the immutable options object."""

        return self.opts_class(self._params)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._params!r})"


class UrlOptsBuilder(OptsBuilder):
    opts_base = UrlOpts


class JsonOptsBuilder(OptsBuilder):
    opts_base = JsonOpts


# -- field factories -----------------------------------------------------------


def to_json_value(value: Any) -> Any:
    """Plain JSON data for nested fields. Models keep the remote casing."""

    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(k): to_json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    return value


def _as_strings(values: Iterable[Any]) -> tuple[str, ...]:
    if isinstance(values, str):
        return (values,)
    return tuple(str(v) for v in values)


def _as_mapping(pairs: Mapping[Any, Any] | Iterable[tuple[Any, Any]]) -> dict[str, Any]:
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    return {str(k): to_json_value(v) for k, v in items}


def _field(key: str, convert: Callable[[Any], ParamValue], doc: str | None) -> Callable[..., Any]:
    def setter(self: _B, value: Any) -> _B:
        self._params.insert(key, convert(value))
        return self

    setter._param_key = key  # type: ignore[attr-defined]
    setter.__doc__ = doc
    return setter


def str_field(key: str, doc: str | None = None) -> Callable[[_B, str], _B]:
    return _field(key, lambda v: StrParam(str(v)), doc)


def bool_field(key: str, doc: str | None = None) -> Callable[[_B, bool], _B]:
    return _field(key, lambda v: BoolParam(bool(v)), doc)


def int_field(key: str, doc: str | None = None) -> Callable[[_B, int], _B]:
    return _field(key, lambda v: IntParam(int(v)), doc)


def enum_field(key: str, enum_cls: type[Enum], doc: str | None = None) -> Callable[[_B, Any], _B]:
    """Closed vocabulary: the value is coerced through `enum_cls`."""

    return _field(key, lambda v: StrParam(str(enum_cls(v).value)), doc)


def display_field(key: str, doc: str | None = None) -> Callable[[_B, Any], _B]:
    """Value-carrying option types rendered through `str()` (`UserOpt`, `Platform`...)."""

    return _field(key, lambda v: StrParam(str(v)), doc)


def vec_field(key: str, doc: str | None = None) -> Callable[[_B, Iterable[str]], _B]:
    return _field(key, lambda v: ListParam(_as_strings(v)), doc)


def objects_field(key: str, doc: str | None = None) -> Callable[[_B, Iterable[Any]], _B]:
    """List of nested objects (models or dicts)."""

    return _field(key, lambda v: JsonParam([to_json_value(item) for item in v]), doc)


def map_field(key: str, doc: str | None = None) -> Callable[..., Any]:
    """Key/value map. A second call replaces the whole map."""

    return _field(key, lambda v: JsonParam(_as_mapping(v)), doc)


def json_field(key: str, doc: str | None = None) -> Callable[[_B, Any], _B]:
    """Single nested object (usually a pydantic model)."""

    return _field(key, lambda v: JsonParam(to_json_value(v)), doc)


def filter_field(filter_cls: type[Filter], doc: str | None = None) -> Callable[[_B, Iterable[Filter]], _B]:
    """`filter(predicates)` setter storing the grouped `filters` parameter."""

    def setter(self: _B, filters: Iterable[Filter]) -> _B:
        filters = list(filters)
        for predicate in filters:
            if not isinstance(predicate, filter_cls):
                raise TypeError(f"expected {filter_cls.__name__} predicates, got {type(predicate).__name__}")
        encoded = encode_filters(filters)
        if encoded is None:
            self._params.remove(FILTERS_KEY)
        else:
            self._params.insert(FILTERS_KEY, StrParam(encoded))
        return self

    setter._param_key = FILTERS_KEY  # type: ignore[attr-defined]
    setter.__doc__ = doc or f"Filter results with {filter_cls.__name__} predicates."
    return setter
