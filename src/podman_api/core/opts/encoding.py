"""Wire encoder for parameter bags.

Two renderings of the same bag:
- URL: `key=value` pairs in bag order, percent encoded with `quote_plus`.
- JSON: one compact object, nested values kept nested.

Both are pure functions of the bag, so encoding the same bag twice always
yields the same text.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Iterable
from urllib.parse import quote_plus

from podman_api.core.errors import OptsSerializationError
from podman_api.core.opts.params import (
    BoolParam,
    IntParam,
    JsonParam,
    ListParam,
    ParameterBag,
    ParamValue,
    StrParam,
)

_COMPACT = (",", ":")


def wire_str(value: Any) -> str:
    """String form of a scalar as the daemon expects it.

    Booleans are lowercase, enums use their declared value.
    """

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def dumps_compact(data: Any) -> str:
    """`json.dumps` without whitespace, insertion ordered, NaN rejected."""

    return json.dumps(data, separators=_COMPACT, ensure_ascii=False, allow_nan=False)


def encoded_pair(key: str, value: Any) -> str:
    return f"{quote_plus(key)}={quote_plus(wire_str(value))}"


def encoded_pairs(pairs: Iterable[tuple[str, str]]) -> str:
    """Join pairs into a query string; an empty value becomes a bare key."""

    out: list[str] = []
    for key, value in pairs:
        if value == "":
            out.append(quote_plus(key))
        else:
            out.append(f"{quote_plus(key)}={quote_plus(value)}")
    return "&".join(out)


def construct_ep(endpoint: str, query: str | None = None) -> str:
    if query:
        return f"{endpoint}?{query}"
    return endpoint


def _url_pairs(key: str, param: ParamValue) -> list[tuple[str, str]]:
    if isinstance(param, StrParam):
        return [(key, param.value)]
    if isinstance(param, BoolParam):
        return [(key, wire_str(param.value))]
    if isinstance(param, IntParam):
        return [(key, str(param.value))]
    if isinstance(param, ListParam):
        return [(key, item) for item in param.value]
    if isinstance(param, JsonParam):
        try:
            return [(key, dumps_compact(param.value))]
        except (TypeError, ValueError) as exc:
            raise OptsSerializationError(f"failed to serialize `{key}` - {exc}") from exc
    raise TypeError(f"unsupported parameter kind: {type(param).__name__}")


def _json_value(param: ParamValue) -> Any:
    if isinstance(param, ListParam):
        return list(param.value)
    if isinstance(param, (StrParam, BoolParam, IntParam, JsonParam)):
        return param.value
    raise TypeError(f"unsupported parameter kind: {type(param).__name__}")


def encode_query(bag: ParameterBag) -> str | None:
    """Render a bag as a query string, `None` when the bag is empty."""

    if not len(bag):
        return None
    pairs: list[tuple[str, str]] = []
    for key, param in bag.items():
        pairs.extend(_url_pairs(key, param))
    return encoded_pairs(pairs)


def encode_json_object(bag: ParameterBag) -> dict[str, Any]:
    return {key: _json_value(param) for key, param in bag.items()}


def encode_json(bag: ParameterBag) -> str:
    """Render a bag as a single compact JSON object."""

    try:
        return dumps_compact(encode_json_object(bag))
    except (TypeError, ValueError) as exc:
        raise OptsSerializationError(str(exc)) from exc
