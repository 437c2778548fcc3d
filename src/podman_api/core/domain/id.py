"""Identifier newtype for name-or-ID references."""

from __future__ import annotations


class Id(str):
    """Opaque name or ID the daemon assigned to (or accepts for) an object.

    It is a `str` subclass so it can be used anywhere a string is expected
    (URL paths, filter values) while keeping intent visible in signatures.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Id({str.__repr__(self)})"
