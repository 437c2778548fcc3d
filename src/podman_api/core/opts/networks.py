"""Network options."""

from __future__ import annotations

from podman_api.core.opts.builder import (
    JsonOpts,
    JsonOptsBuilder,
    UrlOpts,
    UrlOptsBuilder,
    bool_field,
    filter_field,
    map_field,
    objects_field,
    str_field,
)
from podman_api.core.opts.filters import Filter, LabelFilterMixin, NegatedLabelFilterMixin


class NetworkListFilter(NegatedLabelFilterMixin, Filter):
    __slots__ = ()

    @classmethod
    def name(cls, name: str) -> NetworkListFilter:
        return cls._make("name", name)

    @classmethod
    def id(cls, network_id: str) -> NetworkListFilter:
        return cls._make("id", network_id)

    @classmethod
    def driver(cls, driver: str) -> NetworkListFilter:
        return cls._make("driver", driver)

    @classmethod
    def until(cls, timestamp: str) -> NetworkListFilter:
        return cls._make("until", timestamp)


class NetworkPruneFilter(LabelFilterMixin, Filter):
    __slots__ = ()

    @classmethod
    def until(cls, timestamp: str) -> NetworkPruneFilter:
        return cls._make("until", timestamp)


class NetworkCreateOpts(JsonOpts):
    """Adjust how a network is created."""

    __slots__ = ()


class NetworkCreateOptsBuilder(JsonOptsBuilder, opts=NetworkCreateOpts):
    dns_enabled = bool_field("dns_enabled", "Whether name resolution is active for containers on this network.")
    driver = str_field("driver", "Driver for this network, e.g. bridge, macvlan.")
    id = str_field("id")
    internal = bool_field("internal", "Whether the network has no external routes.")
    ipam_options = map_field("ipam_options", "Options used for IP assignment.")
    ipv6_enabled = bool_field("ipv6_enabled")
    labels = map_field("labels")
    name = str_field("name")
    network_interface = str_field("network_interface", "Network interface name on the host.")
    options = map_field("options")
    subnets = objects_field("subnets", "Subnets as `{\"subnet\": ..., \"gateway\": ...}` objects.")


class NetworkListOpts(UrlOpts):
    __slots__ = ()


class NetworkListOptsBuilder(UrlOptsBuilder, opts=NetworkListOpts):
    filter = filter_field(NetworkListFilter)


class NetworkPruneOpts(UrlOpts):
    __slots__ = ()


class NetworkPruneOptsBuilder(UrlOptsBuilder, opts=NetworkPruneOpts):
    filter = filter_field(NetworkPruneFilter)
