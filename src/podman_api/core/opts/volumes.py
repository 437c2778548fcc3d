"""Volume options."""

from __future__ import annotations

from podman_api.core.opts.builder import (
    JsonOpts,
    JsonOptsBuilder,
    UrlOpts,
    UrlOptsBuilder,
    filter_field,
    map_field,
    str_field,
)
from podman_api.core.opts.filters import Filter, LabelFilterMixin


class VolumeListFilter(LabelFilterMixin, Filter):
    """Predicates accepted when listing volumes."""

    __slots__ = ()

    @classmethod
    def driver(cls, driver: str) -> VolumeListFilter:
        return cls._make("driver", driver)

    @classmethod
    def name(cls, name: str) -> VolumeListFilter:
        return cls._make("name", name)

    @classmethod
    def opt(cls, opt: str) -> VolumeListFilter:
        """Volumes with the given storage driver option."""
        return cls._make("opt", opt)

    @classmethod
    def until(cls, timestamp: str) -> VolumeListFilter:
        """Unix timestamp, date or Go duration (`10m`, `1h30m`) relative to the daemon clock."""
        return cls._make("until", timestamp)


class VolumePruneFilter(LabelFilterMixin, Filter):
    __slots__ = ()

    @classmethod
    def until(cls, timestamp: str) -> VolumePruneFilter:
        return cls._make("until", timestamp)


class VolumeListOpts(UrlOpts):
    """Adjust the list of returned volumes."""

    __slots__ = ()


class VolumeListOptsBuilder(UrlOptsBuilder, opts=VolumeListOpts):
    filter = filter_field(VolumeListFilter)


class VolumeCreateOpts(JsonOpts):
    """Adjust how a volume is created."""

    __slots__ = ()


class VolumeCreateOptsBuilder(JsonOptsBuilder, opts=VolumeCreateOpts):
    driver = str_field("Driver", "Storage driver to use.")
    labels = map_field("Labels", "User-defined key/value metadata.")
    name = str_field("Name")
    options = map_field("Options", "Storage driver options.")


class VolumePruneOpts(UrlOpts):
    __slots__ = ()


class VolumePruneOptsBuilder(UrlOptsBuilder, opts=VolumePruneOpts):
    filter = filter_field(VolumePruneFilter)
