"""Secret options."""

from __future__ import annotations

from podman_api.core.opts.builder import UrlOpts, UrlOptsBuilder, filter_field, str_field
from podman_api.core.opts.filters import Filter


class SecretListFilter(Filter):
    __slots__ = ()

    @classmethod
    def name(cls, name: str) -> SecretListFilter:
        return cls._make("name", name)

    @classmethod
    def id(cls, secret_id: str) -> SecretListFilter:
        return cls._make("id", secret_id)


class SecretCreateOpts(UrlOpts):
    """Used to create a secret. The secret name is mandatory."""

    __slots__ = ()

    @property
    def name(self) -> str:
        return self._required("name")


class SecretCreateOptsBuilder(UrlOptsBuilder, opts=SecretCreateOpts):
    def __init__(self, name: str) -> None:
        super().__init__()
        self._require("name", name)

    driver = str_field("driver", "Secret driver. Default is `file`.")
    driver_opts = str_field("driveropts", "Secret driver options.")


class SecretListOpts(UrlOpts):
    __slots__ = ()


class SecretListOptsBuilder(UrlOptsBuilder, opts=SecretListOpts):
    filter = filter_field(SecretListFilter)
