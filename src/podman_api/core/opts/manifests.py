"""Manifest list options."""

from __future__ import annotations

from podman_api.core.opts.builder import (
    JsonOpts,
    JsonOptsBuilder,
    UrlOpts,
    UrlOptsBuilder,
    bool_field,
    map_field,
    str_field,
    vec_field,
)


class ManifestCreateOpts(UrlOpts):
    """Adjust how a manifest list is created."""

    __slots__ = ()

    @property
    def name(self) -> str:
        return self._required("name")


class ManifestCreateOptsBuilder(UrlOptsBuilder, opts=ManifestCreateOpts):
    def __init__(self, name: str) -> None:
        super().__init__()
        self._require("name", name)

    all = bool_field("all", "Add all contents if given a list.")
    images = vec_field("images", "Images to add to the new list.")


class ManifestImageAddOpts(JsonOpts):
    """Describe an image added to an existing manifest list."""

    __slots__ = ()


class ManifestImageAddOptsBuilder(JsonOptsBuilder, opts=ManifestImageAddOpts):
    all = bool_field("all", "Add every image of a referenced list.")
    annotation = vec_field("annotation")
    annotations = map_field("annotations")
    arch = str_field("arch", "Override the architecture of the image.")
    features = vec_field("features")
    images = vec_field("images")
    os = str_field("os")
    os_version = str_field("os_version")
    variant = str_field("variant")


class ManifestPushOpts(UrlOpts):
    """Adjust how a manifest list is pushed. The destination is mandatory."""

    __slots__ = ()

    @property
    def destination(self) -> str:
        return self._required("destination")


class ManifestPushOptsBuilder(UrlOptsBuilder, opts=ManifestPushOpts):
    def __init__(self, destination: str) -> None:
        super().__init__()
        self._require("destination", destination)

    all = bool_field("all", "Push the images of the list, not only the list.")
    remove_signatures = bool_field("removeSignatures")
    tls_verify = bool_field("tlsVerify", "Require TLS verification.")
