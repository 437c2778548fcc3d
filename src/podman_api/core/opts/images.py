"""Image options.

Most image endpoints take query parameters only. Pull and push can also
carry registry credentials, sent in the `X-Registry-Auth` header as URL-safe
base64 encoded JSON; those two option sets keep the credentials beside the
parameter bag.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from podman_api.core.opts.builder import (
    UrlOpts,
    UrlOptsBuilder,
    bool_field,
    display_field,
    enum_field,
    filter_field,
    int_field,
    map_field,
    objects_field,
    str_field,
    vec_field,
)
from podman_api.core.opts.encoding import dumps_compact
from podman_api.core.opts.filters import Filter, NegatedLabelFilterMixin
from podman_api.core.opts.params import ParameterBag

# -- value types ---------------------------------------------------------------


@dataclass(frozen=True)
class ImageOpt:
    """Image reference by name, `name:tag` or `name@digest`."""

    name: str
    tag: str | None = None
    digest: str | None = None

    def __str__(self) -> str:
        if self.digest is not None:
            return f"{self.name}@{self.digest}"
        if self.tag is not None:
            return f"{self.name}:{self.tag}"
        return self.name


@dataclass(frozen=True)
class NetworkMode:
    """Networking mode for RUN instructions during a build."""

    value: str

    BRIDGE: ClassVar[NetworkMode]
    HOST: ClassVar[NetworkMode]
    NONE: ClassVar[NetworkMode]
    CONTAINER: ClassVar[NetworkMode]

    @classmethod
    def custom(cls, network: str) -> NetworkMode:
        """A user defined network, by name."""
        return cls(network)

    def __str__(self) -> str:
        return self.value


NetworkMode.BRIDGE = NetworkMode("bridge")
NetworkMode.HOST = NetworkMode("host")
NetworkMode.NONE = NetworkMode("none")
NetworkMode.CONTAINER = NetworkMode("container")


@dataclass(frozen=True)
class Platform:
    """`os[/arch[/version]]`. A version is only rendered when an arch is set."""

    os: str
    arch: str | None = None
    version: str | None = None

    def __str__(self) -> str:
        if self.arch is None:
            return self.os
        if self.version is None:
            return f"{self.os}/{self.arch}"
        return f"{self.os}/{self.arch}/{self.version}"


class PullPolicy(str, Enum):
    ALWAYS = "always"
    MISSING = "missing"
    NEWER = "newer"
    NEVER = "never"


class RegistryAuth(BaseModel):
    """Registry credentials: username/password or an identity token."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    username: str | None = None
    password: str | None = None
    email: str | None = None
    server_address: str | None = Field(default=None, alias="serveraddress")
    identity_token: str | None = Field(default=None, alias="identitytoken")

    @classmethod
    def token(cls, token: str) -> RegistryAuth:
        return cls(identity_token=token)

    @classmethod
    def credentials(
        cls,
        username: str,
        password: str,
        *,
        email: str | None = None,
        server_address: str | None = None,
    ) -> RegistryAuth:
        """`server_address` is a domain or IP without scheme, e.g. `docker.corp.local`."""
        return cls(username=username, password=password, email=email, server_address=server_address)

    def serialize(self) -> str:
        """URL-safe base64 of the JSON document, as `X-Registry-Auth` expects."""

        payload = dumps_compact(self.model_dump(by_alias=True, exclude_none=True))
        return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii")


# -- filters -------------------------------------------------------------------


class ImageListFilter(NegatedLabelFilterMixin, Filter):
    __slots__ = ()

    @classmethod
    def before(cls, image: ImageOpt | str) -> ImageListFilter:
        return cls._make("before", image)

    @classmethod
    def dangling(cls, dangling: bool) -> ImageListFilter:
        return cls._make("dangling", bool(dangling))

    @classmethod
    def reference(cls, image: str, tag: str | None = None) -> ImageListFilter:
        return cls._make("reference", ImageOpt(image, tag))

    @classmethod
    def id(cls, image_id: str) -> ImageListFilter:
        return cls._make("id", image_id)

    @classmethod
    def since(cls, image: ImageOpt | str) -> ImageListFilter:
        return cls._make("since", image)


class ImagePruneFilter(NegatedLabelFilterMixin, Filter):
    __slots__ = ()

    @classmethod
    def dangling(cls, dangling: bool) -> ImagePruneFilter:
        """True prunes only unused and untagged images, false all unused ones."""
        return cls._make("dangling", bool(dangling))

    @classmethod
    def until(cls, timestamp: str) -> ImagePruneFilter:
        return cls._make("until", timestamp)


class ImageSearchFilter(Filter):
    __slots__ = ()

    @classmethod
    def is_automated(cls, automated: bool) -> ImageSearchFilter:
        return cls._make("is-automated", bool(automated))

    @classmethod
    def is_official(cls, official: bool) -> ImageSearchFilter:
        return cls._make("is-official", bool(official))

    @classmethod
    def stars(cls, stars: int) -> ImageSearchFilter:
        """Images with at least this many stars."""
        return cls._make("stars", int(stars))


# -- option sets ---------------------------------------------------------------


class ImageBuildOpts(UrlOpts):
    """Adjust how an image is built. The build context path is mandatory."""

    __slots__ = ()

    @property
    def path(self) -> str:
        return self._required("path")


class ImageBuildOptsBuilder(UrlOptsBuilder, opts=ImageBuildOpts):
    def __init__(self, path: str) -> None:
        super().__init__()
        self._require("path", path)

    all_platforms = bool_field("allplatforms", "Build for every platform of the base images.")
    build_args = map_field("buildargs", "Build time variables.")
    cache_from = objects_field("cachefrom", "Images used for build cache resolution.")
    cpu_period = int_field("cpuperiod")
    cpu_quota = int_field("cpuquota")
    cpu_set_cpus = str_field("cpusetcpus", "CPUs allowed for execution, e.g. `0-1`.")
    cpu_shares = int_field("cpushares")
    dockerfile = str_field("dockerfile", "Path of the Dockerfile within the build context.")
    extra_hosts = str_field("extrahosts")
    force_rm = bool_field("forcerm", "Always remove intermediate containers.")
    http_proxy = bool_field("httpproxy")
    labels = map_field("labels", "Labels set on the new image.")
    layers = bool_field("layers", "Cache intermediate layers.")
    memory = int_field("memory", "Memory limit in bytes for build containers.")
    memswap = int_field("memswap")
    network_mode = display_field("networkmode", "`NetworkMode` for RUN instructions.")
    no_cache = bool_field("nocache")
    outputs = str_field("outputs")
    platform = display_field("platform", "Target `Platform`.")
    pull = bool_field("pull", "Pull the base image even if an older one exists locally.")
    quiet = bool_field("q")
    remote = str_field("remote", "Git repository or HTTP(S) context URI.")
    remove = bool_field("rm", "Remove intermediate containers after a successful build.")
    shared_mem_size = int_field("shmsize")
    squash = bool_field("squash")
    tag = str_field("t", "`name:tag` applied to the image.")
    target = str_field("target", "Target build stage.")
    unset_env = vec_field("unsetenv")


class ImageListOpts(UrlOpts):
    __slots__ = ()


class ImageListOptsBuilder(UrlOptsBuilder, opts=ImageListOpts):
    all = bool_field("all", "Show all images, not only final layers.")
    filter = filter_field(ImageListFilter)


class ImageTagOpts(UrlOpts):
    """Adjust how an image is tagged or untagged."""

    __slots__ = ()


class ImageTagOptsBuilder(UrlOptsBuilder, opts=ImageTagOpts):
    repo = str_field("repo")
    tag = str_field("tag")


class _AuthOpts(UrlOpts):
    """Query options plus optional registry credentials."""

    __slots__ = ("_auth",)

    def __init__(self, params: ParameterBag | None = None, auth: RegistryAuth | None = None) -> None:
        super().__init__(params)
        self._auth = auth

    @property
    def auth(self) -> RegistryAuth | None:
        return self._auth

    def auth_header(self) -> str | None:
        return self._auth.serialize() if self._auth is not None else None

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is NotImplemented or not result:
            return result
        return self._auth == other._auth  # type: ignore[attr-defined]


class _AuthOptsBuilder(UrlOptsBuilder):
    def __init__(self) -> None:
        super().__init__()
        self._auth: RegistryAuth | None = None

    def auth(self, auth: RegistryAuth) -> Any:
        self._auth = auth
        return self

    def build(self) -> Any:
        return self.opts_class(self._params, self._auth)


class PullOpts(_AuthOpts):
    __slots__ = ()


class PullOptsBuilder(_AuthOptsBuilder, opts=PullOpts):
    all_tags = bool_field("allTags", "Pull all tagged images in the repository.")
    arch = str_field("Arch")
    credentials = str_field("credentials", "`username:password` for the registry.")
    os = str_field("OS")
    policy = enum_field("policy", PullPolicy)
    quiet = bool_field("quiet")
    reference = str_field("reference", "Image to pull.")
    tls_verify = bool_field("tlsVerify")
    variant = str_field("Variant")


class ImagePushOpts(_AuthOpts):
    __slots__ = ()


class ImagePushOptsBuilder(_AuthOptsBuilder, opts=ImagePushOpts):
    destination = str_field("destination", "Push to a different destination than the image refers to.")
    quiet = bool_field("quiet")
    tls_verify = bool_field("tlsVerify")


class ImageExportOpts(UrlOpts):
    __slots__ = ()


class ImageExportOptsBuilder(UrlOptsBuilder, opts=ImageExportOpts):
    compress = bool_field("compress")
    format = str_field("format")


class ImageImportOpts(UrlOpts):
    __slots__ = ()


class ImageImportOptsBuilder(UrlOptsBuilder, opts=ImageImportOpts):
    changes = vec_field("changes", "Dockerfile instructions applied to the created image.")
    message = str_field("message")
    reference = str_field("reference", "Optional `name[:tag]` for the image.")
    url = str_field("url", "Load the image from this URL.")


class ImageTreeOpts(UrlOpts):
    __slots__ = ()


class ImageTreeOptsBuilder(UrlOptsBuilder, opts=ImageTreeOpts):
    what_requires = bool_field("whatrequires", "Show all child images and layers.")


class ImagesRemoveOpts(UrlOpts):
    __slots__ = ()


class ImagesRemoveOptsBuilder(UrlOptsBuilder, opts=ImagesRemoveOpts):
    all = bool_field("all")
    force = bool_field("force", "Also remove containers using the images.")
    ignore = bool_field("ignore", "Do not fail on images that do not exist.")
    images = vec_field("images")
    lookup_manifest = bool_field("lookupManifest")


class ImagePruneOpts(UrlOpts):
    __slots__ = ()


class ImagePruneOptsBuilder(UrlOptsBuilder, opts=ImagePruneOpts):
    all = bool_field("all", "Remove all unused images, not just dangling ones.")
    external = bool_field("external")
    filter = filter_field(ImagePruneFilter)


class ImageSearchOpts(UrlOpts):
    __slots__ = ()


class ImageSearchOptsBuilder(UrlOptsBuilder, opts=ImageSearchOpts):
    filter = filter_field(ImageSearchFilter)
    limit = int_field("limit")
    list_tags = bool_field("listTags")
    term = str_field("term")
    tls_verify = bool_field("tlsVerify")


class ImagesExportOpts(UrlOpts):
    __slots__ = ()


class ImagesExportOptsBuilder(UrlOptsBuilder, opts=ImagesExportOpts):
    compress = bool_field("compress")
    format = str_field("format")
    oci_accept_uncompressed_layers = bool_field("ociAcceptUncompressedLayers")
    references = vec_field("references")
