"""Request options for every endpoint.

Why a package:
- `params`, `encoding`, `filters` and `builder` form the generic machinery.
- One module per resource declares its option sets and filter predicates
  with that machinery; they are re-exported here as the public surface.
"""

from podman_api.core.opts.builder import JsonOpts, JsonOptsBuilder, Opts, OptsBuilder, UrlOpts, UrlOptsBuilder
from podman_api.core.opts.common import (
    ChangesOpts,
    DiffType,
    EventsOpts,
    PlayKubernetesYamlOpts,
    RestartPolicy,
    SystemdUnitsOpts,
)
from podman_api.core.opts.containers import (
    ContainerAttachOpts,
    ContainerCheckpointOpts,
    ContainerCommitOpts,
    ContainerCreateOpts,
    ContainerDeleteOpts,
    ContainerListFilter,
    ContainerListOpts,
    ContainerLogsOpts,
    ContainerPruneFilter,
    ContainerPruneOpts,
    ContainerRestartPolicy,
    ContainerRestoreOpts,
    ContainerStatsOpts,
    ContainerStopOpts,
    ContainerTopOpts,
    ContainerWaitOpts,
    ImageVolumeMode,
    SeccompPolicy,
    SocketNotifyMode,
    SystemdEnabled,
)
from podman_api.core.opts.encoding import construct_ep, encoded_pair
from podman_api.core.opts.exec import ExecCreateOpts, ExecStartOpts, UserOpt
from podman_api.core.opts.filters import Equality, Filter, FilterItem
from podman_api.core.opts.images import (
    ImageBuildOpts,
    ImageExportOpts,
    ImageImportOpts,
    ImageListFilter,
    ImageListOpts,
    ImageOpt,
    ImagePruneFilter,
    ImagePruneOpts,
    ImagePushOpts,
    ImageSearchFilter,
    ImageSearchOpts,
    ImagesExportOpts,
    ImagesRemoveOpts,
    ImageTagOpts,
    ImageTreeOpts,
    NetworkMode,
    Platform,
    PullOpts,
    PullPolicy,
    RegistryAuth,
)
from podman_api.core.opts.manifests import ManifestCreateOpts, ManifestImageAddOpts, ManifestPushOpts
from podman_api.core.opts.networks import (
    NetworkCreateOpts,
    NetworkListFilter,
    NetworkListOpts,
    NetworkPruneFilter,
    NetworkPruneOpts,
)
from podman_api.core.opts.params import ParameterBag
from podman_api.core.opts.pods import (
    PodCreateOpts,
    PodListFilter,
    PodListOpts,
    PodPruneFilter,
    PodPruneOpts,
    PodStatsOpts,
    PodTopOpts,
)
from podman_api.core.opts.secrets import SecretCreateOpts, SecretListFilter, SecretListOpts
from podman_api.core.opts.volumes import (
    VolumeCreateOpts,
    VolumeListFilter,
    VolumeListOpts,
    VolumePruneFilter,
    VolumePruneOpts,
)

__all__ = [
    "ChangesOpts",
    "ContainerAttachOpts",
    "ContainerCheckpointOpts",
    "ContainerCommitOpts",
    "ContainerCreateOpts",
    "ContainerDeleteOpts",
    "ContainerListFilter",
    "ContainerListOpts",
    "ContainerLogsOpts",
    "ContainerPruneFilter",
    "ContainerPruneOpts",
    "ContainerRestartPolicy",
    "ContainerRestoreOpts",
    "ContainerStatsOpts",
    "ContainerStopOpts",
    "ContainerTopOpts",
    "ContainerWaitOpts",
    "DiffType",
    "Equality",
    "EventsOpts",
    "ExecCreateOpts",
    "ExecStartOpts",
    "Filter",
    "FilterItem",
    "ImageBuildOpts",
    "ImageExportOpts",
    "ImageImportOpts",
    "ImageListFilter",
    "ImageListOpts",
    "ImageOpt",
    "ImagePruneFilter",
    "ImagePruneOpts",
    "ImagePushOpts",
    "ImageSearchFilter",
    "ImageSearchOpts",
    "ImageTagOpts",
    "ImageTreeOpts",
    "ImageVolumeMode",
    "ImagesExportOpts",
    "ImagesRemoveOpts",
    "JsonOpts",
    "JsonOptsBuilder",
    "ManifestCreateOpts",
    "ManifestImageAddOpts",
    "ManifestPushOpts",
    "NetworkCreateOpts",
    "NetworkListFilter",
    "NetworkListOpts",
    "NetworkMode",
    "NetworkPruneFilter",
    "NetworkPruneOpts",
    "Opts",
    "OptsBuilder",
    "ParameterBag",
    "Platform",
    "PlayKubernetesYamlOpts",
    "PodCreateOpts",
    "PodListFilter",
    "PodListOpts",
    "PodPruneFilter",
    "PodPruneOpts",
    "PodStatsOpts",
    "PodTopOpts",
    "PullOpts",
    "PullPolicy",
    "RegistryAuth",
    "RestartPolicy",
    "SeccompPolicy",
    "SecretCreateOpts",
    "SecretListFilter",
    "SecretListOpts",
    "SocketNotifyMode",
    "SystemdEnabled",
    "SystemdUnitsOpts",
    "UrlOpts",
    "UrlOptsBuilder",
    "UserOpt",
    "VolumeCreateOpts",
    "VolumeListFilter",
    "VolumeListOpts",
    "VolumePruneFilter",
    "VolumePruneOpts",
    "construct_ep",
    "encoded_pair",
]
