"""Endpoint handles, one module per libpod resource."""

from podman_api.adapters.api.containers import Container, Containers
from podman_api.adapters.api.exec import Exec, Execs
from podman_api.adapters.api.images import Image, Images
from podman_api.adapters.api.manifests import Manifest, Manifests
from podman_api.adapters.api.networks import Network, Networks
from podman_api.adapters.api.pods import Pod, Pods
from podman_api.adapters.api.secrets import Secret, Secrets
from podman_api.adapters.api.volumes import Volume, Volumes

__all__ = [
    "Container",
    "Containers",
    "Exec",
    "Execs",
    "Image",
    "Images",
    "Manifest",
    "Manifests",
    "Network",
    "Networks",
    "Pod",
    "Pods",
    "Secret",
    "Secrets",
    "Volume",
    "Volumes",
]
