"""Pod options."""

from __future__ import annotations

from podman_api.core.domain.models import ContainerStatus, PodStatus
from podman_api.core.opts.builder import (
    JsonOpts,
    JsonOptsBuilder,
    UrlOpts,
    UrlOptsBuilder,
    bool_field,
    filter_field,
    int_field,
    json_field,
    map_field,
    str_field,
    vec_field,
)
from podman_api.core.opts.filters import Filter, NegatedLabelFilterMixin
from podman_api.core.opts.params import BoolParam


class PodListFilter(NegatedLabelFilterMixin, Filter):
    """Predicates accepted when listing pods."""

    __slots__ = ()

    @classmethod
    def id(cls, pod_id: str) -> PodListFilter:
        return cls._make("id", pod_id)

    @classmethod
    def name(cls, name: str) -> PodListFilter:
        return cls._make("name", name)

    @classmethod
    def until(cls, timestamp: str) -> PodListFilter:
        return cls._make("until", timestamp)

    @classmethod
    def network(cls, network: str) -> PodListFilter:
        """Name or full ID of a network."""
        return cls._make("network", network)

    @classmethod
    def status(cls, status: PodStatus | str) -> PodListFilter:
        return cls._make("status", PodStatus(status))

    @classmethod
    def container_name(cls, name: str) -> PodListFilter:
        return cls._make("ctr-names", name)

    @classmethod
    def container_id(cls, container_id: str) -> PodListFilter:
        return cls._make("ctr-ids", container_id)

    @classmethod
    def container_status(cls, status: ContainerStatus | str) -> PodListFilter:
        return cls._make("ctr-status", ContainerStatus(status))

    @classmethod
    def container_number(cls, count: int) -> PodListFilter:
        return cls._make("ctr-number", int(count))


class PodPruneFilter(NegatedLabelFilterMixin, Filter):
    __slots__ = ()

    @classmethod
    def until(cls, timestamp: str) -> PodPruneFilter:
        return cls._make("until", timestamp)


class PodListOpts(UrlOpts):
    """Adjust the list of returned pods."""

    __slots__ = ()


class PodListOptsBuilder(UrlOptsBuilder, opts=PodListOpts):
    filter = filter_field(PodListFilter)


class PodTopOpts(UrlOpts):
    """Adjust how processes inside a pod are listed."""

    __slots__ = ()

    def stream(self) -> PodTopOpts:
        return self._with("stream", BoolParam(True))


class PodTopOptsBuilder(UrlOptsBuilder, opts=PodTopOpts):
    delay = int_field("delay", "If streaming, delay in seconds between updates.")
    ps_args = str_field("ps_args", "Arguments to pass to ps such as `aux`.")


class PodStatsOpts(UrlOpts):
    __slots__ = ()

    def stream(self) -> PodStatsOpts:
        return self._with("stream", BoolParam(True))


class PodStatsOptsBuilder(UrlOptsBuilder, opts=PodStatsOpts):
    all = bool_field("all", "Provide statistics for all running pods.")
    names_or_ids = vec_field("namesOrIds")


class PodCreateOpts(JsonOpts):
    """Adjust the way a pod is created."""

    __slots__ = ()


class PodCreateOptsBuilder(JsonOptsBuilder, opts=PodCreateOpts):
    add_hosts = vec_field("hostadd", "Hosts added to the infra container's /etc/hosts.")
    cgroup_parent = str_field("cgroup_parent")
    cni_networks = vec_field("cni_networks")
    cpu_period = int_field("cpu_period")
    cpu_quota = int_field("cpu_quota")
    dns_option = vec_field("dns_option")
    dns_search = vec_field("dns_search")
    dns_server = vec_field("dns_server")
    hostname = str_field("hostname")
    infra_command = vec_field("infra_command")
    infra_common_pid_file = str_field("infra_common_pid_file")
    infra_image = str_field("infra_image")
    infra_name = str_field("infra_name")
    labels = map_field("labels")
    name = str_field("name", "Pod name. Generated by the daemon when unset.")
    netns = json_field("netns", "Network `Namespace`.")
    network_options = map_field("network_options")
    no_infra = bool_field("no_infra", "Do not create an infra container.")
    no_manage_hosts = bool_field("no_manage_hosts")
    no_manage_resolv_conf = bool_field("no_manage_resolv_conf")
    pidns = json_field("pidns")
    pod_create_command = vec_field("pod_create_command")
    pod_devices = vec_field("pod_devices")
    resource_limits = json_field("resource_limits", "`LinuxResources` constraints.")
    shared_namespaces = vec_field("shared_namespaces")
    userns = json_field("userns")
    volumes_from = vec_field("volumes_from")


class PodPruneOpts(UrlOpts):
    __slots__ = ()


class PodPruneOptsBuilder(UrlOptsBuilder, opts=PodPruneOpts):
    filter = filter_field(PodPruneFilter)
