"""Options shared by several resources (events, diffs, systemd units, kube play)."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Mapping

from podman_api.core.opts.builder import (
    UrlOpts,
    UrlOptsBuilder,
    bool_field,
    enum_field,
    int_field,
    str_field,
    vec_field,
)
from podman_api.core.opts.filters import FILTERS_KEY
from podman_api.core.opts.params import JsonParam

EventsConstraint = tuple[str, Iterable[str]]


class EventsOpts(UrlOpts):
    """Used to filter events returned by `Podman.events`."""

    __slots__ = ()


class EventsOptsBuilder(UrlOptsBuilder, opts=EventsOpts):
    since = str_field("since", "Start streaming events from this time.")
    until = str_field("until", "Stop streaming events later than this.")
    stream = bool_field("stream", "When false, do not follow events.")

    def filters(
        self, constraints: Mapping[str, Iterable[str]] | Iterable[EventsConstraint]
    ) -> EventsOptsBuilder:
        """Raw event constraints, e.g. `{"type": ["container"], "event": ["start"]}`.

        Unlike the per-resource predicates these are passed as given.
        """

        items = constraints.items() if isinstance(constraints, Mapping) else constraints
        self._params.insert(FILTERS_KEY, JsonParam({str(k): [str(v) for v in vs] for k, vs in items}))
        return self


class DiffType(str, Enum):
    ALL = "all"
    CONTAINER = "container"
    IMAGE = "image"


class ChangesOpts(UrlOpts):
    """Adjust how filesystem changes inside a container or image are returned."""

    __slots__ = ()


class ChangesOptsBuilder(UrlOptsBuilder, opts=ChangesOpts):
    diff_type = enum_field("diffType", DiffType, "Select what you want to match.")
    parent = str_field("parent", "Layer to compare against instead of the parent layer.")


class RestartPolicy(str, Enum):
    """Systemd `Restart=` values."""

    NO = "no"
    ON_SUCCESS = "on-success"
    ON_FAILURE = "on-failure"
    ON_ABNORMAL = "on-abnormal"
    ON_WATCHDOG = "on-watchdog"
    ON_ABORT = "on-abort"
    ALWAYS = "always"


class SystemdUnitsOpts(UrlOpts):
    """Adjust how systemd units are generated from a container or pod."""

    __slots__ = ()


class SystemdUnitsOptsBuilder(UrlOptsBuilder, opts=SystemdUnitsOpts):
    container_prefix = str_field("containerPrefix", "Systemd unit name prefix for containers.")
    new = bool_field("new", "Create a new container instead of starting an existing one.")
    no_header = bool_field("noHeader", "Do not generate the header with the Podman version and timestamp.")
    pod_prefix = str_field("podPrefix", "Systemd unit name prefix for pods.")
    restart_policy = enum_field("restartPolicy", RestartPolicy)
    restart_sec = int_field("restartSec", "Time to sleep before restarting a service.")
    separator = str_field("separator", "Separator between name/id and prefix.")
    start_timeout = int_field("startTimeout", "Start timeout in seconds.")
    stop_timeout = int_field("stopTimeout", "Stop timeout in seconds.")
    use_name = bool_field("useName", "Use container/pod names instead of IDs.")


class PlayKubernetesYamlOpts(UrlOpts):
    """Adjust how a kubernetes YAML will create pods and containers."""

    __slots__ = ()


class PlayKubernetesYamlOptsBuilder(UrlOptsBuilder, opts=PlayKubernetesYamlOpts):
    log_driver = str_field("logDriver")
    network = vec_field("network", "Network mode or list of networks.")
    start = bool_field("start", "Start the pod after creating it.")
    static_ips = vec_field("staticIPs")
    static_macs = vec_field("staticMACs")
    tls_verify = bool_field("tlsVerify", "Require HTTPS and verify signatures when contacting registries.")
