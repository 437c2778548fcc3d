"""Container options.

`ContainerCreateOpts` is the large JSON body of the libpod spec generator;
every other set here is a query string. Derived variants (`stream()`,
`oneshot()`, `for_export()`, `for_container()`) are used by the endpoint
handles and always return a new object.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from podman_api.core.domain.models import ContainerHealth, ContainerStatus
from podman_api.core.opts.builder import (
    JsonOpts,
    JsonOptsBuilder,
    UrlOpts,
    UrlOptsBuilder,
    bool_field,
    display_field,
    enum_field,
    filter_field,
    int_field,
    json_field,
    map_field,
    objects_field,
    str_field,
    vec_field,
)
from podman_api.core.opts.filters import Filter, NegatedLabelFilterMixin
from podman_api.core.opts.images import ImageOpt
from podman_api.core.opts.params import BoolParam, ListParam, StrParam

# -- filters -------------------------------------------------------------------


class ContainerListFilter(NegatedLabelFilterMixin, Filter):
    """Predicates accepted when listing containers."""

    __slots__ = ()

    @classmethod
    def ancestor(cls, image: ImageOpt | str) -> ContainerListFilter:
        return cls._make("ancestor", image)

    @classmethod
    def before(cls, container: str) -> ContainerListFilter:
        return cls._make("before", container)

    @classmethod
    def expose(cls, port: str) -> ContainerListFilter:
        """`<port>[/<proto>]` or `<startport-endport>/[<proto>]`."""
        return cls._make("expose", port)

    @classmethod
    def exited(cls, code: int) -> ContainerListFilter:
        return cls._make("exited", int(code))

    @classmethod
    def health(cls, health: ContainerHealth | str) -> ContainerListFilter:
        return cls._make("health", ContainerHealth(health))

    @classmethod
    def id(cls, container_id: str) -> ContainerListFilter:
        return cls._make("id", container_id)

    @classmethod
    def is_task(cls, is_task: bool) -> ContainerListFilter:
        return cls._make("is-task", bool(is_task))

    @classmethod
    def name(cls, name: str) -> ContainerListFilter:
        return cls._make("name", name)

    @classmethod
    def network(cls, network: str) -> ContainerListFilter:
        return cls._make("network", network)

    @classmethod
    def pod(cls, pod: str) -> ContainerListFilter:
        return cls._make("pod", pod)

    @classmethod
    def publish(cls, port: str) -> ContainerListFilter:
        return cls._make("publish", port)

    @classmethod
    def since(cls, container: str) -> ContainerListFilter:
        return cls._make("since", container)

    @classmethod
    def status(cls, status: ContainerStatus | str) -> ContainerListFilter:
        return cls._make("status", ContainerStatus(status))

    @classmethod
    def volume(cls, volume: str) -> ContainerListFilter:
        """Volume name or mount point destination."""
        return cls._make("volume", volume)


class ContainerPruneFilter(NegatedLabelFilterMixin, Filter):
    __slots__ = ()

    @classmethod
    def until(cls, timestamp: str) -> ContainerPruneFilter:
        return cls._make("until", timestamp)


# -- enums ---------------------------------------------------------------------


class ImageVolumeMode(str, Enum):
    """How image volumes are created for a container."""

    IGNORE = "ignore"
    TMPFS = "tmpfs"
    ANONYMOUS = "anonymous"


class SocketNotifyMode(str, Enum):
    CONTAINER = "container"
    CONMON = "conmon"
    IGNORE = "ignore"


class SeccompPolicy(str, Enum):
    EMPTY = "empty"
    DEFAULT = "default"
    IMAGE = "image"


class SystemdEnabled(str, Enum):
    TRUE = "true"
    FALSE = "false"
    ALWAYS = "always"


class ContainerRestartPolicy(str, Enum):
    ALWAYS = "always"
    NO = "no"
    ON_FAILURE = "on-failure"
    UNLESS_STOPPED = "unless-stopped"


# -- query option sets ---------------------------------------------------------


class ContainerListOpts(UrlOpts):
    """Adjust the list of returned containers."""

    __slots__ = ()


class ContainerListOptsBuilder(UrlOptsBuilder, opts=ContainerListOpts):
    all = bool_field("all", "Include containers that are not running.")
    filter = filter_field(ContainerListFilter)
    limit = int_field("limit", "Return this number of most recently created containers.")
    size = bool_field("size", "Return the size of each container.")
    sync = bool_field("sync", "Sync container state with the OCI runtime.")


class ContainerStopOpts(UrlOpts):
    __slots__ = ()


class ContainerStopOptsBuilder(UrlOptsBuilder, opts=ContainerStopOpts):
    all = bool_field("all")
    ignore = bool_field("Ignore", "Do not fail if the container is already stopped.")
    timeout = int_field("Timeout", "Seconds to wait before killing the container.")


class ContainerDeleteOpts(UrlOpts):
    __slots__ = ()


class ContainerDeleteOptsBuilder(UrlOptsBuilder, opts=ContainerDeleteOpts):
    force = bool_field("force")
    volumes = bool_field("v", "Delete associated volumes.")
    timeout = int_field("timeout")


class ContainerCheckpointOpts(UrlOpts):
    __slots__ = ()

    def for_export(self) -> ContainerCheckpointOpts:
        return self._with("export", BoolParam(True))


class ContainerCheckpointOptsBuilder(UrlOptsBuilder, opts=ContainerCheckpointOpts):
    export = bool_field("export", "Export the checkpoint image to a tar.gz.")
    file_locks = bool_field("fileLocks")
    ignore_root_fs = bool_field("ignoreRootFS")
    ignore_volumes = bool_field("ignoreVolumes", "Only valid together with `export`.")
    keep = bool_field("keep", "Keep all temporary checkpoint files.")
    leave_running = bool_field("leaveRunning")
    pre_checkpoint = bool_field("preCheckpoint")
    print_stats = bool_field("printStats")
    tcp_established = bool_field("tcpEstablished")
    with_previous = bool_field("withPrevious")


class ContainerCommitOpts(UrlOpts):
    __slots__ = ()

    def for_container(self, container: str) -> ContainerCommitOpts:
        return self._with("container", StrParam(str(container)))


class ContainerCommitOptsBuilder(UrlOptsBuilder, opts=ContainerCommitOpts):
    author = str_field("author")
    changes = vec_field("changes", "Dockerfile instructions to apply, e.g. `CMD=/bin/foo`.")
    comment = str_field("comment")
    format = str_field("format", "Image manifest format (default `oci`).")
    pause = bool_field("pause", "Pause the container while committing.")
    repo = str_field("repo")
    tag = str_field("tag")


class ContainerWaitOpts(UrlOpts):
    __slots__ = ()


class ContainerWaitOptsBuilder(UrlOptsBuilder, opts=ContainerWaitOpts):
    interval = str_field("interval", "Polling interval, e.g. `250ms` or `2s`.")

    def conditions(self, conditions: Iterable[ContainerStatus | str]) -> ContainerWaitOptsBuilder:
        """Container states to wait for (sent as repeated `condition` pairs)."""

        values = tuple(ContainerStatus(c).value for c in conditions)
        self._params.insert("condition", ListParam(values))
        return self


class ContainerAttachOpts(UrlOpts):
    __slots__ = ()

    def stream(self) -> ContainerAttachOpts:
        return self._with("stream", BoolParam(True))


class ContainerAttachOptsBuilder(UrlOptsBuilder, opts=ContainerAttachOpts):
    detach_keys = str_field("detachKeys")
    stderr = bool_field("stderr")
    stdin = bool_field("stdin")
    stdout = bool_field("stdout")


class ContainerLogsOpts(UrlOpts):
    __slots__ = ()


class ContainerLogsOptsBuilder(UrlOptsBuilder, opts=ContainerLogsOpts):
    follow = bool_field("follow", "Keep the connection open after returning logs.")
    since = str_field("since", "UNIX timestamp.")
    stderr = bool_field("stderr")
    stdout = bool_field("stdout")
    tail = str_field("tail", "Number of lines from the end, or `all`.")
    timestamps = bool_field("timestamps")
    until = str_field("until")


class ContainerStatsOpts(UrlOpts):
    __slots__ = ()

    def oneshot(self) -> ContainerStatsOpts:
        return self._with("stream", BoolParam(False))

    def stream(self) -> ContainerStatsOpts:
        return self._with("stream", BoolParam(True))


class ContainerStatsOptsBuilder(UrlOptsBuilder, opts=ContainerStatsOpts):
    containers = vec_field("containers", "Names or IDs of containers.")
    interval = int_field("interval", "Seconds between reports.")


class ContainerTopOpts(UrlOpts):
    __slots__ = ()

    def oneshot(self) -> ContainerTopOpts:
        return self._with("stream", BoolParam(False))

    def stream(self) -> ContainerTopOpts:
        return self._with("stream", BoolParam(True))


class ContainerTopOptsBuilder(UrlOptsBuilder, opts=ContainerTopOpts):
    delay = int_field("delay", "Delay in seconds between streamed updates.")
    ps_args = str_field("ps_args")


class ContainerPruneOpts(UrlOpts):
    __slots__ = ()


class ContainerPruneOptsBuilder(UrlOptsBuilder, opts=ContainerPruneOpts):
    filter = filter_field(ContainerPruneFilter)


class ContainerRestoreOpts(UrlOpts):
    __slots__ = ()


class ContainerRestoreOptsBuilder(UrlOptsBuilder, opts=ContainerRestoreOpts):
    ignore_root_fs = bool_field("ignoreRootFS")
    ignore_static_ip = bool_field("ignoreStaticIP")
    ignore_static_mac = bool_field("ignoreStaticMac")
    import_ = bool_field("import", "Restore from a checkpoint tar.gz.")
    keep = bool_field("keep")
    leave_running = bool_field("leaveRunning")
    name = str_field("name", "Name of the restored container. Only valid with `import_`.")
    pod = str_field("pod")
    print_stats = bool_field("printStats")
    tcp_established = bool_field("tcpEstablished")


# -- create (JSON) -------------------------------------------------------------


class ContainerCreateOpts(JsonOpts):
    """Spec generator body of `POST /libpod/containers/create`."""

    __slots__ = ()


class ContainerCreateOptsBuilder(JsonOptsBuilder, opts=ContainerCreateOpts):
    add_capabilities = vec_field("cap_add")
    annotations = map_field("annotations")
    apparmor_profile = str_field("apparmor_profile")
    cgroup_mode = str_field("cgroups_mode")
    cgroup_namespace = json_field("cgroupns")
    cgroup_parent = str_field("cgroup_parent")
    chroot_directories = vec_field("chroot_directories")
    command = vec_field("command", "Command run in the container, overriding the image CMD.")
    common_pid_file = str_field("common_pid_file")
    cpu_period = int_field("cpu_period")
    cpu_quota = int_field("cpu_quota")
    create_command = vec_field("containerCreateCommand")
    create_working_dir = bool_field("create_working_dir")
    dependency_containers = vec_field("dependencyContainers")
    devices_from = vec_field("device_from")
    dns_option = vec_field("dns_option")
    dns_search = vec_field("dns_search")
    dns_server = vec_field("dns_server")
    drop_capabilities = vec_field("cap_drop")
    entrypoint = vec_field("entrypoint")
    env = map_field("env", "Environment variables as a key/value map.")
    env_host = bool_field("env_host")
    groups = vec_field("groups")
    hostname = str_field("hostname")
    hosts_add = vec_field("hostadd")
    http_proxy = bool_field("httpproxy")
    image = str_field("image", "Image the container is created from.")
    image_arch = str_field("image_arch")
    image_os = str_field("image_os")
    image_variant = str_field("image_variant")
    image_volume_mode = enum_field("image_volume_mode", ImageVolumeMode)
    init = bool_field("init")
    init_path = str_field("init_path")
    ipc_namespace = json_field("ipcns")
    labels = map_field("labels")
    mask = vec_field("mask")
    mounts = objects_field("mounts", "`ContainerMount` entries.")
    name = str_field("name")
    net_namespace = json_field("netns")
    network_options = map_field("network_options")
    networks = map_field("Networks", "Network name -> per network options.")
    no_new_privileges = bool_field("no_new_privileges")
    oci_runtime = str_field("oci_runtime")
    oom_score_adj = int_field("oom_score_adj")
    pid_namespace = json_field("pidns")
    pod = str_field("pod")
    portmappings = objects_field("portmappings", "`PortMapping` entries.")
    privileged = bool_field("privileged")
    publish_image_ports = bool_field("publish_image_ports")
    read_only_fs = bool_field("read_only_filesystem")
    remove = bool_field("remove", "Remove the container once it exits.")
    resource_limits = json_field("resource_limits", "`LinuxResources` constraints.")
    restart_policy = enum_field("restart_policy", ContainerRestartPolicy)
    restart_tries = int_field("restart_tries", "Only used with the `on-failure` policy.")
    rootfs = str_field("rootfs")
    sdnotify_mode = enum_field("sdnotifyMode", SocketNotifyMode)
    seccomp_policy = enum_field("seccomp_policy", SeccompPolicy)
    seccomp_profile_path = str_field("seccomp_profile_path")
    secret_env = map_field("secret_env")
    selinux_opts = vec_field("selinux_opts")
    shm_size = int_field("shm_size")
    stdin = bool_field("stdin")
    stop_signal = int_field("stop_signal")
    stop_timeout = int_field("stop_timeout")
    storage_opts = map_field("storage_opts")
    sysctl = map_field("sysctl")
    systemd = enum_field("systemd", SystemdEnabled)
    terminal = bool_field("terminal")
    timeout = int_field("timeout", "Seconds the container may run before it is killed.")
    timezone = str_field("timezone")
    umask = str_field("umask")
    unmask = vec_field("unmask")
    unset_env = vec_field("unsetenv")
    unset_env_all = bool_field("unsetenvall")
    use_image_hosts = bool_field("use_image_hosts")
    use_image_resolv_conf = bool_field("use_image_resolv_conf")
    user = display_field("user", "`UserOpt` or plain `user[:group]` text.")
    user_namespace = json_field("userns")
    uts_namespace = json_field("utsns")
    volatile = bool_field("volatile")
    volumes = objects_field("volumes", "`NamedVolume` entries.")
    volumes_from = vec_field("volumes_from")
    work_dir = str_field("work_dir", "Working directory, `/` when unset.")
