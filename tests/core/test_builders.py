"""Tests for the options builders of every resource."""

import json
from urllib.parse import parse_qs

import pytest

from podman_api.core.domain.models import ContainerStatus, Namespace, PortMapping
from podman_api.core.opts import (
    ChangesOpts,
    ContainerCheckpointOpts,
    ContainerCommitOpts,
    ContainerCreateOpts,
    ContainerStatsOpts,
    ContainerWaitOpts,
    DiffType,
    EventsOpts,
    ExecCreateOpts,
    ExecStartOpts,
    ImageBuildOpts,
    ManifestCreateOpts,
    ManifestImageAddOpts,
    ManifestPushOpts,
    NetworkCreateOpts,
    NetworkMode,
    Platform,
    PodCreateOpts,
    PodTopOpts,
    RestartPolicy,
    SecretCreateOpts,
    SystemdUnitsOpts,
    UserOpt,
    VolumeCreateOpts,
)
from podman_api.core.opts.builder import JsonOpts, UrlOpts, UrlOptsBuilder


class TestBuilderContract:
    def test_last_write_wins(self):
        opts = ExecCreateOpts.builder().attach_stdout(True).attach_stdout(False).build()
        assert opts.serialize() == '{"AttachStdout":false}'

    def test_build_twice_is_equal(self):
        builder = SystemdUnitsOpts.builder().new(True).restart_sec(5)
        assert builder.build() == builder.build()
        assert builder.build().serialize() == builder.build().serialize()

    def test_built_opts_do_not_follow_builder(self):
        builder = SystemdUnitsOpts.builder().new(True)
        opts = builder.build()
        builder.use_name(True)

        assert opts.serialize() == "new=true"

    def test_clone_is_independent(self):
        original = VolumeCreateOpts.builder().labels({"env": "prod"})
        copy = original.clone().name("data")

        assert original.build().to_dict() == {"Labels": {"env": "prod"}}
        assert copy.build().to_dict() == {"Labels": {"env": "prod"}, "Name": "data"}

    def test_map_setter_replaces_whole_map(self):
        opts = VolumeCreateOpts.builder().labels({"a": "1"}).labels([("b", "2")]).build()
        assert opts.to_dict() == {"Labels": {"b": "2"}}

    def test_empty_builder(self):
        assert EventsOpts.builder().build().serialize() is None
        assert ExecStartOpts.builder().build().serialize() == "{}"

    def test_flavors_are_distinct_types(self):
        assert isinstance(ChangesOpts.builder().build(), UrlOpts)
        assert isinstance(ExecCreateOpts.builder().build(), JsonOpts)
        assert not hasattr(UrlOpts, "to_dict")

    def test_builder_must_match_flavor(self):
        with pytest.raises(TypeError):

            class WrongBuilder(UrlOptsBuilder, opts=ExecStartOpts):
                pass

    def test_setters_keep_their_names(self):
        assert ExecStartOpts.builder().detach.__name__ == "detach"


class TestRequiredFields:
    def test_secret_name(self):
        opts = SecretCreateOpts.builder("db-password").driver("file").build()
        assert opts.name == "db-password"
        assert opts.serialize() == "name=db-password&driver=file"

    def test_manifest_create(self):
        opts = ManifestCreateOpts.builder("app:latest").images(["alpine", "busybox"]).build()
        assert opts.name == "app:latest"
        assert opts.serialize() == "name=app%3Alatest&images=alpine&images=busybox"

    def test_image_build_path(self):
        opts = ImageBuildOpts.builder("/srv/ctx").tag("app:1").build()
        assert opts.path == "/srv/ctx"
        assert parse_qs(opts.serialize())["t"] == ["app:1"]

    def test_manifest_push_all_flag(self):
        with_all = ManifestPushOpts.builder("registry.local/app").all(True).build()
        without = ManifestPushOpts.builder("registry.local/app").build()

        assert "all=true" in with_all.serialize()
        assert "all" not in parse_qs(without.serialize())
        assert without.destination == "registry.local/app"


class TestValueTypes:
    def test_enum_fields(self):
        assert ChangesOpts.builder().diff_type(DiffType.CONTAINER).build().serialize() == "diffType=container"
        opts = SystemdUnitsOpts.builder().restart_policy(RestartPolicy.ON_FAILURE).build()
        assert opts.serialize() == "restartPolicy=on-failure"

    def test_enum_field_accepts_plain_value(self):
        assert ChangesOpts.builder().diff_type("image").build().serialize() == "diffType=image"

    def test_enum_field_rejects_unknown_value(self):
        with pytest.raises(ValueError):
            ChangesOpts.builder().diff_type("everything")

    def test_user_opt(self):
        assert str(UserOpt("app")) == "app"
        assert str(UserOpt(1000, 1000)) == "1000:1000"
        opts = ExecCreateOpts.builder().user(UserOpt("app", "staff")).build()
        assert opts.to_dict() == {"User": "app:staff"}

    def test_platform(self):
        assert str(Platform("linux")) == "linux"
        assert str(Platform("linux", "arm64")) == "linux/arm64"
        assert str(Platform("linux", "arm", "v7")) == "linux/arm/v7"
        assert str(Platform("linux", version="v7")) == "linux"

    def test_network_mode(self):
        opts = (
            ImageBuildOpts.builder("/ctx")
            .network_mode(NetworkMode.HOST)
            .platform(Platform("linux", "amd64"))
            .build()
        )
        query = parse_qs(opts.serialize())
        assert query["networkmode"] == ["host"]
        assert query["platform"] == ["linux/amd64"]
        assert str(NetworkMode.custom("backend")) == "backend"


class TestDerivedVariants:
    def test_stats_oneshot_and_stream(self):
        opts = ContainerStatsOpts.builder().containers(["web"]).build()

        assert opts.oneshot().serialize() == "containers=web&stream=false"
        assert opts.stream().serialize() == "containers=web&stream=true"
        assert opts.serialize() == "containers=web"

    def test_checkpoint_for_export(self):
        opts = ContainerCheckpointOpts.builder().keep(True).build()
        assert opts.for_export().serialize() == "keep=true&export=true"
        assert opts.serialize() == "keep=true"

    def test_commit_for_container(self):
        opts = ContainerCommitOpts.builder().repo("app").build().for_container("web")
        assert opts.serialize() == "repo=app&container=web"

    def test_pod_top_stream(self):
        assert PodTopOpts.builder().delay(2).build().stream().serialize() == "delay=2&stream=true"


class TestResourceOpts:
    def test_exec_create_env_and_command(self):
        opts = (
            ExecCreateOpts.builder()
            .command(["sh", "-c", "echo hi"])
            .env({"A": "1", "B": "two"})
            .tty(True)
            .build()
        )
        assert json.loads(opts.serialize()) == {"Cmd": ["sh", "-c", "echo hi"], "Env": ["A=1", "B=two"], "Tty": True}

    def test_exec_start_keys(self):
        opts = ExecStartOpts.builder().detach(False).height(40).width(120).build()
        assert opts.serialize() == '{"Detach":false,"h":40,"w":120}'

    def test_wait_conditions_repeat(self):
        opts = (
            ContainerWaitOpts.builder()
            .conditions([ContainerStatus.EXITED, "dead"])
            .interval("250ms")
            .build()
        )
        assert opts.serialize() == "condition=exited&condition=dead&interval=250ms"

    def test_events_raw_filters(self):
        opts = EventsOpts.builder().stream(False).filters({"type": ["container"], "event": ["start"]}).build()
        query = parse_qs(opts.serialize())
        assert query["stream"] == ["false"]
        assert json.loads(query["filters"][0]) == {"type": ["container"], "event": ["start"]}

    def test_container_create_nested_models(self):
        opts = (
            ContainerCreateOpts.builder()
            .image("alpine")
            .command(["sleep", "60"])
            .net_namespace(Namespace(nsmode="host"))
            .portmappings([PortMapping(container_port=80, host_port=8080)])
            .env({"MODE": "test"})
            .restart_policy("on-failure")
            .build()
        )
        assert opts.to_dict() == {
            "image": "alpine",
            "command": ["sleep", "60"],
            "netns": {"nsmode": "host"},
            "portmappings": [{"container_port": 80, "host_port": 8080}],
            "env": {"MODE": "test"},
            "restart_policy": "on-failure",
        }

    def test_pod_create(self):
        opts = PodCreateOpts.builder().name("pod1").labels({"app": "web"}).no_infra(True).build()
        assert opts.serialize() == '{"name":"pod1","labels":{"app":"web"},"no_infra":true}'

    def test_network_create_subnets(self):
        opts = (
            NetworkCreateOpts.builder()
            .name("backend")
            .subnets([{"subnet": "10.89.0.0/24", "gateway": "10.89.0.1"}])
            .build()
        )
        assert opts.to_dict() == {"name": "backend", "subnets": [{"subnet": "10.89.0.0/24", "gateway": "10.89.0.1"}]}

    def test_manifest_image_add(self):
        opts = ManifestImageAddOpts.builder().images(["docker.io/library/alpine"]).arch("arm64").build()
        assert opts.serialize() == '{"images":["docker.io/library/alpine"],"arch":"arm64"}'
