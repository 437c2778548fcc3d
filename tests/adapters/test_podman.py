"""Tests for the `Podman` client and its endpoint handles."""

import asyncio
import base64
import json

import httpx
import pytest

from podman_api.adapters.api import Container, Exec, Manifest, Pod, Secret
from podman_api.core.domain.models import ApiResource
from podman_api.core.domain.version import ApiVersion
from podman_api.core.errors import FaultError, InvalidResponseError, StreamError
from podman_api.core.opts import (
    ContainerCreateOpts,
    ContainerListFilter,
    ContainerListOpts,
    ContainerStopOpts,
    ContainerWaitOpts,
    EventsOpts,
    ExecCreateOpts,
    ExecStartOpts,
    ImageBuildOpts,
    ManifestCreateOpts,
    PodCreateOpts,
    PullOpts,
    RegistryAuth,
    SecretCreateOpts,
    VolumeCreateOpts,
    VolumePruneFilter,
    VolumePruneOpts,
)


def run(coro):
    return asyncio.run(coro)


async def collect(agen):
    return [item async for item in agen]


class TestSystem:
    def test_ping_reads_headers(self, make_podman, ping_headers):
        podman, handler = make_podman(lambda r: httpx.Response(200, headers=ping_headers, text="OK"))

        info = run(podman.ping())

        assert handler.last.url.path == "/v3.4/libpod/_ping"
        assert info.api_version == "1.41"
        assert info.buildkit_version == ""

    def test_ping_missing_header(self, make_podman):
        podman, _ = make_podman(lambda r: httpx.Response(200, text="OK"))
        with pytest.raises(InvalidResponseError):
            run(podman.ping())

    def test_events_stream(self, make_podman):
        lines = [
            {"Type": "container", "Action": "start", "Actor": {"ID": "c1", "Attributes": None}},
            {"Type": "image", "Action": "pull", "Actor": {"ID": "i1", "Attributes": {"name": "alpine"}}},
        ]
        body = "\n".join(json.dumps(line) for line in lines) + "\n"
        podman, handler = make_podman(lambda r: httpx.Response(200, text=body))

        opts = EventsOpts.builder().stream(False).build()
        events = run(collect(podman.events(opts)))

        assert handler.last.url.params["stream"] == "false"
        assert [e.action for e in events] == ["start", "pull"]
        assert events[0].actor.attributes == {}

    def test_play_kubernetes_yaml_sends_yaml(self, make_podman):
        podman, handler = make_podman(lambda r: httpx.Response(200, json={"Pods": []}))

        run(podman.play_kubernetes_yaml("apiVersion: v1\nkind: Pod\n"))

        assert handler.last.method == "POST"
        assert handler.last.url.path == "/v3.4/libpod/play/kube"
        assert handler.last.headers["Content-Type"] == "application/x-yaml"
        assert handler.last.content.startswith(b"apiVersion: v1")

    def test_adjust_api_version_to_older_server(self, make_podman):
        podman, handler = make_podman(lambda r: httpx.Response(200, json={"Version": "3.2.1", "ApiVersion": "1.40"}))

        version = run(podman.adjust_api_version())

        assert version == ApiVersion(3, 2, 1)
        assert podman.api_version == ApiVersion(3, 2, 1)
        assert handler.last.url.path == "/v3.4/libpod/version"

    def test_adjust_api_version_keeps_client_version_for_newer_server(self, make_podman):
        podman, _ = make_podman(lambda r: httpx.Response(200, json={"Version": "4.5.0"}))
        assert run(podman.adjust_api_version()) == ApiVersion(3, 4, 4)

    @pytest.mark.parametrize("status, expected", [(204, True), (404, False)])
    def test_exists(self, make_podman, status, expected):
        podman, handler = make_podman(lambda r: httpx.Response(status))

        assert run(podman.containers().get("web").exists()) is expected
        assert handler.last.url.path == "/v3.4/libpod/containers/web/exists"

    def test_exists_propagates_other_errors(self, make_podman):
        podman, _ = make_podman(lambda r: httpx.Response(500, json={"message": "internal"}))
        with pytest.raises(FaultError):
            run(podman.resource_exists(ApiResource.IMAGES, "alpine"))


class TestContainers:
    def test_list_builds_query(self, make_podman):
        podman, handler = make_podman(
            lambda r: httpx.Response(200, json=[{"Id": "abc", "Names": ["web"], "Labels": None, "Networks": None}])
        )
        opts = ContainerListOpts.builder().all(True).filter([ContainerListFilter.label_key("env")]).build()

        containers = run(podman.containers().list(opts))

        params = handler.last.url.params
        assert handler.last.url.path == "/v3.4/libpod/containers/json"
        assert params["all"] == "true"
        assert json.loads(params["filters"]) == {"label": ["env"]}
        assert containers[0].names == ["web"]
        assert containers[0].labels == {}

    def test_create_posts_json_body(self, make_podman):
        podman, handler = make_podman(lambda r: httpx.Response(201, json={"Id": "abc", "Warnings": None}))
        opts = ContainerCreateOpts.builder().image("alpine").name("web").build()

        response = run(podman.containers().create(opts))

        assert handler.last.headers["Content-Type"] == "application/json"
        assert json.loads(handler.last.content) == {"image": "alpine", "name": "web"}
        assert response.id == "abc"
        assert response.warnings == []

    def test_stop_without_options_has_no_query(self, make_podman):
        podman, handler = make_podman(lambda r: httpx.Response(204))

        run(podman.containers().get("web").stop())
        run(podman.containers().get("web").stop(ContainerStopOpts.builder().timeout(3).build()))

        assert str(handler.requests[0].url).endswith("/v3.4/libpod/containers/web/stop")
        assert handler.requests[1].url.params["Timeout"] == "3"

    def test_remove_forces_delete(self, make_podman):
        podman, handler = make_podman(lambda r: httpx.Response(204))

        run(podman.containers().get("web").remove())

        assert handler.last.method == "DELETE"
        assert handler.last.url.params["force"] == "true"

    def test_commit_targets_container(self, make_podman):
        podman, handler = make_podman(lambda r: httpx.Response(201, json={"Id": "img1"}))

        result = run(podman.containers().get("web").commit())

        assert handler.last.url.path == "/v3.4/libpod/commit"
        assert handler.last.url.params["container"] == "web"
        assert result.id == "img1"

    def test_wait_sends_repeated_conditions(self, make_podman):
        podman, handler = make_podman(lambda r: httpx.Response(200, json=0))

        opts = ContainerWaitOpts.builder().conditions(["running", "exited"]).build()
        assert run(podman.containers().get("web").wait(opts)) == 0
        assert handler.last.url.params.get_list("condition") == ["running", "exited"]

    def test_container_stats_is_one_shot(self, make_podman):
        podman, handler = make_podman(lambda r: httpx.Response(200, json={"Stats": []}))

        run(podman.containers().get("web").stats())

        assert handler.last.url.params["stream"] == "false"
        assert handler.last.url.params["containers"] == "web"

    def test_logs_stream(self, make_podman):
        podman, _ = make_podman(lambda r: httpx.Response(200, text="line one\nline two\n"))
        assert run(collect(podman.containers().get("web").logs())) == ["line one", "line two"]

    def test_missing_container_raises_fault(self, make_podman):
        podman, _ = make_podman(lambda r: httpx.Response(404, json={"message": "no such container"}))
        with pytest.raises(FaultError) as excinfo:
            run(podman.containers().get("nope").inspect())
        assert excinfo.value.code == 404


class TestExec:
    def test_create_and_start(self, make_podman):
        def respond(request):
            if request.url.path.endswith("/exec"):
                return httpx.Response(201, json={"Id": "exec1"})
            return httpx.Response(200, text="hello\n")

        podman, handler = make_podman(respond)
        container = podman.containers().get("web")

        exec_ = run(container.create_exec(ExecCreateOpts.builder().command(["echo", "hello"]).build()))
        output = run(collect(exec_.start(ExecStartOpts.builder().tty(True).build())))

        assert exec_ == Exec(podman, "exec1")
        assert json.loads(handler.requests[0].content) == {"Cmd": ["echo", "hello"]}
        assert handler.requests[1].url.path == "/v3.4/libpod/exec/exec1/start"
        assert json.loads(handler.requests[1].content) == {"Tty": True}
        assert output == ["hello"]

    def test_resize(self, make_podman):
        podman, handler = make_podman(lambda r: httpx.Response(201))
        run(podman.execs().get("exec1").resize(120, 40))
        assert handler.last.url.params["h"] == "40"
        assert handler.last.url.params["w"] == "120"


class TestImages:
    def test_pull_sends_auth_header_and_streams(self, make_podman):
        body = '{"stream":"Trying to pull alpine"}\n{"images":["abc"],"id":"abc"}\n'
        podman, handler = make_podman(lambda r: httpx.Response(200, text=body))
        opts = PullOpts.builder().reference("alpine").auth(RegistryAuth.token("tok")).build()

        chunks = run(collect(podman.images().pull(opts)))

        header = handler.last.headers["X-Registry-Auth"]
        assert json.loads(base64.urlsafe_b64decode(header)) == {"identitytoken": "tok"}
        assert handler.last.url.params["reference"] == "alpine"
        assert chunks[-1]["id"] == "abc"

    def test_pull_error_record_raises(self, make_podman):
        body = '{"stream":"Trying"}\n{"error":"denied","errorDetail":{"message":"unauthorized"}}\n'
        podman, _ = make_podman(lambda r: httpx.Response(200, text=body))

        with pytest.raises(StreamError, match="unauthorized"):
            run(collect(podman.images().pull(PullOpts.builder().reference("private/app").build())))

    def test_build_sends_context_tarball(self, make_podman):
        podman, handler = make_podman(lambda r: httpx.Response(200, text='{"stream":"STEP 1/1"}\n'))
        opts = ImageBuildOpts.builder("/srv/ctx").tag("app:1").build()

        chunks = run(collect(podman.images().build(opts, b"tar-bytes")))

        assert handler.last.url.path == "/v3.4/libpod/build"
        assert handler.last.headers["Content-Type"] == "application/x-tar"
        assert handler.last.content == b"tar-bytes"
        assert chunks == [{"stream": "STEP 1/1"}]

    def test_export_returns_bytes(self, make_podman):
        podman, handler = make_podman(lambda r: httpx.Response(200, content=b"\x1f\x8b tar"))
        assert run(podman.images().get("alpine").export()) == b"\x1f\x8b tar"
        assert handler.last.url.path == "/v3.4/libpod/images/alpine/get"


class TestOtherResources:
    def test_pod_create_returns_handle(self, make_podman):
        podman, handler = make_podman(lambda r: httpx.Response(201, json={"Id": "pod1"}))

        pod = run(podman.pods().create(PodCreateOpts.builder().name("web").build()))

        assert pod == Pod(podman, "pod1")
        assert json.loads(handler.last.content) == {"name": "web"}

    def test_pod_action_report(self, make_podman):
        podman, _ = make_podman(lambda r: httpx.Response(200, json={"Id": "pod1", "Errs": None}))
        report = run(podman.pods().get("pod1").start())
        assert report.errs == []

    def test_volume_create_and_prune(self, make_podman):
        def respond(request):
            if request.url.path.endswith("/create"):
                return httpx.Response(201, json={"Name": "data", "Driver": "local", "Labels": {"env": "prod"}})
            return httpx.Response(200, json=[{"Id": "old", "Size": 10}])

        podman, handler = make_podman(respond)
        volumes = podman.volumes()

        created = run(volumes.create(VolumeCreateOpts.builder().name("data").labels({"env": "prod"}).build()))
        pruned = run(volumes.prune(VolumePruneOpts.builder().filter([VolumePruneFilter.until("24h")]).build()))

        assert created.labels == {"env": "prod"}
        assert json.loads(handler.requests[1].url.params["filters"]) == {"until": ["24h"]}
        assert pruned[0].id == "old"

    def test_secret_create_sends_raw_value(self, make_podman):
        podman, handler = make_podman(lambda r: httpx.Response(200, json={"ID": "sec1"}))

        secret = run(podman.secrets().create(SecretCreateOpts.builder("db").build(), "hunter2"))

        assert secret == Secret(podman, "sec1")
        assert handler.last.url.params["name"] == "db"
        assert handler.last.content == b"hunter2"

    def test_manifest_create(self, make_podman):
        podman, handler = make_podman(lambda r: httpx.Response(200, json={"Id": "man1"}))

        manifest = run(podman.manifests().create(ManifestCreateOpts.builder("app").all(True).build()))

        assert manifest == Manifest(podman, "man1")
        assert handler.last.url.path == "/v3.4/libpod/manifests/app"
        assert handler.last.url.params["all"] == "true"

    def test_handles_compare_by_kind_and_id(self, make_podman):
        podman, _ = make_podman(lambda r: httpx.Response(204))
        assert podman.containers().get("x") == Container(podman, "x")
        assert podman.containers().get("x") != Pod(podman, "x")
