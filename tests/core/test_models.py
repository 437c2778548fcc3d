"""Tests for response models and the non-optional collection hooks."""

import json

import pytest
from pydantic import BaseModel, Field

from podman_api.core.domain.models import (
    ContainerCreateResponse,
    Event,
    JsonError,
    LibpodPingInfo,
    ListPodsReport,
    SecretInfoReport,
    VolumeInfo,
)
from podman_api.core.domain.normalize import NonOptionalDict, NonOptionalList
from podman_api.core.errors import InvalidResponseError


class _Sample(BaseModel):
    tags: NonOptionalList[str] = Field(alias="Tags")
    labels: NonOptionalDict[str, str] = Field(alias="Labels")


class TestNonOptionalCollections:
    def test_null_becomes_empty(self):
        sample = _Sample.model_validate({"Tags": None, "Labels": None})
        assert sample.tags == []
        assert sample.labels == {}

    def test_absent_becomes_empty(self):
        sample = _Sample.model_validate({})
        assert sample.tags == []
        assert sample.labels == {}

    def test_populated_values_validate(self):
        sample = _Sample.model_validate({"Tags": ["a"], "Labels": {"k": "v"}})
        assert sample.tags == ["a"]
        assert sample.labels == {"k": "v"}

    def test_wrong_type_still_fails(self):
        with pytest.raises(ValueError):
            _Sample.model_validate({"Tags": 3})

    def test_warnings_null_round_trip(self):
        response = ContainerCreateResponse.model_validate_json('{"Id":"abc","Warnings":null}')

        assert response.warnings == []
        assert json.loads(response.model_dump_json(by_alias=True)) == {"Id": "abc", "Warnings": []}
        assert response.to_wire() == {"Id": "abc", "Warnings": []}


class TestResponseModels:
    def test_pods_report_normalizes_collections(self):
        report = ListPodsReport.model_validate(
            {"Id": "p1", "Name": "web", "Labels": None, "Containers": None, "Networks": None, "Extra": 1}
        )
        assert report.containers == []
        assert report.labels == {}

    def test_volume_info(self):
        volume = VolumeInfo.model_validate({"Name": "data", "Driver": "local", "Options": None})
        assert volume.name == "data"
        assert volume.options == {}

    def test_secret_info(self):
        secret = SecretInfoReport.model_validate(
            {"ID": "s1", "Spec": {"Name": "db", "Driver": {"Name": "file", "Options": None}}}
        )
        assert secret.spec.driver.name == "file"
        assert secret.spec.driver.options == {}

    def test_event_aliases(self):
        event = Event.model_validate(
            {
                "Type": "container",
                "Action": "start",
                "Actor": {"ID": "abc", "Attributes": {"image": "alpine"}},
                "from": "alpine",
                "timeNano": 1700000000000000000,
            }
        )
        assert event.from_ == "alpine"
        assert event.actor.attributes == {"image": "alpine"}
        assert event.time_nano == 1700000000000000000

    def test_json_error_text(self):
        assert str(JsonError.model_validate({"error": "pull failed", "errorDetail": {"message": "denied"}})) == (
            "pull failed-denied"
        )
        assert str(JsonError.model_validate({"errorDetail": {"message": "denied"}})) == "denied"


class TestPingInfo:
    HEADERS = {
        "API-Version": "1.41",
        "Libpod-API-Version": "4.2.0",
        "Libpod-Buildah-Version": "1.27.0",
        "Cache-Control": "no-cache",
        "Docker-Experimental": "true",
        "Pragma": "no-cache",
    }

    def test_from_headers_is_case_insensitive(self):
        info = LibpodPingInfo.from_headers({k.lower(): v for k, v in self.HEADERS.items()})
        assert info.libpod_api_version == "4.2.0"
        assert info.docker_experimental is True
        assert info.buildkit_version is None

    def test_optional_buildkit_header(self):
        info = LibpodPingInfo.from_headers({**self.HEADERS, "BuildKit-Version": "0.10"})
        assert info.buildkit_version == "0.10"

    def test_missing_header_raises(self):
        headers = dict(self.HEADERS)
        del headers["Pragma"]
        with pytest.raises(InvalidResponseError, match="pragma"):
            LibpodPingInfo.from_headers(headers)

    def test_experimental_must_be_bool(self):
        with pytest.raises(InvalidResponseError):
            LibpodPingInfo.from_headers({**self.HEADERS, "Docker-Experimental": "maybe"})
