"""Tests for settings and the user .env writer."""

import pytest
from pydantic import ValidationError

from podman_api.core.config import PodmanSettings, get_user_env_file, write_user_env_vars


class TestPodmanSettings:
    def test_defaults(self):
        settings = PodmanSettings()
        assert settings.uri == "unix:///run/podman/podman.sock"
        assert settings.api_version == "3.4.4"
        assert settings.http_timeout_seconds == 30

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("PODMAN_API_URI", "tcp://127.0.0.1:8080")
        monkeypatch.setenv("podman_api_http_timeout_seconds", "5")

        settings = PodmanSettings()
        assert settings.uri == "tcp://127.0.0.1:8080"
        assert settings.http_timeout_seconds == 5

    def test_rejects_bad_api_version(self):
        with pytest.raises(ValidationError):
            PodmanSettings(api_version="4.2")

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            PodmanSettings(http_timeout_seconds=0)

    def test_reads_project_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("PODMAN_API_LOG_LEVEL=DEBUG\n", encoding="utf-8")
        assert PodmanSettings().log_level == "DEBUG"


class TestWriteUserEnvVars:
    def test_writes_sorted_keys_with_header(self, tmp_path):
        path = tmp_path / "cfg" / ".env"
        write_user_env_vars({"PODMAN_API_URI": "unix:///tmp/p.sock", "PODMAN_API_API_VERSION": "4.0.0"}, path)

        assert path.read_text(encoding="utf-8").splitlines() == [
            "# written by `podman-api doctor setup`",
            "PODMAN_API_API_VERSION=4.0.0",
            "PODMAN_API_URI=unix:///tmp/p.sock",
        ]

    def test_updates_existing_and_skips_none(self, tmp_path):
        path = tmp_path / ".env"
        path.write_text('# old\nPODMAN_API_URI="tcp://a:1"\nOTHER=keep\n', encoding="utf-8")

        write_user_env_vars({"PODMAN_API_URI": "tcp://b:2", "PODMAN_API_LOG_LEVEL": None}, path)

        text = path.read_text(encoding="utf-8")
        assert "PODMAN_API_URI=tcp://b:2" in text
        assert "OTHER=keep" in text
        assert "LOG_LEVEL" not in text

    def test_default_location_follows_xdg(self, tmp_path):
        path = write_user_env_vars({"PODMAN_API_URI": "tcp://c:3"})
        assert path == get_user_env_file()
        assert path == tmp_path / "config" / "podman-api" / ".env"

    def test_quoted_values_are_read_unquoted(self, tmp_path):
        path = tmp_path / ".env"
        path.write_text("export PODMAN_API_USER_AGENT='my agent'\n", encoding="utf-8")

        write_user_env_vars({"PODMAN_API_URI": "tcp://d:4"}, path)

        assert "PODMAN_API_USER_AGENT=my agent" in path.read_text(encoding="utf-8").splitlines()
