"""Client configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- The HTTP adapter and the CLI read the connection settings the same way.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "podman-api"
ENV_PREFIX = "PODMAN_API_"


def get_user_config_dir() -> Path:
    """`$XDG_CONFIG_HOME/podman-api`, falling back to `~/.config/podman-api`.

    Same base directory Podman uses for `containers.conf`.
    """

    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Merge `values` into the user `.env` (what `doctor setup` stores).

    Keys already in the file survive unless overwritten; `None` values are
    ignored. The file is rewritten sorted by key.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    merged = {k: v for k, v in dotenv_values(env_path).items() if v is not None} if env_path.exists() else {}
    merged.update({k: v for k, v in values.items() if v is not None})

    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    env_path.write_text("# written by `podman-api doctor setup`\n" + body, encoding="utf-8")
    return env_path


class PodmanSettings(BaseSettings):
    """Connection settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars, `.env` files).
    - One configuration contract for the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Project `.env` first (development), then the user's global file.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    uri: str = Field(
        default="unix:///run/podman/podman.sock",
        min_length=1,
        description="Daemon URI: unix://<socket>, tcp://<host:port>, http(s)://<host:port>.",
    )
    api_version: str = Field(
        default="3.4.4",
        pattern=r"^\d+\.\d+\.\d+$",
        description="libpod API version used to prefix endpoints.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="podman-api-py/0.1",
        min_length=1,
        description="User-Agent sent to the daemon.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level used by the CLI.",
    )
