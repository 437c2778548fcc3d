"""Allows `python -m podman_api ...` during development."""

from __future__ import annotations

import sys

# Windows terminals default to cp1252; rich tables need utf-8.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from podman_api.cli.main import run  # noqa: E402

if __name__ == "__main__":
    run()
