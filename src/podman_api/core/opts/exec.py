"""Exec session options (JSON bodies)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from podman_api.core.opts.builder import (
    JsonOpts,
    JsonOptsBuilder,
    bool_field,
    display_field,
    int_field,
    str_field,
    vec_field,
)
from podman_api.core.opts.params import ListParam


@dataclass(frozen=True)
class UserOpt:
    """User (and optionally group) to run a process as.

    Either side may be a name or a numeric id: `UserOpt("app")`,
    `UserOpt(1000, 1000)`, `UserOpt("app", "staff")`.
    """

    user: str | int
    group: str | int | None = None

    def __str__(self) -> str:
        if self.group is None:
            return str(self.user)
        return f"{self.user}:{self.group}"


class ExecCreateOpts(JsonOpts):
    """Modify how an exec session is run inside a container."""

    __slots__ = ()


class ExecCreateOptsBuilder(JsonOptsBuilder, opts=ExecCreateOpts):
    attach_stderr = bool_field("AttachStderr")
    attach_stdin = bool_field("AttachStdin")
    attach_stdout = bool_field("AttachStdout")
    command = vec_field("Cmd", "Command to run, as a list of arguments.")
    detach_keys = str_field("DetachKeys", "Key sequence for detaching, e.g. `ctrl-p,ctrl-q`.")
    privileged = bool_field("Privileged")
    tty = bool_field("Tty", "Allocate a pseudo-TTY.")
    user = display_field("User", "`UserOpt` or plain `user[:group]` text.")
    working_dir = str_field("WorkingDir")

    def env(self, variables: Mapping[str, str] | Iterable[tuple[str, str]]) -> ExecCreateOptsBuilder:
        """Environment for the command, stored as `KEY=VALUE` entries."""

        items = variables.items() if isinstance(variables, Mapping) else variables
        self._params.insert("Env", ListParam(tuple(f"{k}={v}" for k, v in items)))
        return self


class ExecStartOpts(JsonOpts):
    """Adjust how an exec instance is started."""

    __slots__ = ()


class ExecStartOptsBuilder(JsonOptsBuilder, opts=ExecStartOpts):
    detach = bool_field("Detach")
    height = int_field("h", "TTY height in characters. Requires `tty`.")
    tty = bool_field("Tty")
    width = int_field("w", "TTY width in characters. Requires `tty`.")
