"""Structured command line value."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from ..exceptions import CommandBuildError
from .quoting import quote

_TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9._/+-]+$")


class Program(str, Enum):
    """The two external subsystems the server can invoke."""

    SCRIPT_INTERPRETER = "script-interpreter"
    AUTOMATION_RUNNER = "automation-runner"


@dataclass(frozen=True)
class CommandLine:
    """An executable plus an ordered sequence of already-quoted arguments.

    Arguments only enter ``quoted_args`` through ``with_flag`` (plain tokens,
    checked against a conservative pattern) or ``with_value`` (any text, passed
    through ``quote``), so rendering never interpolates raw caller input.
    """

    program: Program
    executable: str
    quoted_args: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _require_token(self.executable, "program")
        for arg in self.quoted_args:
            if not (_TOKEN_PATTERN.match(arg) or _is_single_quoted(arg)):
                raise CommandBuildError(f"Argument {arg!r} was not produced by the quoting engine.")

    def with_flag(self, flag: str) -> CommandLine:
        _require_token(flag, "flag")
        return CommandLine(self.program, self.executable, self.quoted_args + (flag,))

    def with_value(self, raw: str) -> CommandLine:
        return CommandLine(self.program, self.executable, self.quoted_args + (quote(raw),))

    def render(self) -> str:
        """Serialize to the text handed to ``/bin/sh -c``."""
        return " ".join((self.executable,) + self.quoted_args)

    def __str__(self) -> str:
        return self.render()


def _require_token(value: str, kind: str) -> None:
    if not _TOKEN_PATTERN.match(value):
        raise CommandBuildError(f"Invalid {kind} {value!r}: only letters, digits and '._/+-' are allowed.")


def _is_single_quoted(arg: str) -> bool:
    # Every ' inside the literal must belong to a '"'"' sequence.
    if len(arg) < 2 or not (arg.startswith("'") and arg.endswith("'")):
        return False
    return "'" not in arg[1:-1].replace("'\"'\"'", "")
