"""Resolve commands against PATH and run two of them connected by a pipe."""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from collections.abc import Mapping, Sequence
from typing import IO, Any

from .textutils import split

NOT_FOUND_MESSAGE = "Error: Command not found"
FAILED_MESSAGE = "Error: Executing the command failed"
OPEN_ERROR_MESSAGE = "Error while opening the output file"

_OUTFILE_FLAGS = os.O_CREAT | os.O_WRONLY | os.O_TRUNC


class CommandNotFoundError(Exception):
    """Raised when a command line names no program that can be located."""

    def __init__(self, command: str | None) -> None:
        super().__init__(NOT_FOUND_MESSAGE)
        self.command = command


class CommandFailedError(Exception):
    """Raised when a located program could not be started."""

    def __init__(self, command: str, reason: str | None = None) -> None:
        super().__init__(FAILED_MESSAGE)
        self.command = command
        self.reason = reason


def get_path_from_env(env: Mapping[str, str]) -> str | None:
    """Return the PATH value of ``env``, or None when it is not set."""
    return env.get("PATH")


def find_command_path(directories: Sequence[str], command: str) -> str | None:
    """Locate ``command``.

    ``command`` itself is returned when it names an existing file; otherwise
    each directory is tried in order with the first word of ``command``.
    Only existence is checked, not whether the file may be executed.
    """
    if os.path.exists(command):
        return command
    name = command.split(" ", 1)[0]
    for directory in directories:
        candidate = f"{directory}/{name}"
        if os.path.exists(candidate):
            return candidate
    return None


def resolve_command(
    command: str | None, env: Mapping[str, str] | None = None
) -> tuple[str, list[str]]:
    """Return the program to start and its argument vector.

    Without a PATH in ``env`` the first word is used as the program as is.
    Raises CommandNotFoundError for an empty command, one starting with a
    space, or one that cannot be found on PATH.
    """
    environment = os.environ if env is None else env
    if not command or command.startswith(" "):
        raise CommandNotFoundError(command)
    argv = split(command, " ")
    search_path = get_path_from_env(environment)
    if search_path is None:
        return argv[0], argv
    program = find_command_path(split(search_path, ":"), argv[0])
    if program is None:
        raise CommandNotFoundError(command)
    return program, argv


def run_command(
    command: str | None,
    env: Mapping[str, str] | None = None,
    stdin: Any = None,
    stdout: Any = None,
) -> int:
    """Run ``command`` with the given standard streams and return its exit status.

    Raises CommandNotFoundError when the command cannot be located and
    CommandFailedError when the operating system refuses to start it.
    """
    environment = dict(os.environ if env is None else env)
    program, argv = resolve_command(command, environment)
    # A bare name is taken relative to the working directory, never searched.
    executable = program if os.sep in program else os.path.join(os.curdir, program)
    try:
        completed = subprocess.run(
            argv,
            executable=executable,
            stdin=stdin,
            stdout=stdout,
            env=environment,
            check=False,
        )
    except OSError as exc:
        raise CommandFailedError(command or "", exc.strerror) from exc
    return completed.returncode


def _report(message: str) -> None:
    sys.stderr.write(message + "\n")
    sys.stderr.flush()


def _open_outfile(path: str, flags: int) -> int:
    return os.open(path, _OUTFILE_FLAGS, 0o777)


def _run_first_stage(
    infile: str, command: str, env: Mapping[str, str], channel: IO[bytes]
) -> None:
    try:
        source = open(infile, "rb")
    except OSError as exc:
        _report(f"{OPEN_ERROR_MESSAGE}: {exc.strerror}")
        return
    with source:
        try:
            run_command(command, env, stdin=source, stdout=channel)
        except (CommandNotFoundError, CommandFailedError) as exc:
            _report(str(exc))


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run ``first < infile | second > outfile`` and return the second's status.

    Failures of the first stage are reported on stderr and the second stage
    still runs with whatever input was produced. The output file is created
    or truncated; an error opening it propagates as OSError, and errors of
    the second command propagate as CommandNotFoundError or
    CommandFailedError.
    """
    environment = dict(os.environ if env is None else env)
    with tempfile.TemporaryFile() as channel:
        _run_first_stage(infile, first, environment, channel)
        channel.seek(0)
        with open(outfile, "wb", opener=_open_outfile) as target:
            return run_command(second, environment, stdin=channel, stdout=target)