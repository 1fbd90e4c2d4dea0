"""Synchronous subprocess execution with captured output."""

import logging
import os
import subprocess
from collections.abc import Mapping, Sequence

from ._errors import FatalError, ProcessFailedError
from ._types import CommandSpec, ProcessResult
from .failure import die_from
from .output import log_info

logger = logging.getLogger(__name__)


def _build_env(overrides: Mapping[str, str] | None) -> dict[str, str] | None:
    """Overlay *overrides* on the current environment (None keeps it as is)."""
    if overrides is None:
        return None
    env = dict(os.environ)
    env.update(overrides)
    return env


def run_command(
    spec: CommandSpec,
    *,
    allow_failure: bool = True,
    announce: bool = True,
) -> ProcessResult:
    """Run *spec* to completion and return its exit status and output.

    Args:
        spec: The command to run.
        allow_failure: When False, a non-zero exit raises
            :class:`ProcessFailedError` instead of returning.
        announce: Print ``Executing: <command line>`` before spawning.

    Returns:
        The :class:`ProcessResult` of the command.

    Raises:
        ProcessFailedError: If the command fails and *allow_failure* is False.
        OSError: If the executable cannot be spawned (e.g. it does not exist).
    """
    if announce:
        log_info(f"Executing: {spec.command_line}")

    logger.debug("Spawning %r (cwd=%s)", list(spec.argv), spec.cwd)
    completed = subprocess.run(
        list(spec.argv),
        cwd=spec.cwd,
        env=_build_env(spec.env),
        stdin=subprocess.DEVNULL,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=False,
    )
    result = ProcessResult(completed.returncode, completed.stdout, completed.stderr)
    logger.debug("%s exited with %d", spec.argv[0], result.returncode)

    if not result.success and not allow_failure:
        raise ProcessFailedError(spec, result)

    return result


def run(
    argv: Sequence[str],
    *,
    cwd: str | None = None,
    env: Mapping[str, str] | None = None,
    allow_failure: bool = True,
    announce: bool = True,
) -> ProcessResult:
    """Shortcut for ``run_command(CommandSpec(argv, cwd, env), ...)``."""
    return run_command(
        CommandSpec(argv, cwd=cwd, env=env),
        allow_failure=allow_failure,
        announce=announce,
    )


def must_run(
    argv: Sequence[str],
    *,
    cwd: str | None = None,
    env: Mapping[str, str] | None = None,
    announce: bool = True,
) -> ProcessResult:
    """Like :func:`run` with ``allow_failure=False``, but a failure exits the program.

    The captured stdout and stderr are dumped before the error line.
    """
    try:
        return run(argv, cwd=cwd, env=env, allow_failure=False, announce=announce)
    except FatalError as e:
        die_from(e)
