"""Environment adapters for the foxxy task automater.

Usage::

    from foxxy import get_remote_info, load_config, must_run

    config = load_config(".", "foxxy")
    info = get_remote_info()
    result = must_run(["git", "status"])
"""

from ._errors import (
    ConfigNotFoundError,
    ConfigParseError,
    FatalError,
    ProcessFailedError,
    RemoteNotFoundError,
    RemoteUrlError,
)
from ._types import CommandSpec, ProcessResult, RemoteInfo
from .config import load_config, read_config
from .failure import die, exit_on_fatal
from .process import must_run, run, run_command
from .remote import get_remote_info, parse_remote_url, read_remote_info

__version__ = "0.1.0"

__all__ = [
    "CommandSpec",
    "ConfigNotFoundError",
    "ConfigParseError",
    "FatalError",
    "ProcessFailedError",
    "ProcessResult",
    "RemoteInfo",
    "RemoteNotFoundError",
    "RemoteUrlError",
    "die",
    "exit_on_fatal",
    "get_remote_info",
    "load_config",
    "must_run",
    "parse_remote_url",
    "read_config",
    "read_remote_info",
    "run",
    "run_command",
]
