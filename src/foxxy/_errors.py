"""Exceptions for the foxxy environment adapters.

Everything derived from :class:`FatalError` is turned into an
``Error: <message>. Exiting`` line and exit status 1 by
:func:`foxxy.failure.exit_on_fatal`.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._types import CommandSpec, ProcessResult


class FatalError(Exception):
    """Raised when an adapter hits a condition the program cannot recover from."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigNotFoundError(FatalError):
    """Raised when no config candidate exists in a directory."""

    def __init__(self, directory: str, name: str) -> None:
        self.directory = directory
        self.name = name
        super().__init__(
            f"Failed to find a config file named {name} in directory {directory}"
        )


class ConfigParseError(FatalError):
    """Raised when a config candidate exists but cannot be parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"SyntaxError when parsing file {path} ({reason})")


class ProcessFailedError(FatalError):
    """Raised when a command that must succeed exits with a non-zero status."""

    def __init__(self, spec: "CommandSpec", result: "ProcessResult") -> None:
        self.spec = spec
        self.result = result
        super().__init__("Executing process unexpectedly failed")


class RemoteUrlError(FatalError):
    """Raised when a remote URL cannot be turned into a RemoteInfo."""

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(message)


class RemoteNotFoundError(FatalError):
    """Raised when the url of a remote cannot be read."""

    def __init__(self, remote: str, stderr: str = "") -> None:
        self.remote = remote
        self.stderr = stderr
        super().__init__(f"Failed to read url of remote {remote}")
