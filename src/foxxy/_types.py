"""Data types shared by the foxxy environment adapters."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class CommandSpec:
    """Description of one external command to run.

    ``argv[0]`` is the executable. ``env`` entries are laid over the
    environment of the current process rather than replacing it.
    """

    argv: Sequence[str]
    cwd: str | None = None
    env: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        if isinstance(self.argv, str):
            raise TypeError("CommandSpec.argv must be a sequence of strings, not a str")
        if not self.argv:
            raise ValueError("CommandSpec.argv must name an executable")
        # Accept any sequence (e.g. a list) but store an immutable tuple
        object.__setattr__(self, "argv", tuple(self.argv))

    @property
    def command_line(self) -> str:
        """The argv joined with single spaces, as shown to the user."""
        return " ".join(self.argv)


@dataclass(frozen=True)
class ProcessResult:
    """Result of running a :class:`CommandSpec` to completion."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        """Whether the command succeeded (returncode == 0)."""
        return self.returncode == 0


@dataclass(frozen=True)
class RemoteInfo:
    """Hosting site, owner and repository name of a git remote."""

    site: str
    owner: str
    repo: str

    @property
    def web_url(self) -> str:
        """Browser URL of the repository."""
        return f"https://{self.site}/{self.owner}/{self.repo}"
