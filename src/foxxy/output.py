"""
Console output utilities for the foxxy environment adapters.

User-facing progress and error lines are printed through Rich consoles so
every adapter writes to the terminal the same way. Output is kept literal:
markup, highlighting and emoji codes are disabled because captured process
output is echoed verbatim.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV_VAR = "FOXXY_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Global console instances for consistent output
console = Console(highlight=False, markup=False, emoji=False, soft_wrap=True)
error_console = Console(
    stderr=True, highlight=False, markup=False, emoji=False, soft_wrap=True
)


def log_info(message: str) -> None:
    """Print a progress line (``  - <message>``) to stdout."""
    console.print(f"  - {message}")


def log_error(message: str) -> None:
    """Print an error line (``Error: <message>``) to stderr."""
    error_console.print(f"Error: {message}")


def write_raw(text: str, *, to_stderr: bool = False) -> None:
    """Write captured process output verbatim, bypassing Rich rendering."""
    target = error_console if to_stderr else console
    target.file.write(text)
    target.file.flush()


def print_stream_dump(header: str, text: str, *, to_stderr: bool = False) -> None:
    """Print a header line followed by raw captured process output."""
    console.print(header)
    write_raw(text if text.endswith("\n") else text + "\n", to_stderr=to_stderr)


def get_log_level() -> int:
    """Resolve the log level from ``FOXXY_LOG_LEVEL``, falling back to WARNING."""
    name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def setup_logging(level: int | None = None) -> None:
    """Route the ``logging`` module through Rich on stderr."""
    logging.basicConfig(
        level=get_log_level() if level is None else level,
        format="%(message)s",
        handlers=[
            RichHandler(console=error_console, show_time=False, show_path=False)
        ],
        force=True,
    )
