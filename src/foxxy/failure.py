"""Process-wide fatal error handling.

Adapters raise :class:`~foxxy._errors.FatalError`; the outermost caller
wraps its work in :func:`exit_on_fatal` so a fatal condition becomes one
``Error: <message>. Exiting`` line and exit status 1.
"""

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import NoReturn

from ._errors import FatalError, ProcessFailedError
from .output import log_error, print_stream_dump


def die(message: str) -> NoReturn:
    """Report *message* and terminate the program with exit status 1."""
    log_error(f"{message}. Exiting")
    sys.exit(1)


def die_from(error: FatalError) -> NoReturn:
    """Report a :class:`FatalError` the way the user expects to see it.

    A :class:`ProcessFailedError` dumps the captured stdout and stderr of the
    failed command before the error line.
    """
    if isinstance(error, ProcessFailedError):
        print_stream_dump("STDOUT", error.result.stdout)
        print_stream_dump("STDERR", error.result.stderr, to_stderr=True)
    die(error.message)


@contextmanager
def exit_on_fatal() -> Iterator[None]:
    """Terminate the program if the wrapped block raises a :class:`FatalError`.

    Other exceptions (e.g. an ``OSError`` from a missing executable) pass
    through untouched.
    """
    try:
        yield
    except FatalError as e:
        die_from(e)
