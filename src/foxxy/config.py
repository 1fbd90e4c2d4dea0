"""Config file discovery and parsing.

A logical config name (e.g. ``foxxy``) is resolved against a directory by
trying ``<name>.json`` and then ``<name>.toml``. The first candidate that
exists is parsed and returned; files are never merged.
"""

import json
import logging
import os
import tomllib
from collections.abc import Callable
from typing import Any

from ._errors import ConfigNotFoundError, ConfigParseError, FatalError
from .failure import die_from

logger = logging.getLogger(__name__)

# extension → (parser, error raised by the parser), in priority order
_PARSERS: dict[str, tuple[Callable[[str], Any], type[ValueError]]] = {
    "json": (json.loads, json.JSONDecodeError),
    "toml": (tomllib.loads, tomllib.TOMLDecodeError),
}

CONFIG_EXTENSIONS: tuple[str, ...] = tuple(_PARSERS)


def _read_text(path: str) -> str | None:
    """Return the contents of *path*, or None if it does not exist.

    Raises:
        ConfigParseError: If the file is not valid UTF-8.
    """
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return None
    except UnicodeDecodeError as e:
        raise ConfigParseError(path, str(e)) from e


def _parse(path: str, text: str, extension: str) -> dict[str, Any]:
    parser, error_type = _PARSERS[extension]
    try:
        data = parser(text)
    except error_type as e:
        raise ConfigParseError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ConfigParseError(
            path, f"expected a mapping at the top level, got {type(data).__name__}"
        )
    return data


def config_candidates(directory: str, name: str) -> list[str]:
    """Paths that :func:`read_config` tries, in order."""
    return [os.path.join(directory, f"{name}.{ext}") for ext in CONFIG_EXTENSIONS]


def read_config(directory: str, name: str) -> dict[str, Any]:
    """Read the config named *name* from *directory*.

    Args:
        directory: Directory holding the config file.
        name: Logical config name (file name without extension).

    Returns:
        The parsed contents of the first candidate that exists.

    Raises:
        ConfigParseError: If the first existing candidate cannot be parsed.
        ConfigNotFoundError: If no candidate exists.
        OSError: If a candidate exists but cannot be read.
    """
    for path, extension in zip(config_candidates(directory, name), CONFIG_EXTENSIONS):
        text = _read_text(path)
        if text is None:
            logger.debug("Config candidate not found: %s", path)
            continue
        logger.debug("Loading config from %s", path)
        return _parse(path, text, extension)

    raise ConfigNotFoundError(directory, name)


def load_config(directory: str, name: str) -> dict[str, Any]:
    """Like :func:`read_config`, but a missing or broken config exits the program."""
    try:
        return read_config(directory, name)
    except FatalError as e:
        die_from(e)
