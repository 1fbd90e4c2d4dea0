"""Repository identity (site, owner, repo) from a git remote URL.

Usage::

    from foxxy.remote import get_remote_info

    info = get_remote_info()
    print(info.site, info.owner, info.repo)
"""

import logging
import re
from enum import Enum

from ._errors import FatalError, RemoteNotFoundError, RemoteUrlError
from ._types import CommandSpec, RemoteInfo
from .failure import die_from
from .process import run_command

logger = logging.getLogger(__name__)

DEFAULT_REMOTE = "origin"
GIT_SUFFIX = ".git"

# user@site:owner/repo
_SSH_URL_RE = re.compile(r"^[^@]+@(?P<site>[^:/]+):(?P<owner>[^/]+)/(?P<repo>.+)$")
# http(s)://site/owner/repo, possibly behind a scheme prefix such as git+
_HTTPS_URL_RE = re.compile(
    r"https?://(?P<site>[^/]+)/(?P<owner>[^/]+)/(?P<repo>.+)$"
)


class RemoteUrlFormat(Enum):
    """Shapes of remote URL that can be decomposed."""

    SSH = "ssh"
    HTTPS = "https"


def classify_remote_url(url: str) -> RemoteUrlFormat | None:
    """Guess the format of *url*: ``@`` means SSH, ``http`` means HTTPS."""
    if "@" in url:
        return RemoteUrlFormat.SSH
    if "http" in url:
        return RemoteUrlFormat.HTTPS
    return None


def _match_info(pattern: re.Pattern[str], url: str) -> RemoteInfo | None:
    match = pattern.search(url)
    if match is None:
        return None
    return RemoteInfo(
        site=match.group("site"),
        owner=match.group("owner"),
        repo=match.group("repo"),
    )


def parse_ssh_url(url: str) -> RemoteInfo | None:
    """Parse ``user@site:owner/repo``, returning None if *url* has another shape."""
    return _match_info(_SSH_URL_RE, url)


def parse_https_url(url: str) -> RemoteInfo | None:
    """Parse ``https://site/owner/repo``, returning None if *url* has another shape."""
    return _match_info(_HTTPS_URL_RE, url)


_URL_PARSERS = {
    RemoteUrlFormat.SSH: parse_ssh_url,
    RemoteUrlFormat.HTTPS: parse_https_url,
}


def parse_remote_url(url: str) -> RemoteInfo:
    """Decompose a remote URL into a :class:`RemoteInfo`.

    Raises:
        RemoteUrlError: If the format is unknown or the URL is malformed.
    """
    url_format = classify_remote_url(url)
    if url_format is None:
        raise RemoteUrlError(url, "Failed to recognize format of remote url")

    info = _URL_PARSERS[url_format](url)
    if info is None:
        raise RemoteUrlError(url, "Failed to extract info from remote url")
    return info


def strip_git_suffix(url: str) -> str:
    """Remove a trailing ``.git`` from *url*, if present."""
    if url.endswith(GIT_SUFFIX):
        return url[: -len(GIT_SUFFIX)]
    return url


def read_remote_info(
    cwd: str | None = None, remote: str = DEFAULT_REMOTE
) -> RemoteInfo:
    """Look up the URL of *remote* and decompose it.

    A URL ending in ``.git`` is rewritten in the repository config without
    the suffix before it is parsed.

    Args:
        cwd: Directory inside the repository (defaults to the current one).
        remote: Name of the git remote.

    Returns:
        The :class:`RemoteInfo` of the remote.

    Raises:
        RemoteNotFoundError: If git cannot report the remote's URL.
        RemoteUrlError: If the URL cannot be decomposed.
    """
    result = run_command(CommandSpec(("git", "remote", "get-url", remote), cwd=cwd))

    raw_url = result.stdout.strip()
    url = strip_git_suffix(raw_url)
    if url != raw_url:
        rewrite = run_command(
            CommandSpec(("git", "remote", "set-url", remote, url), cwd=cwd)
        )
        if not rewrite.success:
            logger.warning(
                "Failed to drop %s suffix from remote %s: %s",
                GIT_SUFFIX,
                remote,
                rewrite.stderr.strip(),
            )

    if not result.success:
        raise RemoteNotFoundError(remote, result.stderr.strip())

    return parse_remote_url(url)


def get_remote_info(
    cwd: str | None = None, remote: str = DEFAULT_REMOTE
) -> RemoteInfo:
    """Like :func:`read_remote_info`, but any failure exits the program."""
    try:
        return read_remote_info(cwd, remote)
    except FatalError as e:
        die_from(e)
