"""Recognizing, parsing and rebuilding GitHub remote URLs."""

import re
from typing import Tuple

from git_repo_name.core.errors import InvalidRemoteUrlError
from git_repo_name.core.types import UrlFormat, detect_url_format

GITHUB_HOST = "github.com"

# Detection and parsing share the prefix and the owner/name shape so that a
# URL accepted by is_github_url always parses. Only the host is matched
# case-insensitively; the scheme must be spelled the way detect_url_format
# recognizes it.
_HOST = r"(?i:github\.com)"
_PREFIX = rf"(?:https://(?i:www\.)?{_HOST}/|git@{_HOST}:|ssh://git@{_HOST}/|git://{_HOST}/)"
_GITHUB_URL_RE = re.compile(rf"^{_PREFIX}[^/\s]+/[^/\s]+?(?:\.git)?$")
_GITHUB_URL_PARTS_RE = re.compile(rf"^{_PREFIX}([^/\s]+)/([^/\s]+?)(?:\.git)?$")


def is_github_url(url: str) -> bool:
    return _GITHUB_URL_RE.match(url) is not None


def parse_github_url(url: str) -> Tuple[str, str]:
    """Split a GitHub remote URL into ``(owner, repo_name)``.

    >>> parse_github_url("git@github.com:owner/repo.git")
    ('owner', 'repo')
    """
    match = _GITHUB_URL_PARTS_RE.match(url)
    if match is None:
        raise InvalidRemoteUrlError(url)
    return match.group(1), match.group(2)


def format_new_remote_url(original_remote_url: str, owner: str, repo_name: str) -> str:
    """Point ``original_remote_url`` at ``owner/repo_name``, keeping its scheme.

    ``http://`` URLs come back as ``https://`` and ``.git`` is always appended.
    """
    url_format = detect_url_format(original_remote_url)

    if url_format is UrlFormat.SSH_SHORTHAND:
        return f"git@{GITHUB_HOST}:{owner}/{repo_name}.git"
    if url_format is UrlFormat.SSH_URL:
        return f"ssh://git@{GITHUB_HOST}/{owner}/{repo_name}.git"
    if url_format is UrlFormat.GIT_PROTOCOL:
        return f"git://{GITHUB_HOST}/{owner}/{repo_name}.git"
    return f"https://{GITHUB_HOST}/{owner}/{repo_name}.git"
