"""Value types shared by the reconciliation backends."""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

FILE_PREFIX = "file://"


class UrlFormat(Enum):
    """Addressing scheme of a configured remote URL.

    Rewrites keep the scheme of the URL they replace.
    """

    RELATIVE = "relative"
    FILE_PREFIXED_ABSOLUTE = "file-prefixed-absolute"
    BARE_ABSOLUTE = "bare-absolute"
    SSH_SHORTHAND = "ssh-shorthand"
    SSH_URL = "ssh-url"
    GIT_PROTOCOL = "git-protocol"
    HTTPS = "https"


def detect_url_format(url: str) -> UrlFormat:
    """Infer the format tag of a remote URL from its prefix."""
    url = url.strip()
    if url.startswith("git@"):
        return UrlFormat.SSH_SHORTHAND
    if url.startswith("ssh://"):
        return UrlFormat.SSH_URL
    if url.startswith("git://"):
        return UrlFormat.GIT_PROTOCOL
    if url.startswith(("https://", "http://")):
        return UrlFormat.HTTPS
    if url.startswith(FILE_PREFIX):
        return UrlFormat.FILE_PREFIXED_ABSOLUTE
    if os.path.isabs(url):
        return UrlFormat.BARE_ABSOLUTE
    return UrlFormat.RELATIVE


@dataclass(frozen=True)
class FileIdentity:
    """Resolved identity of a filesystem remote: ``file://<canonical path>``."""

    canonical_path: str

    @property
    def path(self) -> str:
        return self.canonical_path[len(FILE_PREFIX):]


@dataclass(frozen=True)
class RepoInfo:
    """Repository metadata as reported by GitHub."""

    name: str
    full_name: str
    clone_url: str

    @property
    def owner(self) -> str:
        return self.full_name.split("/", 1)[0]

    @classmethod
    def from_json(cls, data: dict) -> "RepoInfo":
        return cls(
            name=data["name"],
            full_name=data["full_name"],
            clone_url=data.get("clone_url", ""),
        )


@dataclass(frozen=True)
class ActionSet:
    """Corrective actions computed for one reconciliation call.

    ``rename_directory`` is the new base name of the directory being renamed
    (the local checkout on pull, the remote's bare directory on a file push),
    ``change_remote_url`` the replacement URL and ``rename_hosted_repo`` the
    new name requested from GitHub on a hosted push.
    """

    rename_directory: Optional[str] = None
    change_remote_url: Optional[str] = None
    rename_hosted_repo: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return (
            self.rename_directory is None
            and self.change_remote_url is None
            and self.rename_hosted_repo is None
        )
