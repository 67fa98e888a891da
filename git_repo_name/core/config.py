"""Persisted settings: GitHub token and default remote.

The file lives at ``$XDG_CONFIG_HOME/git-repo-name/config`` (falling back to
``~/.config``) and is written with owner-only permissions because it may hold
a token::

    [core]
    default_remote = origin

    [github]
    token = ghp_...
"""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from git_repo_name.core.errors import ConfigError
from git_repo_name.core.fs import set_secure_permissions

APP_NAME = "git-repo-name"
DEFAULT_REMOTE = "origin"


def get_config_dir() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    return get_config_dir() / "config"


@dataclass
class Config:
    """Settings handed down to the reconcilers and the GitHub client.

    ``remote`` is a per-invocation override (``--remote``) and is never
    persisted.
    """

    github_token: Optional[str] = None
    default_remote: str = DEFAULT_REMOTE
    remote: Optional[str] = None
    path: Optional[Path] = None

    @property
    def active_remote(self) -> str:
        return self.remote or self.default_remote

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Read the config file; a missing file yields the defaults."""
        path = Path(path) if path else get_config_path()
        config = cls(path=path)

        if not path.exists():
            return config

        parser = configparser.ConfigParser()
        try:
            with open(path, "r") as f:
                parser.read_file(f)
        except (OSError, configparser.Error) as e:
            raise ConfigError(f"Failed to read config file: {e}") from e

        token = parser.get("github", "token", fallback="").strip()
        config.github_token = token or None
        config.default_remote = parser.get("core", "default_remote", fallback=DEFAULT_REMOTE).strip() or DEFAULT_REMOTE
        return config

    def save(self) -> None:
        path = self.path or get_config_path()
        parser = configparser.ConfigParser()
        parser["core"] = {"default_remote": self.default_remote}
        if self.github_token:
            parser["github"] = {"token": self.github_token}

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w") as f:
                parser.write(f)
        except OSError as e:
            raise ConfigError(f"Failed to write config file: {e}") from e

        set_secure_permissions(path)
        self.path = path

    def get_github_token(self) -> Optional[str]:
        return self.github_token

    def set_github_token(self, token: str) -> None:
        self.github_token = token.strip() or None
        self.save()

    def set_default_remote(self, remote: str) -> None:
        remote = remote.strip()
        if not remote:
            raise ConfigError("Default remote name cannot be empty")
        self.default_remote = remote
        self.save()
