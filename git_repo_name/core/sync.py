"""Entry points that pick the backend matching the configured remote."""

import os
from pathlib import Path
from typing import Optional, Tuple, Union

from git_repo_name.core.config import Config
from git_repo_name.core.git import GitRemote, discover_repo_root, extract_repo_name_from_path
from git_repo_name.core.remotes.file import pull_from_file_remote, push_to_file_remote
from git_repo_name.core.remotes.github import (
    GitHubClient,
    is_github_url,
    parse_github_url,
    pull_from_github_remote,
    push_to_github_remote,
)
from git_repo_name.core.types import ActionSet


def open_remote(config: Config, path: Union[str, os.PathLike] = ".") -> Tuple[Path, GitRemote, str]:
    """Locate the working tree containing ``path`` and read its active remote URL."""
    workdir = discover_repo_root(path)
    remote = GitRemote(workdir, config.active_remote)
    return workdir, remote, remote.get_url()


def make_client(config: Config) -> GitHubClient:
    return GitHubClient(token=config.get_github_token())


def pull(
    config: Config,
    dry_run: bool = False,
    path: Union[str, os.PathLike] = ".",
    client: Optional[GitHubClient] = None,
) -> ActionSet:
    """Rename the local directory and/or rewrite the remote URL to match the remote."""
    workdir, remote, remote_url = open_remote(config, path)
    return pull_remote(config, workdir, remote, remote_url, dry_run=dry_run, client=client)


def pull_remote(
    config: Config,
    workdir: Path,
    remote: GitRemote,
    remote_url: str,
    dry_run: bool = False,
    client: Optional[GitHubClient] = None,
) -> ActionSet:
    """Same as ``pull`` for a remote already opened with ``open_remote``."""
    if is_github_url(remote_url):
        return pull_from_github_remote(workdir, remote, remote_url, client or make_client(config), dry_run)
    return pull_from_file_remote(workdir, remote, remote_url, dry_run)


def push(
    config: Config,
    dry_run: bool = False,
    path: Union[str, os.PathLike] = ".",
    client: Optional[GitHubClient] = None,
) -> ActionSet:
    """Rename the remote repository to match the local directory name."""
    workdir, remote, remote_url = open_remote(config, path)

    if is_github_url(remote_url):
        return push_to_github_remote(workdir, remote, remote_url, client or make_client(config), dry_run)
    return push_to_file_remote(workdir, remote, remote_url, dry_run)


def fetch_repo_name(
    config: Config,
    path: Union[str, os.PathLike] = ".",
    client: Optional[GitHubClient] = None,
) -> str:
    """Return the repository name the remote considers authoritative."""
    _, _, remote_url = open_remote(config, path)

    if is_github_url(remote_url):
        owner, name = parse_github_url(remote_url)
        return (client or make_client(config)).get_repo_info(owner, name).name
    return extract_repo_name_from_path(remote_url)
