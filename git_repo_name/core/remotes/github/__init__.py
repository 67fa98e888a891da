"""Reconciliation against repositories hosted on GitHub."""

from git_repo_name.core.remotes.github.client import GitHubClient
from git_repo_name.core.remotes.github.operations import pull_from_github_remote, push_to_github_remote
from git_repo_name.core.remotes.github.url import format_new_remote_url, is_github_url, parse_github_url

__all__ = [
    "GitHubClient",
    "format_new_remote_url",
    "is_github_url",
    "parse_github_url",
    "pull_from_github_remote",
    "push_to_github_remote",
]
