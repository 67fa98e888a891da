"""Reconciliation against remotes that are plain filesystem paths."""

from git_repo_name.core.remotes.file.operations import pull_from_file_remote, push_to_file_remote
from git_repo_name.core.remotes.file.url import format_new_remote_url

__all__ = ["format_new_remote_url", "pull_from_file_remote", "push_to_file_remote"]
