"""Impose the local directory name onto the remote repository."""

from typing import Optional

import typer
from rich.console import Console

from git_repo_name.commands import exit_with_error, load_config
from git_repo_name.core.errors import GitRepoNameError
from git_repo_name.core.sync import push

console = Console()


def push_command(
    remote: Optional[str] = typer.Option(
        None,
        "--remote", "-r",
        help="Remote to rename (defaults to the configured default remote)"
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run", "-n",
        help="Preview changes without making them"
    ),
):
    """
    Rename the remote repository after the local directory.

    GitHub repositories are renamed through the API (the token needs the
    'Administration' permission); filesystem remotes are renamed on disk.
    The remote URL is updated afterwards.

    Examples:
        git-repo-name push
        git-repo-name push --dry-run
    """
    config = load_config(remote)

    try:
        push(config, dry_run=dry_run)
    except GitRepoNameError as e:
        exit_with_error(e)

    if dry_run:
        console.print("[dim]Dry run - no changes were made[/dim]")
