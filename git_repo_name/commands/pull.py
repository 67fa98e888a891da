"""Adopt the remote repository's name locally."""

from typing import Optional

import typer
from rich.console import Console

from git_repo_name.commands import exit_with_error, load_config
from git_repo_name.core.errors import GitRepoNameError
from git_repo_name.core.sync import open_remote, pull_remote

console = Console()

# Read by shell/git-repo-name.sh to follow a renamed working directory.
DIR_CHANGE_MARKER = "GRN_DIR_CHANGE"


def pull_command(
    remote: Optional[str] = typer.Option(
        None,
        "--remote", "-r",
        help="Remote to reconcile with (defaults to the configured default remote)"
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run", "-n",
        help="Preview changes without making them"
    ),
):
    """
    Rename the local directory and update the remote URL to match the remote.

    Useful after a repository was renamed or transferred on GitHub, or after
    a filesystem remote was moved.

    Examples:
        git-repo-name pull
        git-repo-name pull --dry-run
        git-repo-name pull -r upstream
    """
    config = load_config(remote)

    try:
        workdir, git_remote, remote_url = open_remote(config)
        actions = pull_remote(config, workdir, git_remote, remote_url, dry_run=dry_run)
    except GitRepoNameError as e:
        exit_with_error(e)

    if dry_run:
        console.print("[dim]Dry run - no changes were made[/dim]")
        return

    if actions.rename_directory is not None:
        new_workdir = workdir.parent / actions.rename_directory
        typer.echo(f"{DIR_CHANGE_MARKER}:{workdir}:{new_workdir}")
