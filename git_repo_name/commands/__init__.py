"""CLI commands for git-repo-name."""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from git_repo_name.core.config import Config
from git_repo_name.core.errors import GitRepoNameError

err_console = Console(stderr=True)


def load_config(remote: Optional[str] = None) -> Config:
    """Load the persisted config and apply the ``--remote`` override."""
    try:
        config = Config.load()
    except GitRepoNameError as e:
        exit_with_error(e)
    if remote:
        config.remote = remote
    return config


def exit_with_error(error: GitRepoNameError) -> None:
    err_console.print(f"[red]{escape(str(error))}[/red]")
    raise typer.Exit(1)
