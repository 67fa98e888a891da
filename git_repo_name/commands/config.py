"""Read and write git-repo-name settings."""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from git_repo_name.commands import exit_with_error, load_config
from git_repo_name.core.errors import ConfigError, GitRepoNameError

console = Console()

VALID_KEYS = ("github-token", "default-remote")


def config_command(
    key: str = typer.Argument(
        ...,
        help="Setting to read or write: github-token or default-remote"
    ),
    value: Optional[str] = typer.Argument(
        None,
        help="New value. If omitted, the current value is printed"
    ),
):
    """
    Show or change a setting.

    Examples:
        git-repo-name config github-token ghp_xxx
        git-repo-name config default-remote upstream
        git-repo-name config default-remote
    """
    config = load_config()

    try:
        if key == "github-token":
            if value is None:
                token = config.get_github_token()
                if token is None:
                    raise ConfigError("No GitHub token found in configuration")
                typer.echo(token)
            else:
                config.set_github_token(value)
                console.print("[green]✓[/green] GitHub token configured successfully")
        elif key == "default-remote":
            if value is None:
                typer.echo(config.default_remote)
            else:
                config.set_default_remote(value)
                console.print(f"[green]✓[/green] Default remote set to {escape(config.default_remote)}")
        else:
            raise ConfigError(f"Unknown config key: {key}. Valid keys: {', '.join(VALID_KEYS)}")
    except GitRepoNameError as e:
        exit_with_error(e)
