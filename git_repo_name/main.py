"""Main entry point for git-repo-name CLI."""

import typer
from typing import Optional

from git_repo_name.commands.config import config_command
from git_repo_name.commands.fetch import fetch_command
from git_repo_name.commands.pull import pull_command
from git_repo_name.commands.push import push_command

app = typer.Typer(
    name="git-repo-name",
    help="Keep a repository's directory name and its git remote in sync",
    add_completion=True,
    no_args_is_help=True,
)

# Add subcommands
app.command(name="fetch", help="Show the repository name according to the remote")(fetch_command)
app.command(name="pull", help="Rename the local directory to match the remote")(pull_command)
app.command(name="push", help="Rename the remote to match the local directory")(push_command)
app.command(name="config", help="Show or change a setting")(config_command)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        is_eager=True,
    )
):
    """
    git-repo-name - keep a repository's directory name and its remote in sync.

    - pull: adopt the remote's name (e.g. after a GitHub rename or transfer)
    - push: rename the remote after the local directory
    - fetch: print the remote's name without changing anything

    Supports GitHub remotes and remotes that are filesystem paths.
    """
    if version:
        from git_repo_name import __version__
        typer.echo(f"git-repo-name version {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


if __name__ == "__main__":
    app()
