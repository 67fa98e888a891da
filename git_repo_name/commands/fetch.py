"""Print the repository name the remote considers authoritative."""

from typing import Optional

import typer

from git_repo_name.commands import exit_with_error, load_config
from git_repo_name.core.errors import GitRepoNameError
from git_repo_name.core.sync import fetch_repo_name


def fetch_command(
    remote: Optional[str] = typer.Option(
        None,
        "--remote", "-r",
        help="Remote to query (defaults to the configured default remote)"
    ),
):
    """
    Show the repository name according to the remote.

    For GitHub remotes the name is looked up through the GitHub API, which
    follows renames and transfers. For filesystem remotes it is the last
    segment of the remote path.

    Examples:
        git-repo-name fetch
        git-repo-name fetch --remote upstream
    """
    config = load_config(remote)

    try:
        name = fetch_repo_name(config)
    except GitRepoNameError as e:
        exit_with_error(e)

    typer.echo(name)
