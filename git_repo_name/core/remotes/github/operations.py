"""Pull and push for remotes hosted on GitHub."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from git_repo_name.core.fs import rename_directory
from git_repo_name.core.git import GitRemote
from git_repo_name.core.remotes.github.client import GitHubClient
from git_repo_name.core.remotes.github.url import format_new_remote_url, parse_github_url
from git_repo_name.core.types import ActionSet

console = Console()


def pull_from_github_remote(
    workdir: Path,
    remote: GitRemote,
    remote_url: str,
    client: GitHubClient,
    dry_run: bool = False,
) -> ActionSet:
    """Adopt the name and owner GitHub reports for the repository.

    The remote URL is rewritten when the owner or name changed upstream;
    the local directory is renamed when its name differs from the
    repository's.
    """
    workdir = Path(workdir)
    owner, remote_repo_name = parse_github_url(remote_url)
    local_directory_name = workdir.name

    repo_info = client.get_repo_info(owner, remote_repo_name)
    resolved_owner = repo_info.owner or owner
    resolved_remote_url = format_new_remote_url(remote_url, resolved_owner, repo_info.name)

    actions = ActionSet(
        rename_directory=repo_info.name if repo_info.name != local_directory_name else None,
        change_remote_url=resolved_remote_url if resolved_remote_url != remote_url else None,
    )

    if actions.is_empty:
        console.print("[yellow]Directory name and remote URL already up-to-date[/yellow]")
        return actions

    if actions.change_remote_url is not None:
        remote.set_url(remote_url, actions.change_remote_url, dry_run)

    if actions.rename_directory is not None:
        rename_directory(workdir, actions.rename_directory, dry_run)

    return actions


def push_to_github_remote(
    workdir: Path,
    remote: GitRemote,
    remote_url: str,
    client: GitHubClient,
    dry_run: bool = False,
) -> ActionSet:
    """Rename the GitHub repository after the local directory.

    Nothing local changes unless GitHub accepted the rename; the new URL is
    built from the owner and name GitHub returns.
    """
    workdir = Path(workdir)
    owner, remote_repo_name = parse_github_url(remote_url)
    local_directory_name = workdir.name

    if remote_repo_name == local_directory_name:
        console.print("[yellow]Repository name already matches the local directory name[/yellow]")
        return ActionSet()

    if dry_run:
        console.print(
            f"[cyan]Would update GitHub repository name from "
            f"'{escape(remote_repo_name)}' to '{escape(local_directory_name)}'[/cyan]"
        )
        new_remote_url = format_new_remote_url(remote_url, owner, local_directory_name)
        actions = ActionSet(
            rename_hosted_repo=local_directory_name,
            change_remote_url=new_remote_url if new_remote_url != remote_url else None,
        )
        if actions.change_remote_url is not None:
            remote.set_url(remote_url, actions.change_remote_url, dry_run=True)
        return actions

    updated_repo = client.update_repo_name(owner, remote_repo_name, local_directory_name)
    console.print(
        f"[green]✓[/green] GitHub repository renamed from "
        f"'{escape(remote_repo_name)}' to '{escape(updated_repo.name)}'"
    )

    new_remote_url = format_new_remote_url(remote_url, updated_repo.owner or owner, updated_repo.name)
    actions = ActionSet(
        rename_hosted_repo=local_directory_name,
        change_remote_url=new_remote_url if new_remote_url != remote_url else None,
    )
    if actions.change_remote_url is not None:
        remote.set_url(remote_url, actions.change_remote_url)

    return actions
