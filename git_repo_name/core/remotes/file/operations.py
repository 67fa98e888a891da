"""Pull and push for remotes that point at a directory on disk."""

from pathlib import Path

from rich.console import Console

from git_repo_name.core.errors import FilesystemError
from git_repo_name.core.fs import rename_directory, resolve_canonical_path, strip_file_prefix
from git_repo_name.core.git import GitRemote, extract_repo_name_from_path
from git_repo_name.core.remotes.file.url import format_new_remote_url
from git_repo_name.core.types import FILE_PREFIX, ActionSet, FileIdentity

console = Console()


def resolve_file_identity(remote_url: str, workdir: Path) -> FileIdentity:
    return FileIdentity(resolve_canonical_path(remote_url, base=workdir))


def pull_from_file_remote(workdir: Path, remote: GitRemote, remote_url: str, dry_run: bool = False) -> ActionSet:
    """Adopt the remote directory's name for the local checkout.

    The expected local name is the last segment of the remote's canonical
    path without ``.git``. The remote URL is rewritten only when its
    canonical form differs from what is configured, keeping its shape.
    """
    workdir = Path(workdir)
    local_directory_name = workdir.name

    identity = resolve_file_identity(remote_url, workdir)
    resolved_repo_name = extract_repo_name_from_path(identity.canonical_path)
    resolved_remote_url = format_new_remote_url(remote_url, identity.canonical_path, cwd=workdir)

    actions = ActionSet(
        rename_directory=resolved_repo_name if resolved_repo_name != local_directory_name else None,
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


def push_to_file_remote(workdir: Path, remote: GitRemote, remote_url: str, dry_run: bool = False) -> ActionSet:
    """Rename the remote's directory on disk after the local checkout.

    The remote directory keeps its ``.git`` suffix if it had one. Once the
    directory is renamed the remote URL is pointed at the new location.
    """
    workdir = Path(workdir)
    local_directory_name = workdir.name

    remote_path = Path(strip_file_prefix(remote_url))
    if not remote_path.is_absolute():
        remote_path = workdir / remote_path
    if not remote_path.exists():
        raise FilesystemError(f"Remote repository does not exist: {remote_url}", path=str(remote_path))

    identity = resolve_file_identity(remote_url, workdir)
    remote_repo_name = extract_repo_name_from_path(identity.canonical_path)

    if remote_repo_name == local_directory_name:
        console.print("[yellow]Remote repository name already matches the local directory name[/yellow]")
        return ActionSet()

    old_repo_path = Path(identity.path)
    suffix = ".git" if old_repo_path.name.endswith(".git") else ""
    new_directory_name = f"{local_directory_name}{suffix}"
    new_canonical_path = f"{FILE_PREFIX}{old_repo_path.parent / new_directory_name}"
    new_remote_url = format_new_remote_url(remote_url, new_canonical_path, cwd=workdir)

    actions = ActionSet(
        rename_directory=new_directory_name,
        change_remote_url=new_remote_url if new_remote_url != remote_url else None,
    )

    # TODO: roll the directory rename back when the remote URL update fails.
    rename_directory(old_repo_path, new_directory_name, dry_run)
    if actions.change_remote_url is not None:
        remote.set_url(remote_url, actions.change_remote_url, dry_run)

    return actions
