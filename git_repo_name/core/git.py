"""Thin wrapper around the ``git`` executable for remote URL access."""

import os
import subprocess
from pathlib import Path
from typing import List, Union

from rich.console import Console
from rich.markup import escape

from git_repo_name.core.errors import GitCommandError, InvalidRemoteUrlError, NoRemoteError, NotAGitRepoError
from git_repo_name.core.fs import strip_file_prefix

console = Console()


def run_git(args: List[str], cwd: Union[str, os.PathLike]) -> str:
    """Run ``git`` with ``args`` in ``cwd`` and return its stripped stdout."""
    command = ["git", *args]
    try:
        result = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise GitCommandError(command, f"git executable not found: {e}") from e
    except subprocess.CalledProcessError as e:
        raise GitCommandError(command, e.stderr or "") from e
    return result.stdout.strip()


def discover_repo_root(path: Union[str, os.PathLike] = ".") -> Path:
    """Return the working directory root of the repository containing ``path``."""
    try:
        top = run_git(["rev-parse", "--show-toplevel"], cwd=path)
    except GitCommandError as e:
        raise NotAGitRepoError(os.fspath(path)) from e
    if not top:
        # Bare repositories have no working tree.
        raise NotAGitRepoError(os.fspath(path))
    return Path(top).resolve()


class GitRemote:
    """Read and write the URL of one named remote of a working tree."""

    def __init__(self, workdir: Union[str, os.PathLike], name: str = "origin"):
        self.workdir = Path(workdir)
        self.name = name

    def get_url(self) -> str:
        # Read the literal configured value; `git remote get-url` would apply
        # url.<base>.insteadOf rewrites.
        try:
            url = run_git(["config", "--get", f"remote.{self.name}.url"], cwd=self.workdir)
        except GitCommandError as e:
            raise NoRemoteError(self.name) from e
        if not url:
            raise NoRemoteError(self.name)
        return url

    def set_url(self, current_url: str, new_url: str, dry_run: bool = False) -> None:
        name, old, new = escape(self.name), escape(current_url), escape(new_url)
        if dry_run:
            console.print(f"[cyan]Would change '{name}' remote from '{old}' to '{new}'[/cyan]")
            return

        console.print(f"[cyan]Changing '{name}' remote from '{old}' to '{new}'[/cyan]")
        run_git(["remote", "set-url", self.name, new_url], cwd=self.workdir)

    def __repr__(self) -> str:
        return f"GitRemote(workdir={str(self.workdir)!r}, name={self.name!r})"


def extract_repo_name_from_path(url: str) -> str:
    """Last path segment of a path or ``file://`` URL, without a ``.git`` suffix.

    Examples:
        /path/to/repo.git -> repo
        file:///path/to/repo -> repo
    """
    path = strip_file_prefix(url).rstrip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]
    name = os.path.basename(path)
    if not name or name in (".", ".."):
        raise InvalidRemoteUrlError(url, kind="remote")
    return name
