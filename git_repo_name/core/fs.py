"""Filesystem primitives: path canonicalization, directory renames, permissions."""

import os
import stat
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.markup import escape

from git_repo_name.core.errors import FilesystemError
from git_repo_name.core.types import FILE_PREFIX

console = Console()

PathLike = Union[str, os.PathLike]


def strip_file_prefix(url: str) -> str:
    if url.startswith(FILE_PREFIX):
        return url[len(FILE_PREFIX):]
    return url


def resolve_canonical_path(path: PathLike, base: Optional[PathLike] = None) -> str:
    """Resolve a filesystem remote to ``file://<absolute, symlink-free path>``.

    Accepts a bare path or a ``file://`` URL. Relative paths are resolved
    against ``base``, or against the process working directory when no base
    is given.

    Raises:
        FilesystemError: the path does not exist or cannot be resolved.
    """
    raw = strip_file_prefix(os.fspath(path))
    target = Path(raw)
    if not target.is_absolute() and base is not None:
        target = Path(base) / target

    try:
        canonical = target.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise FilesystemError("Failed to resolve path", path=raw, os_error=str(e)) from e

    return f"{FILE_PREFIX}{canonical}"


def rename_directory(current_path: PathLike, new_name: str, dry_run: bool = False) -> Path:
    """Rename a directory to ``new_name``, keeping it in the same parent.

    The from/to pair is reported whether or not ``dry_run`` is set; nothing is
    touched on a dry run.

    Returns:
        The path the directory has (or would have) after the rename.

    Raises:
        FilesystemError: the source is missing, the target already exists, or
            the rename itself fails.
    """
    current = Path(current_path)
    new_path = current.parent / new_name

    current_display = str(current).rstrip("/")
    new_display = str(new_path).rstrip("/")

    if dry_run:
        console.print(f"[cyan]Would rename directory from '{escape(current_display)}' to '{escape(new_display)}'[/cyan]")
        return new_path

    console.print(f"[cyan]Renaming directory from '{escape(current_display)}' to '{escape(new_display)}'...[/cyan]")

    if not current.exists():
        raise FilesystemError(f"Directory does not exist: {current_display}", path=current_display)

    # A case-only rename on a case-insensitive filesystem sees the target as existing.
    if new_path.exists() and not os.path.samefile(current, new_path):
        raise FilesystemError(f"Target path '{new_display}' already exists", path=new_display)

    try:
        os.rename(current, new_path)
    except OSError as e:
        raise FilesystemError("Failed to rename directory", path=current_display, os_error=str(e)) from e

    console.print("[green]✓[/green] Directory renamed successfully")
    return new_path


def set_secure_permissions(path: PathLike) -> None:
    """Restrict a file to owner read/write (0600)."""
    try:
        os.chmod(path, stat.S_IRUSR | stat.S_IWUSR)
    except OSError as e:
        raise FilesystemError("Failed to set file permissions", path=os.fspath(path), os_error=str(e)) from e
