"""Errors raised by the repository name reconciliation engine.

Every error carries the structured fields that describe it; the human
readable text is produced by ``__str__`` so that the CLI layer can print it
as-is.
"""

from typing import Optional, Sequence


class GitRepoNameError(Exception):
    """Base class for every error surfaced to the caller."""


class NotAGitRepoError(GitRepoNameError):
    def __init__(self, path: str = "."):
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return "Error: not a git repository"


class NoRemoteError(GitRepoNameError):
    def __init__(self, remote: str):
        super().__init__(remote)
        self.remote = remote

    def __str__(self) -> str:
        return f"Error: no remote named '{self.remote}' configured"


class ConfigError(GitRepoNameError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Error: {self.message}"


class FilesystemError(GitRepoNameError):
    """A filesystem operation failed.

    ``os_error`` keeps the underlying OS error text so that "not found" and
    "permission denied" stay distinguishable.
    """

    def __init__(self, message: str, path: Optional[str] = None, os_error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.os_error = os_error

    def __str__(self) -> str:
        if self.os_error:
            return f"Filesystem error: {self.message}: {self.os_error}"
        return f"Filesystem error: {self.message}"


class InvalidRemoteUrlError(GitRepoNameError):
    def __init__(self, url: str, kind: str = "GitHub"):
        super().__init__(url)
        self.url = url
        self.kind = kind

    def __str__(self) -> str:
        return f"Invalid {self.kind} URL format: {self.url}"


class GitCommandError(GitRepoNameError):
    def __init__(self, args: Sequence[str], stderr: str = ""):
        super().__init__(args, stderr)
        self.command = list(args)
        self.stderr = stderr

    def __str__(self) -> str:
        detail = self.stderr.strip() or "unknown error"
        return f"Error: '{' '.join(self.command)}' failed: {detail}"


class HostedApiError(GitRepoNameError):
    """The GitHub API answered with an unexpected status or could not be reached.

    ``status`` is ``None`` when no response was received at all.
    """

    def __init__(self, status: Optional[int] = None, detail: str = ""):
        super().__init__(status, detail)
        self.status = status
        self.detail = detail

    def __str__(self) -> str:
        if self.status is None:
            return f"GitHub API error: {self.detail}"
        if self.detail:
            return f"GitHub API error: HTTP {self.status}: {self.detail}"
        return f"GitHub API error: HTTP {self.status}"


class NotFoundError(HostedApiError):
    # GitHub answers 404 both for missing repositories and for private ones
    # requested without sufficient credentials.
    def __init__(self, owner: str, name: str):
        super().__init__(404)
        self.owner = owner
        self.name = name

    def __str__(self) -> str:
        return (
            "GitHub API error: Repository not found. If this is a private repository, "
            "please configure a GitHub token with 'git repo-name config github-token YOUR_TOKEN'"
        )


class PermissionDeniedError(HostedApiError):
    def __init__(self, capability: str, status: int = 403):
        super().__init__(status)
        self.capability = capability

    def __str__(self) -> str:
        return (
            "GitHub API error: Permission denied. Ensure your GitHub token has the "
            f"'{self.capability}' repository permission (write)."
        )


class NameConflictError(HostedApiError):
    def __init__(self, name: str, detail: str = ""):
        super().__init__(422, detail)
        self.name = name

    def __str__(self) -> str:
        return (
            f"GitHub API error: Repository name '{self.name}' was rejected "
            "(it is invalid or already taken)"
        )
