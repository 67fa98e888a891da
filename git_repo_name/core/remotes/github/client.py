"""Minimal GitHub REST client for reading and renaming repositories."""

import os
from typing import Dict, Optional

import requests

from git_repo_name.core.errors import HostedApiError, NameConflictError, NotFoundError, PermissionDeniedError
from git_repo_name.core.types import RepoInfo

DEFAULT_API_BASE_URL = "https://api.github.com"
API_BASE_URL_ENV = "GITHUB_API_BASE_URL"
USER_AGENT = "git-repo-name"
DEFAULT_TIMEOUT = 30

# Repository permission a fine-grained token needs to rename a repository.
RENAME_CAPABILITY = "Administration"


def get_api_base_url() -> str:
    return os.environ.get(API_BASE_URL_ENV, DEFAULT_API_BASE_URL).rstrip("/")


def _error_detail(response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or ""
    if isinstance(body, dict):
        return body.get("message", "") or ""
    return ""


class GitHubClient:
    """Talk to the GitHub API on behalf of one user.

    Without a token, reads are sent unauthenticated so that public
    repositories stay reachable; renames will then be rejected by GitHub.
    """

    def __init__(self, token: Optional[str] = None, base_url: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT):
        self.token = token or None
        self.base_url = (base_url or get_api_base_url()).rstrip("/")
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/vnd.github+json",
        }
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    def _repo_url(self, owner: str, name: str) -> str:
        return f"{self.base_url}/repos/{owner}/{name}"

    @staticmethod
    def _parse_repo(response) -> RepoInfo:
        try:
            return RepoInfo.from_json(response.json())
        except (ValueError, KeyError, TypeError) as e:
            raise HostedApiError(response.status_code, f"Unexpected response body: {e}") from e

    def get_repo_info(self, owner: str, name: str) -> RepoInfo:
        """Fetch the authoritative name, full name and clone URL of a repository.

        GitHub follows renames and transfers, so the answer may name a
        different repository than the one requested.

        Raises:
            NotFoundError: missing repository, or a private one without a
                usable token.
            HostedApiError: any other failure.
        """
        try:
            response = requests.get(
                self._repo_url(owner, name),
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise HostedApiError(None, str(e)) from e

        if response.status_code == 404:
            raise NotFoundError(owner, name)
        if not 200 <= response.status_code < 300:
            raise HostedApiError(response.status_code, _error_detail(response))

        return self._parse_repo(response)

    def update_repo_name(self, owner: str, name: str, new_name: str) -> RepoInfo:
        """Rename ``owner/name`` to ``new_name`` and return the updated metadata.

        Not safe to retry blindly: a failure after the request was sent may
        leave the repository renamed.

        Raises:
            PermissionDeniedError: the token may not administer the repository.
            NameConflictError: ``new_name`` is invalid or already taken.
            HostedApiError: any other failure.
        """
        try:
            response = requests.patch(
                self._repo_url(owner, name),
                headers=self._headers(),
                json={"name": new_name},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise HostedApiError(None, str(e)) from e

        if response.status_code in (401, 403):
            raise PermissionDeniedError(RENAME_CAPABILITY, status=response.status_code)
        if response.status_code == 422:
            raise NameConflictError(new_name, _error_detail(response))
        if not 200 <= response.status_code < 300:
            raise HostedApiError(response.status_code, _error_detail(response))

        return self._parse_repo(response)
