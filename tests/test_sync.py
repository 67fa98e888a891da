"""
Tests for backend selection, plus end-to-end runs against real git checkouts.
"""

import shutil
import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from git_repo_name.core import sync
from git_repo_name.core.config import Config
from git_repo_name.core.errors import NoRemoteError
from git_repo_name.core.git import GitRemote
from git_repo_name.core.remotes.github.client import GitHubClient
from git_repo_name.core.types import ActionSet, RepoInfo

WORKDIR = Path("/work/repo")


@pytest.fixture
def client():
    return Mock(spec=GitHubClient)


def opened(url):
    remote = Mock(spec=GitRemote)
    return patch.object(sync, 'open_remote', return_value=(WORKDIR, remote, url)), remote


class TestDispatch:
    def test_pull_github(self, client):
        opener, remote = opened("https://github.com/owner/repo.git")
        with opener, patch.object(sync, 'pull_from_github_remote', return_value=ActionSet()) as backend:
            sync.pull(Config(), dry_run=True, client=client)

        backend.assert_called_once_with(WORKDIR, remote, "https://github.com/owner/repo.git", client, True)

    def test_pull_file(self):
        opener, remote = opened("../repo.git")
        with opener, patch.object(sync, 'pull_from_file_remote', return_value=ActionSet()) as backend:
            sync.pull(Config())

        backend.assert_called_once_with(WORKDIR, remote, "../repo.git", False)

    def test_push_github(self, client):
        opener, remote = opened("git@github.com:owner/repo.git")
        with opener, patch.object(sync, 'push_to_github_remote', return_value=ActionSet()) as backend:
            sync.push(Config(), client=client)

        backend.assert_called_once_with(WORKDIR, remote, "git@github.com:owner/repo.git", client, False)

    def test_push_file(self):
        opener, remote = opened("file:///srv/repo.git")
        with opener, patch.object(sync, 'push_to_file_remote', return_value=ActionSet()) as backend:
            sync.push(Config(), dry_run=True)

        backend.assert_called_once_with(WORKDIR, remote, "file:///srv/repo.git", True)

    def test_non_github_host_is_not_hosted(self):
        opener, remote = opened("https://gitlab.com/owner/repo.git")
        with opener, patch.object(sync, 'pull_from_file_remote', return_value=ActionSet()) as backend:
            sync.pull(Config())

        backend.assert_called_once()

    def test_client_built_from_config_token(self):
        client = sync.make_client(Config(github_token="mock-token"))

        assert client.token == "mock-token"


class TestFetchRepoName:
    def test_github_follows_rename(self, client):
        client.get_repo_info.return_value = RepoInfo(
            "new-name", "owner/new-name", "https://github.com/owner/new-name.git"
        )
        opener, _ = opened("https://github.com/owner/old-name.git")

        with opener:
            assert sync.fetch_repo_name(Config(), client=client) == "new-name"

        client.get_repo_info.assert_called_once_with("owner", "old-name")

    @pytest.mark.parametrize("url", ["../repo.git", "/srv/git/repo.git", "file:///srv/git/repo"])
    def test_file_remote_uses_last_segment(self, url):
        opener, _ = opened(url)

        with opener:
            assert sync.fetch_repo_name(Config()) == "repo"


# ============================================================================
# END-TO-END (real git)
# ============================================================================

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


@pytest.fixture
def quiet():
    with patch('git_repo_name.core.fs.console'), \
            patch('git_repo_name.core.git.console'), \
            patch('git_repo_name.core.remotes.file.operations.console'):
        yield


def git(*args, cwd=None):
    subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True)


def make_checkout(root, bare_name, local_name, url):
    git("init", "-q", "--bare", str(root / bare_name))
    local = root / local_name
    git("init", "-q", str(local))
    git("remote", "add", "origin", url, cwd=local)
    return local


@requires_git
class TestEndToEnd:
    def test_pull_renames_checkout_and_keeps_relative_url(self, tmp_path, quiet):
        root = tmp_path.resolve()
        local = make_checkout(root, "new-name.git", "old-name", "../new-name.git")

        actions = sync.pull(Config(), path=local)

        assert actions == ActionSet(rename_directory="new-name")
        renamed = root / "new-name"
        assert renamed.is_dir()
        assert not local.exists()
        assert GitRemote(renamed, "origin").get_url() == "../new-name.git"

        assert sync.pull(Config(), path=renamed).is_empty

    def test_pull_dry_run_changes_nothing(self, tmp_path, quiet):
        root = tmp_path.resolve()
        local = make_checkout(root, "new-name.git", "old-name", f"file://{root}/./new-name.git")

        actions = sync.pull(Config(), dry_run=True, path=local)

        assert actions == ActionSet(rename_directory="new-name", change_remote_url=f"file://{root / 'new-name.git'}")
        assert local.is_dir()
        assert GitRemote(local, "origin").get_url() == f"file://{root}/./new-name.git"

    def test_push_renames_bare_repository(self, tmp_path, quiet):
        root = tmp_path.resolve()
        local = make_checkout(root, "remote-name.git", "local-name", str(root / "remote-name.git"))

        sync.push(Config(), path=local)

        assert (root / "local-name.git").is_dir()
        assert not (root / "remote-name.git").exists()
        assert GitRemote(local, "origin").get_url() == str(root / "local-name.git")

    def test_remote_override(self, tmp_path, quiet):
        root = tmp_path.resolve()
        local = make_checkout(root, "repo.git", "repo", "../repo.git")

        with pytest.raises(NoRemoteError) as exc_info:
            sync.pull(Config(remote="upstream"), path=local)

        assert exc_info.value.remote == "upstream"
