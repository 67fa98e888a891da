"""
Tests for the persisted configuration.
"""

import stat
import sys

import pytest

from git_repo_name.core import config as config_module
from git_repo_name.core.config import Config
from git_repo_name.core.errors import ConfigError


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at a temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".config"))
    return tmp_path / ".config" / "git-repo-name"


class TestConfigLocation:
    def test_xdg_config_home(self, config_home):
        assert config_module.get_config_path() == config_home / "config"

    def test_home_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(config_module.Path, "home", classmethod(lambda cls: tmp_path))

        assert config_module.get_config_dir() == tmp_path / ".config" / "git-repo-name"


class TestConfigLoad:
    def test_missing_file_gives_defaults(self, config_home):
        config = Config.load()

        assert config.github_token is None
        assert config.default_remote == "origin"
        assert config.active_remote == "origin"
        assert not (config_home / "config").exists()

    def test_reads_values(self, config_home):
        config_home.mkdir(parents=True)
        (config_home / "config").write_text(
            "[core]\ndefault_remote = upstream\n\n[github]\ntoken = mock-token\n"
        )

        config = Config.load()

        assert config.github_token == "mock-token"
        assert config.default_remote == "upstream"

    def test_empty_token_is_absent(self, config_home):
        config_home.mkdir(parents=True)
        (config_home / "config").write_text("[github]\ntoken =\n")

        assert Config.load().get_github_token() is None

    def test_malformed_file(self, config_home):
        config_home.mkdir(parents=True)
        (config_home / "config").write_text("this is not ini\n")

        with pytest.raises(ConfigError) as exc_info:
            Config.load()

        assert "Failed to read config file" in str(exc_info.value)


class TestConfigSave:
    def test_set_github_token_persists(self, config_home):
        config = Config.load()
        config.set_github_token("test-token")

        assert Config.load().github_token == "test-token"

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions only")
    def test_file_is_private(self, config_home):
        Config.load().set_github_token("test-token")

        mode = stat.S_IMODE((config_home / "config").stat().st_mode)
        assert mode == 0o600

    def test_set_default_remote_keeps_token(self, config_home):
        config = Config.load()
        config.set_github_token("test-token")
        config.set_default_remote("upstream")

        reloaded = Config.load()
        assert reloaded.default_remote == "upstream"
        assert reloaded.github_token == "test-token"

    def test_empty_default_remote_rejected(self, config_home):
        with pytest.raises(ConfigError):
            Config.load().set_default_remote("  ")

    def test_remote_override_not_persisted(self, config_home):
        config = Config.load()
        config.remote = "fork"
        assert config.active_remote == "fork"

        config.set_default_remote("upstream")

        reloaded = Config.load()
        assert reloaded.remote is None
        assert reloaded.active_remote == "upstream"
