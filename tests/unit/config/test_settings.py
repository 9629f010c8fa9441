"""Tests for application settings."""

import pytest

from git_online.config.settings import Settings, get_settings, split_hosts
from git_online.core.exceptions import ConfigurationError
from git_online.core.models.request import RevisionMode


@pytest.mark.unit
class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.gitlab_host_list == []
        assert settings.gitea_host_list == []
        assert settings.default_branch == "master"
        assert settings.default_revision_mode is RevisionMode.BRANCH

    def test_hosts_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GIT_ONLINE_GITLAB_HOSTS", "gitlab.com, git.corp.example,")
        monkeypatch.setenv("GIT_ONLINE_GITEA_HOSTS", "Gitea.Example.com")
        settings = Settings(_env_file=None)
        assert settings.gitlab_host_list == ["gitlab.com", "git.corp.example"]
        assert settings.gitea_host_list == ["gitea.example.com"]

    def test_invalid_revision_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GIT_ONLINE_REVISION_MODE", "latest")
        settings = Settings(_env_file=None)
        with pytest.raises(ConfigurationError):
            settings.default_revision_mode

    def test_get_settings_cached(self) -> None:
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestSplitHosts:
    """Tests for split_hosts."""

    def test_empty(self) -> None:
        assert split_hosts("") == []

    def test_whitespace(self) -> None:
        assert split_hosts(" a.com ,, b.com ") == ["a.com", "b.com"]
