"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from git_online.core.exceptions import ConfigurationError
from git_online.core.models.request import RevisionMode, normalize_hosts


def split_hosts(value: str) -> list[str]:
    """Split a comma-separated host list."""
    return list(normalize_hosts(value.split(",")))


class Settings(BaseSettings):
    """Application settings loaded from GIT_ONLINE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GIT_ONLINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    json_logs: bool = False

    # Self-hosted instances, comma-separated (e.g. "gitlab.example.com,git.corp")
    gitlab_hosts: str = ""
    gitea_hosts: str = ""

    # Defaults for the CLI
    default_branch: str = "master"
    revision_mode: str = "branch"

    @property
    def gitlab_host_list(self) -> list[str]:
        return split_hosts(self.gitlab_hosts)

    @property
    def gitea_host_list(self) -> list[str]:
        return split_hosts(self.gitea_hosts)

    @property
    def default_revision_mode(self) -> RevisionMode:
        try:
            return RevisionMode(self.revision_mode.strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown revision mode in settings: {self.revision_mode!r}",
                details={"revision_mode": self.revision_mode},
            ) from None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
