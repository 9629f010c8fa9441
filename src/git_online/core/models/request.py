"""Resolution request models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RevisionMode(str, Enum):
    """Which revision a local path is shown at."""

    HEAD = "head"  # current commit SHA
    BRANCH = "branch"  # current branch name
    NONE = "none"


def normalize_hosts(hosts: list[str] | tuple[str, ...] | None) -> tuple[str, ...]:
    """Lowercase host names and drop blanks."""
    return tuple(h.strip().lower() for h in hosts or () if h and h.strip())


class ResolutionRequest(BaseModel):
    """Everything needed to build a web URI for a remote."""

    model_config = ConfigDict(frozen=True)

    remote: str
    path: str = ""
    committish: str = ""
    default_branch: str = ""
    gitlab_hosts: tuple[str, ...] = Field(default_factory=tuple)
    gitea_hosts: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("remote", "committish", "default_branch")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()

    @field_validator("gitlab_hosts", "gitea_hosts", mode="before")
    @classmethod
    def _normalize_hosts(cls, value: list[str] | tuple[str, ...] | None) -> tuple[str, ...]:
        return normalize_hosts(value)


class LocalContext(BaseModel):
    """Repository context discovered for a local path."""

    remote_name: str
    remote_url: str
    tracked_branch: str
    default_branch: str
    relative_path: str = ""
    committish: str = ""
