"""Remote and hosting-provider models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class HostKind(str, Enum):
    """Hosting provider family."""

    GITHUB = "github"
    GITLAB = "gitlab"
    GITEA = "gitea"


class HostProfile(BaseModel):
    """How a provider lays out revision and path segments in its web URIs."""

    model_config = ConfigDict(frozen=True)

    kind: HostKind
    revision_prefix: str

    def repository_root(self, remote: "RemoteDescriptor") -> str:
        return f"https://{remote.host}/{remote.user}/{remote.repo}"


class RemoteDescriptor(BaseModel):
    """Host, owner and repository name parsed from a remote URL."""

    model_config = ConfigDict(frozen=True)

    kind: HostKind
    host: str
    user: str
    repo: str

    @property
    def profile(self) -> HostProfile:
        return HOST_PROFILES[self.kind]


HOST_PROFILES: dict[HostKind, HostProfile] = {
    HostKind.GITHUB: HostProfile(kind=HostKind.GITHUB, revision_prefix="/tree/"),
    HostKind.GITLAB: HostProfile(kind=HostKind.GITLAB, revision_prefix="/-/tree/"),
    HostKind.GITEA: HostProfile(kind=HostKind.GITEA, revision_prefix="/-/src/"),
}
