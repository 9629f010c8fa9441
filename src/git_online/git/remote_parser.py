"""Parse git remote URLs into hosting-provider descriptors.

Recognized shapes:
- https://<host>/<user>/<repo>.git
- git@<host>:<user>/<repo>.git

The ``.git`` suffix and a trailing slash are optional.
"""

import re
from dataclasses import dataclass
from typing import Callable

import structlog

from git_online.core.exceptions import UnrecognizedRemoteError
from git_online.core.models.remote import HostKind, RemoteDescriptor
from git_online.core.models.request import normalize_hosts

logger = structlog.get_logger(__name__)

GITHUB_HOST = "github.com"

GITHUB_PATTERN = re.compile(
    r"^(?:https://github\.com/|git@github\.com:)"
    r"(?P<user>[^/\s]+)/(?P<repo>[^/\s]+?)(?:\.git)?/?$",
    re.IGNORECASE,
)

# User may span several segments for GitLab subgroups.
GENERIC_PATTERN = re.compile(
    r"^(?:https://(?P<https_host>[^/:@\s]+)/|git@(?P<ssh_host>[^/:@\s]+):)"
    r"(?P<user>[^/\s]+(?:/[^/\s]+)*?)/(?P<repo>[^/\s]+?)(?:\.git)?/?$",
    re.IGNORECASE,
)

DOT_SEGMENTS = frozenset({".", ".."})


@dataclass(frozen=True)
class ProviderMatcher:
    """A URL pattern plus a gate deciding whether the matched host belongs to a provider."""

    kind: HostKind
    pattern: re.Pattern[str]
    accepts_host: Callable[[str], bool]

    def match(self, remote: str) -> RemoteDescriptor | None:
        found = self.pattern.match(remote)
        if not found:
            return None
        groups = found.groupdict()
        host = (groups.get("https_host") or groups.get("ssh_host") or GITHUB_HOST).lower()
        if not self.accepts_host(host):
            return None
        segments = [*groups["user"].split("/"), groups["repo"]]
        if DOT_SEGMENTS.intersection(segments):
            return None
        return RemoteDescriptor(
            kind=self.kind,
            host=host,
            user=groups["user"],
            repo=groups["repo"],
        )


def build_matchers(
    gitlab_hosts: list[str] | tuple[str, ...] = (),
    gitea_hosts: list[str] | tuple[str, ...] = (),
) -> list[ProviderMatcher]:
    """Build the ordered matcher list: GitHub, then GitLab, then Gitea."""
    gitlab = frozenset(normalize_hosts(gitlab_hosts))
    gitea = frozenset(normalize_hosts(gitea_hosts))
    return [
        ProviderMatcher(HostKind.GITHUB, GITHUB_PATTERN, lambda host: host == GITHUB_HOST),
        ProviderMatcher(HostKind.GITLAB, GENERIC_PATTERN, lambda host: host in gitlab),
        ProviderMatcher(HostKind.GITEA, GENERIC_PATTERN, lambda host: host in gitea),
    ]


def parse_remote(
    remote: str,
    gitlab_hosts: list[str] | tuple[str, ...] = (),
    gitea_hosts: list[str] | tuple[str, ...] = (),
) -> RemoteDescriptor:
    """Parse a remote URL, trying each provider in order.

    Raises:
        UnrecognizedRemoteError: If no provider accepts the remote.
    """
    remote = remote.strip()
    for matcher in build_matchers(gitlab_hosts, gitea_hosts):
        descriptor = matcher.match(remote)
        if descriptor is not None:
            logger.debug(
                "Remote matched",
                remote=remote,
                kind=descriptor.kind.value,
                host=descriptor.host,
            )
            return descriptor

    gitlab = list(normalize_hosts(gitlab_hosts))
    gitea = list(normalize_hosts(gitea_hosts))
    raise UnrecognizedRemoteError(
        f"Unrecognized remote '{remote}' "
        f"(GitLab instances: {gitlab}; Gitea instances: {gitea})",
        details={"remote": remote, "gitlab_hosts": gitlab, "gitea_hosts": gitea},
    )
