"""Build web URIs for repositories, revisions and paths."""

from urllib.parse import quote

import structlog

from git_online.core.exceptions import InvalidPathError
from git_online.core.models.remote import RemoteDescriptor
from git_online.core.models.request import ResolutionRequest
from git_online.git.remote_parser import parse_remote

logger = structlog.get_logger(__name__)


def normalize_path(path: str) -> str:
    """Normalize a repository-relative path to forward-slash form.

    Backslashes become slashes, empty and ``.`` segments are dropped.
    A ``..`` segment would escape the repository and is rejected.
    """
    segments = []
    for segment in path.replace("\\", "/").split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            raise InvalidPathError(
                f"Path may not contain '..' segments: {path}",
                details={"path": path},
            )
        segments.append(segment)
    return "/".join(segments)


def build_uri(
    remote: RemoteDescriptor,
    path: str = "",
    committish: str = "",
    default_branch: str = "",
) -> str:
    """Build the provider-specific web URI.

    A path without a committish is shown at the default branch. With
    neither, the bare repository root is returned.
    """
    path = normalize_path(path)
    committish = committish.strip()
    if path and not committish:
        committish = default_branch.strip()
        if not committish:
            raise InvalidPathError(
                f"Path '{path}' needs a committish or a default branch",
                details={"path": path},
            )

    profile = remote.profile
    uri = profile.repository_root(remote)
    if committish:
        # Slashes in branch names stay unescaped.
        uri += f"{profile.revision_prefix}{quote(committish, safe='/')}"
    if path:
        uri += "/" + "/".join(quote(segment, safe="") for segment in path.split("/"))
    return uri


def resolve_request(request: ResolutionRequest) -> str:
    """Parse the request's remote and build its URI."""
    remote = parse_remote(request.remote, request.gitlab_hosts, request.gitea_hosts)
    uri = build_uri(remote, request.path, request.committish, request.default_branch)
    logger.debug("Resolved URI", remote=request.remote, uri=uri)
    return uri


def resolve_uri(
    remote: str,
    path: str = "",
    committish: str = "",
    default_branch: str = "",
    gitlab_hosts: list[str] | tuple[str, ...] = (),
    gitea_hosts: list[str] | tuple[str, ...] = (),
) -> str:
    """Resolve a remote URL plus optional path and committish to a web URI.

    Raises:
        UnrecognizedRemoteError: If the remote matches no known provider.
        InvalidPathError: If the path is unusable.
    """
    return resolve_request(
        ResolutionRequest(
            remote=remote,
            path=path,
            committish=committish,
            default_branch=default_branch,
            gitlab_hosts=gitlab_hosts,
            gitea_hosts=gitea_hosts,
        )
    )
