"""Core domain models and exceptions for git-online."""

from git_online.core.exceptions import (
    ConfigurationError,
    GitCommandError,
    GitOnlineError,
    InvalidPathError,
    InvalidRevisionModeError,
    UnrecognizedRemoteError,
    UpstreamResolutionError,
)
from git_online.core.models import (
    HostKind,
    HostProfile,
    LocalContext,
    RemoteDescriptor,
    ResolutionRequest,
    RevisionMode,
)

__all__ = [
    # Models
    "HostKind",
    "HostProfile",
    "RemoteDescriptor",
    "ResolutionRequest",
    "RevisionMode",
    "LocalContext",
    # Exceptions
    "GitOnlineError",
    "ConfigurationError",
    "UnrecognizedRemoteError",
    "InvalidRevisionModeError",
    "InvalidPathError",
    "GitCommandError",
    "UpstreamResolutionError",
]
