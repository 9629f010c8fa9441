"""Exception hierarchy for git-online."""

from typing import Any


class GitOnlineError(Exception):
    """Base exception for all git-online errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(GitOnlineError):
    """Raised when settings hold an unusable value."""


class UnrecognizedRemoteError(GitOnlineError):
    """Raised when a remote URL matches no known hosting provider."""


class InvalidRevisionModeError(GitOnlineError, ValueError):
    """Raised for a revision mode outside of head/branch/none."""


class InvalidPathError(GitOnlineError, ValueError):
    """Raised when a repository-relative path cannot be used in a URI."""


class GitCommandError(GitOnlineError):
    """Raised when a git invocation fails."""


class UpstreamResolutionError(GitCommandError):
    """Raised when the tracked remote or its URL cannot be determined."""
