"""git-online: open repository files on their hosting provider's web UI."""

from git_online.git.local_context import resolve_from_local_path
from git_online.git.uri_builder import resolve_uri
from git_online.launcher import open_online

__version__ = "0.1.0"

__all__ = ["__version__", "open_online", "resolve_from_local_path", "resolve_uri"]
