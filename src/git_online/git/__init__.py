"""Git remote parsing and URI resolution."""

from git_online.git.local_context import LocalContextResolver, resolve_from_local_path
from git_online.git.remote_parser import parse_remote
from git_online.git.uri_builder import build_uri, resolve_uri

__all__ = [
    "LocalContextResolver",
    "build_uri",
    "parse_remote",
    "resolve_from_local_path",
    "resolve_uri",
]
