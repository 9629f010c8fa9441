"""Domain models for git-online."""

from git_online.core.models.remote import HOST_PROFILES, HostKind, HostProfile, RemoteDescriptor
from git_online.core.models.request import LocalContext, ResolutionRequest, RevisionMode

__all__ = [
    "HOST_PROFILES",
    "HostKind",
    "HostProfile",
    "RemoteDescriptor",
    "ResolutionRequest",
    "RevisionMode",
    "LocalContext",
]
