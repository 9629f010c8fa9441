"""Test factories using factory_boy."""

import factory

from git_online.core.models.remote import HostKind, RemoteDescriptor
from git_online.core.models.request import ResolutionRequest


class RemoteDescriptorFactory(factory.Factory):
    """Factory for creating RemoteDescriptor instances."""

    class Meta:
        model = RemoteDescriptor

    kind = HostKind.GITHUB
    host = "github.com"
    user = factory.Sequence(lambda n: f"org{n}")
    repo = factory.Sequence(lambda n: f"repo-{n}")


class ResolutionRequestFactory(factory.Factory):
    """Factory for creating ResolutionRequest instances."""

    class Meta:
        model = ResolutionRequest

    remote = factory.Sequence(lambda n: f"https://github.com/org{n}/repo-{n}.git")
    path = ""
    committish = ""
    default_branch = "main"
    gitlab_hosts = factory.LazyFunction(tuple)
    gitea_hosts = factory.LazyFunction(tuple)
