"""Open a local path's web page in the default browser."""

from pathlib import Path

import click
import structlog

from git_online.core.models.request import RevisionMode
from git_online.git.local_context import resolve_from_local_path

logger = structlog.get_logger(__name__)


def open_online(
    path: str | Path = ".",
    revision_mode: RevisionMode | str = RevisionMode.BRANCH,
    gitlab_hosts: list[str] | tuple[str, ...] = (),
    gitea_hosts: list[str] | tuple[str, ...] = (),
) -> str:
    """Resolve the URI for ``path`` and hand it to the OS default opener."""
    uri = resolve_from_local_path(path, revision_mode, gitlab_hosts, gitea_hosts)
    logger.info("Opening URI", uri=uri)
    click.launch(uri)
    return uri
