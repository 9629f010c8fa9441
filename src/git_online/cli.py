"""CLI for git-online."""

import sys
from pathlib import Path

import click
import structlog

from git_online.config.logging import configure_logging
from git_online.config.settings import get_settings
from git_online.core.exceptions import GitOnlineError
from git_online.core.models.request import RevisionMode

logger = structlog.get_logger(__name__)

REVISION_CHOICES = click.Choice([mode.value for mode in RevisionMode], case_sensitive=False)


def host_options(func):
    """Add --gitlab-host and --gitea-host options to a command."""
    func = click.option(
        "--gitea-host", "-t", "gitea_host", multiple=True,
        help="Additional Gitea host name (repeatable)",
    )(func)
    func = click.option(
        "--gitlab-host", "-g", "gitlab_host", multiple=True,
        help="Additional self-hosted GitLab host name (repeatable)",
    )(func)
    return func


def _hosts(configured: list[str], extra: tuple[str, ...]) -> list[str]:
    return [*configured, *extra]


def _fail(exc: Exception) -> None:
    logger.debug("Resolution failed", error=str(exc), details=getattr(exc, "details", {}))
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """git-online: open repository paths on GitHub, GitLab and Gitea."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, json_logs=settings.json_logs)


@cli.command()
@click.argument("remote")
@click.option("--path", "-p", default="", help="Path relative to the repository root")
@click.option("--committish", "-c", default="", help="Branch, tag or commit to show")
@click.option("--default-branch", "-b", default=None, help="Branch used when only a path is given")
@host_options
def resolve(
    remote: str,
    path: str,
    committish: str,
    default_branch: str | None,
    gitlab_host: tuple[str, ...],
    gitea_host: tuple[str, ...],
) -> None:
    """Print the web URI for a remote URL."""
    from git_online.git.uri_builder import resolve_uri

    settings = get_settings()
    try:
        uri = resolve_uri(
            remote,
            path=path,
            committish=committish,
            default_branch=default_branch or settings.default_branch,
            gitlab_hosts=_hosts(settings.gitlab_host_list, gitlab_host),
            gitea_hosts=_hosts(settings.gitea_host_list, gitea_host),
        )
    except GitOnlineError as exc:
        _fail(exc)
    else:
        click.echo(uri)


@cli.command()
@click.argument("path", default=".")
@click.option("--revision", "-r", type=REVISION_CHOICES, default=None, help="Revision to show")
@host_options
def find(
    path: str,
    revision: str | None,
    gitlab_host: tuple[str, ...],
    gitea_host: tuple[str, ...],
) -> None:
    """Print the web URI for a local file or directory."""
    from git_online.git.local_context import resolve_from_local_path

    settings = get_settings()
    try:
        uri = resolve_from_local_path(
            Path(path),
            revision or settings.default_revision_mode,
            gitlab_hosts=_hosts(settings.gitlab_host_list, gitlab_host),
            gitea_hosts=_hosts(settings.gitea_host_list, gitea_host),
        )
    except (GitOnlineError, FileNotFoundError) as exc:
        _fail(exc)
    else:
        click.echo(uri)


@cli.command(name="open")
@click.argument("path", default=".")
@click.option("--revision", "-r", type=REVISION_CHOICES, default=None, help="Revision to show")
@host_options
def open_command(
    path: str,
    revision: str | None,
    gitlab_host: tuple[str, ...],
    gitea_host: tuple[str, ...],
) -> None:
    """Open the web page for a local file or directory in the browser."""
    from git_online.launcher import open_online

    settings = get_settings()
    try:
        uri = open_online(
            Path(path),
            revision or settings.default_revision_mode,
            gitlab_hosts=_hosts(settings.gitlab_host_list, gitlab_host),
            gitea_hosts=_hosts(settings.gitea_host_list, gitea_host),
        )
    except (GitOnlineError, FileNotFoundError) as exc:
        _fail(exc)
    else:
        click.echo(f"Opened {uri}")


if __name__ == "__main__":
    cli()
