"""Discover repository context for a local path using subprocess."""

import subprocess
from pathlib import Path

import structlog

from git_online.core.exceptions import (
    GitCommandError,
    InvalidRevisionModeError,
    UpstreamResolutionError,
)
from git_online.core.models.request import LocalContext, RevisionMode
from git_online.git.uri_builder import resolve_uri

logger = structlog.get_logger(__name__)


def coerce_revision_mode(mode: RevisionMode | str) -> RevisionMode:
    """Turn a revision mode or its string value into a RevisionMode."""
    if isinstance(mode, RevisionMode):
        return mode
    try:
        return RevisionMode(str(mode).strip().lower())
    except ValueError:
        allowed = [m.value for m in RevisionMode]
        raise InvalidRevisionModeError(
            f"Invalid revision mode: {mode!r} (expected one of {allowed})",
            details={"revision_mode": str(mode), "allowed": allowed},
        ) from None


class LocalContextResolver:
    """Resolves remote, relative path and revision for a file or directory.

    Uses subprocess + git CLI directly (no gitpython dependency).
    """

    def __init__(self, path: str | Path) -> None:
        target = Path(path).expanduser().absolute()
        if not target.exists():
            raise FileNotFoundError(f"Path does not exist: {target}")

        # A symlinked file keeps its own name; only its directory is resolved.
        if target.is_dir():
            self._directory = target.resolve()
            self._file_name = ""
        else:
            self._directory = target.parent.resolve()
            self._file_name = target.name

    @property
    def directory(self) -> Path:
        return self._directory

    def _run_git(self, *args: str) -> str:
        """Run a git command in the target directory and return stdout."""
        command = ["git", *args]
        logger.debug("Running git", command=command, cwd=str(self._directory))
        try:
            result = subprocess.run(
                command,
                cwd=self._directory,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as exc:
            raise GitCommandError(
                f"git {' '.join(args)} failed: {exc.stderr.strip() or exc.returncode}",
                details={
                    "command": command,
                    "returncode": exc.returncode,
                    "stderr": exc.stderr.strip(),
                    "cwd": str(self._directory),
                },
            ) from exc
        return result.stdout.strip()

    def get_relative_path(self) -> str:
        """Get the target's path relative to the repository root."""
        prefix = self._run_git("rev-parse", "--show-prefix").strip("/")
        parts = [part for part in (prefix, self._file_name) if part]
        return "/".join(parts)

    def get_upstream(self) -> tuple[str, str]:
        """Get the (remote, branch) tracked by the current local branch.

        Read from branch.<name>.remote and branch.<name>.merge, since remote
        names may themselves contain slashes.
        """
        try:
            local_branch = self._run_git("symbolic-ref", "--short", "HEAD")
            remote = self._run_git("config", "--get", f"branch.{local_branch}.remote")
            merge = self._run_git("config", "--get", f"branch.{local_branch}.merge")
        except GitCommandError as exc:
            raise UpstreamResolutionError(
                f"No upstream branch tracked in {self._directory}: {exc.details.get('stderr', '')}",
                details=exc.details,
            ) from exc

        branch = merge.removeprefix("refs/heads/")
        if not remote or not branch:
            raise UpstreamResolutionError(
                f"Unexpected upstream for {local_branch}: {remote!r} {merge!r}",
                details={"remote": remote, "merge": merge, "cwd": str(self._directory)},
            )
        return remote, branch

    def get_remote_url(self, remote: str) -> str:
        """Get the URL configured for a named remote."""
        try:
            url = self._run_git("remote", "get-url", remote)
        except GitCommandError as exc:
            raise UpstreamResolutionError(
                f"Remote '{remote}' has no URL: {exc.details.get('stderr', '')}",
                details=exc.details,
            ) from exc
        if not url:
            raise UpstreamResolutionError(
                f"Remote '{remote}' has no URL",
                details={"remote": remote, "cwd": str(self._directory)},
            )
        return url

    def get_default_branch(self, remote: str, fallback: str) -> str:
        """Get the remote's default branch from its recorded HEAD.

        Falls back to ``fallback`` when refs/remotes/<remote>/HEAD is not set,
        which is common for repositories that were pushed rather than cloned.
        """
        try:
            head = self._run_git("symbolic-ref", "--short", f"refs/remotes/{remote}/HEAD")
        except GitCommandError:
            logger.debug("Remote HEAD not recorded, using tracked branch", remote=remote, branch=fallback)
            return fallback
        return head.removeprefix(f"{remote}/")

    def get_current_commit(self) -> str:
        """Get the current HEAD commit hash."""
        return self._run_git("rev-parse", "HEAD")

    def get_current_branch(self) -> str:
        """Get the current branch name."""
        return self._run_git("branch", "--show-current")

    def get_committish(self, mode: RevisionMode) -> str:
        if mode is RevisionMode.HEAD:
            return self.get_current_commit()
        if mode is RevisionMode.BRANCH:
            return self.get_current_branch()
        return ""

    def resolve_context(self, revision_mode: RevisionMode | str) -> LocalContext:
        """Collect everything needed to build the web URI."""
        mode = coerce_revision_mode(revision_mode)
        relative_path = self.get_relative_path()
        remote_name, tracked_branch = self.get_upstream()
        remote_url = self.get_remote_url(remote_name)
        return LocalContext(
            remote_name=remote_name,
            remote_url=remote_url,
            tracked_branch=tracked_branch,
            default_branch=self.get_default_branch(remote_name, tracked_branch),
            relative_path=relative_path,
            committish=self.get_committish(mode),
        )


def resolve_from_local_path(
    path: str | Path,
    revision_mode: RevisionMode | str = RevisionMode.BRANCH,
    gitlab_hosts: list[str] | tuple[str, ...] = (),
    gitea_hosts: list[str] | tuple[str, ...] = (),
) -> str:
    """Resolve a local file or directory to its page on the remote's web UI.

    Raises:
        InvalidRevisionModeError: If the revision mode is not head/branch/none.
        UpstreamResolutionError: If no upstream or remote URL is configured.
        GitCommandError: If any other git invocation fails.
        UnrecognizedRemoteError: If the remote matches no known provider.
    """
    mode = coerce_revision_mode(revision_mode)
    context = LocalContextResolver(path).resolve_context(mode)
    logger.debug(
        "Local context resolved",
        remote=context.remote_url,
        path=context.relative_path,
        committish=context.committish,
        default_branch=context.default_branch,
    )
    return resolve_uri(
        context.remote_url,
        path=context.relative_path,
        committish=context.committish,
        default_branch=context.default_branch,
        gitlab_hosts=gitlab_hosts,
        gitea_hosts=gitea_hosts,
    )
