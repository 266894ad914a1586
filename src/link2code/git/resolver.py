"""Git metadata resolution using subprocess."""

import os
import subprocess

import structlog

from link2code.config.settings import Settings
from link2code.core.exceptions import GitCommandError, NotARepositoryError, NoUpstreamCommonError
from link2code.git.cache import KeyedCache
from link2code.git.remote import remote_to_base_url

logger = structlog.get_logger(__name__)


class GitMetadataResolver:
    """Resolves working-tree roots, upstream revisions and base URLs.

    Uses subprocess + git CLI directly (no gitpython dependency). Every
    answer is cached for the lifetime of the resolver: root discovery by
    the queried directory, revision and base URL by the resolved root.
    One resolver is meant to serve one batch of inputs.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()
        self._worktrees: KeyedCache[str] = KeyedCache()
        self._revisions: KeyedCache[str] = KeyedCache()
        self._base_urls: KeyedCache[str] = KeyedCache()

    def _run_git(self, cwd: str, *args: str) -> str:
        """Run a git command from ``cwd`` and return stripped stdout."""
        command = ["git", "-C", cwd, *args]
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            reason = stderr or f"exit status {e.returncode}"
            raise GitCommandError(
                f"'{' '.join(command)}' failed: {reason}",
                details={
                    "command": command,
                    "cwd": cwd,
                    "returncode": e.returncode,
                    "stderr": stderr,
                },
            ) from e
        except FileNotFoundError as e:
            raise GitCommandError(
                "git executable not found",
                details={"command": command, "cwd": cwd},
            ) from e
        return result.stdout.strip()

    def worktree(self, directory: str) -> str:
        """Get the absolute working-tree root containing ``directory``."""
        return self._worktrees.get_or_compute(directory, lambda: self._find_worktree(directory))

    def _find_worktree(self, directory: str) -> str:
        try:
            git_dir = self._run_git(directory, "rev-parse", "--absolute-git-dir")
        except GitCommandError as e:
            raise NotARepositoryError(
                f"not a git repo: {directory}",
                details={"directory": directory, **e.details},
            ) from e

        # core.worktree is typically set for submodules; it is relative to the git dir
        try:
            configured = self._run_git(directory, "config", "--get", "core.worktree")
        except GitCommandError:
            configured = ""

        if configured:
            root = os.path.abspath(os.path.join(git_dir, configured))
        else:
            root = os.path.dirname(git_dir)

        logger.debug("Resolved worktree", directory=directory, root=root)
        return root

    def upstream_revision(self, root: str) -> str:
        """Get the newest commit on HEAD's ancestry that a remote also has."""
        return self._revisions.get_or_compute(root, lambda: self._find_upstream_revision(root))

    def _find_upstream_revision(self, root: str) -> str:
        # Newest first, so the last line is the oldest unpushed commit
        output = self._run_git(root, "rev-list", "HEAD", "--not", "--remotes")
        local_only = output.splitlines() if output else []

        anchor = f"{local_only[-1]}~1" if local_only else "HEAD"

        try:
            revision = self._run_git(
                root,
                "rev-list",
                "--abbrev-commit",
                f"--abbrev={self._settings.abbrev}",
                "--max-count=1",
                anchor,
            )
        except GitCommandError as e:
            raise NoUpstreamCommonError(
                f"no commit on HEAD is known to any remote: {root}",
                details={"root": root, "anchor": anchor, **e.details},
            ) from e

        if not revision:
            raise NoUpstreamCommonError(
                f"no commit on HEAD is known to any remote: {root}",
                details={"root": root, "anchor": anchor},
            )

        logger.debug(
            "Resolved upstream revision",
            root=root,
            revision=revision,
            unpushed=len(local_only),
        )
        return revision

    def base_url(self, root: str) -> str:
        """Get the web base URL of the configured remote."""
        return self._base_urls.get_or_compute(root, lambda: self._find_base_url(root))

    def _find_base_url(self, root: str) -> str:
        remote = self._settings.remote_name
        origin = self._run_git(root, "config", "--get", f"remote.{remote}.url")
        base_url = remote_to_base_url(origin, host=self._settings.host)
        logger.debug("Resolved base URL", root=root, remote=remote, base_url=base_url)
        return base_url
