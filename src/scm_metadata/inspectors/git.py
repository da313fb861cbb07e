"""Git repository inspector using subprocess."""

import logging
import subprocess
from pathlib import Path

import structlog

from scm_metadata.core.models.metadata import RemoteMetadata
from scm_metadata.inspectors.base import RepositoryInspector
from scm_metadata.scm.segments import remote_path_segments

logger = structlog.get_logger(__name__)


def find_work_tree(directory: str | Path) -> Path | None:
    """Return ``directory`` or its nearest parent containing ``.git``."""
    start = Path(directory).resolve()
    for candidate in (start, *start.parents):
        if (candidate / ".git").exists():
            return candidate
    return None


class GitRepositoryInspector(RepositoryInspector):
    """Inspects a Git checkout.

    Uses subprocess + git CLI directly (no gitpython dependency).
    """

    provider = "git"

    def _run_git(self, work_tree: Path, *args: str, strip: bool = True) -> str:
        """Run a git command and return stdout."""
        result = subprocess.run(
            ["git", *args],
            cwd=work_tree,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip() if strip else result.stdout

    def inspect(self, directory: str | Path, remote_url: str | None = None) -> RemoteMetadata | None:
        work_tree = find_work_tree(directory)

        if work_tree is None:
            logger.debug(
                "Not a git repository (or any of the parent directories)",
                directory=str(directory),
            )
            return None

        revision = self._run_git(work_tree, "rev-parse", "HEAD")
        branch = self.get_current_branch(work_tree, revision)
        uncommitted, untracked = self.get_changes(work_tree)

        self._log_files(uncommitted, "uncommitted")
        self._log_files(untracked, "untracked")

        if remote_url is None:
            remote_url = self.get_remote_url(work_tree)

        return RemoteMetadata(
            branch=branch,
            revision=revision,
            uncommitted_changes_present=bool(uncommitted or untracked),
            remote_path_segments=tuple(remote_path_segments(remote_url)),
        )

    def get_current_branch(self, work_tree: Path, revision: str) -> str:
        """Get the current branch name, or the revision on a detached HEAD."""
        branch = self._run_git(work_tree, "rev-parse", "--abbrev-ref", "HEAD")
        return revision if branch == "HEAD" else branch

    def get_changes(self, work_tree: Path) -> tuple[list[str], list[str]]:
        """Return (uncommitted, untracked) file paths."""
        output = self._run_git(work_tree, "status", "--porcelain", "--untracked-files=all", strip=False)
        uncommitted = []
        untracked = []
        for line in output.splitlines():
            if not line:
                continue
            path = line[3:]
            if line.startswith("??"):
                untracked.append(path)
            else:
                uncommitted.append(path)
        return uncommitted, untracked

    def get_remote_url(self, work_tree: Path) -> str | None:
        """Get the remote origin URL, if available."""
        try:
            url = self._run_git(work_tree, "remote", "get-url", "origin")
            return url if url else None
        except subprocess.CalledProcessError:
            return None

    @staticmethod
    def _log_files(files: list[str], kind: str) -> None:
        if not logger.is_enabled_for(logging.DEBUG):
            return
        if not files:
            logger.debug(f"No {kind} files")
            return
        logger.debug(f"{kind.capitalize()} files", count=len(files), files=sorted(files))
