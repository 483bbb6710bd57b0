"""Version-control staging collaborator for fmtgate."""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path


class GitError(RuntimeError):
    """Raised when git is missing or a git command fails."""


class StagingArea(ABC):
    """Source of the staged file set and sink for re-staging files."""

    @abstractmethod
    def list_staged_files(self) -> list[str]:
        """Return the staged paths, in the order the VCS reports them."""
        ...  # pragma: no cover

    @abstractmethod
    def stage_file(self, path: str) -> None:
        """Add ``path`` to the staging index."""
        ...  # pragma: no cover


class GitStagingArea(StagingArea):
    """Staging area backed by the ``git`` command line.

    Staged paths are relative to the working tree root, so callers that
    hand them to other tools should run those tools from :meth:`toplevel`.
    """

    def __init__(self, cwd: str | Path | None = None) -> None:
        self.cwd = cwd

    def _run(self, cmd: list[str]) -> str:
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                encoding="utf-8",
                errors="surrogateescape",
                check=True,
                cwd=self.cwd,
            )
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
            raise GitError(f"{' '.join(cmd)} failed: {detail}") from e
        except FileNotFoundError as e:
            raise GitError("git is not installed or not in PATH") from e
        return result.stdout

    def toplevel(self) -> str:
        """Return the absolute path of the working tree root."""
        return self._run(["git", "rev-parse", "--show-toplevel"]).strip()

    def list_staged_files(self) -> list[str]:
        # NUL-separated names are never quoted, so non-ASCII paths come back verbatim.
        # Deleted paths have nothing to format and cannot be re-added.
        output = self._run(["git", "diff", "--cached", "--name-only", "-z", "--diff-filter=d"])
        return [name for name in output.split("\0") if name]

    def stage_file(self, path: str) -> None:
        self._run(["git", "add", "--", path])
