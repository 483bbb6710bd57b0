"""Format checkers: the capability the gate uses to judge a single file."""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from fmtgate.models import CheckStatus, FormatCheckResult


class FormatChecker(ABC):
    """Judge whether a file is already formatted without modifying it."""

    @abstractmethod
    def check(self, path: str) -> FormatCheckResult:
        """Check one file.

        Args:
            path: Repository-relative path of the file to check.

        Returns:
            A FormatCheckResult for the file.
        """
        ...  # pragma: no cover


def result_from_output(path: str, output: str) -> FormatCheckResult:
    """Classify formatter output: anything non-blank means reformatting is needed."""
    if output.strip():
        return FormatCheckResult(path=path, status=CheckStatus.NEEDS_REFORMATTING, output=output)
    return FormatCheckResult(path=path, status=CheckStatus.FORMATTED)


class CommandFormatChecker(FormatChecker):
    """Run an external formatter in check mode, once per file.

    The file path is appended to ``command``. Standard output and standard
    error are both captured, so a formatter that cannot run or crashes on a
    file reports that file exactly like one that needs reformatting.
    """

    def __init__(self, command: list[str], cwd: str | Path | None = None) -> None:
        if not command:
            raise ValueError("formatter command must not be empty")
        self.command = list(command)
        self.cwd = cwd

    def check(self, path: str) -> FormatCheckResult:
        cmd = [*self.command, path]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=False,
                cwd=self.cwd,
            )
        except OSError as e:
            # Missing executable, permission denied, ...
            return result_from_output(path, f"{self.command[0]}: {e}")

        return result_from_output(path, (result.stdout or "") + (result.stderr or ""))
