"""Data models for fmtgate."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

FAILURE_SUFFIX = "Automatic formatting failed. Please check the files above."


class CheckStatus(str, Enum):
    """Outcome of checking a single file."""

    FORMATTED = "FORMATTED"
    NEEDS_REFORMATTING = "NEEDS_REFORMATTING"


class Action(str, Enum):
    """Gate verdict levels."""

    PASS = "PASS"
    FAIL = "FAIL"


@dataclass(frozen=True)
class FormatCheckResult:
    """The formatter's verdict on one staged file."""

    path: str
    status: CheckStatus
    output: str = ""

    @property
    def needs_reformatting(self) -> bool:
        return self.status is CheckStatus.NEEDS_REFORMATTING

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "status": self.status.value,
            "output": self.output,
        }


@dataclass(frozen=True)
class GateVerdict:
    """The aggregate decision of one gate run."""

    verdict: str
    timestamp: str
    results: tuple[FormatCheckResult, ...] = ()
    offending: tuple[str, ...] = ()
    staged: tuple[str, ...] = ()
    ignored: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.verdict == Action.PASS.value

    @property
    def summary(self) -> str:
        return (
            f"{len(self.results)} checked, {len(self.offending)} need reformatting, "
            f"{len(self.ignored)} ignored, {len(self.staged)} re-staged"
        )

    @property
    def message(self) -> str:
        """Human-readable failure message naming the offending files.

        Empty when the gate passed.
        """
        if not self.offending:
            return ""
        return f"{', '.join(self.offending)}. {FAILURE_SUFFIX}"

    def to_dict(self) -> dict:
        return {
            "verdict": self.verdict,
            "timestamp": self.timestamp,
            "summary": self.summary,
            "results": [r.to_dict() for r in self.results],
            "offending": list(self.offending),
            "staged": list(self.staged),
            "ignored": list(self.ignored),
        }
