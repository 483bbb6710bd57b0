"""Core fmtgate engine: filters staged files, checks them, and produces a verdict."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime, timezone

from fmtgate.checker import FormatChecker
from fmtgate.config import FmtGateConfig
from fmtgate.git import StagingArea
from fmtgate.models import Action, FormatCheckResult, GateVerdict


def filter_source_files(staged_files: Sequence[str], config: FmtGateConfig) -> list[str]:
    """Return the staged paths the formatter should check, in staged order."""
    return [
        path
        for path in staged_files
        if config.is_source_file(path) and not config.is_path_excluded(path)
    ]


def collect_offending(results: Iterable[FormatCheckResult]) -> tuple[str, ...]:
    """Return the paths needing reformatting, first-seen order, without duplicates."""
    return tuple(dict.fromkeys(r.path for r in results if r.needs_reformatting))


class FormatGate:
    """Checks staged source files and decides whether the commit may proceed.

    Every applicable file is checked, in order, before a decision is made.
    On Pass the original staged set is re-staged (unless disabled in the
    config); on Fail nothing is staged and no file is touched.
    """

    def __init__(
        self,
        config: FmtGateConfig,
        checker: FormatChecker,
        staging: StagingArea,
    ) -> None:
        self.config = config
        self.checker = checker
        self.staging = staging

    def run(self, staged_files: Sequence[str]) -> GateVerdict:
        """Run the gate against a staged file set.

        Args:
            staged_files: Paths staged for the commit, as reported by the VCS.

        Returns:
            A GateVerdict describing checked, offending, ignored and re-staged files.
        """
        staged = tuple(staged_files)
        to_check = filter_source_files(staged, self.config)
        checked = set(to_check)
        ignored = tuple(path for path in staged if path not in checked)

        results = tuple(self.checker.check(path) for path in to_check)
        offending = collect_offending(results)
        timestamp = datetime.now(timezone.utc).isoformat()

        if offending:
            return GateVerdict(
                verdict=Action.FAIL.value,
                timestamp=timestamp,
                results=results,
                offending=offending,
                ignored=ignored,
            )

        restaged: tuple[str, ...] = ()
        if self.config.restage:
            for path in staged:
                self.staging.stage_file(path)
            restaged = staged

        return GateVerdict(
            verdict=Action.PASS.value,
            timestamp=timestamp,
            results=results,
            staged=restaged,
            ignored=ignored,
        )


def run_gate(
    staged_files: Sequence[str],
    checker: FormatChecker,
    staging: StagingArea,
    extensions: Sequence[str] = (".rs",),
) -> GateVerdict:
    """Run the format gate with default settings and the given source extensions."""
    config = FmtGateConfig(extensions=list(extensions))
    return FormatGate(config, checker, staging).run(staged_files)
