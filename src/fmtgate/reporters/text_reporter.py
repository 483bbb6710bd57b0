"""Plain-text verdict reporter, the format printed by the pre-commit hook."""

from __future__ import annotations

from fmtgate.models import GateVerdict
from fmtgate.reporters.base import write_report

PASS_HEADLINE = "All staged source files are formatted."


class TextReporter:
    """Render a GateVerdict as the message shown to the committer."""

    def render(self, verdict: GateVerdict) -> str:
        if not verdict.passed:
            return verdict.message

        lines = [PASS_HEADLINE]
        lines.extend(f"staged: {path}" for path in verdict.staged)
        return "\n".join(lines)

    def write(self, verdict: GateVerdict, output_path: str) -> None:
        write_report(output_path, self.render(verdict))
