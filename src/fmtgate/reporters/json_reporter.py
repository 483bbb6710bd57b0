"""JSON verdict reporter for fmtgate."""

from __future__ import annotations

import json

from fmtgate.models import GateVerdict
from fmtgate.reporters.base import write_report


class JSONReporter:
    """Serialize a GateVerdict, including every per-file result, as JSON."""

    def render(self, verdict: GateVerdict) -> str:
        return json.dumps(verdict.to_dict(), indent=2, ensure_ascii=False)

    def write(self, verdict: GateVerdict, output_path: str) -> None:
        write_report(output_path, self.render(verdict))
