"""SARIF 2.1.0 verdict reporter for GitHub Code Scanning integration."""

from __future__ import annotations

import json
from typing import Any

from fmtgate import __version__
from fmtgate.models import FAILURE_SUFFIX, GateVerdict
from fmtgate.reporters.base import write_report

RULE_ID = "fmtgate/needs-reformatting"


class SARIFReporter:
    """Render a GateVerdict in SARIF 2.1.0 format, one result per offending file."""

    def render(self, verdict: GateVerdict) -> str:
        """Render the verdict as a SARIF 2.1.0 JSON string."""
        outputs = {r.path: r.output for r in verdict.results}
        results: list[dict[str, Any]] = []

        for path in verdict.offending:
            text = f"{path} is not formatted. {FAILURE_SUFFIX}"
            output = outputs.get(path, "").strip()
            if output:
                text += f"\n\n```\n{output}\n```"

            results.append(
                {
                    "ruleId": RULE_ID,
                    "ruleIndex": 0,
                    "level": "error",
                    "message": {"text": text},
                    "locations": [
                        {
                            "physicalLocation": {
                                "artifactLocation": {"uri": path},
                                "region": {"startLine": 1, "startColumn": 1},
                            }
                        }
                    ],
                    "properties": {"fmtgate-verdict": verdict.verdict},
                }
            )

        sarif = {
            "$schema": "https://schemastore.azurewebsites.net/schemas/json/sarif-2.1.0-rtm.6.json",
            "version": "2.1.0",
            "runs": [
                {
                    "tool": {
                        "driver": {
                            "name": "fmtgate",
                            "version": __version__,
                            "rules": [
                                {
                                    "id": RULE_ID,
                                    "name": "NeedsReformatting",
                                    "shortDescription": {
                                        "text": "Staged file is not formatted"
                                    },
                                    "fullDescription": {
                                        "text": "The external formatter reported differences "
                                        "(or failed) when checking this file."
                                    },
                                    "properties": {"tags": ["formatting"]},
                                }
                            ],
                        }
                    },
                    "results": results,
                }
            ],
        }

        return json.dumps(sarif, indent=2, ensure_ascii=False)

    def write(self, verdict: GateVerdict, output_path: str) -> None:
        """Write the verdict to a SARIF file."""
        write_report(output_path, self.render(verdict))
