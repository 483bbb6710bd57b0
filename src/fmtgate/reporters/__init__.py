"""Verdict reporters for fmtgate."""

from fmtgate.reporters.json_reporter import JSONReporter
from fmtgate.reporters.sarif_reporter import SARIFReporter
from fmtgate.reporters.text_reporter import TextReporter

REPORTERS = {
    "text": TextReporter,
    "json": JSONReporter,
    "sarif": SARIFReporter,
}

REPORT_FILENAMES = {
    "text": "verdict.txt",
    "json": "verdict.json",
    "sarif": "verdict.sarif",
}

__all__ = ["JSONReporter", "SARIFReporter", "TextReporter", "REPORTERS", "REPORT_FILENAMES"]
