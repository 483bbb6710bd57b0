"""Tests for fmtgate data models."""

from dataclasses import FrozenInstanceError

import pytest

from fmtgate.models import Action, CheckStatus, FormatCheckResult, GateVerdict


def _verdict(**kwargs):
    defaults = {"verdict": Action.PASS.value, "timestamp": "2026-10-17T00:00:00+00:00"}
    defaults.update(kwargs)
    return GateVerdict(**defaults)


class TestFormatCheckResult:
    def test_needs_reformatting(self):
        result = FormatCheckResult("a.rs", CheckStatus.NEEDS_REFORMATTING, "diff")
        assert result.needs_reformatting is True

    def test_formatted(self):
        result = FormatCheckResult("a.rs", CheckStatus.FORMATTED)
        assert result.needs_reformatting is False
        assert result.output == ""

    def test_to_dict(self):
        result = FormatCheckResult("a.rs", CheckStatus.NEEDS_REFORMATTING, "diff")
        assert result.to_dict() == {
            "path": "a.rs",
            "status": "NEEDS_REFORMATTING",
            "output": "diff",
        }


class TestGateVerdict:
    def test_passed(self):
        assert _verdict().passed is True
        assert _verdict(verdict=Action.FAIL.value, offending=("a.rs",)).passed is False

    def test_message_names_offending_files_in_order(self):
        verdict = _verdict(verdict=Action.FAIL.value, offending=("a.rs", "b.rs"))
        assert verdict.message == (
            "a.rs, b.rs. Automatic formatting failed. Please check the files above."
        )

    def test_message_empty_on_pass(self):
        assert _verdict().message == ""

    def test_summary_counts(self):
        verdict = _verdict(
            results=(FormatCheckResult("a.rs", CheckStatus.FORMATTED),),
            staged=("a.rs", "b.txt"),
            ignored=("b.txt",),
        )
        assert verdict.summary == "1 checked, 0 need reformatting, 1 ignored, 2 re-staged"

    def test_to_dict(self):
        verdict = _verdict(
            verdict=Action.FAIL.value,
            results=(FormatCheckResult("a.rs", CheckStatus.NEEDS_REFORMATTING, "x"),),
            offending=("a.rs",),
        )
        data = verdict.to_dict()
        assert data["verdict"] == "FAIL"
        assert data["offending"] == ["a.rs"]
        assert data["staged"] == []
        assert data["results"][0]["status"] == "NEEDS_REFORMATTING"

    def test_is_immutable(self):
        verdict = _verdict()
        with pytest.raises(FrozenInstanceError):
            verdict.verdict = "FAIL"  # type: ignore[misc]
