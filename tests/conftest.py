"""Shared test fixtures for fmtgate tests."""

import pytest

from fmtgate.checker import FormatChecker, result_from_output
from fmtgate.git import StagingArea


class FakeChecker(FormatChecker):
    """Checker returning canned formatter output per path."""

    def __init__(self, outputs=None):
        self.outputs = dict(outputs or {})
        self.checked = []

    def check(self, path):
        self.checked.append(path)
        return result_from_output(path, self.outputs.get(path, ""))


class RecordingStagingArea(StagingArea):
    """Staging area that remembers what it was asked to stage."""

    def __init__(self, staged=None):
        self.staged = list(staged or [])
        self.added = []

    def list_staged_files(self):
        return list(self.staged)

    def stage_file(self, path):
        self.added.append(path)


@pytest.fixture
def staging():
    return RecordingStagingArea()


@pytest.fixture
def make_checker():
    return FakeChecker
