"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from repolint.models import Result
from repolint.reporting import Reporter


def _write(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class MessageFormatter:
    """Formats results as `PASS|FAIL rule: message` strings."""

    def format(self, result: Result) -> str:
        status = "PASS" if result.passed else "FAIL"
        return f"{status} {result.rule.id}: {result.message}"


class RecordingReporter(Reporter):
    def __init__(self):
        self.infos: list[str] = []
        self.results: list[object] = []
        super().__init__(info=self.infos.append, result=self.results.append)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def formatter() -> MessageFormatter:
    return MessageFormatter()


@pytest.fixture
def sample_repo(tmp_path: Path) -> Path:
    """A small project tree with the usual community files."""
    repo = tmp_path / "repo"
    _write(repo / "README.md", "# Sample\n\nReleased under the MIT license.\n")
    _write(
        repo / "LICENSE",
        "MIT License\n\nCopyright (c) 2024 Sample\n\n"
        "Permission is hereby granted, free of charge, to any person obtaining a copy\n",
    )
    _write(repo / "package.json", '{"name": "sample"}\n')
    _write(repo / "src" / "index.js", "// Copyright 2024 Sample\n// License: MIT\nmodule.exports = 1\n")
    _write(repo / "src" / "util.py", "print('hi')\n")
    _write(repo / "test" / "index.test.js", "test('x', () => {})\n")
    _write(repo / "docs" / "CONTRIBUTING.md", "How to contribute\n")
    return repo
