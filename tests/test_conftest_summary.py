from __future__ import annotations

from types import SimpleNamespace

from conftest import pytest_terminal_summary


class _Reporter:
    def __init__(self, stats) -> None:
        self.stats = stats
        self.lines: list[str] = []
        self.sections: list[str] = []

    def section(self, title: str, sep: str = "=") -> None:
        self.sections.append(title)

    def write_line(self, line: str) -> None:
        self.lines.append(line)


def _rep(nodeid: str) -> SimpleNamespace:
    return SimpleNamespace(nodeid=nodeid)


def test_summary_groups_outcomes_by_module() -> None:
    reporter = _Reporter(
        {
            "passed": [_rep("tests/test_a.py::x"), _rep("tests/test_b.py::y")],
            "failed": [_rep("tests/test_b.py::z")],
        }
    )

    pytest_terminal_summary(reporter)

    assert reporter.sections == ["seqlab test modules"]
    assert reporter.lines == [
        "tests/test_b.py: 1 passed, 1 failed",
        "tests/test_a.py: 1 passed",
    ]


def test_summary_is_silent_without_results() -> None:
    reporter = _Reporter({})
    pytest_terminal_summary(reporter)
    assert reporter.lines == [] and reporter.sections == []
