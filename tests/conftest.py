"""Pytest configuration, stub collaborators & per-module summary hook.

Also ensures the project root is on sys.path so ``import seqlab`` works
without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so 'import seqlab.*' works
_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

NS_PER_MS = 1_000_000


class FakeClock:
    """Monotonic nanosecond clock advanced only by the stubs."""

    def __init__(self) -> None:
        self.now = 0

    def __call__(self) -> int:
        return self.now

    def advance(self, ns: int) -> None:
        self.now += ns


class StubSequence:
    def __init__(self, engine: "StubEngine") -> None:
        self.engine = engine
        self.actions: list[bytes] = []
        self.verify_calls = 0

    def append(self, action, peer_key, group, group_key) -> None:
        self.engine.clock.advance(self.engine.append_ns)
        self.engine.groups.add(group)
        self.actions.append(action)

    def verify(self) -> bool:
        self.engine.clock.advance(self.engine.verify_ns)
        self.verify_calls += 1
        return self.engine.verify_result

    def serialize(self) -> bytes:
        per_entry = b"m" * self.engine.metadata_bytes
        return b"".join(a + per_entry for a in self.actions)


class StubEngine:
    """Sequence engine with fixed, clock-driven costs.

    Every ``append`` advances the clock by ``append_ns``, every ``verify`` by
    ``verify_ns``; ``serialize`` adds ``metadata_bytes`` per entry.
    """

    def __init__(
        self,
        clock: FakeClock,
        append_ns: int = NS_PER_MS,
        verify_ns: int = NS_PER_MS,
        metadata_bytes: int = 10,
        verify_result: bool = True,
    ) -> None:
        self.clock = clock
        self.append_ns = append_ns
        self.verify_ns = verify_ns
        self.metadata_bytes = metadata_bytes
        self.verify_result = verify_result
        self.created: list[StubSequence] = []
        self.groups: set[str] = set()

    def new(self) -> StubSequence:
        seq = StubSequence(self)
        self.created.append(seq)
        return seq


class StubActionSource:
    def __init__(self) -> None:
        self.sizes: list[int] = []

    def generate(self, size: int) -> bytes:
        self.sizes.append(size)
        return b"a" * size


class CountingKeyFactory:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return None, b"k" * 32


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_engine(fake_clock):
    def _make(**kwargs) -> StubEngine:
        return StubEngine(fake_clock, **kwargs)

    return _make


@pytest.fixture
def action_source() -> StubActionSource:
    return StubActionSource()


@pytest.fixture
def key_factory() -> CountingKeyFactory:
    return CountingKeyFactory()


def pytest_terminal_summary(terminalreporter: pytest.TerminalReporter) -> None:
    """Print pass/fail counts per test module, failing modules first."""
    per_module: dict[str, dict[str, int]] = {}
    for outcome in ("passed", "failed", "error", "skipped"):
        for rep in terminalreporter.stats.get(outcome, []):
            module = rep.nodeid.split("::", 1)[0]
            counts = per_module.setdefault(module, {})
            counts[outcome] = counts.get(outcome, 0) + 1
    if not per_module:
        return

    terminalreporter.section("seqlab test modules", sep="-")

    def _bad(item: tuple[str, dict[str, int]]) -> tuple[int, str]:
        counts = item[1]
        return (-(counts.get("failed", 0) + counts.get("error", 0)), item[0])

    for module, counts in sorted(per_module.items(), key=_bad):
        cells = ", ".join(f"{n} {outcome}" for outcome, n in counts.items())
        terminalreporter.write_line(f"{module}: {cells}")
