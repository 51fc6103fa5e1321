"""Reduction of repeated trial samples into one metric per sweep point."""

from __future__ import annotations

import time
from typing import Callable, Sequence

NS_PER_MS = 1_000_000

Clock = Callable[[], int]


class TrialTimer:
    """Context manager measuring elapsed nanoseconds with an injectable clock.

    The clock must be monotonic and return integer nanoseconds; it defaults to
    :func:`time.perf_counter_ns`.
    """

    def __init__(self, clock: Clock = time.perf_counter_ns) -> None:
        self._clock = clock
        self._start = 0
        self.elapsed_ns = 0

    def __enter__(self) -> "TrialTimer":
        self._start = self._clock()
        return self

    def __exit__(self, *exc_info) -> None:
        self.elapsed_ns = self._clock() - self._start


def mean_ms(durations_ns: Sequence[int]) -> int:
    """Average whole milliseconds over all samples.

    Every sample is truncated to whole milliseconds before summing and the
    sum is integer-divided by the number of samples.
    """
    if not durations_ns:
        raise ValueError("at least one sample is required")
    total_ms = sum(int(d) // NS_PER_MS for d in durations_ns)
    return total_ms // len(durations_ns)


def mean_ns(durations_ns: Sequence[int]) -> float:
    if not durations_ns:
        raise ValueError("at least one sample is required")
    return float(sum(durations_ns)) / len(durations_ns)


def overhead(serialized_size: int, action_size: int, action_nb: int) -> float:
    """Fractional storage cost of metadata over the raw payload.

    ``(T - n*s) / (n*s)`` for ``n`` actions of ``s`` bytes serialized to
    ``T`` bytes.
    """
    base_size = action_size * action_nb
    if base_size <= 0:
        raise ValueError("payload size must be positive to compute overhead")
    return float(serialized_size - base_size) / float(base_size)


def ratio(write_time: float, verify_time: float) -> float:
    if verify_time <= 0:
        raise ValueError(f"verify time must be positive, got {verify_time}")
    return write_time / verify_time
