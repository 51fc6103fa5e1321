"""Deterministic parameter sweeps.

Two generation modes are provided:

* linear: ``start, start + step, ...`` up to and including ``end``;
* capped logarithmic: ``u * 10**e`` for every unit ``u`` and exponent
  ``e in [0, max_exp]``, where the last decade only keeps ``u == 1`` so the
  sweep ends exactly on ``10**max_exp``.

Both return strictly increasing, duplicate-free integer lists.
"""

from __future__ import annotations

from typing import Iterable, Sequence

DEFAULT_UNITS = (1, 2, 5)


def linear_sweep(start: int, end: int, step: int) -> list[int]:
    """Return ``start, start + step, ...`` while the value is ``<= end``.

    Raises:
        ValueError: If ``step`` is not positive.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    return list(range(start, end + 1, step))


def check_units(units: Sequence[int]) -> None:
    if not units:
        raise ValueError("units must not be empty")
    prev = 0
    for u in units:
        if not 1 <= u < 10:
            raise ValueError(f"unit {u} must lie in [1, 10)")
        if u <= prev:
            raise ValueError("units must be strictly increasing")
        prev = u


def log_sweep_points(units: Iterable[int], max_exp: int) -> list[tuple[int, int]]:
    """Return ``(exponent, value)`` pairs of a capped log-scale sweep.

    Args:
        units: Multipliers applied in every decade, e.g. ``(1, 2, 5)``.
        max_exp: Last exponent; only the ``1 * 10**max_exp`` point is kept
            for that decade.

    Returns:
        Pairs in increasing value order. The exponent is kept alongside the
        value because some experiments scale their workload by decade.
    """
    units = [int(u) for u in units]
    check_units(units)
    if max_exp < 0:
        raise ValueError(f"max_exp must be >= 0, got {max_exp}")
    points: list[tuple[int, int]] = []
    for exp in range(max_exp + 1):
        for unit in units:
            if exp == max_exp and unit != 1:
                break
            points.append((exp, unit * 10**exp))
    return points


def log_sweep(units: Iterable[int], max_exp: int) -> list[int]:
    return [value for _, value in log_sweep_points(units, max_exp)]


def actions_for_exponent(exp: int) -> int:
    """Number of actions per sequence for payloads of size ``~10**exp``.

    Keeps the total run time bounded as single payloads grow.
    """
    if exp < 1:
        return 1000
    if exp < 5:
        return 500
    if exp < 6:
        return 100
    if exp < 8:
        return 10
    return 2
