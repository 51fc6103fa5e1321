"""Alignment of several measurement series into one wide table.

The first series contributes its key and value columns, every further series
only its value column, appended in order:

    Length,1-byte actions,500-byte actions,...
    100,3,4,...

``join_positional`` matches rows purely by index and never looks at the
keys. Series with different keys or lengths silently produce misaligned
rows: a shorter series leaves trailing cells missing and the surplus rows
of a longer one are dropped. ``join_keyed`` produces the same layout but
raises :class:`TableAlignmentError` on any mismatch.
"""

from __future__ import annotations

from seqlab.errors import TableAlignmentError
from seqlab.models import Series, WideTable


def _header(series: tuple[Series, ...]) -> tuple[str, ...]:
    first = series[0]
    return (first.key_label, first.value_label) + tuple(s.value_label for s in series[1:])


def series_table(series: Series) -> WideTable:
    return join_positional(series)


def join_positional(*series: Series) -> WideTable:
    if not series:
        raise ValueError("at least one series is required")
    first = series[0]
    rows = []
    for j, (key, value) in enumerate(first.rows):
        row = [key, value]
        for other in series[1:]:
            if j < len(other.rows):
                row.append(other.rows[j][1])
        rows.append(tuple(row))
    return WideTable(header=_header(series), rows=tuple(rows))


def join_keyed(*series: Series) -> WideTable:
    """Join series whose keys must match row for row."""
    if not series:
        raise ValueError("at least one series is required")
    first = series[0]
    expected = first.keys()
    for idx, other in enumerate(series[1:], start=1):
        if len(other) != len(first):
            raise TableAlignmentError(
                f"series {idx} ({other.value_label!r}) has {len(other)} rows, "
                f"expected {len(first)}"
            )
        for j, (want, got) in enumerate(zip(expected, other.keys())):
            if want != got:
                raise TableAlignmentError(
                    f"series {idx} ({other.value_label!r}) row {j}: key {got!r} != {want!r}"
                )
    return join_positional(*series)
