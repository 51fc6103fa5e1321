from __future__ import annotations

import csv
import logging
from pathlib import Path

from seqlab.models import WideTable

logger = logging.getLogger("seqlab.sink")


def write_csv(table: WideTable, path: str | Path) -> Path:
    """Write ``table`` to ``path`` as UTF-8 CSV, header first.

    The file is truncated if present and closed (hence flushed) before
    returning. ``OSError`` is not caught: a failed write is fatal to the run.
    """
    out_path = Path(path)
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        for record in table.records():
            writer.writerow(record)
    logger.info("Wrote %d rows to %s", len(table.rows), out_path)
    return out_path


def read_csv(path: str | Path) -> WideTable:
    """Read a table written by :func:`write_csv`; cells stay strings."""
    with open(path, "r", newline="", encoding="utf-8") as f:
        records = [tuple(r) for r in csv.reader(f)]
    if not records:
        return WideTable(header=())
    return WideTable(header=records[0], rows=tuple(records[1:]))
