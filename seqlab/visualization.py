"""Line charts of benchmark tables."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402

from seqlab.models import WideTable  # noqa: E402

logger = logging.getLogger("seqlab.visualization")


def _as_float(value) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def plot_wide_table(
    table: WideTable,
    path: str | Path,
    title: str | None = None,
    log_x: bool = False,
    ylabel: str | None = None,
) -> Path:
    """Plot every value column of ``table`` against its key column and save a PNG.

    Works for tables built in memory and for tables read back from CSV
    (string cells). Cells that are not numbers are skipped.
    """
    fig, ax = plt.subplots(figsize=(10, 6), constrained_layout=True)
    keys = [_as_float(row[0]) if row else None for row in table.rows]
    for col_idx, label in enumerate(table.header[1:], start=1):
        xs, ys = [], []
        for key, row in zip(keys, table.rows):
            y = _as_float(row[col_idx]) if col_idx < len(row) else None
            if key is None or y is None:
                continue
            xs.append(key)
            ys.append(y)
        if not xs:
            continue
        ax.plot(
            xs,
            ys,
            label=label,
            linewidth=2,
            marker="o",
            markersize=4,
            markerfacecolor="white",
            markeredgewidth=1.0,
        )
    if log_x:
        ax.set_xscale("log")
    ax.set_xlabel(table.header[0] if table.header else "", fontsize=12)
    if ylabel:
        ax.set_ylabel(ylabel, fontsize=12)
    if title:
        ax.set_title(title, fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.25, linestyle="--", linewidth=0.7)
    if len(table.header) > 2:
        ax.legend(frameon=False, fontsize=9)
    out_path = Path(path)
    if out_path.parent:
        os.makedirs(out_path.parent, exist_ok=True)
    fig.savefig(out_path, dpi=180)
    plt.close(fig)
    logger.info("Chart saved as: %s", out_path)
    return out_path
