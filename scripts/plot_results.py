"""Render charts for benchmark CSV files that were written earlier.

Reads every ``*.csv`` in a results directory (as produced by ``main.py``) and
writes one PNG per table next to it, or into ``--out-dir``.

Usage:
    python scripts/plot_results.py --results-dir data
    python scripts/plot_results.py --results-dir data --out-dir figures --log-x overhead ratio
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running as a plain script from the repository root without installing
_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from seqlab.experiments.sink import read_csv  # noqa: E402
from seqlab.visualization import plot_wide_table  # noqa: E402

logger = logging.getLogger("seqlab.plot_results")


def render_directory(
    results_dir: Path,
    out_dir: Path | None = None,
    log_x_markers: tuple[str, ...] = ("overhead", "ratio"),
) -> list[Path]:
    """Plot every CSV table in ``results_dir``.

    Tables whose file name contains one of ``log_x_markers`` get a log-scale
    x axis (their keys come from a log-scale sweep).
    """
    out_dir = out_dir or results_dir
    charts: list[Path] = []
    for csv_path in sorted(results_dir.glob("*.csv")):
        table = read_csv(csv_path)
        if len(table.header) < 2 or not table.rows:
            logger.warning("Skipping %s: no data", csv_path)
            continue
        log_x = any(marker in csv_path.stem for marker in log_x_markers)
        charts.append(
            plot_wide_table(
                table,
                out_dir / f"{csv_path.stem}.png",
                title=csv_path.stem,
                log_x=log_x,
            )
        )
    return charts


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--results-dir", required=True, type=Path)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--log-x",
        nargs="*",
        default=["overhead", "ratio"],
        help="File-name fragments of tables plotted with a log-scale x axis",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    charts = render_directory(args.results_dir, args.out_dir, tuple(args.log_x))
    logger.info("Rendered %d charts", len(charts))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
