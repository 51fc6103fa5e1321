"""Full benchmark run.

Runs every experiment family in sequence and writes one CSV per family under
``config.output_dir``:

    <prefix>-generation-time.csv     one column per action size
    <prefix>-verification-time.csv   one column per action size
    <prefix>-space.csv               one column per action size
    <prefix>-overhead.csv
    <prefix>-ratio-write-verif.csv   write time, verify time, ratio
    <prefix>-space-<n>b.csv          single action size

Optional PNG charts and LaTeX tables sit next to the CSV files, and a
``manifest.json`` describing the run is written last.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from seqlab.experiments.join import join_keyed, series_table
from seqlab.experiments.latex_export import write_latex_table
from seqlab.experiments.runner import ExperimentRunner
from seqlab.experiments.sink import write_csv
from seqlab.models import WideTable
from seqlab.sweep import linear_sweep
from seqlab.visualization import plot_wide_table

logger = logging.getLogger("seqlab.suite")


@dataclass(frozen=True)
class FamilyOutput:
    name: str
    table: WideTable
    ylabel: str
    log_x: bool = False


def ensure_output_dir(path: str | Path) -> Path:
    out = Path(path)
    out.mkdir(parents=True, exist_ok=True)
    return out


def run_families(runner: ExperimentRunner) -> list[FamilyOutput]:
    """Execute all experiments and join their series into tables."""
    config = runner.config
    lengths = linear_sweep(config.lengths.start, config.lengths.end, config.lengths.step)
    sizes = list(config.action_sizes)
    logger.info(
        "Running length sweep %d..%d step %d for action sizes %s (%d repetitions)",
        config.lengths.start,
        config.lengths.end,
        config.lengths.step,
        sizes,
        config.repetitions,
    )

    outputs = [
        FamilyOutput(
            "generation-time",
            join_keyed(*runner.generation_time(sizes, lengths)),
            ylabel="Time (ms)",
        ),
        FamilyOutput(
            "verification-time",
            join_keyed(*runner.verification_time(sizes, lengths)),
            ylabel="Time (ms)",
        ),
        FamilyOutput(
            "space",
            join_keyed(*runner.space_usage(sizes, lengths)),
            ylabel="Size (bytes)",
        ),
        FamilyOutput(
            "overhead",
            series_table(
                runner.overhead_ratio(
                    config.overhead.action_nb, config.overhead.units, config.overhead.max_exp
                )
            ),
            ylabel="Overhead",
            log_x=True,
        ),
        FamilyOutput(
            "ratio-write-verif",
            join_keyed(*runner.write_verify_ratio(config.ratio.units, config.ratio.max_exp)),
            ylabel="Time (ns) / ratio",
            log_x=True,
        ),
    ]
    single = config.single_space_action_size
    outputs.append(
        FamilyOutput(
            f"space-{single}b",
            join_keyed(*runner.space_usage([single], lengths)),
            ylabel="Size (bytes)",
        )
    )
    return outputs


def run_suite(runner: ExperimentRunner) -> dict[str, Path]:
    """Run every family with the runner's own config and persist the results.

    Returns:
        Mapping family name -> written CSV path.

    Raises:
        OSError: If the output directory or any file cannot be written.
    """
    config = runner.config
    out_dir = ensure_output_dir(config.output_dir)
    logger.info("Benchmark output directory: %s", out_dir)

    written: dict[str, Path] = {}
    artefacts: dict[str, list[str]] = {}
    for family in run_families(runner):
        stem = f"{config.file_prefix}-{family.name}"
        csv_path = write_csv(family.table, out_dir / f"{stem}.csv")
        written[family.name] = csv_path
        files = [csv_path.name]
        if config.charts:
            chart = plot_wide_table(
                family.table,
                out_dir / f"{stem}.png",
                title=family.name.replace("-", " ").capitalize(),
                log_x=family.log_x,
                ylabel=family.ylabel,
            )
            files.append(chart.name)
        if config.latex:
            tex = write_latex_table(family.table, out_dir / f"{stem}.tex", caption=family.name)
            files.append(tex.name)
        artefacts[family.name] = files

    manifest_path = out_dir / "manifest.json"
    with open(manifest_path, "w", encoding="utf-8") as f:
        json.dump({"config": config.to_dict(), "files": artefacts}, f, indent=2)
    logger.info("Benchmark manifest written to %s", manifest_path)
    return written
