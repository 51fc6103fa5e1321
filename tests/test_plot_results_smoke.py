from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from scripts.plot_results import render_directory
from seqlab.experiments.sink import write_csv
from seqlab.models import WideTable


def test_render_directory_smoke(tmp_path: Path) -> None:
    write_csv(
        WideTable(header=("Action size (bytes)", "Overhead"), rows=((1, 2.0), (10, 0.5))),
        tmp_path / "x-overhead.csv",
    )
    write_csv(WideTable(header=("Length",)), tmp_path / "empty.csv")

    charts = render_directory(tmp_path, tmp_path / "png")

    assert [c.name for c in charts] == ["x-overhead.png"]
    assert charts[0].exists()


def test_script_runs_from_outside_the_project(tmp_path: Path) -> None:
    script = Path(__file__).resolve().parents[1] / "scripts" / "plot_results.py"
    write_csv(
        WideTable(header=("Length", "1-byte actions"), rows=((100, 3), (200, 6))),
        tmp_path / "x-space.csv",
    )
    env = {k: v for k, v in os.environ.items() if k != "PYTHONPATH"}

    result = subprocess.run(
        [sys.executable, str(script), "--results-dir", str(tmp_path)],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert (tmp_path / "x-space.png").exists()
