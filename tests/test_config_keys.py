from __future__ import annotations

from pathlib import Path

import pytest

from seqlab import keys
from seqlab.config import HarnessConfig, load_config
from seqlab.errors import ConfigError, KeyGenerationError
from seqlab.experiments.runner import ExperimentRunner
from seqlab.experiments.suite import run_suite


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_empty_config_uses_reference_defaults(tmp_path: Path) -> None:
    cfg = load_config(_write(tmp_path, ""))
    assert cfg == HarnessConfig()
    assert cfg.repetitions == 10
    assert cfg.group == "G1"
    assert cfg.output_dir == "data"
    assert cfg.action_sizes == (1, 500, 1000, 10000, 100000)
    assert (cfg.lengths.start, cfg.lengths.end, cfg.lengths.step) == (100, 2000, 100)
    assert cfg.overhead.max_exp == 8 and cfg.overhead.action_nb == 10
    assert cfg.ratio.max_exp == 9


def test_config_overrides(tmp_path: Path) -> None:
    cfg = load_config(
        _write(
            tmp_path,
            "repetitions: 3\n"
            "group: lab\n"
            "charts: true\n"
            "action_sizes: [8, 16]\n"
            "lengths: {start: 10, end: 30, step: 10}\n"
            "overhead: {units: [1, 5], max_exp: 2}\n",
        )
    )
    assert cfg.repetitions == 3
    assert cfg.group == "lab"
    assert cfg.charts is True
    assert cfg.action_sizes == (8, 16)
    assert cfg.lengths.end == 30
    assert cfg.overhead.units == (1, 5)
    assert cfg.overhead.action_nb == 10


def test_repository_config_loads() -> None:
    cfg = load_config(Path(__file__).resolve().parents[1] / "config.yaml")
    assert cfg.single_space_action_size == 256


@pytest.mark.parametrize(
    "text",
    [
        "unknown: 1\n",
        "lengths: {start: 1, stop: 2}\n",
        "ratio: [1, 2]\n",
        "repetitions: 0\n",
        "- a\n- b\n",
        "overhead: {units: [1, 2, 10], max_exp: 1}\n",
        "overhead: {units: [5, 2]}\n",
        "overhead: {units: []}\n",
        "overhead: {action_nb: 0}\n",
        "ratio: {max_exp: -1}\n",
    ],
)
def test_config_errors(tmp_path: Path, text: str) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, text))


def test_bad_sweep_config_fails_before_any_experiment(
    tmp_path: Path, make_engine, action_source, key_factory, fake_clock
) -> None:
    path = _write(tmp_path, f"output_dir: {tmp_path / 'out'}\noverhead: {{units: [1, 2, 10]}}\n")
    engine = make_engine()

    with pytest.raises(ConfigError, match="unit 10"):
        run_suite(
            ExperimentRunner(
                engine, action_source, load_config(path), key_factory=key_factory, clock=fake_clock
            )
        )

    assert engine.created == []
    assert not (tmp_path / "out").exists()


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_generate_keys() -> None:
    peer, group = keys.generate_keys()
    assert len(peer.public_bytes) == 33
    assert peer.public_bytes[0] in (2, 3)
    assert len(group) == keys.GROUP_KEY_SIZE


def test_key_generation_failure_is_fatal(monkeypatch) -> None:
    def boom(curve):
        raise RuntimeError("no entropy")

    monkeypatch.setattr(keys.ec, "generate_private_key", boom)
    with pytest.raises(KeyGenerationError):
        keys.generate_keys()
