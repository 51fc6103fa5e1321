"""Harness configuration.

All run parameters are explicit values of :class:`HarnessConfig` passed into
the runner, so tests can use their own repetition count, group label and
output directory. ``load_config`` reads them from a YAML file; keys that are
absent fall back to the defaults of the reference benchmark run.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from seqlab.errors import ConfigError
from seqlab.sweep import check_units

_TOP_LEVEL_KEYS = {
    "log_level",
    "output_dir",
    "repetitions",
    "group",
    "charts",
    "latex",
    "file_prefix",
    "action_sizes",
    "lengths",
    "overhead",
    "ratio",
    "single_space_action_size",
}


@dataclass(frozen=True)
class LengthRange:
    start: int = 100
    end: int = 2000
    step: int = 100


@dataclass(frozen=True)
class LogSweepConfig:
    """Capped log-scale sweep over action sizes.

    ``action_nb`` is only read by the overhead experiment; the write/verify
    ratio experiment derives it from the exponent.
    """

    units: tuple[int, ...] = (1, 2, 5)
    max_exp: int = 8
    action_nb: int = 10

    def __post_init__(self) -> None:
        try:
            check_units(self.units)
        except ValueError as e:
            raise ConfigError(f"invalid sweep units {list(self.units)}: {e}") from e
        if self.max_exp < 0:
            raise ConfigError(f"max_exp must be >= 0, got {self.max_exp}")
        if self.action_nb <= 0:
            raise ConfigError(f"action_nb must be positive, got {self.action_nb}")


@dataclass(frozen=True)
class HarnessConfig:
    """Bundle of every parameter of a benchmark run."""

    repetitions: int = 10
    group: str = "G1"
    output_dir: str = "data"
    file_prefix: str = "seqlab"
    charts: bool = False
    latex: bool = False
    log_level: str = "INFO"
    action_sizes: tuple[int, ...] = (1, 500, 1000, 10000, 100000)
    lengths: LengthRange = field(default_factory=LengthRange)
    overhead: LogSweepConfig = field(default_factory=LogSweepConfig)
    ratio: LogSweepConfig = field(default_factory=lambda: LogSweepConfig(max_exp=9, action_nb=100))
    single_space_action_size: int = 256

    def __post_init__(self) -> None:
        if self.repetitions <= 0:
            raise ConfigError(f"repetitions must be positive, got {self.repetitions}")
        if not self.action_sizes:
            raise ConfigError("action_sizes must be a non-empty list")
        if self.lengths.step <= 0:
            raise ConfigError("lengths.step must be positive")

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


def _section(raw: dict[str, Any], name: str, cls, base):
    value = raw.get(name)
    if value is None:
        return base
    if not isinstance(value, dict):
        raise ConfigError(f"'{name}' must be a mapping")
    allowed = {f.name for f in dataclasses.fields(cls)}
    unknown = set(value) - allowed
    if unknown:
        raise ConfigError(f"unknown keys in '{name}': {', '.join(sorted(unknown))}")
    if "units" in value:
        value = {**value, "units": tuple(int(u) for u in value["units"])}
    return dataclasses.replace(base, **value)


def config_from_dict(raw: dict[str, Any]) -> HarnessConfig:
    unknown = set(raw) - _TOP_LEVEL_KEYS
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(sorted(unknown))}")
    base = HarnessConfig()
    kwargs: dict[str, Any] = {}
    for key in ("repetitions", "single_space_action_size"):
        if key in raw:
            kwargs[key] = int(raw[key])
    for key in ("group", "output_dir", "file_prefix", "log_level"):
        if key in raw:
            kwargs[key] = str(raw[key])
    for key in ("charts", "latex"):
        if key in raw:
            kwargs[key] = bool(raw[key])
    if "action_sizes" in raw:
        kwargs["action_sizes"] = tuple(int(s) for s in raw["action_sizes"] or ())
    kwargs["lengths"] = _section(raw, "lengths", LengthRange, base.lengths)
    kwargs["overhead"] = _section(raw, "overhead", LogSweepConfig, base.overhead)
    kwargs["ratio"] = _section(raw, "ratio", LogSweepConfig, base.ratio)
    return HarnessConfig(**kwargs)


def load_config(config_file: str | Path = "config.yaml") -> HarnessConfig:
    """Load configuration from YAML file."""
    with open(config_file, "r", encoding="utf-8") as file:
        raw = yaml.safe_load(file) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{config_file}: top level must be a mapping")
    return config_from_dict(raw)
