"""Benchmark harness for cryptographically linked peer-action sequences.

Exports base data structures and the configuration loader.
"""

from seqlab.config import HarnessConfig, load_config  # noqa: F401
from seqlab.models import PeerKey, Series, WideTable  # noqa: F401

__all__ = [
    "HarnessConfig",
    "PeerKey",
    "Series",
    "WideTable",
    "load_config",
]
