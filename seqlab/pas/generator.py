"""Synthetic action payloads."""

from __future__ import annotations

import os
import random

from seqlab.models import Action


class RandomActionSource:
    """Produces random payloads of an exact size.

    With an ``rng`` the content is reproducible (``random.Random.randbytes``),
    otherwise it comes from ``os.urandom``.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng

    def generate(self, size: int) -> Action:
        if size < 0:
            raise ValueError(f"action size must be >= 0, got {size}")
        if self._rng is not None:
            return self._rng.randbytes(size)
        return os.urandom(size)
