"""Core data structures for the sequence benchmark harness.

This module defines:
    Action    -- alias for one fixed-size synthetic payload.
    GroupKey  -- alias for the 32-byte symmetric key of a labeled group.
    PeerKey   -- secp256k1 keypair of the synthetic actor appending entries.
    Series    -- one measurement column keyed by the swept parameter.
    WideTable -- several series aligned into a single table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from cryptography.hazmat.primitives.asymmetric import ec

Action = bytes
GroupKey = bytes
Row = tuple[Any, ...]


@dataclass(frozen=True)
class PeerKey:
    """Asymmetric keypair identifying one synthetic actor.

    Attributes:
        private_key: secp256k1 private key used to sign appended entries.
        public_bytes: Compressed SEC1 encoding of the public key (33 bytes).
    """

    private_key: ec.EllipticCurvePrivateKey = field(repr=False)
    public_bytes: bytes


@dataclass(frozen=True)
class Series:
    """Ordered ``(key, value)`` pairs produced by one experiment for one category.

    Fields:
        key_label: Header of the swept parameter column (e.g. ``"Length"``).
        value_label: Header of the measured column (e.g. ``"500-byte actions"``).
        rows: Measurements in sweep order.
    """

    key_label: str
    value_label: str
    rows: tuple[tuple[int, Any], ...] = ()

    def keys(self) -> list[int]:
        return [k for k, _ in self.rows]

    def values(self) -> list[Any]:
        return [v for _, v in self.rows]

    def __len__(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class WideTable:
    """Rows keyed by the first column, one extra column per joined series."""

    header: tuple[str, ...]
    rows: tuple[Row, ...] = ()

    def records(self) -> Iterator[Row]:
        """Yield the header followed by every data row."""
        yield self.header
        yield from self.rows

    def column(self, label: str) -> list[Any]:
        idx = self.header.index(label)
        return [row[idx] if idx < len(row) else None for row in self.rows]
