"""Capability interfaces of the collaborators measured by the harness.

The runner only talks to these protocols, so the sweep, averaging and join
logic can be exercised with stubs instead of real cryptography. The reference
implementations live in :mod:`seqlab.pas`.
"""

from __future__ import annotations

from typing import Protocol

from seqlab.models import Action, GroupKey, PeerKey


class ActionSource(Protocol):
    def generate(self, size: int) -> Action:
        """Return a payload of exactly ``size`` bytes with random content."""
        ...


class Sequence(Protocol):
    def append(
        self,
        action: Action,
        peer_key: PeerKey,
        group: str,
        group_key: GroupKey,
    ) -> None: ...

    def verify(self) -> bool: ...

    def serialize(self) -> bytes: ...


class SequenceEngine(Protocol):
    def new(self) -> Sequence:
        """Return an empty sequence."""
        ...
