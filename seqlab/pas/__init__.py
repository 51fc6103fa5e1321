"""Reference peer-action sequence and action generator.

Concrete collaborators used by a full benchmark run; the harness itself only
depends on the protocols in :mod:`seqlab.interfaces`.
"""

from seqlab.pas.generator import RandomActionSource
from seqlab.pas.sequence import PeerAction, PeerActionSequence, PeerActionSequenceEngine

__all__ = [
    "PeerAction",
    "PeerActionSequence",
    "PeerActionSequenceEngine",
    "RandomActionSource",
]
