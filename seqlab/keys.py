"""Generation of peer and group key material.

Key generation is fail-fast: any error surfaces as
:class:`~seqlab.errors.KeyGenerationError` so an experiment never runs with
missing or partial keys.
"""

from __future__ import annotations

import logging
import os

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from seqlab.errors import KeyGenerationError
from seqlab.models import GroupKey, PeerKey

GROUP_KEY_SIZE = 32

logger = logging.getLogger("seqlab.keys")


def peer_key_from_private(private_key: ec.EllipticCurvePrivateKey) -> PeerKey:
    public_bytes = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.CompressedPoint,
    )
    return PeerKey(private_key=private_key, public_bytes=public_bytes)


def generate_peer_key() -> PeerKey:
    """Generate a fresh secp256k1 keypair."""
    try:
        private_key = ec.generate_private_key(ec.SECP256K1())
    except Exception as e:
        logger.error("Peer key generation failed: %s", e)
        raise KeyGenerationError(f"peer key generation failed: {e}") from e
    return peer_key_from_private(private_key)


def generate_group_key() -> GroupKey:
    try:
        key = os.urandom(GROUP_KEY_SIZE)
    except NotImplementedError as e:
        logger.error("Group key generation failed: %s", e)
        raise KeyGenerationError(f"group key generation failed: {e}") from e
    return key


def generate_keys() -> tuple[PeerKey, GroupKey]:
    return generate_peer_key(), generate_group_key()
