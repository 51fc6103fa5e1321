"""Reference peer-action sequence.

Each appended action is encrypted for its group, chained to the previous
entry by a SHA-256 digest and signed by the appending peer:

    ciphertext = AES-256-GCM(group_key, nonce, action, aad=group)
    digest     = SHA256(prev_digest || nonce || len(ct) || ct
                        || len(group) || group || peer_public_key)
    signature  = ECDSA-secp256k1(peer_private_key, digest)

The first entry chains to 32 zero bytes. ``verify`` recomputes the chain and
checks every signature; it never needs the group key. ``serialize`` emits
canonical JSON (sorted keys, compact separators, base64 binary fields).
"""

from __future__ import annotations

import base64
import hashlib
import json
import os
from dataclasses import dataclass
from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from seqlab.keys import GROUP_KEY_SIZE
from seqlab.models import Action, GroupKey, PeerKey

GENESIS_DIGEST = b"\x00" * 32
NONCE_SIZE = 12

_SIGNATURE_ALGORITHM = ec.ECDSA(Prehashed(hashes.SHA256()))


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _unb64(text: str) -> bytes:
    return base64.b64decode(text.encode("ascii"), validate=True)


def chain_digest(
    prev_digest: bytes, nonce: bytes, ciphertext: bytes, group: str, peer: bytes
) -> bytes:
    group_raw = group.encode("utf-8")
    h = hashlib.sha256()
    h.update(prev_digest)
    h.update(nonce)
    h.update(len(ciphertext).to_bytes(8, "big"))
    h.update(ciphertext)
    h.update(len(group_raw).to_bytes(4, "big"))
    h.update(group_raw)
    h.update(peer)
    return h.digest()


@dataclass(frozen=True)
class PeerAction:
    """One signed, chained entry of a :class:`PeerActionSequence`."""

    ciphertext: bytes
    nonce: bytes
    group: str
    peer: bytes
    digest: bytes
    signature: bytes

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": _b64(self.ciphertext),
            "nonce": _b64(self.nonce),
            "group": self.group,
            "peer": _b64(self.peer),
            "digest": _b64(self.digest),
            "signature": _b64(self.signature),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PeerAction":
        try:
            return cls(
                ciphertext=_unb64(data["action"]),
                nonce=_unb64(data["nonce"]),
                group=str(data["group"]),
                peer=_unb64(data["peer"]),
                digest=_unb64(data["digest"]),
                signature=_unb64(data["signature"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"malformed peer action: {e}") from e


class PeerActionSequence:
    """Append-only, cryptographically linked sequence of peer actions."""

    def __init__(self, entries: list[PeerAction] | None = None) -> None:
        self._entries: list[PeerAction] = list(entries or [])

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[PeerAction, ...]:
        return tuple(self._entries)

    def last_digest(self) -> bytes:
        return self._entries[-1].digest if self._entries else GENESIS_DIGEST

    def append(
        self,
        action: Action,
        peer_key: PeerKey,
        group: str,
        group_key: GroupKey,
    ) -> None:
        if len(group_key) != GROUP_KEY_SIZE:
            raise ValueError(f"group key must be {GROUP_KEY_SIZE} bytes")
        nonce = os.urandom(NONCE_SIZE)
        ciphertext = AESGCM(group_key).encrypt(nonce, bytes(action), group.encode("utf-8"))
        digest = chain_digest(
            self.last_digest(), nonce, ciphertext, group, peer_key.public_bytes
        )
        signature = peer_key.private_key.sign(digest, _SIGNATURE_ALGORITHM)
        self._entries.append(
            PeerAction(
                ciphertext=ciphertext,
                nonce=nonce,
                group=group,
                peer=peer_key.public_bytes,
                digest=digest,
                signature=signature,
            )
        )

    def verify(self) -> bool:
        """Check the digest chain and every signature; ``True`` when empty."""
        public_keys: dict[bytes, ec.EllipticCurvePublicKey] = {}
        prev = GENESIS_DIGEST
        for entry in self._entries:
            expected = chain_digest(
                prev, entry.nonce, entry.ciphertext, entry.group, entry.peer
            )
            if expected != entry.digest:
                return False
            public_key = public_keys.get(entry.peer)
            if public_key is None:
                try:
                    public_key = ec.EllipticCurvePublicKey.from_encoded_point(
                        ec.SECP256K1(), entry.peer
                    )
                except ValueError:
                    return False
                public_keys[entry.peer] = public_key
            try:
                public_key.verify(entry.signature, entry.digest, _SIGNATURE_ALGORITHM)
            except InvalidSignature:
                return False
            prev = entry.digest
        return True

    def serialize(self) -> bytes:
        payload = [entry.to_dict() for entry in self._entries]
        return json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")

    @classmethod
    def deserialize(cls, data: bytes) -> "PeerActionSequence":
        try:
            payload = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValueError(f"malformed sequence encoding: {e}") from e
        if not isinstance(payload, list):
            raise ValueError("sequence encoding must be a JSON list")
        return cls([PeerAction.from_dict(item) for item in payload])


class PeerActionSequenceEngine:
    """Factory of empty :class:`PeerActionSequence` instances."""

    def new(self) -> PeerActionSequence:
        return PeerActionSequence()
