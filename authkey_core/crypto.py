"""
authkey_core.crypto
-------------------
Public key value types consumed by authentication key derivation:

- Ed25519PublicKey: a single 32-byte Ed25519 key (length-checked only; the
  curve point is not decoded), convertible to and from `cryptography` keys
- MultiEd25519PublicKey: an ordered K-of-N set of Ed25519 keys, serialized
  as p_1 | ... | p_n | K

Only encoding and shape validation live here. Signing and verification are
out of scope for this package.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple
from cryptography.hazmat.primitives.asymmetric import ed25519
from .constants import ED25519_PUBLIC_KEY_LENGTH, MAX_MULTI_ED25519_KEYS
from .logger import get_logger
from .utils import HexInput, to_bytes, to_hex

log = get_logger("authkey.crypto")


# --------- Ed25519 ----------
@dataclass(frozen=True)
class Ed25519PublicKey:
    key: bytes

    def __post_init__(self):
        raw = to_bytes(self.key)
        if len(raw) != ED25519_PUBLIC_KEY_LENGTH:
            log.warning(f"[ED25519] rejected public key of {len(raw)} bytes")
            raise ValueError(f"Ed25519 public key length should be {ED25519_PUBLIC_KEY_LENGTH}, got {len(raw)}")
        object.__setattr__(self, "key", raw)

    @classmethod
    def from_crypto(cls, pk: ed25519.Ed25519PublicKey) -> "Ed25519PublicKey":
        """Wrap a `cryptography` Ed25519 public key object."""
        return cls(pk.public_bytes_raw())

    def to_bytes(self) -> bytes:
        return self.key

    def to_crypto(self) -> ed25519.Ed25519PublicKey:
        return ed25519.Ed25519PublicKey.from_public_bytes(self.key)

    def __str__(self) -> str:
        return to_hex(self.key)


# --------- MultiEd25519 (K-of-N) ----------
@dataclass(frozen=True)
class MultiEd25519PublicKey:
    """
    Threshold public key: `threshold` of the `keys` must sign.

    Key order is significant. It is part of the serialized form and therefore
    of every authentication key derived from it.
    """
    keys: Tuple[Ed25519PublicKey, ...]
    threshold: int

    def __post_init__(self):
        keys = tuple(self.keys)
        n = len(keys)
        if not 1 <= n <= MAX_MULTI_ED25519_KEYS:
            log.warning(f"[MULTI-ED25519] rejected key set of size {n}")
            raise ValueError(f"MultiEd25519 needs between 1 and {MAX_MULTI_ED25519_KEYS} keys, got {n}")
        if not all(isinstance(k, Ed25519PublicKey) for k in keys):
            raise TypeError("MultiEd25519 keys must be Ed25519PublicKey instances")
        if not isinstance(self.threshold, int) or isinstance(self.threshold, bool):
            raise TypeError(f"MultiEd25519 threshold must be an int, got {type(self.threshold).__name__}")
        if not 1 <= self.threshold <= n:
            log.warning(f"[MULTI-ED25519] rejected threshold {self.threshold} of {n}")
            raise ValueError(f"MultiEd25519 threshold must be in [1, {n}], got {self.threshold}")
        object.__setattr__(self, "keys", keys)

    @classmethod
    def create(cls, keys: Sequence[Ed25519PublicKey], threshold: int) -> "MultiEd25519PublicKey":
        return cls(tuple(keys), threshold)

    def to_bytes(self) -> bytes:
        # p_1 | ... | p_n | K
        return b"".join(k.to_bytes() for k in self.keys) + bytes([self.threshold])

    @classmethod
    def from_bytes(cls, data: HexInput) -> "MultiEd25519PublicKey":
        raw = to_bytes(data)
        body, rem = divmod(len(raw) - 1, ED25519_PUBLIC_KEY_LENGTH)
        if len(raw) < ED25519_PUBLIC_KEY_LENGTH + 1 or rem != 0:
            raise ValueError(f"Invalid MultiEd25519 public key length: {len(raw)}")
        keys = tuple(
            Ed25519PublicKey(raw[i * ED25519_PUBLIC_KEY_LENGTH:(i + 1) * ED25519_PUBLIC_KEY_LENGTH])
            for i in range(body)
        )
        return cls(keys, raw[-1])

    def __str__(self) -> str:
        return f"{self.threshold}-of-{len(self.keys)} MultiEd25519 public key"
