"""
authkey_core.authentication_key
-------------------------------
Each account stores an authentication key. The key lets the account owner
rotate the private key(s) behind an account without changing the address
that hosts it.

    auth_key = SHA3-256(public_key_bytes | scheme)

where `scheme` is the 1-byte AuthKeyScheme tag for the key variant:

- Ed25519:       SHA3-256(p | 0x00)
- MultiEd25519:  SHA3-256(p_1 | ... | p_n | K | 0x01)

The account address is derived from the authentication key byte for byte,
since both are 32 bytes wide.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from .address import AccountAddress
from .constants import AUTH_KEY_LENGTH, AuthKeyScheme
from .crypto import Ed25519PublicKey, MultiEd25519PublicKey
from .errors import InvalidLength
from .logger import get_logger
from .utils import sha3_256, to_bytes, to_hex

log = get_logger("authkey.derive")


@dataclass(frozen=True)
class AuthenticationKey:
    data: bytes

    def __post_init__(self):
        raw = to_bytes(self.data)
        if len(raw) != AUTH_KEY_LENGTH:
            log.warning(f"[AUTH KEY] rejected {len(raw)}-byte input")
            raise InvalidLength(AUTH_KEY_LENGTH, len(raw))
        object.__setattr__(self, "data", raw)

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------
    @classmethod
    def derive(cls, material: bytes, scheme: AuthKeyScheme) -> "AuthenticationKey":
        """Hash key material with the scheme tag appended as the final byte."""
        scheme = AuthKeyScheme(scheme)
        if scheme is AuthKeyScheme.DERIVE_RESOURCE_ACCOUNT:
            raise ValueError("DERIVE_RESOURCE_ACCOUNT is reserved and has no public key recipe")
        key = cls(sha3_256(bytes(material) + scheme.as_byte()))
        if log.isEnabledFor(logging.DEBUG):
            log.debug("[DERIVE] scheme=%s auth_key=%s", scheme.name, key.to_hex())
        return key

    @classmethod
    def from_ed25519_public_key(cls, public_key: Ed25519PublicKey) -> "AuthenticationKey":
        return cls.derive(public_key.to_bytes(), AuthKeyScheme.ED25519)

    @classmethod
    def from_multi_ed25519_public_key(cls, public_key: MultiEd25519PublicKey) -> "AuthenticationKey":
        """
        K-of-N MultiEd25519PublicKey to AuthenticationKey:
        `sha3-256(p_1 | ... | p_n | K | 0x01)`. `K` is the number of signatures
        required; `0x01` is the 1-byte MultiEd25519 scheme.
        """
        return cls.derive(public_key.to_bytes(), AuthKeyScheme.MULTI_ED25519)

    @classmethod
    def from_public_key(cls, public_key) -> "AuthenticationKey":
        if isinstance(public_key, Ed25519PublicKey):
            return cls.from_ed25519_public_key(public_key)
        if isinstance(public_key, MultiEd25519PublicKey):
            return cls.from_multi_ed25519_public_key(public_key)
        raise TypeError(f"Unsupported public key type: {type(public_key).__name__}")

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def derived_address(self) -> AccountAddress:
        """Current addresses are 32 bytes, so the key bytes map directly."""
        return AccountAddress(bytes(self.data))

    def to_hex(self) -> str:
        return to_hex(self.data)

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.to_hex()
