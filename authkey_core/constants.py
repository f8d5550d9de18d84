# authkey_core/constants.py
"""
authkey_core.constants
----------------------
Protocol constants for authentication key derivation. These values must match
every other conforming implementation byte for byte.
"""

from __future__ import annotations
from enum import IntEnum

AUTH_KEY_LENGTH = 32
ACCOUNT_ADDRESS_LENGTH = 32
ED25519_PUBLIC_KEY_LENGTH = 32
MAX_MULTI_ED25519_KEYS = 32


class AuthKeyScheme(IntEnum):
    """1-byte scheme tag appended to the hash input."""
    ED25519 = 0
    MULTI_ED25519 = 1
    # Reserved: hashes an address with a seed, not a public key.
    DERIVE_RESOURCE_ACCOUNT = 255

    def as_byte(self) -> bytes:
        return bytes([self.value])
