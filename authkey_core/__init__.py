"""
authkey_core
============
Authentication key and account address derivation for an account-based ledger.

Provides:
- AuthenticationKey: 32-byte value derived via scheme-tagged SHA3-256
- Ed25519 / MultiEd25519 public key value types
- AccountAddress derived from an authentication key
"""

from .address import AccountAddress
from .authentication_key import AuthenticationKey
from .constants import AUTH_KEY_LENGTH, AuthKeyScheme
from .crypto import Ed25519PublicKey, MultiEd25519PublicKey
from .errors import InvalidLength

__all__ = [
    "AccountAddress",
    "AuthenticationKey",
    "AUTH_KEY_LENGTH",
    "AuthKeyScheme",
    "Ed25519PublicKey",
    "MultiEd25519PublicKey",
    "InvalidLength",
]
