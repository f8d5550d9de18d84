"""
authkey_core.utils
------------------
Lightweight helpers for hex/byte normalization and SHA3-256 hashing.
Every fixed-width value in the package is built from bytes that pass through here.
"""

from __future__ import annotations
from typing import Union
from cryptography.hazmat.primitives import hashes

HexInput = Union[str, bytes, bytearray, memoryview]


def strip_0x(s: str) -> str:
    return s[2:] if s[:2].lower() == "0x" else s


def to_bytes(hex_input: HexInput) -> bytes:
    """Normalize a hex string (``0x`` optional) or a byte buffer to raw bytes."""
    if isinstance(hex_input, str):
        digits = strip_0x(hex_input.strip())
        try:
            return bytes.fromhex(digits)
        except ValueError as e:
            raise ValueError(f"Invalid hex string: {hex_input!r}") from e
    if isinstance(hex_input, (bytes, bytearray, memoryview)):
        return bytes(hex_input)
    raise TypeError(f"Expected hex string or bytes, got {type(hex_input).__name__}")


def to_hex(b: bytes) -> str:
    return "0x" + bytes(b).hex()


def sha3_256(data: bytes) -> bytes:
    # 32-byte digest
    h = hashes.Hash(hashes.SHA3_256())
    h.update(data)
    return h.finalize()
