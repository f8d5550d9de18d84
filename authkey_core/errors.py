# authkey_core/errors.py
from __future__ import annotations


class InvalidLength(ValueError):
    """Raised when a fixed-width value is built from the wrong number of bytes."""

    def __init__(self, expected: int, actual: int, what: str = "Authentication Key"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} length should be {expected}, got {actual}")
