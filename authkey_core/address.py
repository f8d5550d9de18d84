# authkey_core/address.py
from __future__ import annotations
from dataclasses import dataclass
from .constants import ACCOUNT_ADDRESS_LENGTH
from .errors import InvalidLength
from .logger import get_logger
from .utils import strip_0x, to_bytes

log = get_logger("authkey.address")


@dataclass(frozen=True)
class AccountAddress:
    """
    32-byte on-chain account identity.

    At account creation the address is the byte-for-byte copy of the
    account's authentication key (see AuthenticationKey.derived_address).
    """
    data: bytes

    def __post_init__(self):
        raw = to_bytes(self.data)
        if len(raw) != ACCOUNT_ADDRESS_LENGTH:
            log.warning(f"[ADDRESS] rejected {len(raw)}-byte input")
            raise InvalidLength(ACCOUNT_ADDRESS_LENGTH, len(raw), what="Account Address")
        object.__setattr__(self, "data", raw)

    @classmethod
    def from_str(cls, address: str) -> "AccountAddress":
        """Parse the LONG form: exactly 64 hex digits, ``0x`` prefix optional."""
        digits = strip_0x(address.strip())
        if len(digits) != ACCOUNT_ADDRESS_LENGTH * 2:
            raise InvalidLength(ACCOUNT_ADDRESS_LENGTH * 2, len(digits), what="Account Address hex")
        return cls(digits)

    @classmethod
    def from_key(cls, public_key) -> "AccountAddress":
        from .authentication_key import AuthenticationKey
        return AuthenticationKey.from_public_key(public_key).derived_address()

    def is_special(self) -> bool:
        # 0x0 .. 0xf
        return all(b == 0 for b in self.data[:-1]) and self.data[-1] < 0x10

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        # AIP-40: SHORT form for special addresses, LONG form otherwise
        suffix = self.data.hex()
        if self.is_special():
            suffix = suffix.lstrip("0") or "0"
        return f"0x{suffix}"
