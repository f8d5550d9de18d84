import pytest
from authkey_core import AccountAddress, AuthenticationKey, InvalidLength


def test_address_requires_32_bytes():
    assert AccountAddress(bytes(32)).data == bytes(32)
    with pytest.raises(InvalidLength) as exc:
        AccountAddress(bytes(20))
    assert "Account Address length should be 32" in str(exc.value)


def test_special_addresses_use_short_form():
    assert str(AccountAddress(bytes(32))) == "0x0"
    assert str(AccountAddress(bytes(31) + b"\x0f")) == "0xf"
    assert str(AccountAddress(bytes(31) + b"\x10")) == "0x" + "00" * 31 + "10"


def test_regular_addresses_use_long_form():
    raw = b"\x10" + bytes(31)
    assert str(AccountAddress(raw)) == "0x10" + "00" * 31


def test_from_str():
    digits = "0123456789abcdef" * 4
    assert AccountAddress.from_str("0x" + digits).data == bytes.fromhex(digits)
    assert AccountAddress.from_str(digits) == AccountAddress.from_str("0x" + digits.upper())
    with pytest.raises(InvalidLength):
        AccountAddress.from_str("0x1")
    with pytest.raises(InvalidLength) as exc:
        AccountAddress.from_str("0x" + "a" * 63)
    assert exc.value.expected == 64
    assert exc.value.actual == 63


def test_address_matches_auth_key_bytes():
    key = AuthenticationKey(bytes(range(32)))
    assert bytes(key.derived_address()) == bytes(key)
