import pytest
from cryptography.hazmat.primitives.asymmetric import ed25519
from authkey_core.crypto import Ed25519PublicKey, MultiEd25519PublicKey


def _pub(i: int) -> Ed25519PublicKey:
    return Ed25519PublicKey(bytes([i]) * 32)


def test_ed25519_from_crypto_roundtrip():
    sk = ed25519.Ed25519PrivateKey.generate()
    pk = Ed25519PublicKey.from_crypto(sk.public_key())
    assert pk.to_bytes() == sk.public_key().public_bytes_raw()
    assert pk.to_crypto().public_bytes_raw() == pk.to_bytes()


def test_ed25519_accepts_hex():
    assert Ed25519PublicKey("0x" + "11" * 32) == _pub(0x11)
    assert str(_pub(0x11)) == "0x" + "11" * 32


def test_ed25519_rejects_wrong_length(caplog):
    with pytest.raises(ValueError):
        Ed25519PublicKey(bytes(31))
    assert "rejected public key of 31 bytes" in caplog.text


def test_multi_serialization_layout():
    pk = MultiEd25519PublicKey.create([_pub(1), _pub(2), _pub(3)], 2)
    raw = pk.to_bytes()
    assert len(raw) == 32 * 3 + 1
    assert raw == bytes([1]) * 32 + bytes([2]) * 32 + bytes([3]) * 32 + b"\x02"
    assert MultiEd25519PublicKey.from_bytes(raw) == pk
    assert MultiEd25519PublicKey.from_bytes(raw.hex()) == pk


def test_multi_rejects_bad_threshold():
    with pytest.raises(ValueError):
        MultiEd25519PublicKey.create([_pub(1), _pub(2)], 0)
    with pytest.raises(ValueError):
        MultiEd25519PublicKey.create([_pub(1), _pub(2)], 3)
    with pytest.raises(TypeError):
        MultiEd25519PublicKey.create([_pub(1), _pub(2)], 1.5)
    with pytest.raises(TypeError):
        MultiEd25519PublicKey.create([_pub(1), _pub(2)], True)
    with pytest.raises(TypeError):
        MultiEd25519PublicKey.create([_pub(1), _pub(2)], "1")


def test_multi_rejects_bad_key_count():
    with pytest.raises(ValueError):
        MultiEd25519PublicKey.create([], 1)
    with pytest.raises(ValueError):
        MultiEd25519PublicKey.create([_pub(1)] * 33, 1)
    with pytest.raises(TypeError):
        MultiEd25519PublicKey.create([bytes(32)], 1)


def test_multi_from_bytes_rejects_bad_length():
    for n in (0, 32, 34, 65):
        with pytest.raises(ValueError):
            MultiEd25519PublicKey.from_bytes(bytes(n))


def test_multi_keys_are_a_tuple():
    keys = [_pub(1), _pub(2)]
    pk = MultiEd25519PublicKey(keys, 1)
    keys.append(_pub(3))
    assert pk.keys == (_pub(1), _pub(2))
    assert str(pk) == "1-of-2 MultiEd25519 public key"


def test_ed25519_checks_length_only():
    # any 32 bytes are accepted; the curve point is never decoded
    for b in (0x00, 0x7F, 0xFF):
        assert Ed25519PublicKey(bytes([b]) * 32).to_bytes() == bytes([b]) * 32
