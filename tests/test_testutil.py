import pytest

from encid.core import NotFoundError, decode, encode
from encid.testutil import DemoKeyStore, check_round_trip


def test_encoder_key_id_equals_type():
    ks = DemoKeyStore(num_types=100)
    key_id, _ = ks.encoder_by_type(42)
    assert key_id == 42


def test_decoder_type_matches_encoder_type():
    ks = DemoKeyStore(num_types=100)
    for typ in (1, 17, 99):
        key_id, _ = ks.encoder_by_type(typ)
        got_typ, _ = ks.decoder_by_id(key_id)
        assert got_typ == typ


def test_default_modulus_is_two():
    ks = DemoKeyStore()
    assert ks.decoder_by_id(3)[0] == 1
    assert ks.decoder_by_id(4)[0] == 0


def test_encrypt_and_decrypt_are_inverse():
    ks = DemoKeyStore(num_types=100)
    key_id, encrypt = ks.encoder_by_type(5)
    _, decrypt = ks.decoder_by_id(key_id)
    block = bytes(range(16))
    assert decrypt(encrypt(block)) == block


def test_largest_key_id_found():
    ks = DemoKeyStore(num_types=100)
    key_id, _ = ks.encoder_by_type(999999)
    assert key_id == 999999


@pytest.mark.parametrize("key_id", [1000000, 5000000])
def test_missing_key(key_id):
    ks = DemoKeyStore(num_types=100)
    with pytest.raises(NotFoundError):
        ks.decoder_by_id(key_id)
    with pytest.raises(NotFoundError):
        ks.encoder_by_type(key_id)


def test_default_version_is_one():
    ks = DemoKeyStore(num_types=100)
    assert ks.version == 1
    key_id, text = encode(ks, 1, 1)
    assert decode(ks, key_id, text) == (1, 1)


@pytest.mark.parametrize("version", [1, 2])
def test_check_round_trip_counts(version):
    ks = DemoKeyStore(num_types=10, version=version)
    values = [1, 2, 1 << 40, (1 << 63) - 1]
    assert check_round_trip(ks, 10, values) == 9 * len(values)


def test_check_round_trip_skips_non_positive():
    ks = DemoKeyStore(num_types=10)
    assert check_round_trip(ks, 10, [0, -5]) == 0


class _WrongType:
    version = 2

    def __init__(self):
        self._inner = DemoKeyStore(num_types=100, version=2)

    def encoder_by_type(self, typ):
        return self._inner.encoder_by_type(typ)

    def decoder_by_id(self, key_id):
        typ, decrypt = self._inner.decoder_by_id(key_id)
        return typ + 1, decrypt


def test_check_round_trip_detects_mismatch():
    ks = _WrongType()
    key_id, text = encode(ks, 1, 7)
    assert decode(ks, key_id, text) == (2, 7)
    with pytest.raises(AssertionError):
        check_round_trip(ks, 3, [7])


def test_check_round_trip_mismatching_store_with_no_values():
    assert check_round_trip(_WrongType(), 3, [0]) == 0