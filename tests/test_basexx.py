import pytest
from hypothesis import given
from hypothesis import strategies as st

from encid.basexx import BASE30, BASE50, BINARY, Base, InvalidDigitError, convert


@pytest.mark.parametrize("base", [BASE30, BASE50, BINARY])
@given(value=st.integers(min_value=0, max_value=1 << 200))
def test_round_trip(base, value):
    assert base.decode(base.encode(value)) == value


def test_radix_matches_digit_count():
    assert BASE30.decode("10") == BASE30.n == 30
    assert BASE50.decode("10") == BASE50.n == 50
    assert BINARY.decode("\x01\x00") == BINARY.n == 256


def test_highest_single_digits():
    assert BASE30.encode(29) == "z"
    assert BASE50.decode("Z") == 49


def test_place_value():
    assert BASE30.decode("10") == 30


def test_leading_zeros_do_not_change_value():
    assert BASE50.decode("0007") == BASE50.decode("7")


def test_vowels_are_invalid():
    with pytest.raises(InvalidDigitError):
        BASE50.decode("aeiou")


def test_base30_is_case_sensitive():
    with pytest.raises(InvalidDigitError):
        BASE30.decode("B")


def test_invalid_digit_is_value_error():
    with pytest.raises(ValueError):
        BASE30.decode("l")


def test_negative_value_rejected():
    with pytest.raises(ValueError):
        BASE30.encode(-1)


def test_duplicate_digits_rejected():
    with pytest.raises(ValueError):
        Base("aa")


@pytest.mark.parametrize(
    "text, base",
    [
        ("4gsb6bwnsvzdr9sg1wb9f748p1", BASE30),
        ("1zQqKSwhbq2jGRmBNjZctj1", BASE50),
    ],
)
def test_convert_through_binary(text, base):
    raw = convert(text, base, BINARY)
    assert len(raw) <= 16
    assert convert(raw, BINARY, base) == text


@given(data=st.binary(min_size=1, max_size=16).filter(lambda b: b[0] != 0))
def test_convert_binary_to_base50_and_back(data):
    raw = data.decode("latin-1")
    assert convert(convert(raw, BINARY, BASE50), BASE50, BINARY) == raw