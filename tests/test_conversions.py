import pytest

from cbasics.conversions import to_binary, to_hex


def test_binary_known_value():
    assert to_binary(10) == "1010"


def test_binary_zero_and_negative():
    assert to_binary(0) == "0"
    assert to_binary(-5) == "0"


@pytest.mark.parametrize("n", [1, 2, 7, 255, 1024, 123456789])
def test_binary_round_trip(n):
    digits = to_binary(n)
    assert int(digits, 2) == n
    assert digits.startswith("1")
    assert set(digits) <= {"0", "1"}


def test_hex_known_value():
    assert to_hex(255) == "FF"


def test_hex_zero():
    assert to_hex(0) == "0"


@pytest.mark.parametrize("n", [1, 15, 16, 4095, 65535, 3735928559])
def test_hex_round_trip(n):
    digits = to_hex(n)
    assert int(digits, 16) == n
    assert digits == digits.upper()
    assert not digits.startswith("0")


def test_hex_negative_raises():
    with pytest.raises(ValueError):
        to_hex(-1)