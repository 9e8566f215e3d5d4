import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftprintf.convert import repeat, to_base

HEX = "0123456789abcdef"


def test_hex_matches_builtin():
    assert to_base(255, HEX) == format(255, "x")


def test_upper_hex_matches_builtin():
    assert to_base(48879, HEX.upper()) == format(48879, "X")


def test_zero_is_first_digit():
    assert to_base(0, "0123456789") == "0"
    assert to_base(0, "ab") == "a"


@given(
    n=st.integers(min_value=0, max_value=2**64),
    base=st.integers(min_value=2, max_value=16),
)
def test_round_trip(n, base):
    text = to_base(n, HEX[:base])
    assert int(text, base) == n


@given(n=st.integers(min_value=1, max_value=2**64))
def test_no_leading_zero(n):
    assert not to_base(n, "0123456789").startswith("0")


def test_negative_number_rejected():
    with pytest.raises(ValueError):
        to_base(-1, "0123456789")


@pytest.mark.parametrize("digits", ["", "0"])
def test_short_alphabet_rejected(digits):
    with pytest.raises(ValueError):
        to_base(5, digits)


@given(char=st.sampled_from(" 0x"), count=st.integers(min_value=-20, max_value=50))
def test_repeat_length_and_content(char, count):
    out = repeat(char, count)
    assert len(out) == max(count, 0)
    assert set(out) <= {char}


def test_repeat_zero_is_empty():
    assert repeat("0", 0) == ""