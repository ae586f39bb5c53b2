import pytest

from iso8583.prefix.base import PrefixError
from iso8583.prefix.bcd import BCD, BCDFixedPrefixer, BCDVarPrefixer


def test_encode_length_digits_validation():
    with pytest.raises(PrefixError, match="number of digits in length: 123 exceeds: 2"):
        BCD.ll.encode_length(999, 123)


def test_encode_length_max_length_validation():
    with pytest.raises(PrefixError, match="field length: 22 is larger than maximum: 20"):
        BCD.ll.encode_length(20, 22)


def test_decode_length_not_enough_data():
    with pytest.raises(
        PrefixError, match="length mismatch: want to read 2 bytes, get only 1"
    ):
        BCD.lll.decode_length(20, b"\x22")


CASES = [
    (1, 1, 5, 3, bytes([0x03])),
    (2, 1, 20, 2, bytes([0x02])),
    (2, 1, 20, 12, bytes([0x12])),
    (3, 2, 340, 2, bytes([0x00, 0x02])),
    (3, 2, 340, 200, bytes([0x02, 0x00])),
    (4, 2, 9999, 1234, bytes([0x12, 0x34])),
]


@pytest.mark.parametrize("digits, bytes_read, max_len, value, encoded", CASES)
def test_encode_length(digits, bytes_read, max_len, value, encoded):
    assert BCDVarPrefixer(digits).encode_length(max_len, value) == encoded


@pytest.mark.parametrize("digits, bytes_read, max_len, value, encoded", CASES)
def test_decode_length(digits, bytes_read, max_len, value, encoded):
    assert BCDVarPrefixer(digits).decode_length(max_len, encoded) == (value, bytes_read)


def test_decode_length_larger_than_maximum():
    with pytest.raises(PrefixError, match="data length 12 is larger than maximum 10"):
        BCD.ll.decode_length(10, b"\x12")


def test_decode_length_rejects_non_decimal_nibbles():
    with pytest.raises(PrefixError):
        BCD.ll.decode_length(99, b"\x1a")


def test_fixed_prefixer():
    pref = BCDFixedPrefixer()
    data = pref.encode_length(8, 8)
    assert len(data) == 0
    assert pref.decode_length(8, b"1234") == (8, 0)


def test_fixed_prefixer_accepts_shorter_data():
    assert BCDFixedPrefixer().encode_length(8, 5) == b""


def test_fixed_prefixer_encode_length_validation():
    with pytest.raises(PrefixError, match="field length: 12 should be fixed: 8"):
        BCDFixedPrefixer().encode_length(8, 12)


@pytest.mark.parametrize(
    "pref, name",
    [
        (BCD.fixed, "BCD.Fixed"),
        (BCD.l, "BCD.L"),
        (BCD.ll, "BCD.LL"),
        (BCD.lll, "BCD.LLL"),
        (BCDVarPrefixer(4), "BCD.LLLL"),
    ],
)
def test_inspect(pref, name):
    assert pref.inspect() == name