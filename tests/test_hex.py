import pytest

from iso8583.prefix.base import PrefixError
from iso8583.prefix.hex import HEX, HexFixedPrefixer, HexVarPrefixer


def test_fixed_decode_length():
    assert HexFixedPrefixer().decode_length(16, b"whatever") == (16, 0)


def test_fixed_encode_length_counts_two_characters_per_byte():
    assert HexFixedPrefixer().encode_length(8, 16) == b""
    with pytest.raises(PrefixError, match="field length: 8 should be fixed: 16"):
        HexFixedPrefixer().encode_length(8, 8)


def test_var_encode_length_success():
    assert HexVarPrefixer(3).encode_length(32, 24) == b"000018"


@pytest.mark.parametrize(
    "digits, max_len, data_len",
    [(1, 16, 24), (1, 512, 512)],
    ids=["exceeds-max-len", "exceeds-max-possible-len"],
)
def test_var_encode_length_errors(digits, max_len, data_len):
    with pytest.raises(PrefixError):
        HexVarPrefixer(digits).encode_length(max_len, data_len)


def test_var_decode_length_success():
    assert HexVarPrefixer(3).decode_length(32, b"000018whateverwhateverwhatever") == (
        0x18,
        6,
    )


@pytest.mark.parametrize(
    "max_len, data",
    [
        (32, b"0000"),
        (32, b"SSSSSSwhateverwhateverwhatever"),
        (8, b"000018whateverwhateverwhatever"),
    ],
    ids=["not-enough-data", "parse-error", "exceeds-max-len"],
)
def test_var_decode_length_errors(max_len, data):
    with pytest.raises(PrefixError):
        HexVarPrefixer(3).decode_length(max_len, data)


@pytest.mark.parametrize("pref", [HEX.ll, HEX.lll, HEX.llll])
def test_var_round_trip(pref):
    encoded = pref.encode_length(300, 300)
    assert len(encoded) == pref.digits * 2
    assert pref.decode_length(300, encoded) == (300, pref.digits * 2)


def test_inspect_names():
    assert HEX.fixed.inspect() == "Hex.Fixed"
    assert HEX.ll.inspect() == "Hex.LL"