import pytest

from iso8583.prefix.none import NONE, NonePrefixer


@pytest.mark.parametrize("max_len, data_len", [(5, 3), (0, 10), (10, 10)])
def test_encode_length_writes_nothing(max_len, data_len):
    assert NonePrefixer().encode_length(max_len, data_len) == b""


@pytest.mark.parametrize("data", [b"", b"abc", b"\x00" * 40])
def test_decode_length_takes_all_data(data):
    assert NonePrefixer().decode_length(4, data) == (len(data), 0)


def test_inspect_name():
    assert NonePrefixer().inspect() == "None.Fixed"


def test_family_has_only_fixed():
    assert NONE.fixed == NonePrefixer()
    assert NONE.l is None
    assert NONE.llll is None