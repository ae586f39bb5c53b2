import io
from dataclasses import dataclass

import pytest

from iso8583.network.header import Header, HeaderError


@dataclass
class ThreeDigitHeader(Header):
    length: int = 0

    def write_to(self, stream):
        return stream.write(f"{self.length:03d}".encode("ascii"))

    def read_from(self, stream):
        raw = self._read_exact(stream, 3)
        self.length = int(raw)
        return len(raw)


class TrickleStream(io.RawIOBase):
    """Hands out at most one byte per read."""

    def __init__(self, data):
        self._data = io.BytesIO(data)

    def readable(self):
        return True

    def read(self, size=-1):
        return self._data.read(1 if size != 0 else 0)


def _expect_eof(header, stream):
    with pytest.raises(HeaderError) as info:
        header.read_from(stream)
    return str(info.value)


def test_header_is_abstract():
    with pytest.raises(TypeError):
        Header()


def test_round_trip_through_subclass():
    buf = io.BytesIO()
    ThreeDigitHeader(42).write_to(buf)
    stream = io.BytesIO(buf.getvalue())
    header = ThreeDigitHeader()
    read = header.read_from(stream)
    assert (header.length, read) == (42, 3)
    assert _expect_eof(header, stream) == str(HeaderError("reading header: EOF"))


def test_read_exact_leaves_rest_of_stream():
    stream = io.BytesIO(b"007payload")
    header = ThreeDigitHeader()
    header.read_from(stream)
    assert header.length == 7
    assert stream.read() == b"payload"
    assert _expect_eof(header, stream) == str(HeaderError("reading header: EOF"))


def test_read_exact_collects_partial_reads():
    header = ThreeDigitHeader()
    stream = TrickleStream(b"123")
    assert header.read_from(stream) == 3
    assert header.length == 123
    assert _expect_eof(header, stream) == str(HeaderError("reading header: EOF"))


def test_read_from_empty_stream_reports_eof():
    message = _expect_eof(ThreeDigitHeader(), io.BytesIO(b""))
    assert message == str(HeaderError("reading header: EOF"))
    assert message == "reading header: EOF"


def test_read_from_short_stream_reports_unexpected_eof():
    with pytest.raises(ValueError) as info:
        ThreeDigitHeader().read_from(io.BytesIO(b"01"))
    assert str(info.value) == str(HeaderError("reading header: unexpected EOF"))
    assert str(info.value) == "reading header: unexpected EOF"