# iso8583

Building blocks for ISO 8583 card-payment messages in pure Python, with no
third-party dependencies.

## What is included

- **`iso8583.padding`**: `LeftPadder`, `RightPadder` and `NonePadder`, all
  implementing the `Padder` interface (`pad(data, length)`, `unpad(data)`,
  `inspect()`). `left(pad)` and `right(pad)` build padders from a single
  character; `NONE` is a ready-made no-op padder. Values shorter than the
  length are padded; longer ones are returned unchanged.
- **`iso8583.bcd`**: packed binary-coded decimal. `encode(digits)` packs
  decimal digits two per byte (an odd count gets a leading `0`),
  `decode(data, length)` returns the digits and the number of bytes read,
  and `encoded_length(digits)` gives the byte count. Bad input raises
  `BCDError`.
- **`iso8583.prefix`**: length prefixers for the indicator in front of a
  field's data. Each prefixer has `encode_length(max_len, data_len)`,
  `decode_length(max_len, data)` (returning the length and the bytes the
  prefix took) and `inspect()` (a name such as `ASCII.LL`). Errors raise
  `iso8583.prefix.base.PrefixError`. Ready-made families, each a
  `Prefixers` with members `fixed`, `l`, `ll`, `lll` and `llll`:
  - `iso8583.prefix.ascii.ASCII`: ASCII decimal digits
  - `iso8583.prefix.binary.BINARY`: big-endian binary bytes
  - `iso8583.prefix.hex.HEX`: upper-case ASCII hex, two characters per byte
    (the fixed member expects the data to be twice the field length)
  - `iso8583.prefix.bcd.BCD`: packed BCD digits
  - `iso8583.prefix.ebcdic.EBCDIC`: EBCDIC digits (code page 037)
  - `iso8583.prefix.ebcdic.EBCDIC1047`: EBCDIC digits (code page 1047)
  - `iso8583.prefix.none.NONE`: only `fixed`, which writes nothing and takes
    all remaining data

  `iso8583.prefix.bertlv.BER_TLV` encodes BER-TLV lengths in short form (up
  to 127) or long form, ignoring the maximum length argument.
- **`iso8583.sorting`**: in-place orderings of tag lists: `strings` (lexical),
  `strings_by_int` (by integer value) and `strings_by_hex` (by the
  big-endian value of even-length hex strings). The last two raise
  `ValueError` on elements they cannot convert.
- **`iso8583.network`**: message length headers, each with a `length`
  attribute, `write_to(stream)` and `read_from(stream)` on any binary
  file-like object, both returning the number of bytes handled. Problems,
  including a stream that ends too early, raise
  `iso8583.network.header.HeaderError`.
  - `ascii4.ASCII4BytesHeader`: four zero-padded ASCII digits
  - `bcd2.BCD2BytesHeader`: four BCD digits in two bytes
  - `binary2.Binary2BytesHeader`: unsigned 16-bit big-endian length;
    lengths above 65535 are refused when set
  - `vml.VMLHeader`: two-byte length, a reserved byte and an indicator byte;
    lengths above `MAX_MESSAGE_LENGTH` (2048) are refused on writing and
    reading, and `is_session_control` is set from the indicator

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Padding an amount to twelve characters and removing it again:

```python
from iso8583.padding import left

padder = left("0")
padded = padder.pad(b"100", 12)     # b"000000000100"
padder.unpad(padded)                # b"100"
```

Packing digits as BCD:

```python
from iso8583 import bcd

packed = bcd.encode(b"0115")        # b"\x01\x15"
bcd.decode(packed, 4)               # (b"0115", 2)
```

Length prefixes:

```python
from iso8583.prefix.ascii import ASCII
from iso8583.prefix.bcd import BCD
from iso8583.prefix.bertlv import BER_TLV

ASCII.ll.encode_length(19, 16)            # b"16"
ASCII.ll.decode_length(19, b"16...")      # (16, 2)
BCD.lll.encode_length(999, 200)           # b"\x02\x00"
BER_TLV.encode_length(0, 131)             # b"\x81\x83"
```

Network headers:

```python
import io
from iso8583.network.ascii4 import ASCII4BytesHeader
from iso8583.network.vml import VMLHeader

buf = io.BytesIO()
ASCII4BytesHeader(length=115).write_to(buf)   # 4; buf holds b"0115"

header = VMLHeader()
header.read_from(io.BytesIO(b"\x00\x0f\x00\x20"))  # 4
header.length                                      # 15
header.is_session_control                          # True
```

## What this package does not do

It has no model of message fields or message specifications, so it does
not pack or unpack whole messages, build bitmaps, convert messages to JSON
or print masked message descriptions. It opens no network connections and
provides no command-line tool: headers are written to and read from
streams that the caller supplies.