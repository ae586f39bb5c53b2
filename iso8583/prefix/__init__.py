"""Length prefixers in ASCII, binary, hex, BCD, EBCDIC, BER-TLV and none forms."""