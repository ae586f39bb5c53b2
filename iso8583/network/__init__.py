"""Message length headers (ASCII, BCD, binary and VML) written to and read from binary streams."""