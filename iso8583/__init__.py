"""Building blocks for ISO 8583 messages: padding, BCD, length prefixes, tag sorting and network headers."""

__version__ = "0.1.0"