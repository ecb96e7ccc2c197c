"""
Response parsers for modem output.

Provides type-safe parsing of modem responses into structured data.
"""

from .base import ResponseParser, parse_unsigned, parse_int16
from .hexcodec import encode_hex, decode_hex
from .packet import PacketParser, decode_packet
from .status import StatusParser, SentCountParser, FrequencyParser

__all__ = [
    "ResponseParser",
    "parse_unsigned",
    "parse_int16",
    "encode_hex",
    "decode_hex",
    "PacketParser",
    "decode_packet",
    "StatusParser",
    "SentCountParser",
    "FrequencyParser",
]
