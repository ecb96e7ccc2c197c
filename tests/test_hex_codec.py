"""
Tests for hex payload encoding and decoding.
"""

import pytest
from rf95py.parsers.hexcodec import encode_hex, decode_hex
from rf95py.exceptions import HexDecodeError, ResponseParseError


class TestEncodeHex:
    """Test bytes to hex text."""

    def test_encode_lowercase(self):
        """Test output is lowercase with two characters per byte."""
        assert encode_hex(b"\xde\xad\xbe\xef") == "deadbeef"

    def test_encode_leading_zero(self):
        """Test small byte values keep their leading zero."""
        assert encode_hex(b"\x00\x01\x0a") == "00010a"

    def test_encode_empty(self):
        """Test empty input gives empty text."""
        assert encode_hex(b"") == ""

    def test_encode_length(self):
        """Test output length is twice the input length."""
        data = bytes(range(256))
        assert len(encode_hex(data)) == 512

    def test_encode_bytearray(self):
        """Test bytearray input is accepted."""
        assert encode_hex(bytearray(b"\xff")) == "ff"


class TestDecodeHex:
    """Test hex text to bytes."""

    def test_decode_lowercase(self):
        """Test decoding lowercase hex."""
        assert decode_hex("deadbeef") == b"\xde\xad\xbe\xef"

    def test_decode_uppercase(self):
        """Test decoding uppercase hex as the modem may send it."""
        assert decode_hex("DEADBEEF") == b"\xde\xad\xbe\xef"

    def test_decode_empty(self):
        """Test empty text gives empty bytes."""
        assert decode_hex("") == b""

    def test_decode_round_trip(self):
        """Test decode(encode(b)) == b for every byte value."""
        data = bytes(range(256))
        assert decode_hex(encode_hex(data)) == data

    def test_decode_odd_length(self):
        """Test odd-length text is rejected."""
        with pytest.raises(HexDecodeError):
            decode_hex("abc")

    @pytest.mark.parametrize("text", ["zz", "0g", "de ad", "+1", "-1", "0x", "é1"])
    def test_decode_invalid_characters(self, text):
        """Test any non-hex character is rejected."""
        with pytest.raises(HexDecodeError):
            decode_hex(text)

    def test_decode_error_is_parse_error(self):
        """Test hex errors belong to the bad-data family."""
        with pytest.raises(ResponseParseError):
            decode_hex("1")
