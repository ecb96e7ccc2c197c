"""
Hex payload encoding and decoding.

The modem carries binary payloads as plain hex text: two characters per
byte, lowercase on output, no prefix and no separators.
"""

import binascii
import logging

from ..exceptions import HexDecodeError

logger = logging.getLogger(__name__)


def encode_hex(data: bytes) -> str:
    """
    Encode bytes as lowercase hex text.

    Args:
        data: Bytes to encode

    Returns:
        Hex string, two characters per byte (empty for empty input)

    Example:

    .. code-block:: python

        encode_hex(b"\\xde\\xad")  # "dead"
    """
    return binascii.hexlify(bytes(data)).decode("ascii")


def decode_hex(text: str) -> bytes:
    """
    Decode hex text into bytes.

    Upper and lower case digits are accepted.

    Args:
        text: Hex string with an even number of characters

    Returns:
        Decoded bytes

    Raises:
        HexDecodeError: If text has odd length or contains a non-hex character
    """
    if len(text) % 2:
        raise HexDecodeError(f"Odd-length hex string ({len(text)} characters)")

    try:
        return binascii.unhexlify(text)
    except ValueError as e:
        # binascii.Error is a ValueError; non-ASCII str input raises ValueError
        raise HexDecodeError(f"Invalid hex string: {text!r}") from e
