"""
Received packet parser.

Parses +RX lines reported by the modem while the receive listener is on.
"""

import logging

from .base import ResponseParser, parse_unsigned, parse_int16
from .hexcodec import decode_hex
from ..types import ReceivedPacket
from ..exceptions import (
    HexDecodeError,
    InvalidFieldError,
    InvalidPayloadError,
    LengthMismatchError,
    MalformedLineError,
)

logger = logging.getLogger(__name__)

RX_PREFIX = "+RX "


def decode_packet(line: str) -> ReceivedPacket:
    """
    Decode one received packet line.

    Expected format (the ``+RX `` marker is optional)::

        +RX <len>,<hexpayload>,<rssi>,<snr>

    Args:
        line: Line from the modem

    Returns:
        ReceivedPacket with rssi, snr and decoded payload

    Raises:
        MalformedLineError: If the line does not have exactly 4 fields
        InvalidFieldError: If length, rssi or snr is not a valid number
        InvalidPayloadError: If the payload is not valid hex
        LengthMismatchError: If the payload length differs from the declared length

    Example:

    .. code-block:: python

        packet = decode_packet("+RX 4,DEADBEEF,-42,7")
        packet.data  # b"\\xde\\xad\\xbe\\xef"
    """
    payload = line[len(RX_PREFIX):] if line.startswith(RX_PREFIX) else line

    fields = payload.strip().split(",")
    if len(fields) != 4:
        raise MalformedLineError(
            f"Expected 4 fields in received packet, got {len(fields)}",
            response=[line]
        )

    length_str, hex_str, rssi_str, snr_str = fields

    length = parse_unsigned(length_str, "payload length", InvalidFieldError)

    try:
        data = decode_hex(hex_str)
    except HexDecodeError as e:
        raise InvalidPayloadError(
            f"Invalid packet payload: {e}",
            response=[line]
        ) from e

    if len(data) != length:
        raise LengthMismatchError(
            f"Declared payload length {length} does not match "
            f"actual payload length {len(data)}",
            response=[line]
        )

    rssi = parse_int16(rssi_str, "rssi", InvalidFieldError)
    snr = parse_int16(snr_str, "snr", InvalidFieldError)

    packet = ReceivedPacket(rssi=rssi, snr=snr, data=data)
    logger.debug(f"Decoded packet: {packet}")
    return packet


class PacketParser(ResponseParser[ReceivedPacket]):
    """Parser for +RX (received packet) lines."""

    def parse(self, response: list[str]) -> ReceivedPacket:
        """Parse the first line of response as a received packet."""
        if not response:
            raise MalformedLineError("Empty received packet response", response=response)
        return decode_packet(response[0])
