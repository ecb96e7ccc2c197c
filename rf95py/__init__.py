"""
rf95py - Python library for controlling rf95modem LoRa modems.
"""

from .version import __version__
from .modem import RF95Modem
from .device import LoraModemDevice
from .core import MockTransport, SerialTransport, Transport

from .types import (
    LoRaChannel,
    ModemConfig,
    ModemPreset,
    MODEM_PRESETS,
    ReceivedPacket,
    DeviceStatus,
    RxListenerState,
    channel_frequency,
)

from .parsers import encode_hex, decode_hex, decode_packet

from .exceptions import (
    RF95Error,
    ResponseParseError,
    HexDecodeError,
    InvalidPayloadError,
    MalformedLineError,
    InvalidFieldError,
    LengthMismatchError,
    ConfigError,
    UnknownConfigCodeError,
    TransportError,
    DeviceDisconnectedError,
    DeviceNotOpenError,
    ATTimeoutError,
    CommandFailedError,
)

__all__ = [
    "__version__",
    "RF95Modem",
    "LoraModemDevice",
    "MockTransport",
    "SerialTransport",
    "Transport",
    "LoRaChannel",
    "ModemConfig",
    "ModemPreset",
    "MODEM_PRESETS",
    "ReceivedPacket",
    "DeviceStatus",
    "RxListenerState",
    "channel_frequency",
    "encode_hex",
    "decode_hex",
    "decode_packet",
    "RF95Error",
    "ResponseParseError",
    "HexDecodeError",
    "InvalidPayloadError",
    "MalformedLineError",
    "InvalidFieldError",
    "LengthMismatchError",
    "ConfigError",
    "UnknownConfigCodeError",
    "TransportError",
    "DeviceDisconnectedError",
    "DeviceNotOpenError",
    "ATTimeoutError",
    "CommandFailedError",
]
