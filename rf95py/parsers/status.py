"""
Status and command response parsers.

Parses responses for AT+INFO, AT+TX and AT+FREQ.
"""

import logging
import re

from .base import ResponseParser, parse_unsigned
from ..types import DeviceStatus, ModemConfig
from ..exceptions import (
    ConfigError,
    ResponseParseError,
    UnknownConfigCodeError,
)

logger = logging.getLogger(__name__)

_SENT_RE = re.compile(r"\+SENT\s+(\d+)\s+bytes\.?")
_FREQ_RE = re.compile(r"\+FREQ:\s*(\S+)")

_COUNTER_FIELDS = {
    "max pkt size": "max_pkt_size",
    "rx bad": "rx_bad",
    "rx good": "rx_good",
    "tx good": "tx_good",
}


class StatusParser(ResponseParser[DeviceStatus]):
    """Parser for AT+INFO (modem status) response."""

    def parse(self, response: list[str]) -> DeviceStatus:
        """
        Parse AT+INFO response.

        Expected format::

            +STATUS:
            firmware:      0.7.3
            features:      RX GPS
            modem config:  0 | medium range
            max pkt size:  251
            frequency:     868.10
            rx listener:   1
            rx bad:        0
            rx good:       3
            tx good:       7

        Unknown keys are ignored so newer firmware keeps working.
        """
        status = DeviceStatus()
        seen = 0

        for line in response:
            if line.startswith("+") or ":" not in line:
                continue

            key, value = (part.strip() for part in line.split(":", 1))
            key = key.lower()

            try:
                if key == "firmware":
                    status.version = value
                elif key == "features":
                    status.features = value.split()
                elif key == "modem config":
                    code = parse_unsigned(value.split("|", 1)[0].strip(), key)
                    status.config = ModemConfig.from_code(code)
                elif key == "frequency":
                    status.frequency = float(value)
                elif key == "rx listener":
                    status.rx_listener = parse_unsigned(value, key) != 0
                elif key in _COUNTER_FIELDS:
                    setattr(status, _COUNTER_FIELDS[key], parse_unsigned(value, key))
                else:
                    logger.debug(f"Ignoring status line: {line}")
                    continue
            except (ValueError, ResponseParseError, UnknownConfigCodeError) as e:
                raise ConfigError(
                    f"Invalid value for '{key}' in modem status: {value}",
                    command="AT+INFO",
                    response=response
                ) from e

            seen += 1

        if not seen:
            raise ConfigError(
                "No status fields in AT+INFO response",
                command="AT+INFO",
                response=response
            )

        logger.debug(f"Parsed status: {status}")
        return status


class SentCountParser(ResponseParser[int]):
    """Parser for AT+TX response."""

    def parse(self, response: list[str]) -> int:
        """
        Parse AT+TX response.

        Expected format: "+SENT 4 bytes."
        """
        for line in response:
            match = _SENT_RE.fullmatch(line.strip())
            if match:
                return int(match.group(1))

        raise ResponseParseError(
            "Missing +SENT line in transmit response",
            command="AT+TX",
            response=response
        )


class FrequencyParser(ResponseParser[float]):
    """Parser for AT+FREQ response."""

    def parse(self, response: list[str]) -> float:
        """
        Parse AT+FREQ response.

        Expected format: "+FREQ: 868.10"
        """
        for line in response:
            match = _FREQ_RE.fullmatch(line.strip())
            if match:
                try:
                    return float(match.group(1))
                except ValueError as e:
                    raise ResponseParseError(
                        f"Invalid frequency: {match.group(1)}",
                        command="AT+FREQ",
                        response=response
                    ) from e

        raise ResponseParseError(
            "Missing +FREQ line in frequency response",
            command="AT+FREQ",
            response=response
        )
