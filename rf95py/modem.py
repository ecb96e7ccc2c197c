"""
Main RF95Modem class.

User-facing API for rf95modem firmware over a serial line.
"""

import logging
from typing import Optional, Union

from .core import ModemCore, SerialTransport, Transport, URCCallback
from .device import LoraModemDevice
from .parsers import (
    FrequencyParser,
    PacketParser,
    SentCountParser,
    StatusParser,
    encode_hex,
)
from .types import DeviceStatus, ModemConfig, ReceivedPacket, RxListenerState

logger = logging.getLogger(__name__)


class RF95Modem(LoraModemDevice):
    """
    rf95modem device driven through AT commands.

    Example usage with context manager:

    .. code-block:: python

        with RF95Modem(port="/dev/ttyUSB0") as modem:
            modem.set_mode(ModemConfig.MEDIUM_BW125_CR45_SF128_CRC)
            modem.set_channel(LoRaChannel.CH01_868)
            modem.send_data(b"hello")

            status = modem.config()
            print(f"Firmware {status.version}, {status.tx_good} packets sent")

    Example usage with manual lifecycle management:

    .. code-block:: python

        modem = RF95Modem(port="/dev/ttyUSB0")
        modem.open()
        modem.set_rx_listener(True)
        packet = modem.read_packet()
        modem.close()
    """

    def __init__(
        self,
        port: Optional[str] = None,
        transport: Optional[Transport] = None,
        baudrate: int = 115200,
        timeout: Optional[float] = None,
        log_urcs: bool = False,
        max_urc_queue_size: int = 1000,
        auto_open: bool = False
    ) -> None:
        """
        Initialize RF95Modem.

        Args:
            port: Serial port path (e.g., "/dev/ttyUSB0"). Either port or transport required.
            transport: Custom transport instance (for testing). Overrides port if provided.
            baudrate: Serial port baud rate (default: 115200)
            timeout: Read timeout in seconds (default: None, block until data arrives)
            log_urcs: Log packets received during commands at INFO level (default: False)
            max_urc_queue_size: Maximum packets to hold while commands run (default: 1000)
            auto_open: Open the transport immediately (default: False)

        Raises:
            ValueError: If neither port nor transport is provided
        """
        if transport is None and port is None:
            raise ValueError("Either 'port' or 'transport' must be provided")

        if transport is None:
            transport = SerialTransport(
                port=port,
                baudrate=baudrate,
                timeout=timeout
            )
            logger.info(f"Created serial transport for {port}")

        self._core = ModemCore(
            transport=transport,
            timeout=timeout,
            log_urcs=log_urcs,
            max_urc_queue_size=max_urc_queue_size
        )

        self._status_parser = StatusParser()
        self._sent_parser = SentCountParser()
        self._freq_parser = FrequencyParser()
        self._packet_parser = PacketParser()

        logger.info("Initialized RF95Modem")

        if auto_open:
            self.open()

    def open(self) -> None:
        """Open the serial connection to the modem."""
        self._core.open()

    def close(self) -> None:
        """Close the serial connection to the modem."""
        self._core.close()

    @property
    def is_open(self) -> bool:
        """Check if the connection is open."""
        return self._core.is_open()

    def set_frequency(self, freq_mhz: float) -> None:
        """
        Set the radio frequency.

        Args:
            freq_mhz: Frequency in MHz, sent with two decimals

        Raises:
            CommandFailedError: If the modem rejects the frequency
        """
        cmd = f"AT+FREQ={freq_mhz:.2f}"
        logger.info(f"Setting frequency: {freq_mhz:.2f} MHz")
        response = self._core.send_at(cmd, strip_ok=True)
        confirmed = self._freq_parser.parse(response)
        logger.debug(f"Modem confirmed frequency {confirmed} MHz")

    def config(self) -> DeviceStatus:
        """
        Query the modem status.

        Returns:
            Fresh DeviceStatus parsed from AT+INFO

        Raises:
            ConfigError: If the status block cannot be parsed
        """
        logger.info("Getting modem status")
        response = self._core.send_at("AT+INFO", strip_ok=True)
        status = self._status_parser.parse(response)
        logger.debug(f"Status: {status}")
        return status

    def set_mode(self, config: Union[ModemConfig, int]) -> None:
        """
        Select a modem preset.

        Args:
            config: ModemConfig or its wire code 0-3

        Raises:
            UnknownConfigCodeError: If an integer code is outside 0-3
        """
        config = ModemConfig.from_code(config)
        logger.info(f"Setting modem config: {config.name} ({config.code})")
        self._core.send_at(f"AT+MODE={config.code}")

    def set_rx_listener(self, enabled: bool) -> None:
        """
        Enable or disable reporting of received packets.

        Args:
            enabled: True to report incoming packets as +RX lines
        """
        state = RxListenerState.ON if enabled else RxListenerState.OFF
        logger.info(f"Setting rx listener: {state.name}")
        self._core.send_at(f"AT+RX={int(state)}")

    def send_data(self, data: bytes) -> int:
        """
        Transmit a payload.

        Args:
            data: Bytes to send

        Returns:
            Number of bytes the modem reports as sent
        """
        logger.info(f"Sending {len(data)} bytes")
        response = self._core.send_at(f"AT+TX={encode_hex(data)}", strip_ok=True)
        sent = self._sent_parser.parse(response)
        logger.debug(f"Modem sent {sent} bytes")
        return sent

    def read_packet(self) -> ReceivedPacket:
        """
        Read the next packet.

        Blank lines the firmware prints between reports are skipped.

        Returns:
            Decoded packet

        Raises:
            ResponseParseError: If the next non-blank line is not a valid +RX report
        """
        line = self.read_line()
        while not line:
            line = self.read_line()
        return self._packet_parser.parse([line])

    def read_line(self) -> str:
        """Read one line from the modem, blocking until it arrives."""
        return self._core.read_line()

    def register_urc_callback(self, prefix: str, callback: URCCallback) -> None:
        """
        Register a callback for lines received while a command is running.

        Args:
            prefix: Line prefix to match (e.g., "+RX")
            callback: Function to call with the line

        Example:

        .. code-block:: python

            modem.register_urc_callback("+RX", lambda line: print(f"Packet: {line}"))
        """
        self._core.register_urc_callback(prefix, callback)

    def unregister_urc_callback(self, prefix: str) -> bool:
        """
        Unregister a URC callback.

        Args:
            prefix: Line prefix to unregister

        Returns:
            True if callback was removed, False if not found
        """
        return self._core.unregister_urc_callback(prefix)

    def send_raw_at(
        self,
        cmd: str,
        terminator: str = "+OK",
        strip_ok: bool = False,
        timeout: Optional[float] = None
    ) -> list[str]:
        """
        Send a raw AT command.

        For commands not covered by the device methods.

        Args:
            cmd: AT command (e.g., "AT+HELP" or "+HELP")
            terminator: Prefix of the line that completes the response
            strip_ok: Remove "+OK" from response
            timeout: Per-line read timeout in seconds (uses default if None)

        Returns:
            List of response lines

        Example:

        .. code-block:: python

            for line in modem.send_raw_at("AT+HELP", strip_ok=True):
                print(line)
        """
        return self._core.send_at(
            cmd=cmd,
            terminator=terminator,
            strip_ok=strip_ok,
            timeout=timeout
        )

    def __enter__(self):
        """
        Context manager entry.

        Opens the connection if it is not open yet.
        """
        if not self.is_open:
            self.open()
        return self

    def __exit__(self, *exc):
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        """String representation of modem."""
        state = "open" if self.is_open else "closed"
        return f"<RF95Modem state={state}>"
