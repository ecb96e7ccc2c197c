"""
LoRa modem device interface.

Defines the operations any modem-controlling transport must provide.
"""

import logging
from abc import ABC, abstractmethod
from typing import Union

from .types import DeviceStatus, LoRaChannel, ModemConfig, ReceivedPacket, channel_frequency

logger = logging.getLogger(__name__)


class LoraModemDevice(ABC):
    """
    Capability interface for a LoRa modem.

    Implementors provide the transport-specific operations. Channel
    selection is derived here from :meth:`set_frequency` and must not be
    reimplemented.

    :meth:`open` must succeed before any other operation is used. The
    interface does not check this; the underlying transport does.
    """

    @abstractmethod
    def open(self) -> None:
        """
        Open the underlying transport session.

        Raises:
            TransportError: If the transport cannot be opened
        """
        pass

    def set_channel(self, channel: LoRaChannel) -> None:
        """
        Tune the modem to a predefined channel.

        Args:
            channel: Channel to use

        Raises:
            TransportError: If the frequency command cannot be sent
        """
        freq = channel_frequency(channel)
        logger.info(f"Setting channel {channel.name} ({freq:.2f} MHz)")
        self.set_frequency(freq)

    @abstractmethod
    def set_frequency(self, freq_mhz: float) -> None:
        """
        Set the radio frequency.

        Args:
            freq_mhz: Frequency in MHz (e.g., 868.1)
        """
        pass

    @abstractmethod
    def config(self) -> DeviceStatus:
        """
        Query the modem's current configuration.

        Returns:
            Fresh DeviceStatus snapshot

        Raises:
            ConfigError: If the status cannot be parsed
        """
        pass

    @abstractmethod
    def set_mode(self, config: Union[ModemConfig, int]) -> None:
        """
        Select one of the modem presets.

        Args:
            config: ModemConfig or its wire code
        """
        pass

    @abstractmethod
    def send_data(self, data: bytes) -> int:
        """
        Transmit a payload.

        Args:
            data: Bytes to send

        Returns:
            Number of bytes accepted by the modem
        """
        pass

    @abstractmethod
    def read_packet(self) -> ReceivedPacket:
        """
        Read and decode one received packet line.

        Returns:
            ReceivedPacket

        Raises:
            ResponseParseError: If the line is not a valid packet
        """
        pass

    @abstractmethod
    def read_line(self) -> str:
        """
        Read one raw line from the modem. Blocks until a line arrives.

        Returns:
            Line without its terminator
        """
        pass
