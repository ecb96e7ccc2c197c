"""
Data types and structures for rf95py.

Provides the channel and preset catalogs plus type-safe representations
of modem data.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Union

from .exceptions import UnknownConfigCodeError


class LoRaChannel(IntEnum):
    """
    Predefined LoRa channels.

    Values are frequencies in hundredths of a megahertz (86810 = 868.10 MHz).
    """
    # 868MHz EU TTN channels 1-9
    CH01_868 = 86810
    CH02_868 = 86830
    CH03_868 = 86850
    CH04_868 = 86710
    CH05_868 = 86730
    CH06_868 = 86750
    CH07_868 = 86770
    CH08_868 = 86790
    CH09_868 = 86880
    # Further 868MHz EU channels 10-17
    CH10_868 = 86520
    CH11_868 = 86550
    CH12_868 = 86580
    CH13_868 = 86610
    CH14_868 = 86640
    CH15_868 = 86670
    CH16_868 = 86700
    CH17_868 = 86800
    # 915MHz US channels 0-12
    CH00_900 = 90308
    CH01_900 = 90524
    CH02_900 = 90740
    CH03_900 = 90956
    CH04_900 = 91172
    CH05_900 = 91388
    CH06_900 = 91604
    CH07_900 = 91820
    CH08_900 = 92036
    CH09_900 = 92252
    CH10_900 = 92468
    CH11_900 = 92684
    CH12_900 = 91500

    @property
    def frequency(self) -> float:
        """Channel frequency in MHz."""
        return channel_frequency(self)


def channel_frequency(channel: LoRaChannel) -> float:
    """
    Convert a channel to its frequency in MHz.

    Args:
        channel: LoRaChannel to convert

    Returns:
        Frequency in MHz (e.g., 868.1 for CH01_868)
    """
    return int(channel) / 100.0


@dataclass(frozen=True)
class ModemPreset:
    """Radio parameters bundled into one modem config."""
    bandwidth_hz: int       # Signal bandwidth
    coding_rate: str        # Error coding rate (e.g., "4/5")
    spreading: int          # Chips per symbol (128 = SF7)
    crc: bool               # Payload CRC enabled
    description: str        # Human-readable range/speed summary


class ModemConfig(Enum):
    """
    Default LoRa modem configs (AT+MODE).

    Use :attr:`code` and :meth:`from_code` to move between a config and
    its wire code.
    """
    MEDIUM_BW125_CR45_SF128_CRC = "medium"
    FAST_SHORT_BW500_CR45_SF128_CRC = "fast-short"
    SLOW_LONG_BW3125_CR48_SF512_CRC = "slow-long-narrow"
    SLOW_LONG_BW125_CR48_SF4096_CRC = "slow-long"

    @property
    def code(self) -> int:
        """Wire code sent with AT+MODE and reported by AT+INFO."""
        return _CONFIG_TO_CODE[self]

    @property
    def preset(self) -> ModemPreset:
        """Radio parameters of this config."""
        return MODEM_PRESETS[self]

    @classmethod
    def from_code(cls, code: Union[int, "ModemConfig"]) -> "ModemConfig":
        """
        Look up a config by its wire code.

        Args:
            code: Wire code 0-3 (a ModemConfig is returned unchanged)

        Returns:
            Matching ModemConfig

        Raises:
            UnknownConfigCodeError: If code is not 0-3
        """
        if isinstance(code, cls):
            return code
        if isinstance(code, bool) or not isinstance(code, int):
            raise UnknownConfigCodeError(f"Unknown modem config code: {code!r}")
        try:
            return _CODE_TO_CONFIG[code]
        except KeyError:
            raise UnknownConfigCodeError(f"Unknown modem config code: {code}") from None


_CONFIG_TO_CODE: dict[ModemConfig, int] = {
    ModemConfig.MEDIUM_BW125_CR45_SF128_CRC: 0,
    ModemConfig.FAST_SHORT_BW500_CR45_SF128_CRC: 1,
    ModemConfig.SLOW_LONG_BW3125_CR48_SF512_CRC: 2,
    ModemConfig.SLOW_LONG_BW125_CR48_SF4096_CRC: 3,
}

_CODE_TO_CONFIG: dict[int, ModemConfig] = {
    code: config for config, code in _CONFIG_TO_CODE.items()
}

MODEM_PRESETS: dict[ModemConfig, ModemPreset] = {
    ModemConfig.MEDIUM_BW125_CR45_SF128_CRC: ModemPreset(
        bandwidth_hz=125000, coding_rate="4/5", spreading=128, crc=True,
        description="medium range (default)",
    ),
    ModemConfig.FAST_SHORT_BW500_CR45_SF128_CRC: ModemPreset(
        bandwidth_hz=500000, coding_rate="4/5", spreading=128, crc=True,
        description="fast transmission, short range",
    ),
    ModemConfig.SLOW_LONG_BW3125_CR48_SF512_CRC: ModemPreset(
        bandwidth_hz=31250, coding_rate="4/8", spreading=512, crc=True,
        description="slow transmission, long range",
    ),
    ModemConfig.SLOW_LONG_BW125_CR48_SF4096_CRC: ModemPreset(
        bandwidth_hz=125000, coding_rate="4/8", spreading=4096, crc=True,
        description="slow transmission, long range",
    ),
}


class RxListenerState(IntEnum):
    """Receive listener values (AT+RX)."""
    OFF = 0
    ON = 1


@dataclass
class ReceivedPacket:
    """
    A LoRa packet received from the modem (+RX line).

    Attributes:
        rssi: Signal strength (dBm)
        snr: Signal-to-noise ratio
        data: Received binary payload
    """
    rssi: int
    snr: int
    data: bytes


@dataclass
class DeviceStatus:
    """
    Current rf95modem status from AT+INFO.

    A fresh instance holds the power-on defaults. Counters only grow during
    a session; a new query replaces the whole snapshot.
    """
    version: str = "0.0"                # Firmware version
    config: ModemConfig = ModemConfig.MEDIUM_BW125_CR45_SF128_CRC
    max_pkt_size: int = 0               # Maximum packet size supported
    frequency: float = 0.0              # Configured frequency (MHz)
    rx_listener: bool = False           # Incoming packets are reported
    rx_bad: int = 0                     # Receive errors
    rx_good: int = 0                    # Successfully received packets
    tx_good: int = 0                    # Successfully transmitted packets
    features: list[str] = field(default_factory=list)  # Firmware feature flags
