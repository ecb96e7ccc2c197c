"""
Tests for channel and modem config catalogs and data records.
"""

import pytest
from rf95py.types import (
    LoRaChannel,
    ModemConfig,
    MODEM_PRESETS,
    DeviceStatus,
    channel_frequency,
)
from rf95py.exceptions import UnknownConfigCodeError


class TestLoRaChannel:
    """Test the channel catalog."""

    def test_channel_count(self):
        """Test all EU and US channels are present."""
        assert len(LoRaChannel) == 29
        assert len([c for c in LoRaChannel if c.name.endswith("_868")]) == 17
        assert len([c for c in LoRaChannel if c.name.endswith("_900")]) == 13

    def test_eu_channel_1(self):
        """Test EU channel 1 frequency."""
        assert LoRaChannel.CH01_868 == 86810
        assert channel_frequency(LoRaChannel.CH01_868) == 868.10

    def test_us_channel_0(self):
        """Test US channel 0 frequency."""
        assert LoRaChannel.CH00_900 == 90308
        assert channel_frequency(LoRaChannel.CH00_900) == 903.08

    def test_frequency_property(self):
        """Test the property matches the derivation for every channel."""
        for channel in LoRaChannel:
            assert channel.frequency == channel.value / 100.0

    def test_channel_values_unique(self):
        """Test no two channels share a frequency."""
        values = [c.value for c in LoRaChannel]
        assert len(values) == len(set(values))


class TestModemConfig:
    """Test modem config codes and presets."""

    @pytest.mark.parametrize("code,config", [
        (0, ModemConfig.MEDIUM_BW125_CR45_SF128_CRC),
        (1, ModemConfig.FAST_SHORT_BW500_CR45_SF128_CRC),
        (2, ModemConfig.SLOW_LONG_BW3125_CR48_SF512_CRC),
        (3, ModemConfig.SLOW_LONG_BW125_CR48_SF4096_CRC),
    ])
    def test_from_code(self, code, config):
        """Test each wire code maps to its preset and back."""
        assert ModemConfig.from_code(code) is config
        assert config.code == code

    @pytest.mark.parametrize("code", [4, -1, 255, "1", 1.0, None, True])
    def test_from_code_unknown(self, code):
        """Test codes outside 0-3 are rejected."""
        with pytest.raises(UnknownConfigCodeError):
            ModemConfig.from_code(code)

    def test_unknown_code_is_value_error(self):
        """Test unknown codes can be caught as ValueError."""
        with pytest.raises(ValueError):
            ModemConfig.from_code(7)

    def test_from_code_passes_config_through(self):
        """Test a ModemConfig is returned unchanged."""
        config = ModemConfig.SLOW_LONG_BW125_CR48_SF4096_CRC
        assert ModemConfig.from_code(config) is config

    def test_every_config_has_preset(self):
        """Test every config has radio parameters."""
        assert set(MODEM_PRESETS) == set(ModemConfig)

    def test_preset_parameters(self):
        """Test preset radio parameters."""
        medium = ModemConfig.MEDIUM_BW125_CR45_SF128_CRC.preset
        assert medium.bandwidth_hz == 125000
        assert medium.coding_rate == "4/5"
        assert medium.spreading == 128
        assert medium.crc is True

        fast = ModemConfig.FAST_SHORT_BW500_CR45_SF128_CRC.preset
        assert fast.bandwidth_hz == 500000

        narrow = ModemConfig.SLOW_LONG_BW3125_CR48_SF512_CRC.preset
        assert narrow.bandwidth_hz == 31250
        assert narrow.spreading == 512

        slow = ModemConfig.SLOW_LONG_BW125_CR48_SF4096_CRC.preset
        assert slow.bandwidth_hz == 125000
        assert slow.spreading == 4096


def test_device_status_defaults():
    """Test a fresh status holds power-on defaults."""
    status = DeviceStatus()

    assert status.version == "0.0"
    assert status.config == ModemConfig.MEDIUM_BW125_CR45_SF128_CRC
    assert status.max_pkt_size == 0
    assert status.frequency == 0.0
    assert status.rx_listener is False
    assert status.rx_bad == 0
    assert status.rx_good == 0
    assert status.tx_good == 0
    assert status.features == []


def test_device_status_instances_independent():
    """Test snapshots do not share mutable state."""
    first = DeviceStatus()
    second = DeviceStatus()
    first.features.append("GPS")

    assert second.features == []
