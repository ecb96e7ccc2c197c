"""
Tests for the LoraModemDevice interface.
"""

import pytest
from rf95py.device import LoraModemDevice
from rf95py.types import DeviceStatus, LoRaChannel, ReceivedPacket, channel_frequency


class RecordingDevice(LoraModemDevice):
    """Device that records every call instead of talking to hardware."""

    def __init__(self):
        self.calls = []

    def open(self):
        self.calls.append(("open",))

    def set_frequency(self, freq_mhz):
        self.calls.append(("set_frequency", freq_mhz))

    def config(self):
        self.calls.append(("config",))
        return DeviceStatus()

    def set_mode(self, config):
        self.calls.append(("set_mode", config))

    def send_data(self, data):
        self.calls.append(("send_data", data))
        return len(data)

    def read_packet(self):
        self.calls.append(("read_packet",))
        return ReceivedPacket(rssi=0, snr=0, data=b"")

    def read_line(self):
        self.calls.append(("read_line",))
        return ""


def test_interface_is_abstract():
    """Test the interface cannot be instantiated directly."""
    with pytest.raises(TypeError):
        LoraModemDevice()


def test_set_channel_not_abstract():
    """Test channel selection is provided by the interface."""
    assert "set_channel" not in LoraModemDevice.__abstractmethods__
    assert "set_frequency" in LoraModemDevice.__abstractmethods__


@pytest.mark.parametrize("channel", list(LoRaChannel))
def test_set_channel_delegates_once(channel):
    """Test set_channel makes exactly one set_frequency call and nothing else."""
    device = RecordingDevice()

    device.set_channel(channel)

    assert device.calls == [("set_frequency", channel_frequency(channel))]


def test_set_channel_eu_frequency():
    """Test EU channel 1 tunes to 868.10 MHz."""
    device = RecordingDevice()

    device.set_channel(LoRaChannel.CH01_868)

    assert device.calls == [("set_frequency", 868.10)]
