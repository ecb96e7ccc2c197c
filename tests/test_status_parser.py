"""
Tests for status and command response parsers.
"""

import pytest
from rf95py.parsers.status import StatusParser, SentCountParser, FrequencyParser
from rf95py.types import ModemConfig
from rf95py.exceptions import ConfigError, ResponseParseError


class TestStatusParser:
    """Test AT+INFO parsing."""

    def test_parse_full_status(self, mock_info_response):
        """Test every known field is read."""
        status = StatusParser().parse(mock_info_response)

        assert status.version == "0.7.3"
        assert status.config == ModemConfig.FAST_SHORT_BW500_CR45_SF128_CRC
        assert status.max_pkt_size == 251
        assert status.frequency == 868.10
        assert status.rx_listener is True
        assert (status.rx_bad, status.rx_good, status.tx_good) == (2, 17, 5)

    def test_parse_partial_status(self):
        """Test missing fields keep their defaults."""
        status = StatusParser().parse(["+STATUS:", "firmware: 0.5", "rx listener: 0"])

        assert status.version == "0.5"
        assert status.rx_listener is False
        assert status.config == ModemConfig.MEDIUM_BW125_CR45_SF128_CRC
        assert status.tx_good == 0

    def test_parse_ignores_unknown_keys(self):
        """Test lines from newer firmware are skipped."""
        status = StatusParser().parse(["firmware: 0.7.3", "gps: fix", "no colon here"])
        assert status.version == "0.7.3"

    def test_parse_empty_response(self):
        """Test a status without any known field is rejected."""
        with pytest.raises(ConfigError):
            StatusParser().parse(["+STATUS:"])

    @pytest.mark.parametrize("line", [
        "modem config: x | medium",
        "modem config: 4 | ???",
        "max pkt size: big",
        "frequency: high",
        "rx listener: yes",
        "rx bad: -1",
        "tx good: 1.5",
    ])
    def test_parse_invalid_values(self, line):
        """Test malformed values are config errors."""
        with pytest.raises(ConfigError) as exc_info:
            StatusParser().parse(["firmware: 0.7.3", line])

        assert exc_info.value.command == "AT+INFO"


class TestSentCountParser:
    """Test AT+TX response parsing."""

    def test_parse_sent(self):
        """Test sent byte count is read."""
        assert SentCountParser().parse(["+SENT 12 bytes."]) == 12

    def test_parse_sent_without_period(self):
        """Test trailing period is optional."""
        assert SentCountParser().parse(["+SENT 3 bytes"]) == 3

    def test_parse_missing(self):
        """Test response without +SENT is rejected."""
        with pytest.raises(ResponseParseError):
            SentCountParser().parse(["+OK"])


class TestFrequencyParser:
    """Test AT+FREQ response parsing."""

    def test_parse_frequency(self):
        """Test confirmed frequency is read."""
        assert FrequencyParser().parse(["+FREQ: 915.00"]) == 915.0

    def test_parse_invalid_frequency(self):
        """Test non-numeric frequency is rejected."""
        with pytest.raises(ResponseParseError):
            FrequencyParser().parse(["+FREQ: abc"])

    def test_parse_missing(self):
        """Test response without +FREQ is rejected."""
        with pytest.raises(ResponseParseError):
            FrequencyParser().parse([])
