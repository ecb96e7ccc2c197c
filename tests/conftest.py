"""
Pytest configuration and fixtures.

Provides shared test fixtures for rf95py tests.
"""

import pytest
import logging

from rf95py.core import MockTransport, ModemCore
from rf95py import RF95Modem


# Enable logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture
def mock_transport():
    """
    Create a MockTransport instance for testing.

    Example:
        def test_something(mock_transport):
            mock_transport.add_response(["+OK"])
            # ... test code ...
    """
    transport = MockTransport()
    yield transport
    transport.close()


@pytest.fixture
def modem_core(mock_transport):
    """
    Create an open ModemCore with MockTransport.

    Example:
        def test_at_command(modem_core, mock_transport):
            mock_transport.add_response(["+OK"])
            response = modem_core.send_at("AT+MODE=0")
            assert response == ["+OK"]
    """
    core = ModemCore(transport=mock_transport)
    core.open()
    yield core
    core.close()


@pytest.fixture
def modem(mock_transport):
    """
    Create an open RF95Modem with MockTransport.

    Example:
        def test_mode(modem, mock_transport):
            mock_transport.add_response(["+OK"])
            modem.set_mode(0)
    """
    modem_instance = RF95Modem(transport=mock_transport)
    modem_instance.open()
    yield modem_instance
    modem_instance.close()


@pytest.fixture
def mock_info_response():
    """Mock response for AT+INFO command."""
    return [
        "+STATUS:",
        "",
        "firmware:      0.7.3",
        "features:      RX GPS",
        "modem config:  1 | fast+short range",
        "max pkt size:  251",
        "frequency:     868.10",
        "rx listener:   1",
        "rx bad:        2",
        "rx good:       17",
        "tx good:       5",
        "+OK",
    ]
