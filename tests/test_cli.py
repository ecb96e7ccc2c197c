"""
Tests for the interactive CLI commands.
"""

import pytest
from rf95py.cli import RF95CLI


@pytest.fixture
def cli(modem):
    """CLI wired to the mock-backed modem."""
    instance = RF95CLI(port="/dev/null")
    instance.modem = modem
    return instance


def test_channels(cli, capsys):
    """Test channel listing shows frequencies."""
    cli._dispatch("channels", "")

    out = capsys.readouterr().out
    assert "CH01_868" in out
    assert "868.10 MHz" in out
    assert "903.08 MHz" in out


def test_channel_command(cli, mock_transport, capsys):
    """Test tuning by channel name."""
    mock_transport.add_response(["+FREQ: 868.10", "+OK"])

    cli._dispatch("channel", "ch01_868")

    assert mock_transport.sent_commands() == ["AT+FREQ=868.10"]
    assert "OK" in capsys.readouterr().out


def test_mode_invalid(cli, mock_transport, capsys):
    """Test an invalid mode is reported without sending anything."""
    cli._dispatch("mode", "9")

    assert "Invalid argument" in capsys.readouterr().out
    assert mock_transport.written == []


def test_txhex(cli, mock_transport, capsys):
    """Test transmitting hex input."""
    mock_transport.add_response(["+SENT 2 bytes.", "+OK"])

    cli._dispatch("txhex", "CAFE")

    assert mock_transport.sent_commands() == ["AT+TX=cafe"]
    assert "Sent 2 bytes" in capsys.readouterr().out


def test_info(cli, mock_transport, mock_info_response, capsys):
    """Test status display."""
    mock_transport.add_response(mock_info_response)

    cli._dispatch("info", "")

    out = capsys.readouterr().out
    assert "Firmware: 0.7.3" in out
    assert "fast transmission, short range" in out


def test_modem_error_reported(cli, mock_transport, capsys):
    """Test modem failures are printed, not raised."""
    mock_transport.add_response(["+FAIL: busy"])

    cli._dispatch("rx", "on")

    assert "Error:" in capsys.readouterr().out


def test_unknown_command(cli, capsys):
    """Test unknown commands are reported."""
    cli._dispatch("bogus", "")

    assert "Unknown command" in capsys.readouterr().out
