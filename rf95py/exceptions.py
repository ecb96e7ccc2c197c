"""
Exceptions for rf95py library.

Errors fall into three families callers can tell apart:

- ResponseParseError: the modem sent data that could not be understood
- TransportError: the modem could not be talked to
- UnknownConfigCodeError: the caller passed an invalid modem config id
"""

from typing import Optional


class RF95Error(Exception):
    """
    Base exception for rf95modem errors.

    All rf95py exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        response: Optional[list[str]] = None
    ) -> None:
        """
        Initialize exception with context.

        Args:
            message: Error description
            command: AT command that caused the error (if applicable)
            response: Modem response lines (if applicable)
        """
        self.command = command
        self.response = response
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message with context."""
        parts = [super().__str__()]

        if self.command:
            parts.append(f"Command: {self.command}")

        if self.response:
            parts.append(f"Response: {self.response}")

        return " | ".join(parts)


class ResponseParseError(RF95Error):
    """
    Raised when a line from the modem cannot be parsed.

    Base class for all "bad data from modem" errors.
    """
    pass


class HexDecodeError(ResponseParseError):
    """
    Raised when hex text cannot be decoded.

    This indicates:
    - Odd number of characters
    - A character outside 0-9, a-f, A-F
    """
    pass


class InvalidPayloadError(HexDecodeError):
    """Raised when the hex payload field of a received packet is not valid hex."""
    pass


class MalformedLineError(ResponseParseError):
    """Raised when a received packet line has the wrong number of fields."""
    pass


class InvalidFieldError(ResponseParseError):
    """
    Raised when a numeric field is not numeric or overflows its width.
    """
    pass


class LengthMismatchError(ResponseParseError):
    """
    Raised when the declared payload length disagrees with the decoded payload.
    """
    pass


class ConfigError(ResponseParseError):
    """
    Raised when the modem status block (AT+INFO) cannot be parsed.
    """
    pass


class UnknownConfigCodeError(RF95Error, ValueError):
    """
    Raised when a modem config code is outside the valid range 0-3.
    """
    pass


class TransportError(RF95Error):
    """
    Raised when transport layer fails.

    This indicates:
    - Serial port issues
    - Connection lost
    - Hardware communication failure
    """
    pass


class DeviceDisconnectedError(TransportError):
    """
    Raised when device is disconnected during operation.

    This is a fatal error that requires closing and reopening the connection.
    """
    pass


class DeviceNotOpenError(TransportError):
    """
    Raised when reading or writing a transport that has not been opened.
    """
    pass


class ATTimeoutError(TransportError):
    """
    Raised when no line arrives from the modem before the transport timeout.
    """
    pass


class CommandFailedError(RF95Error):
    """
    Raised when the modem answers a command with +FAIL or +ERROR.
    """
    pass
