"""
Transport layer abstraction for modem communication.

Provides abstractions for serial communication with dependency injection support.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional
import serial
from serial import SerialException

from ..exceptions import TransportError, DeviceDisconnectedError, DeviceNotOpenError

logger = logging.getLogger(__name__)

LINE_TERMINATOR = b"\n"

_DISCONNECT_PHRASES = [
    "device disconnected",
    "device reports readiness to read but returned no data",
    "no such device",
    "device not configured",
    "input/output error",
]


class Transport(ABC):
    """Abstract base class for modem transport."""

    @abstractmethod
    def open(self) -> None:
        """
        Open the transport.

        Raises:
            TransportError: If the transport cannot be opened
        """
        pass

    @abstractmethod
    def write(self, data: bytes) -> int:
        """
        Write data to the transport.

        Args:
            data: Bytes to write

        Returns:
            Number of bytes written

        Raises:
            TransportError: If write fails
        """
        pass

    @abstractmethod
    def read_until(self, terminator: bytes = LINE_TERMINATOR, timeout: Optional[float] = None) -> bytes:
        """
        Read from transport until terminator is found.

        Args:
            terminator: Byte sequence marking end of data
            timeout: Optional timeout in seconds

        Returns:
            Bytes read including terminator, or b"" if the read timed out

        Raises:
            TransportError: If read fails
        """
        pass

    @abstractmethod
    def reset_input_buffer(self) -> None:
        """Clear the input buffer."""
        pass

    @abstractmethod
    def is_open(self) -> bool:
        """Check if transport is open."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the transport."""
        pass


class SerialTransport(Transport):
    """Serial port transport implementation."""

    def __init__(
        self,
        port: str,
        baudrate: int = 115200,
        timeout: Optional[float] = None
    ) -> None:
        """
        Initialize serial transport.

        The port is not opened until :meth:`open` is called.

        Args:
            port: Serial port path (e.g., /dev/ttyUSB0)
            baudrate: Baud rate for serial communication
            timeout: Read timeout in seconds (None blocks until a line arrives)
        """
        self.port = port
        self.baudrate = baudrate
        self.timeout = timeout
        self._serial: Optional[serial.Serial] = None

    def open(self) -> None:
        """Open the serial port."""
        if self.is_open():
            logger.debug(f"Serial port {self.port} already open")
            return

        try:
            self._serial = serial.Serial(
                port=self.port,
                baudrate=self.baudrate,
                timeout=self.timeout
            )
            logger.info(f"Opened serial port {self.port} at {self.baudrate} baud")
        except SerialException as e:
            logger.error(f"Failed to open serial port {self.port}: {e}")
            raise TransportError(f"Failed to open serial port {self.port}: {e}") from e

    def _require_open(self) -> serial.Serial:
        if not self.is_open():
            raise DeviceNotOpenError(f"Serial port {self.port} is not open")
        return self._serial

    def write(self, data: bytes) -> int:
        """Write data to serial port."""
        port = self._require_open()
        try:
            written = port.write(data)
            logger.debug(f"Wrote {written} bytes: {data}")
            return written
        except SerialException as e:
            logger.error(f"Serial write failed: {e}")
            raise self._wrap_error("write", e) from e

    def read_until(self, terminator: bytes = LINE_TERMINATOR, timeout: Optional[float] = None) -> bytes:
        """Read from serial port until terminator."""
        port = self._require_open()
        try:
            # Temporarily change timeout if specified
            original_timeout = None
            if timeout is not None:
                original_timeout = port.timeout
                port.timeout = timeout

            try:
                data = port.read_until(terminator)
            finally:
                if timeout is not None:
                    port.timeout = original_timeout

            if data:
                logger.debug(f"Read {len(data)} bytes: {data}")

            return data
        except SerialException as e:
            logger.error(f"Serial read failed: {e}")
            raise self._wrap_error("read", e) from e

    def _wrap_error(self, operation: str, error: SerialException) -> TransportError:
        """Translate a pyserial error, detecting device disconnection."""
        error_str = str(error).lower()

        if any(phrase in error_str for phrase in _DISCONNECT_PHRASES):
            return DeviceDisconnectedError(
                f"Serial device disconnected: {error}",
                response=[str(error)]
            )

        return TransportError(f"Serial {operation} failed: {error}")

    def reset_input_buffer(self) -> None:
        """Clear the serial input buffer."""
        port = self._require_open()
        try:
            port.reset_input_buffer()
            logger.debug("Reset input buffer")
        except SerialException as e:
            logger.error(f"Failed to reset input buffer: {e}")
            raise TransportError(f"Failed to reset input buffer: {e}") from e

    def is_open(self) -> bool:
        """Check if serial port is open."""
        return bool(self._serial and self._serial.is_open)

    def close(self) -> None:
        """Close the serial port."""
        if self._serial and self._serial.is_open:
            self._serial.close()
            logger.info(f"Closed serial port {self.port}")
        self._serial = None


class MockTransport(Transport):
    """
    Mock transport for testing.

    Simulates modem responses without requiring hardware. Every write is
    recorded in :attr:`written`.
    """

    def __init__(self, opened: bool = True) -> None:
        """
        Initialize mock transport.

        Args:
            opened: Start in the open state
        """
        self._open = opened
        self._response_queue: list[list[str]] = []
        self.written: list[bytes] = []
        logger.info("Initialized MockTransport")

    def add_response(self, lines: list[str]) -> None:
        """
        Queue a response to be returned by read_until.

        Args:
            lines: List of response lines (e.g., ["+FREQ: 868.10", "+OK"])
        """
        if lines:
            self._response_queue.append(list(lines))
        logger.debug(f"Added mock response: {lines}")

    def open(self) -> None:
        """Simulate opening the port."""
        self._open = True

    def write(self, data: bytes) -> int:
        """Simulate writing data."""
        if not self._open:
            raise DeviceNotOpenError("MockTransport is closed")

        self.written.append(bytes(data))
        logger.debug(f"Mock write: {data}")
        return len(data)

    def read_until(self, terminator: bytes = LINE_TERMINATOR, timeout: Optional[float] = None) -> bytes:
        """
        Simulate reading from modem.

        Returns queued responses one line at a time.
        """
        if not self._open:
            raise DeviceNotOpenError("MockTransport is closed")

        # Get next response from queue
        if self._response_queue:
            current_response = self._response_queue[0]
            line = current_response.pop(0)

            # Remove empty response from queue
            if not current_response:
                self._response_queue.pop(0)

            result = line.encode("utf-8") + terminator
            logger.debug(f"Mock read: {result}")
            return result

        # No data available (behaves like a read timeout)
        return b""

    def reset_input_buffer(self) -> None:
        """Discard all queued responses."""
        self.clear_responses()

    def is_open(self) -> bool:
        """Check if mock transport is open."""
        return self._open

    def close(self) -> None:
        """Close mock transport."""
        self._open = False
        logger.info("Closed MockTransport")

    def clear_responses(self) -> None:
        """Clear all queued responses (useful for testing)."""
        self._response_queue.clear()
        logger.debug("Cleared mock response queue")

    def sent_commands(self) -> list[str]:
        """
        Get written data decoded as command lines.

        Returns:
            Each write decoded and stripped of its line terminator
        """
        return [data.decode("utf-8").rstrip("\r\n") for data in self.written]
