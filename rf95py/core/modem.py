"""
Core modem class coordinating transport, protocol, and URC handling.

This is the foundation the RF95Modem device builds upon.
"""

import logging
from typing import Optional

from .transport import Transport
from .protocol import ATProtocol, OK_RESPONSE
from .urc import URCHandler, URCCallback

logger = logging.getLogger(__name__)


class ModemCore:
    """
    Core modem functionality.

    Coordinates:
    - Transport layer (serial communication)
    - Protocol layer (AT command execution)
    - URC handling (packets received while a command was running)

    Everything runs on the caller's thread; each call blocks on the
    transport until it completes.
    """

    def __init__(
        self,
        transport: Transport,
        timeout: Optional[float] = None,
        log_urcs: bool = False,
        max_urc_queue_size: int = 1000
    ) -> None:
        """
        Initialize modem core.

        Args:
            transport: Transport instance for communication
            timeout: Per-line read timeout for AT commands (None uses the transport's)
            log_urcs: Whether to log URCs at INFO level
            max_urc_queue_size: Maximum URCs to queue
        """
        self.transport = transport
        self.urc_handler = URCHandler(
            max_queue_size=max_urc_queue_size,
            log_urcs=log_urcs
        )
        self.protocol = ATProtocol(
            transport,
            self.urc_handler,
            default_timeout=timeout
        )

        logger.info("Initialized ModemCore")

    def open(self) -> None:
        """
        Open the transport and discard any stale input.
        """
        self.transport.open()
        self.transport.reset_input_buffer()
        logger.info("Modem connection opened")

    def close(self) -> None:
        """Close the modem connection."""
        logger.info("Closing modem connection")
        self.transport.close()
        logger.info("Modem connection closed")

    def is_open(self) -> bool:
        """Check if the transport is open."""
        return self.transport.is_open()

    def send_at(
        self,
        cmd: str,
        terminator: str = OK_RESPONSE,
        strip_ok: bool = False,
        timeout: Optional[float] = None
    ) -> list[str]:
        """
        Send an AT command.

        This is a convenience wrapper around protocol.send_command().

        Args:
            cmd: AT command (e.g., "AT+INFO" or "+INFO")
            terminator: Prefix of the line that completes the response
            strip_ok: Remove "+OK" from response
            timeout: Per-line read timeout (uses default if None)

        Returns:
            List of response lines

        Raises:
            ATTimeoutError: If command times out
            CommandFailedError: If the modem answers +FAIL
        """
        return self.protocol.send_command(
            cmd=cmd,
            terminator=terminator,
            strip_ok=strip_ok,
            timeout=timeout
        )

    def read_line(self, timeout: Optional[float] = None) -> str:
        """
        Read the next line from the modem.

        Lines queued while a command was running are returned first, oldest
        first. Otherwise blocks on the transport.

        Args:
            timeout: Read timeout in seconds (None uses the transport's)

        Returns:
            Line without its terminator

        Raises:
            ATTimeoutError: If the transport returns no data
        """
        queued = self.urc_handler.pop_urc()
        if queued is not None:
            logger.debug(f"Returning queued line: {queued}")
            return queued

        line = self.protocol.read_line(timeout=timeout)
        logger.debug(f"Read line: {line}")
        return line

    def register_urc_callback(self, prefix: str, callback: URCCallback) -> None:
        """
        Register a callback for URCs matching a prefix.

        Args:
            prefix: URC prefix to match (e.g., "+RX")
            callback: Function to call when URC is received
        """
        self.urc_handler.register_callback(prefix, callback)

    def unregister_urc_callback(self, prefix: str) -> bool:
        """
        Unregister a URC callback.

        Args:
            prefix: URC prefix to unregister

        Returns:
            True if callback was removed
        """
        return self.urc_handler.unregister_callback(prefix)

    def __enter__(self):
        """Context manager entry."""
        if not self.is_open():
            self.open()
        return self

    def __exit__(self, *exc):
        """Context manager exit."""
        self.close()
