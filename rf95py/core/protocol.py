"""
AT command protocol handler.

Manages synchronous AT command execution and separates unsolicited
+RX lines from command responses.
"""

import logging
from typing import Optional

from .transport import Transport, LINE_TERMINATOR
from .urc import URCHandler
from ..exceptions import ATTimeoutError, CommandFailedError, TransportError
from ..parsers.packet import RX_PREFIX

logger = logging.getLogger(__name__)

OK_RESPONSE = "+OK"
FAIL_PREFIXES = ("+FAIL", "+ERROR")
UNSOLICITED_PREFIXES = (RX_PREFIX,)


class ATProtocol:
    """
    AT command protocol handler.

    Writes one command and reads lines from the transport until the
    command's terminal line arrives. Unsolicited lines read in between are
    handed to the URCHandler.
    """

    def __init__(
        self,
        transport: Transport,
        urc_handler: URCHandler,
        default_timeout: Optional[float] = None
    ) -> None:
        """
        Initialize AT protocol handler.

        Args:
            transport: Transport instance for communication
            urc_handler: Receives unsolicited lines seen while waiting for a response
            default_timeout: Per-line read timeout in seconds (None uses the transport's)
        """
        self.transport = transport
        self.urc_handler = urc_handler
        self.default_timeout = default_timeout

        logger.info("Initialized AT protocol handler")

    def send_command(
        self,
        cmd: str = "AT",
        terminator: str = OK_RESPONSE,
        strip_ok: bool = False,
        timeout: Optional[float] = None
    ) -> list[str]:
        """
        Send an AT command and wait for its response.

        Every rf95modem command closes with "+OK", including AT+TX and
        AT+FREQ whose "+SENT" / "+FREQ:" lines come first. Reading through
        to the closing line leaves nothing behind for the next command or
        for read_line.

        Args:
            cmd: AT command to send (e.g., "AT+INFO" or "+INFO")
            terminator: Prefix of the line that completes the response
            strip_ok: Remove the final "+OK" line from the response
            timeout: Per-line read timeout in seconds (uses default if None)

        Returns:
            List of response lines, ending with the terminal line

        Raises:
            ATTimeoutError: If the transport returns no data
            CommandFailedError: If the modem answers +FAIL or +ERROR
            TransportError: If the write fails
        """
        cmd = self._normalize_command(cmd)
        sent = cmd.strip()

        logger.debug(f"Sending AT command: {sent}")

        written = self.transport.write(cmd.encode("ascii"))
        if not written:
            raise TransportError(f"Failed to write AT command: {sent}", command=sent)

        timeout_val = timeout if timeout is not None else self.default_timeout
        lines: list[str] = []

        while True:
            line = self.read_line(timeout=timeout_val, command=sent, response=lines)

            if not line:
                continue

            if self.is_urc(line):
                self.urc_handler.handle_urc(line)
                continue

            lines.append(line)

            if line.startswith(FAIL_PREFIXES):
                logger.error(f"AT command failed: {sent}: {line}")
                raise CommandFailedError(
                    f"AT command {sent} failed: {line}",
                    command=sent,
                    response=lines
                )

            if line.startswith(terminator):
                break

        logger.debug(f"Received response: {lines}")

        if strip_ok and lines[-1] == OK_RESPONSE:
            lines = lines[:-1]

        return lines

    def read_line(
        self,
        timeout: Optional[float] = None,
        command: Optional[str] = None,
        response: Optional[list[str]] = None
    ) -> str:
        """
        Read one line from the transport.

        Args:
            timeout: Read timeout in seconds (None uses the transport's)
            command: Command being executed, for error context
            response: Response collected so far, for error context

        Returns:
            Line without its terminator (may be empty for a blank line)

        Raises:
            ATTimeoutError: If the transport returns no data
        """
        line_bytes = self.transport.read_until(LINE_TERMINATOR, timeout=timeout)

        if not line_bytes:
            if command:
                message = f"AT command timed out: {command}"
            else:
                message = "Timed out waiting for a line from the modem"
            logger.error(message)
            raise ATTimeoutError(message, command=command, response=response)

        return line_bytes.decode("utf-8", errors="replace").strip()

    def _normalize_command(self, cmd: str) -> str:
        """
        Normalize AT command format.

        Ensures command starts with "AT" and ends with a newline.
        """
        cmd = cmd.strip()

        # Add AT prefix if missing
        if not cmd.upper().startswith("AT"):
            cmd = "AT" + cmd

        return cmd + "\n"

    def is_urc(self, line: str) -> bool:
        """
        Determine if a line is unsolicited.

        Args:
            line: Line to classify

        Returns:
            True if the line was not sent in response to a command
        """
        return line.startswith(UNSOLICITED_PREFIXES)
