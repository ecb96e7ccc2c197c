"""
Holding area for +RX lines.

The modem prints a ``+RX len,hex,rssi,snr`` line whenever the rx listener
is on, including while a command is still waiting for its reply. Those
lines are parked here so the reply stays clean and the packet is not lost;
``ModemCore.read_line`` hands them out again before touching the wire.
"""

import logging
from collections import deque
from typing import Callable, Deque, Dict, Optional

logger = logging.getLogger(__name__)

URCCallback = Callable[[str], None]


class URCHandler:
    """
    FIFO of +RX lines seen during command exchanges.

    Callbacks registered for a line prefix also see each line as it is
    parked. The queue is bounded; on overflow the oldest packet is dropped.
    """

    def __init__(self, max_queue_size: int = 1000, log_urcs: bool = False) -> None:
        """
        Args:
            max_queue_size: Packets kept before the oldest is dropped
            log_urcs: Log parked lines at INFO instead of DEBUG
        """
        self.log_urcs = log_urcs
        self._pending: Deque[str] = deque(maxlen=max_queue_size)
        self._callbacks: Dict[str, URCCallback] = {}

    def register_callback(self, prefix: str, callback: URCCallback) -> None:
        """Call ``callback(line)`` for every parked line starting with ``prefix``."""
        self._callbacks[prefix] = callback
        logger.info(f"Registered +RX callback for prefix: {prefix}")

    def unregister_callback(self, prefix: str) -> bool:
        """Remove the callback for ``prefix``. Returns False if none was set."""
        if self._callbacks.pop(prefix, None) is None:
            return False
        logger.info(f"Unregistered +RX callback for prefix: {prefix}")
        return True

    def handle_urc(self, line: str) -> None:
        """
        Park a line read while a command was running.

        A callback that raises is logged and does not stop the command
        exchange that found the line.
        """
        logger.log(logging.INFO if self.log_urcs else logging.DEBUG, f"Parked line: {line}")

        if len(self._pending) == self._pending.maxlen:
            logger.warning(f"Packet backlog full, dropping {self._pending[0]}")
        self._pending.append(line)

        for prefix, callback in list(self._callbacks.items()):
            if not line.startswith(prefix):
                continue
            try:
                callback(line)
            except Exception as e:
                logger.error(f"Callback for '{prefix}' raised on {line!r}: {e}", exc_info=True)

    def pop_urc(self) -> Optional[str]:
        """Oldest parked line, or None when nothing is waiting."""
        return self._pending.popleft() if self._pending else None
