"""
Base parser classes and utilities.

Provides reusable parsing functionality for modem response lines.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Type

from ..exceptions import ResponseParseError

logger = logging.getLogger(__name__)

T = TypeVar('T')

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")

INT16_MIN = -(2 ** 15)
INT16_MAX = 2 ** 15 - 1


class ResponseParser(ABC, Generic[T]):
    """
    Abstract base class for response parsers.

    Parsers convert raw modem response lines into typed data structures.
    """

    @abstractmethod
    def parse(self, response: list[str]) -> T:
        """
        Parse modem response.

        Args:
            response: List of response lines from modem

        Returns:
            Parsed data structure

        Raises:
            ResponseParseError: If response cannot be parsed
        """
        pass


def parse_unsigned(
    text: str,
    name: str,
    error: Type[ResponseParseError] = ResponseParseError
) -> int:
    """
    Parse a decimal unsigned integer field.

    ``int()`` alone would also accept whitespace, underscores and a minus
    sign, none of which the modem ever sends.

    Args:
        text: Field text
        name: Field name used in the error message
        error: Exception class to raise on failure

    Returns:
        Parsed integer

    Raises:
        ResponseParseError: (or the given subclass) if text is not a decimal number
    """
    if not _UNSIGNED_RE.fullmatch(text):
        raise error(f"Invalid {name}: {text!r} is not an unsigned integer")
    return int(text)


def parse_int16(
    text: str,
    name: str,
    error: Type[ResponseParseError] = ResponseParseError
) -> int:
    """
    Parse a decimal signed 16-bit integer field.

    Args:
        text: Field text
        name: Field name used in the error message
        error: Exception class to raise on failure

    Returns:
        Parsed integer in range -32768..32767

    Raises:
        ResponseParseError: (or the given subclass) if not numeric or out of range
    """
    if not _SIGNED_RE.fullmatch(text):
        raise error(f"Invalid {name}: {text!r} is not an integer")

    value = int(text)
    if not INT16_MIN <= value <= INT16_MAX:
        raise error(f"Invalid {name}: {value} does not fit in 16 bits")
    return value
