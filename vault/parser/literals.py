"""
Literal Parser - Reads integer and string literals into typed values

Each function takes the input text and returns ``(remaining, result)``.
On failure a ParseError is raised and the input is left untouched.
"""

import logging
from typing import List, Tuple

from ..core.types import Value, fits_int32

logger = logging.getLogger(__name__)

DIGITS = '0123456789'
QUOTE = '"'
SEPARATOR = ','


class ParseError(ValueError):
    """Parser error carrying the input it failed on"""
    def __init__(self, message: str, text: str):
        self.message = message
        self.text = text
        super().__init__(f"{message} at {text[:20]!r}")


def parse_integer(text: str) -> Tuple[str, int]:
    """Parse a run of ASCII digits as a signed 32-bit integer"""
    end = 0
    while end < len(text) and text[end] in DIGITS:
        end += 1

    if end == 0:
        raise ParseError("Expected digit", text)

    number = int(text[:end])
    if not fits_int32(number):
        raise ParseError(f"Integer literal {text[:end]} overflows 32 bits", text)

    return text[end:], number


def parse_string(text: str) -> Tuple[str, str]:
    """Parse a double-quoted string; no escape sequences are recognised"""
    if not text.startswith(QUOTE):
        raise ParseError("Expected '\"'", text)

    end = text.find(QUOTE, 1)
    if end == -1:
        raise ParseError("Unterminated string literal", text)

    return text[end + 1:], text[1:end]


def parse_value(text: str) -> Tuple[str, Value]:
    """
    Parse a single literal: an integer, or failing that a quoted string.

    Raises:
        ParseError: If neither literal form matches
    """
    if text and text[0] in DIGITS:
        remaining, number = parse_integer(text)
        return remaining, Value.integer(number)

    if text.startswith(QUOTE):
        remaining, string = parse_string(text)
        return remaining, Value.text(string)

    logger.debug("No literal at start of %r", text)
    raise ParseError("Expected integer or string literal", text)


def parse_row(text: str) -> Tuple[str, List[Value]]:
    """
    Parse ``value (',' value)*`` into a list of values.

    At least one value is required. Parsing stops before the first comma
    that is not followed by a valid value, and that comma is left in the
    remaining input.
    """
    try:
        remaining, value = parse_value(text)
    except ParseError as e:
        raise ParseError(f"Empty or malformed row: {e.message}", text) from e

    values = [value]
    while remaining.startswith(SEPARATOR):
        try:
            after, value = parse_value(remaining[1:])
        except ParseError:
            break
        values.append(value)
        remaining = after

    return remaining, values
