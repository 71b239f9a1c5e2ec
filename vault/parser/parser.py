"""
Statement Parser - Converts a line of input into a Statement

Recognises two statement shapes:

    INSERT ("alice",1,...)
    SELECT

Keywords are case-insensitive. The INSERT row is checked against the
literal grammar only; schema validation is a separate step.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

from ..core.types import Value
from .literals import ParseError, parse_row

logger = logging.getLogger(__name__)

# Whitespace accepted between a keyword and its payload
BLANKS = ' \t'


# ============================================================================
# Statements
# ============================================================================

@dataclass(frozen=True)
class Insert:
    """INSERT statement"""
    row: Tuple[Value, ...]

    def __post_init__(self):
        object.__setattr__(self, 'row', tuple(self.row))

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': 'insert', 'row': [value.to_dict() for value in self.row]}


@dataclass(frozen=True)
class Select:
    """SELECT statement"""

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': 'select'}


Statement = Union[Insert, Select]


class StatementPrepareError(Exception):
    """Base class for errors raised while preparing a statement"""


class UnrecognisedStatement(StatementPrepareError):
    """The input did not match any statement shape"""
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Unrecognised statement: {text!r}")


# ============================================================================
# Parser
# ============================================================================

def _keyword(text: str, word: str) -> str:
    """Match ``word`` case-insensitively at the start of ``text``"""
    head = text[:len(word)]
    if not head.isascii() or head.upper() != word:
        raise ParseError(f"Expected {word}", text)
    return text[len(word):]


def _char(text: str, char: str) -> str:
    if not text.startswith(char):
        raise ParseError(f"Expected '{char}'", text)
    return text[1:]


def _blanks(text: str) -> str:
    """Consume one or more spaces or tabs"""
    stripped = text.lstrip(BLANKS)
    if stripped == text:
        raise ParseError("Expected whitespace", text)
    return stripped


def parse_insert(text: str) -> Tuple[str, Insert]:
    """Parse ``INSERT WS+ '(' row ')'``"""
    remaining = _keyword(text, 'INSERT')
    remaining = _blanks(remaining)
    remaining = _char(remaining, '(')
    remaining, row = parse_row(remaining)
    remaining = _char(remaining, ')')
    return remaining, Insert(row)


def parse_select(text: str) -> Tuple[str, Select]:
    """Parse ``SELECT``; anything after the keyword is left unread"""
    remaining = _keyword(text, 'SELECT')
    return remaining, Select()


def parse_statement(text: str) -> Statement:
    """
    Parse a line into a Statement.

    INSERT is tried before SELECT. Once the INSERT keyword matches, a bad
    body fails the whole statement rather than falling through to SELECT.
    Input left over after a statement is ignored.

    Raises:
        UnrecognisedStatement: For any grammar failure
    """
    try:
        _keyword(text, 'INSERT')
    except ParseError:
        parser = parse_select
    else:
        parser = parse_insert

    try:
        _, statement = parser(text)
    except ParseError as e:
        logger.debug("Rejected statement %r: %s", text, e)
        raise UnrecognisedStatement(text) from e

    return statement
