"""Parser module - Literal and Statement parsers"""

from .literals import ParseError, parse_value, parse_row
from .parser import (
    Insert, Select, Statement,
    StatementPrepareError, UnrecognisedStatement,
    parse_statement,
)

__all__ = [
    'ParseError', 'parse_value', 'parse_row',
    'Insert', 'Select', 'Statement',
    'StatementPrepareError', 'UnrecognisedStatement',
    'parse_statement',
]
