"""
Vault - A line-oriented parser for INSERT and SELECT statements

Rows are written as integer and double-quoted string literals and can be
checked against a fixed table schema.
"""

__version__ = "0.1.0"

from .core.repl import REPL
from .core.schema import Column, TableSchema, RowParseError, default_schema, validate_row
from .core.types import ColumnType, Value
from .parser import (
    Insert, Select, Statement,
    ParseError, StatementPrepareError, UnrecognisedStatement,
    parse_row, parse_statement, parse_value,
)

__all__ = [
    "REPL",
    "Column", "ColumnType", "TableSchema", "Value",
    "RowParseError", "default_schema", "validate_row",
    "Insert", "Select", "Statement",
    "ParseError", "StatementPrepareError", "UnrecognisedStatement",
    "parse_row", "parse_statement", "parse_value",
]
