"""Core module - Types, Schema, Meta Commands, REPL"""

from .types import ColumnType, TypeValidator, Value
from .schema import Column, TableSchema, Row, RowParseError, default_schema, validate_row
from .commands import CommandResult, MetaCommandError, handle_meta_command
from .repl import REPL

__all__ = [
    'ColumnType', 'TypeValidator', 'Value',
    'Column', 'TableSchema', 'Row', 'RowParseError',
    'default_schema', 'validate_row',
    'CommandResult', 'MetaCommandError', 'handle_meta_command',
    'REPL',
]
