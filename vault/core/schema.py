"""
Schema Module - Defines table structure and row validation

Supports:
- Column definitions with types
- Ordered table schemas
- Validating plain comma-separated rows against a schema
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from .types import ColumnType, TypeValidator, Value

logger = logging.getLogger(__name__)

Row = List[Value]


class RowParseError(ValueError):
    """A row did not match the shape or types of its schema"""


@dataclass(frozen=True)
class Column:
    """Represents a column in a table"""
    name: str
    col_type: ColumnType

    def __str__(self) -> str:
        return f"{self.name}: {self.col_type}"


@dataclass(frozen=True)
class TableSchema:
    """
    Represents the schema of a table.

    Column order is significant: the n-th value of a row belongs to the
    n-th column. Column names are not checked for uniqueness.
    """
    columns: Tuple[Column, ...]

    def __init__(self, columns: Iterable[Column]):
        columns = tuple(columns)
        if not columns:
            raise ValueError("A table schema needs at least one column")
        object.__setattr__(self, 'columns', columns)

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[Column]:
        return iter(self.columns)

    def get_column_names(self) -> List[str]:
        """Get list of column names"""
        return [col.name for col in self.columns]

    def __str__(self) -> str:
        result = "| "
        for col in self.columns:
            result += f"{col} | "
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Serialize schema to dictionary"""
        return {
            'columns': [
                {'name': col.name, 'type': str(col.col_type)}
                for col in self.columns
            ],
            'display': str(self),
        }


def default_schema() -> TableSchema:
    """The single table Vault works with"""
    return TableSchema([
        Column("id", ColumnType.INTEGER),
        Column("username", ColumnType.TEXT),
        Column("email", ColumnType.TEXT),
    ])


def validate_row(line: str, schema: TableSchema) -> Row:
    """
    Decode a plain comma-separated line into a row for ``schema``.

    Fields are unquoted and split on every comma, so a comma inside a
    String field is read as a separator. Fields are not trimmed.

    Raises:
        RowParseError: On a field count mismatch, or a field that does not
            decode under its column type
    """
    fields = line.split(',')
    if len(fields) != len(schema):
        logger.debug("Row %r has %d fields, schema expects %d",
                     line, len(fields), len(schema))
        raise RowParseError(
            f"Expected {len(schema)} fields, got {len(fields)}"
        )

    row = []
    for col, field in zip(schema, fields):
        try:
            row.append(TypeValidator.decode(field, col.col_type))
        except ValueError as e:
            raise RowParseError(f"Column '{col.name}': {e}") from e

    return row
