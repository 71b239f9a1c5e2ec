"""
Data Types Module - Defines column types and typed values for Vault

Supports: Int (signed 32-bit) and String columns.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Union
import re


INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# Optional sign followed by ASCII digits only
_INTEGER_FIELD = re.compile(r'[+-]?[0-9]+')


class ColumnType(Enum):
    """Supported column types in Vault"""
    INTEGER = "Int"
    TEXT = "String"

    def __str__(self) -> str:
        return self.value


def fits_int32(number: int) -> bool:
    """Check that an integer fits in a signed 32-bit slot"""
    return INT32_MIN <= number <= INT32_MAX


@dataclass(frozen=True)
class Value:
    """
    A typed value: either an Int or a String.

    Two values are equal only when both the type tag and the payload match,
    so ``Value.integer(1) != Value.text("1")``.
    """
    kind: ColumnType
    data: Union[int, str]

    def __post_init__(self):
        if self.kind == ColumnType.INTEGER:
            if isinstance(self.data, bool) or not isinstance(self.data, int):
                raise ValueError(f"Int value must be an int, got {type(self.data).__name__}")
            if not fits_int32(self.data):
                raise ValueError(f"Int value {self.data} is out of 32-bit range")
        elif self.kind == ColumnType.TEXT:
            if not isinstance(self.data, str):
                raise ValueError(f"String value must be a str, got {type(self.data).__name__}")

    @classmethod
    def integer(cls, number: int) -> 'Value':
        return cls(ColumnType.INTEGER, number)

    @classmethod
    def text(cls, string: str) -> 'Value':
        return cls(ColumnType.TEXT, string)

    @property
    def is_integer(self) -> bool:
        return self.kind == ColumnType.INTEGER

    def render(self) -> str:
        """Render as a literal accepted by the row parser"""
        if self.is_integer:
            return str(self.data)
        return f'"{self.data}"'

    def to_dict(self) -> Dict[str, Any]:
        """Serialize value to dictionary"""
        return {'type': str(self.kind), 'value': self.data}

    def __repr__(self) -> str:
        if self.is_integer:
            return f"Integer({self.data})"
        return f"Text({self.data!r})"


class TypeValidator:
    """Decodes unquoted field text into typed values"""

    @staticmethod
    def decode(field: str, col_type: ColumnType) -> Value:
        """
        Decode a raw field under a column type.

        Raises:
            ValueError: If the field is not a valid Int for an Int column
        """
        if col_type == ColumnType.TEXT:
            return Value.text(field)

        if not _INTEGER_FIELD.fullmatch(field):
            raise ValueError(f"Cannot convert '{field}' to {col_type}")
        number = int(field)
        if not fits_int32(number):
            raise ValueError(f"'{field}' is out of range for {col_type}")
        return Value.integer(number)
