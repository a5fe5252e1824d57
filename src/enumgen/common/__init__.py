"""Shared models and exceptions."""

from .exceptions import RowSourceError, UserInputError
from .models import (
    ColumnMetadata,
    EnumBlock,
    EnumMember,
    GenerateOutcome,
    TableEnumResult,
    TableMetadata,
)

__all__ = [
    "ColumnMetadata",
    "EnumBlock",
    "EnumMember",
    "GenerateOutcome",
    "RowSourceError",
    "TableEnumResult",
    "TableMetadata",
    "UserInputError",
]
