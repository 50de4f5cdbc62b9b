"""Exception hierarchy for CSV to JSON conversion.

Every failure the core can report derives from `ConversionError`, so the UI,
API and CLI layers can catch conversion problems with a single except clause.
"""
from __future__ import annotations

from typing import Optional


class ConversionError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MalformedInputError(ConversionError):
    """Unbalanced quoting or an illegal character after a closing quote."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.line = line
        self.column = column


class EmptyInputError(ConversionError):
    def __init__(self, message: str = "Input contains no CSV rows.") -> None:
        super().__init__(message)


class RaggedRowError(ConversionError):
    """A data row whose field count differs from the header's.

    `row_index` is 0-based and counts data rows only (the header row is not
    counted).
    """

    def __init__(self, row_index: int, expected: int, actual: int) -> None:
        super().__init__(
            f"Row {row_index} has {actual} field(s), expected {expected}."
        )
        self.row_index = row_index
        self.expected = expected
        self.actual = actual


class InvalidConfigurationError(ConversionError):
    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
