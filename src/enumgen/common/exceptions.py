"""Custom exceptions for command exit mapping."""

from __future__ import annotations


class UserInputError(Exception):
    """Raised when user input or environment is invalid."""


class RowSourceError(Exception):
    """Raised when a row query cannot be executed or drained."""

    def __init__(self, sql: str, message: str) -> None:
        super().__init__(message)
        self.sql = sql
