"""Storage module."""

from .sqlite_source import SqliteRowSource, connect, read_table, read_tables

__all__ = ["SqliteRowSource", "connect", "read_table", "read_tables"]
