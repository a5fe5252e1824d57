"""SQLite metadata provider and row source."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
import sqlite3

from enumgen.common import ColumnMetadata, RowSourceError, TableMetadata, UserInputError
from enumgen.generator.sanitize import sanitize

_STRING_TYPE_MARKERS = ("CHAR", "CLOB", "TEXT")


class SqliteRowSource:
    """Runs row queries against an open SQLite connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    @contextmanager
    def open(self, sql: str) -> Iterator[Iterator[Mapping[str, str]]]:
        try:
            cursor = self._conn.execute(sql)
        except sqlite3.Error as exc:
            raise RowSourceError(sql, str(exc)) from exc

        try:
            yield _iter_rows(cursor, sql)
        finally:
            cursor.close()


def connect(db_path: Path) -> sqlite3.Connection:
    """Opens an existing SQLite database file."""

    if not db_path.exists():
        raise UserInputError(f"DB file not found: {db_path}")
    return sqlite3.connect(str(db_path))


def read_tables(
    conn: sqlite3.Connection, exclude: Iterable[str] = ()
) -> tuple[TableMetadata, ...]:
    """Reads user table metadata, sorted by table name."""

    excluded = {name.lower() for name in exclude}
    rows = conn.execute(
        """
        SELECT name FROM sqlite_master
        WHERE type = 'table' AND name NOT LIKE 'sqlite_%'
        ORDER BY name
        """
    ).fetchall()

    return tuple(
        read_table(conn, str(row[0]))
        for row in rows
        if str(row[0]).lower() not in excluded
    )


def read_table(conn: sqlite3.Connection, table_name: str) -> TableMetadata:
    quoted = _quote_identifier(table_name)
    column_rows = conn.execute(f"PRAGMA table_info({quoted})").fetchall()
    if not column_rows:
        raise UserInputError(f"Table not found: {table_name}")

    foreign_key_columns = {
        str(row[3]) for row in conn.execute(f"PRAGMA foreign_key_list({quoted})").fetchall()
    }

    # table_info row: cid, name, type, notnull, dflt_value, pk
    columns = tuple(
        ColumnMetadata(
            name=str(row[1]),
            is_string=_is_string_type(str(row[2] or "")),
            is_pk=int(row[5]) > 0,
            is_foreign_key=str(row[1]) in foreign_key_columns,
        )
        for row in column_rows
    )
    return TableMetadata(name=table_name, clean_name=sanitize(table_name), columns=columns)


def _iter_rows(cursor: sqlite3.Cursor, sql: str) -> Iterator[Mapping[str, str]]:
    names = [desc[0] for desc in cursor.description or ()]
    try:
        for row in cursor:
            yield {
                name: "" if value is None else str(value)
                for name, value in zip(names, row)
            }
    except sqlite3.Error as exc:
        raise RowSourceError(sql, str(exc)) from exc


def _is_string_type(declared_type: str) -> bool:
    upper = declared_type.upper()
    return any(marker in upper for marker in _STRING_TYPE_MARKERS)


def _quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'
