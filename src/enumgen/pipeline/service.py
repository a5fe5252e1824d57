"""Pipeline orchestration service."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
import sqlite3

from enumgen.common import GenerateOutcome, TableMetadata, UserInputError
from enumgen.generator import EnumGenerator
from enumgen.observability import get_logger
from enumgen.rules import EnumSettings, default_settings, load_enum_settings
from enumgen.storage import SqliteRowSource, connect, read_table, read_tables

logger = get_logger(__name__)


def run_generate(
    db_path: Path,
    output_path: Path,
    config_path: Path | None = None,
    rules: Sequence[str] | None = None,
    namespace: str | None = None,
    table_names: Sequence[str] | None = None,
) -> GenerateOutcome:
    """Generates enums for every table and writes a single source file."""

    settings = _resolve_settings(config_path, rules, namespace)
    if not settings.rules:
        raise UserInputError("No enum rules configured. Use --config or --rule.")

    logger.info("generate started: db=%s, rules=%d", db_path, len(settings.rules))

    conn = connect(db_path)
    try:
        tables = _select_tables(conn, settings, table_names)
        generator = EnumGenerator(
            settings.rules,
            SqliteRowSource(conn),
            multi_prefix=settings.multi_prefix,
        )
        results = [generator.generate_table(table) for table in tables]
    finally:
        conn.close()

    body = "".join(result.text for result in results)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        render_source_file(body, settings.namespace, db_path.name),
        encoding="utf-8",
    )

    outcome = GenerateOutcome(
        output_path=output_path,
        tables_count=len(tables),
        enum_names=tuple(name for result in results for name in result.enum_names),
        diagnostics=tuple(message for result in results for message in result.diagnostics),
    )
    logger.info(
        "generate completed: tables=%d, enums=%d, diagnostics=%d",
        outcome.tables_count,
        len(outcome.enum_names),
        len(outcome.diagnostics),
    )
    return outcome


def list_tables(db_path: Path, config_path: Path | None = None) -> tuple[TableMetadata, ...]:
    """Reads table metadata, honoring the configured exclusions."""

    settings = _resolve_settings(config_path, None, None)
    conn = connect(db_path)
    try:
        return read_tables(conn, exclude=settings.exclude_tables)
    finally:
        conn.close()


def render_source_file(body: str, namespace: str, source_name: str) -> str:
    return (
        "// <auto-generated>\n"
        f"//     Generated by enumgen from {source_name}.\n"
        "//     Changes to this file will be lost when the code is regenerated.\n"
        "// </auto-generated>\n"
        "using System;\n"
        "\n"
        f"namespace {namespace}\n"
        "{\n"
        f"{body}"
        "}\n"
    )


def _resolve_settings(
    config_path: Path | None,
    rules: Sequence[str] | None,
    namespace: str | None,
) -> EnumSettings:
    settings = default_settings()
    if config_path is not None:
        if not config_path.exists():
            raise UserInputError(f"Config file not found: {config_path}")
        settings = load_enum_settings(config_path)

    return EnumSettings(
        rules=tuple(rules) if rules else settings.rules,
        multi_prefix=settings.multi_prefix,
        namespace=namespace or settings.namespace,
        exclude_tables=settings.exclude_tables,
    )


def _select_tables(
    conn: sqlite3.Connection, settings: EnumSettings, table_names: Sequence[str] | None
) -> tuple[TableMetadata, ...]:
    if table_names:
        return tuple(read_table(conn, name) for name in table_names)
    return read_tables(conn, exclude=settings.exclude_tables)
