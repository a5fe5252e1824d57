"""tables command handler: lists table metadata."""

from __future__ import annotations

import argparse
from pathlib import Path

from enumgen.pipeline import list_tables


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("tables", help="list tables and their columns")
    parser.add_argument("--db", required=True, help="SQLite database path")
    parser.add_argument("--config", required=False, help="enum rules YAML")
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    tables = list_tables(
        db_path=Path(args.db),
        config_path=Path(args.config) if args.config else None,
    )

    for table in tables:
        print(f"{table.name} ({table.clean_name})")
        for column in table.columns:
            flags = [
                flag
                for flag, enabled in (
                    ("pk", column.is_pk),
                    ("fk", column.is_foreign_key),
                    ("string", column.is_string),
                )
                if enabled
            ]
            print(f"  {column.name} [{', '.join(flags)}]")
    return 0
