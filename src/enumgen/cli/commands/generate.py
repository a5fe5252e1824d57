"""generate command handler."""

from __future__ import annotations

import argparse
from pathlib import Path

from enumgen.pipeline import run_generate


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("generate", help="generate enums from lookup tables")
    parser.add_argument("--db", required=True, help="SQLite database path")
    parser.add_argument("--out", required=True, help="output source file")
    parser.add_argument("--config", required=False, help="enum rules YAML")
    parser.add_argument(
        "--rule",
        action="append",
        default=[],
        help="enum rule line, overrides configured rules (repeatable)",
    )
    parser.add_argument("--namespace", required=False)
    parser.add_argument(
        "--table",
        action="append",
        default=[],
        help="only generate for this table (repeatable)",
    )
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    outcome = run_generate(
        db_path=Path(args.db),
        output_path=Path(args.out),
        config_path=Path(args.config) if args.config else None,
        rules=args.rule or None,
        namespace=args.namespace,
        table_names=args.table or None,
    )

    print(f"[OK] output={outcome.output_path}")
    print(f"[OK] tables={outcome.tables_count}, enums={len(outcome.enum_names)}")

    if outcome.partial_failure:
        print(f"[WARN] diagnostics: {len(outcome.diagnostics)}")
        for item in outcome.diagnostics[:20]:
            print(f"[WARN] {item}")
        return 2
    return 0
