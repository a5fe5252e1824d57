"""CLI parser construction."""

from __future__ import annotations

import argparse

from enumgen.cli.commands import COMMAND_MODULES


def build_parser() -> argparse.ArgumentParser:
    """Builds the main ArgumentParser and registers subcommands."""
    parser = argparse.ArgumentParser(prog="enumgen")
    parser.add_argument("--log-config", required=False, help="logging dictConfig YAML")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for module in COMMAND_MODULES:
        module.configure(subparsers)

    return parser
