"""CLI command modules."""

from __future__ import annotations

from types import ModuleType

from enumgen.cli.commands import generate, tables

COMMAND_MODULES: list[ModuleType] = [generate, tables]

__all__ = ["COMMAND_MODULES"]
