"""Enum generation engine."""

from .blocks import build_blocks
from .emitter import emit
from .resolver import ResolvedSpec, resolve_columns
from .sanitize import sanitize
from .service import EnumGenerator, RowSource, build_select

__all__ = [
    "EnumGenerator",
    "ResolvedSpec",
    "RowSource",
    "build_blocks",
    "build_select",
    "emit",
    "resolve_columns",
    "sanitize",
]
