"""Pipeline module."""

from .service import list_tables, render_source_file, run_generate

__all__ = ["list_tables", "render_source_file", "run_generate"]
