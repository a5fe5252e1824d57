"""Shared data models for enumgen."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ColumnMetadata:
    name: str
    is_string: bool
    is_pk: bool = False
    is_foreign_key: bool = False


@dataclass(frozen=True)
class TableMetadata:
    name: str
    clean_name: str
    columns: tuple[ColumnMetadata, ...]


@dataclass(frozen=True)
class EnumMember:
    """One fetched row reduced to an enum member."""

    name: str
    value: str
    key: str = ""


@dataclass(frozen=True)
class EnumBlock:
    enum_name: str
    id_is_string: bool
    members: tuple[EnumMember, ...]


@dataclass(frozen=True)
class TableEnumResult:
    table_name: str
    text: str
    enum_names: tuple[str, ...] = ()
    diagnostics: tuple[str, ...] = ()

    @property
    def has_diagnostics(self) -> bool:
        return bool(self.diagnostics)


@dataclass
class GenerateOutcome:
    output_path: Path
    tables_count: int = 0
    enum_names: tuple[str, ...] = field(default_factory=tuple)
    diagnostics: tuple[str, ...] = field(default_factory=tuple)

    @property
    def partial_failure(self) -> bool:
        return bool(self.diagnostics)
