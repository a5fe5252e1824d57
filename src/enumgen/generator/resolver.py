"""Column resolution for a rule/table pair."""

from __future__ import annotations

from dataclasses import dataclass

from enumgen.common import TableMetadata
from enumgen.rules import EnumRule

ENUM_SUFFIX = "Enum"
STRING_ENUM_SUFFIX = "Str"


@dataclass(frozen=True)
class ResolvedSpec:
    table: TableMetadata
    rule: EnumRule
    id_column: str
    description_column: str
    multi_key_column: str
    id_is_string: bool
    enum_name: str
    id_found: bool
    description_found: bool
    multi_key_found: bool

    @property
    def is_multi(self) -> bool:
        return self.rule.is_multi

    @property
    def is_resolved(self) -> bool:
        return self.failure_reason is None

    @property
    def failure_reason(self) -> str | None:
        """Describes the missing columns, or None when everything was found."""
        missing: list[str] = []
        if not self.id_found:
            missing.append(f"id column '{self.id_column}'")
        if not self.description_found:
            missing.append(f"description column '{self.description_column}'")
        if self.is_multi and not self.multi_key_found:
            missing.append(f"multi key column '{self.multi_key_column}'")
        if not missing:
            return None
        return " and ".join(missing) + " not found"


def enum_name_for(base: str, id_is_string: bool) -> str:
    return base + ENUM_SUFFIX + (STRING_ENUM_SUFFIX if id_is_string else "")


def resolve_columns(table: TableMetadata, rule: EnumRule) -> ResolvedSpec:
    """Picks the id/description/key columns for ``rule`` on ``table``.

    Blank rule columns default to the first primary key column and the first
    string column that is neither a primary nor a foreign key. Explicit
    column names are never replaced, even when the table lacks them.
    """

    id_column = rule.id_column
    description_column = rule.description_column
    multi_key_column = rule.multi_key_column if rule.is_multi else ""

    id_found = False
    description_found = False
    multi_key_found = False
    id_is_string = False

    for column in table.columns:
        if not id_column and column.is_pk:
            id_column = column.name
        if (
            not description_column
            and not column.is_pk
            and not column.is_foreign_key
            and column.is_string
        ):
            description_column = column.name

        if column.name == id_column:
            id_found = True
            id_is_string = column.is_string
        if column.name == description_column:
            description_found = True
        if rule.is_multi and column.name == multi_key_column:
            multi_key_found = True

    enum_name = rule.enum_name
    if not enum_name and not rule.is_multi:
        enum_name = enum_name_for(table.clean_name, id_is_string)

    return ResolvedSpec(
        table=table,
        rule=rule,
        id_column=id_column,
        description_column=description_column,
        multi_key_column=multi_key_column,
        id_is_string=id_is_string,
        enum_name=enum_name,
        id_found=id_found,
        description_found=description_found,
        multi_key_found=multi_key_found,
    )
