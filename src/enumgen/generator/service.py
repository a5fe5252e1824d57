"""Enum generation for a single table."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
import logging
import re
from typing import ContextManager, Protocol

from enumgen.common import RowSourceError, TableEnumResult, TableMetadata
from enumgen.generator.blocks import build_blocks
from enumgen.generator.emitter import comment, emit
from enumgen.generator.resolver import ResolvedSpec, resolve_columns
from enumgen.rules import parse_rule
from enumgen.rules.models import DEFAULT_MULTI_PREFIX

logger = logging.getLogger(__name__)


class RowSource(Protocol):
    """Scoped, forward-only access to query results."""

    def open(self, sql: str) -> ContextManager[Iterator[Mapping[str, str]]]:
        ...


def build_select(spec: ResolvedSpec) -> str:
    columns = [spec.id_column, spec.description_column]
    if spec.is_multi:
        columns.append(spec.multi_key_column)

    sql = f"SELECT {','.join(columns)} FROM {spec.table.name}"
    if spec.rule.where_clause:
        sql += f" {spec.rule.where_clause}"
    return sql


class EnumGenerator:
    """Applies the configured rules, in order, to one table at a time.

    Every failure that concerns a single rule is written into the output as
    a comment and generation moves on to the next rule.
    """

    def __init__(
        self,
        rules: Sequence[str],
        row_source: RowSource,
        multi_prefix: str = DEFAULT_MULTI_PREFIX,
    ) -> None:
        self._rules = tuple(rules)
        self._row_source = row_source
        self._multi_prefix = multi_prefix

    @property
    def rules(self) -> tuple[str, ...]:
        return self._rules

    def generate(self, table: TableMetadata) -> str:
        return self.generate_table(table).text

    def generate_table(self, table: TableMetadata) -> TableEnumResult:
        parts: list[str] = []
        enum_names: list[str] = []
        diagnostics: list[str] = []

        def diagnose(message: str) -> None:
            logger.warning("%s", message)
            diagnostics.append(message)
            parts.append(comment(message))

        for rule_line in self._rules:
            rule = parse_rule(rule_line, self._multi_prefix)

            try:
                matched = rule.matches(table.name)
            except re.error as exc:
                diagnose(f'enum rule "{rule.source}" has an invalid table pattern: {exc}')
                continue
            if not matched:
                continue
            logger.debug("rule matched: table=%s, rule=%s", table.name, rule.source)

            spec = resolve_columns(table, rule)
            if not spec.is_resolved:
                diagnose(
                    f'enum rule "{rule.source}" could not be resolved for table '
                    f"{table.name}: {spec.failure_reason}"
                )
                continue

            sql = build_select(spec)
            try:
                with self._row_source.open(sql) as rows:
                    blocks = build_blocks(rows, spec)
            except RowSourceError as exc:
                diagnose(f"query failed: {exc.sql} -- {exc}")
                continue

            if not blocks:
                diagnose(f'no records found in table {table.name} for enum rule "{rule.source}"')
                continue

            for block in blocks:
                parts.append(
                    emit(
                        table.name,
                        block.enum_name,
                        spec.id_column,
                        spec.description_column,
                        block.members,
                        block.id_is_string,
                    )
                )
                enum_names.append(block.enum_name)

        if enum_names:
            logger.info("table %s: enums=%d", table.name, len(enum_names))

        return TableEnumResult(
            table_name=table.name,
            text="".join(parts),
            enum_names=tuple(enum_names),
            diagnostics=tuple(diagnostics),
        )
