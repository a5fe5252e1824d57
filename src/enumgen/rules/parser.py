"""Rule line parsing.

A rule line holds up to five ``:``-separated positional fields::

    <table pattern>:<enum name | MULTI=key column>:<id column>:<description column>:<where clause>

Any field may be left blank, e.g. ``Products:::ProductName`` keeps the
default enum name and id column but pins the description column.
"""

from __future__ import annotations

from enumgen.rules.models import DEFAULT_MULTI_PREFIX, EnumRule

FIELD_SEPARATOR = ":"
_FIELD_COUNT = 5


def parse_rule(rule_line: str, multi_prefix: str = DEFAULT_MULTI_PREFIX) -> EnumRule:
    """Parses one rule line. Never raises; short lines fall back to blank fields."""

    fields = [part.strip() for part in rule_line.split(FIELD_SEPARATOR, _FIELD_COUNT - 1)]
    fields.extend([""] * (_FIELD_COUNT - len(fields)))
    table_pattern, enum_field, id_column, description_column, where_clause = fields

    enum_name = enum_field
    multi_key_column = ""
    is_multi = False
    if multi_prefix and enum_field.lower().startswith(multi_prefix.lower()):
        is_multi = True
        multi_key_column = enum_field[len(multi_prefix):].strip()
        enum_name = ""

    return EnumRule(
        source=rule_line,
        table_pattern=table_pattern,
        enum_name=enum_name,
        id_column=id_column,
        description_column=description_column,
        where_clause=where_clause,
        multi_key_column=multi_key_column,
        is_multi=is_multi,
    )
