"""Rule line parser tests."""

from __future__ import annotations

import re

import pytest

from enumgen.rules import EnumRule, parse_rule


def test_parse_pattern_only_rule_uses_blank_defaults() -> None:
    rule = parse_rule("Categories")

    assert rule == EnumRule(source="Categories", table_pattern="Categories")
    assert rule.is_multi is False


def test_parse_full_rule() -> None:
    rule = parse_rule("^Orders$:OrderStatusEnum:StatusID:StatusName:WHERE Active = 1")

    assert rule.table_pattern == "^Orders$"
    assert rule.enum_name == "OrderStatusEnum"
    assert rule.id_column == "StatusID"
    assert rule.description_column == "StatusName"
    assert rule.where_clause == "WHERE Active = 1"


def test_parse_placeholder_separators_keep_positions() -> None:
    rule = parse_rule("Products:::ProductName")

    assert rule.enum_name == ""
    assert rule.id_column == ""
    assert rule.description_column == "ProductName"
    assert rule.where_clause == ""


def test_parse_multi_directive() -> None:
    rule = parse_rule("tbl:MULTI=LookupKey:LookupVal:LookupDescLong")

    assert rule.is_multi is True
    assert rule.multi_key_column == "LookupKey"
    assert rule.enum_name == ""
    assert rule.id_column == "LookupVal"
    assert rule.description_column == "LookupDescLong"


def test_parse_multi_directive_is_case_insensitive() -> None:
    rule = parse_rule("tbl:multi=LookupKey")

    assert rule.is_multi is True
    assert rule.multi_key_column == "LookupKey"


def test_parse_custom_multi_prefix() -> None:
    rule = parse_rule("tbl:GROUP=Kind", multi_prefix="GROUP=")
    default_prefix_rule = parse_rule("tbl:GROUP=Kind")

    assert rule.is_multi is True
    assert rule.multi_key_column == "Kind"
    assert default_prefix_rule.is_multi is False
    assert default_prefix_rule.enum_name == "GROUP=Kind"


def test_parse_where_clause_keeps_extra_separators() -> None:
    rule = parse_rule("Codes:CodeEnum:Code:Label:WHERE Code <> 'a:b'")

    assert rule.where_clause == "WHERE Code <> 'a:b'"


def test_parse_trims_fields_and_keeps_source() -> None:
    line = " Categories : CatEnum : CategoryID "
    rule = parse_rule(line)

    assert rule.source == line
    assert rule.table_pattern == "Categories"
    assert rule.enum_name == "CatEnum"
    assert rule.id_column == "CategoryID"


def test_parse_never_fails_on_odd_input() -> None:
    for line in ["", ":", "::::", "::::::::"]:
        rule = parse_rule(line)
        assert rule.table_pattern == ""


def test_rule_matches_table_name_case_insensitively() -> None:
    rule = parse_rule("^categories$")

    assert rule.matches("Categories")
    assert not rule.matches("SubCategories")
    assert parse_rule("Lookup").matches("tblLookup")


def test_rule_with_invalid_pattern_raises_on_match() -> None:
    rule = parse_rule("Categ(ories")

    with pytest.raises(re.error):
        rule.matches("Categories")
