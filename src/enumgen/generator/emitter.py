"""C# text rendering for enum blocks.

Integer ids become a ``public enum``; string ids become a class holding one
string constant per member. Both are indented one level so the caller can
wrap them in a namespace.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from enumgen.common import EnumMember

INDENT = "    "


class EnumEmitter(Protocol):
    """Renders one enum block as source text."""

    def emit(
        self,
        table_name: str,
        enum_name: str,
        id_column: str,
        description_column: str,
        members: Sequence[EnumMember],
    ) -> str:
        ...


class IntEnumEmitter:
    def emit(
        self,
        table_name: str,
        enum_name: str,
        id_column: str,
        description_column: str,
        members: Sequence[EnumMember],
    ) -> str:
        member_lines = [
            f"{INDENT * 2}{member.name} = {member.value}" for member in members
        ]
        lines = [
            *_summary(table_name, id_column, description_column),
            f"{INDENT}public enum {enum_name}",
            f"{INDENT}{{",
            ",\n".join(member_lines),
            f"{INDENT}}}",
        ]
        return "\n".join(lines) + "\n\n"


class StringEnumEmitter:
    def emit(
        self,
        table_name: str,
        enum_name: str,
        id_column: str,
        description_column: str,
        members: Sequence[EnumMember],
    ) -> str:
        body = INDENT * 2
        lines = [
            *_summary(table_name, id_column, description_column),
            f"{INDENT}public class {enum_name}",
            f"{INDENT}{{",
        ]
        lines.extend(
            f'{body}public const string {member.name} = "{_escape(member.value)}";'
            for member in members
        )
        lines.extend(
            [
                "",
                f"{body}public string Value {{ get; private set; }}",
                "",
                f"{body}public {enum_name}(string value)",
                f"{body}{{",
                f"{body}{INDENT}Value = value;",
                f"{body}}}",
                "",
                f"{body}public override string ToString()",
                f"{body}{{",
                f"{body}{INDENT}return Value;",
                f"{body}}}",
                f"{INDENT}}}",
            ]
        )
        return "\n".join(lines) + "\n\n"


_EMITTERS: dict[bool, EnumEmitter] = {
    False: IntEnumEmitter(),
    True: StringEnumEmitter(),
}


def get_emitter(id_is_string: bool) -> EnumEmitter:
    return _EMITTERS[id_is_string]


def emit(
    table_name: str,
    enum_name: str,
    id_column: str,
    description_column: str,
    members: Sequence[EnumMember],
    id_is_string: bool,
) -> str:
    """Renders members in the shape selected by ``id_is_string``."""

    return get_emitter(id_is_string).emit(
        table_name, enum_name, id_column, description_column, members
    )


def comment(message: str) -> str:
    """Formats a diagnostic as an indented line comment."""
    single_line = message.replace("\r", " ").replace("\n", " ")
    return f"{INDENT}// {single_line}\n"


def _summary(table_name: str, id_column: str, description_column: str) -> list[str]:
    return [
        f"{INDENT}/// <summary>",
        f"{INDENT}/// Enum for table {table_name} ({id_column}, {description_column})",
        f"{INDENT}/// </summary>",
    ]


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')
