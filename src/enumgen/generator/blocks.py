"""Row to enum block grouping."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from enumgen.common import EnumBlock, EnumMember
from enumgen.generator.resolver import ResolvedSpec, enum_name_for
from enumgen.generator.sanitize import sanitize


def build_blocks(rows: Iterable[Mapping[str, str]], spec: ResolvedSpec) -> list[EnumBlock]:
    """Groups rows into enum blocks in a single forward pass.

    In MULTI mode a new block starts whenever the key value differs from the
    previous row's, so rows sharing a key must arrive contiguously. Rows are
    never sorted or regrouped here. An empty input yields no blocks.
    """

    blocks: list[EnumBlock] = []
    members: list[EnumMember] = []
    last_key = ""
    row_count = 0

    def flush(enum_name: str) -> None:
        blocks.append(
            EnumBlock(
                enum_name=enum_name,
                id_is_string=spec.id_is_string,
                members=tuple(members),
            )
        )
        members.clear()

    for row in rows:
        key = sanitize(row[spec.multi_key_column]) if spec.is_multi else ""
        if row_count > 0 and key != last_key:
            flush(enum_name_for(last_key, spec.id_is_string))

        members.append(
            EnumMember(
                name=sanitize(row[spec.description_column]),
                value=row[spec.id_column],
                key=key,
            )
        )
        last_key = key
        row_count += 1

    if row_count == 0:
        return blocks

    if spec.is_multi:
        flush(enum_name_for(last_key, spec.id_is_string))
    else:
        flush(spec.enum_name)
    return blocks
