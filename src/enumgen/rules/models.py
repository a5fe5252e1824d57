"""Enum rule and settings models."""

from __future__ import annotations

from dataclasses import dataclass
import re

DEFAULT_MULTI_PREFIX = "MULTI="
DEFAULT_NAMESPACE = "Generated.Enums"


@dataclass(frozen=True)
class EnumRule:
    """One parsed rule line.

    ``source`` keeps the original text so diagnostics can quote it.
    ``enum_name`` is empty for MULTI rules; the name is derived per block.
    """

    source: str
    table_pattern: str
    enum_name: str = ""
    id_column: str = ""
    description_column: str = ""
    where_clause: str = ""
    multi_key_column: str = ""
    is_multi: bool = False

    def matches(self, table_name: str) -> bool:
        """Case-insensitive regex search against a table name.

        Raises ``re.error`` when the pattern itself is invalid.
        """
        return re.search(self.table_pattern, table_name, re.IGNORECASE) is not None


@dataclass(frozen=True)
class EnumSettings:
    """Generator settings (enumgen/rules.yaml)."""

    rules: tuple[str, ...]
    multi_prefix: str = DEFAULT_MULTI_PREFIX
    namespace: str = DEFAULT_NAMESPACE
    exclude_tables: tuple[str, ...] = ()
