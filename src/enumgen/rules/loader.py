"""YAML based generator settings loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import DEFAULT_MULTI_PREFIX, DEFAULT_NAMESPACE, EnumSettings

logger = logging.getLogger(__name__)

_DEFAULT_SETTINGS = EnumSettings(
    rules=(),
    multi_prefix=DEFAULT_MULTI_PREFIX,
    namespace=DEFAULT_NAMESPACE,
    exclude_tables=(),
)


def default_settings() -> EnumSettings:
    return _DEFAULT_SETTINGS


def load_enum_settings(config_path: Path) -> EnumSettings:
    """enumgen/rules.yaml loading. Returns defaults on failure."""
    data = _safe_load_yaml(config_path)
    if data is None:
        return _DEFAULT_SETTINGS

    try:
        section: dict[str, Any] = data.get("enumgen", {})

        return EnumSettings(
            rules=tuple(str(rule) for rule in section.get("rules", []) or []),
            multi_prefix=str(section.get("multi_prefix", DEFAULT_MULTI_PREFIX)),
            namespace=str(section.get("namespace", DEFAULT_NAMESPACE)),
            exclude_tables=tuple(
                str(name) for name in section.get("exclude_tables", []) or []
            ),
        )
    except Exception:
        logger.warning("enum settings parse failed, using defaults: %s", config_path)
        return _DEFAULT_SETTINGS


def _safe_load_yaml(path: Path) -> dict[str, Any] | None:
    """Loads a YAML mapping. Returns None on failure."""
    try:
        with open(path, encoding="utf-8") as f:
            result = yaml.safe_load(f)
        if isinstance(result, dict):
            return result
        return None
    except Exception:
        logger.warning("YAML load failed: %s", path)
        return None
