"""Enum rule configuration."""

from .loader import default_settings, load_enum_settings
from .models import EnumRule, EnumSettings
from .parser import parse_rule

__all__ = [
    "EnumRule",
    "EnumSettings",
    "default_settings",
    "load_enum_settings",
    "parse_rule",
]
