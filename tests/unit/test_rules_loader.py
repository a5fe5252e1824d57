"""Enum settings loader tests."""

from __future__ import annotations

from pathlib import Path

from enumgen.rules import EnumSettings, default_settings, load_enum_settings

CONFIGS_DIR = Path(__file__).resolve().parents[2] / "configs"


def test_load_enum_settings_from_yaml() -> None:
    """Shipped rules.yaml loads."""
    settings = load_enum_settings(CONFIGS_DIR / "enumgen" / "rules.yaml")

    assert isinstance(settings, EnumSettings)
    assert settings.multi_prefix == "MULTI="
    assert settings.namespace == "Generated.Enums"
    assert settings.exclude_tables == ("sqlite_sequence",)
    assert settings.rules[0] == "^Categories$"
    assert any(rule.startswith("^tblLookup$:MULTI=") for rule in settings.rules)
    assert len(settings.rules) == 3


def test_load_enum_settings_missing_file_returns_default() -> None:
    settings = load_enum_settings(Path("/nonexistent/rules.yaml"))

    assert settings == default_settings()
    assert settings.rules == ()


def test_load_enum_settings_invalid_yaml_returns_default(tmp_path: Path) -> None:
    config_path = tmp_path / "rules.yaml"
    config_path.write_text("enumgen: [unclosed\n", encoding="utf-8")

    assert load_enum_settings(config_path) == default_settings()


def test_load_enum_settings_wrong_shape_returns_default(tmp_path: Path) -> None:
    config_path = tmp_path / "rules.yaml"
    config_path.write_text("enumgen: 5\n", encoding="utf-8")

    assert load_enum_settings(config_path) == default_settings()


def test_load_enum_settings_partial_file_keeps_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "rules.yaml"
    config_path.write_text(
        "enumgen:\n  rules:\n    - Categories\n    - 'tbl:GROUP=Kind'\n  multi_prefix: GROUP=\n",
        encoding="utf-8",
    )

    settings = load_enum_settings(config_path)

    assert settings.rules == ("Categories", "tbl:GROUP=Kind")
    assert settings.multi_prefix == "GROUP="
    assert settings.namespace == "Generated.Enums"
