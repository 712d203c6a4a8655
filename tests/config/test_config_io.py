# topmark:header:start
#
#   project      : RubyLit
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reading, discovering and querying TOML configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from rubylit.config.io import (
    ConfigError,
    TomlTable,
    discover_config_file,
    extract_rubylit_table,
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_config_table,
    load_defaults_dict,
    load_toml_dict,
    parse_toml_text,
    warn_unknown_keys,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults_are_fresh_copies() -> None:
    first: TomlTable = load_defaults_dict()
    first["encoder"]["indent"] = True
    assert load_defaults_dict()["encoder"]["indent"] is False


def test_parse_toml_text_returns_plain_dicts() -> None:
    data: TomlTable = parse_toml_text('[encoder]\nindent = true\nindent_unit = "\\t"\n')
    assert data == {"encoder": {"indent": True, "indent_unit": "\t"}}
    assert type(data["encoder"]) is dict


def test_parse_toml_text_rejects_invalid_toml(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="TOML parse error") as exc_info:
        parse_toml_text("[encoder\n", source=tmp_path / "rubylit.toml")
    assert exc_info.value.path == tmp_path / "rubylit.toml"


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="cannot read file"):
        load_toml_dict(tmp_path / "absent.toml")


def test_extract_rubylit_table() -> None:
    doc: TomlTable = {"tool": {"rubylit": {"encoder": {"indent": True}}, "other": {}}}
    assert extract_rubylit_table(doc, is_pyproject=True) == {"encoder": {"indent": True}}
    assert extract_rubylit_table({"project": {}}, is_pyproject=True) is None
    assert extract_rubylit_table({"encoder": {}}, is_pyproject=False) == {"encoder": {}}


def test_discover_walks_up_to_nearest_config(tmp_path: Path) -> None:
    (tmp_path / "rubylit.toml").write_text("[encoder]\nindent = true\n", encoding="utf-8")
    nested: Path = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert discover_config_file(nested) == (tmp_path / "rubylit.toml").resolve()


def test_discover_prefers_rubylit_toml_over_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.rubylit.encoder]\n", encoding="utf-8")
    (tmp_path / "rubylit.toml").write_text("", encoding="utf-8")

    assert discover_config_file(tmp_path) == (tmp_path / "rubylit.toml").resolve()


def test_discover_skips_pyproject_without_rubylit_table(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.rubylit.encoder]\n", encoding="utf-8")
    child: Path = tmp_path / "child"
    child.mkdir()
    (child / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")

    assert discover_config_file(child) == (tmp_path / "pyproject.toml").resolve()


def test_load_config_table_from_pyproject(tmp_path: Path) -> None:
    pyproject: Path = tmp_path / "pyproject.toml"
    pyproject.write_text("[tool.rubylit.encoder]\nmax_depth = 16\n", encoding="utf-8")
    assert load_config_table(pyproject) == {"encoder": {"max_depth": 16}}

    pyproject.write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert load_config_table(pyproject) == {}


def test_warn_unknown_keys() -> None:
    table: TomlTable = {"encoder": {"indent": True, "nope": 1}, "bogus": {}}
    assert sorted(warn_unknown_keys(table)) == ["bogus", "encoder.nope"]
    assert warn_unknown_keys(load_defaults_dict()) == []


def test_getters_coerce_loosely() -> None:
    table: TomlTable = {
        "s": "text",
        "n": 3,
        "digits": " 12 ",
        "flag": True,
        "sub": {"k": 1},
        "bad": [1],
    }
    assert get_string_value_or_none(table, "s") == "text"
    assert get_string_value_or_none(table, "n") == "3"
    assert get_string_value_or_none(table, "bad") is None
    assert get_string_value_or_none(table, "missing") is None

    assert get_bool_value_or_none(table, "flag") is True
    assert get_bool_value_or_none(table, "n") is True
    assert get_bool_value_or_none(table, "s") is None

    assert get_int_value_or_none(table, "n") == 3
    assert get_int_value_or_none(table, "digits") == 12
    assert get_int_value_or_none(table, "flag") is None
    assert get_int_value_or_none(table, "s") is None

    assert get_table_value(table, "sub") == {"k": 1}
    assert get_table_value(table, "s") == {}
    assert get_table_value(table, "missing") == {}
