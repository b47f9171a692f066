from __future__ import annotations

"""
Unit tests for the Plugin Configuration domain.

Verifies default resolution, normalization of dump directories and
patterns, mapping/JSON loading and rejection of malformed values.
"""

import json
import os
from pathlib import Path

import pytest

from assetbridge.domain.config import (
    DEFAULT_DUMP_DIRS,
    DEFAULT_SCRIPT_SUFFIX,
    PluginConfig,
    load_config,
)
from assetbridge.domain.errors import ConfigError


def test_defaults_resolve_against_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    cfg = PluginConfig()

    assert cfg.context == os.getcwd()
    assert cfg.output_path == os.path.join(os.getcwd(), "public")
    assert cfg.dump_dirs == DEFAULT_DUMP_DIRS
    assert cfg.ignore == ()
    assert cfg.script_suffix == DEFAULT_SCRIPT_SUFFIX


def test_dump_dirs_are_normalized(tmp_path: Path) -> None:
    cfg = PluginConfig(context=str(tmp_path), dump_dirs=["static/", "./views", "a\\b", ""])

    assert cfg.dump_dirs == ("static", "views", "a/b")


def test_single_string_values_become_tuples(tmp_path: Path) -> None:
    cfg = PluginConfig(context=str(tmp_path), dump_dirs="static", ignore="*.tmp")

    assert cfg.dump_dirs == ("static",)
    assert cfg.ignore == ("*.tmp",)


def test_from_mapping_ignores_unknown_keys(tmp_path: Path) -> None:
    cfg = PluginConfig.from_mapping({
        "context": str(tmp_path),
        "ignore": ["**/*.log"],
        "unknown": True,
    })

    assert cfg.context == str(tmp_path)
    assert cfg.ignore == ("**/*.log",)


@pytest.mark.parametrize("data", [
    ["not", "a", "mapping"],
    {"ignore": [1, 2]},
    {"dump_dirs": 5},
    {"script_suffix": 3},
])
def test_malformed_values_raise_config_error(data: object) -> None:
    with pytest.raises(ConfigError):
        PluginConfig.from_mapping(data)  # type: ignore[arg-type]


def test_load_config_resolves_relative_context(tmp_path: Path) -> None:
    (tmp_path / "site").mkdir()
    cfg_file = tmp_path / "assetbridge.json"
    cfg_file.write_text(json.dumps({
        "context": "site",
        "dump_dirs": ["static"],
    }), encoding="utf-8")

    cfg = load_config(str(cfg_file), script_suffix=".mjs")

    assert cfg.context == str(tmp_path / "site")
    assert cfg.output_path == str(tmp_path / "site" / "public")
    assert cfg.dump_dirs == ("static",)
    assert cfg.script_suffix == ".mjs"


def test_load_config_rejects_broken_files(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    array = tmp_path / "array.json"
    array.write_text("[]", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(str(broken))
    with pytest.raises(ConfigError):
        load_config(str(array))
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "missing.json"))
