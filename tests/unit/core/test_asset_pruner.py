from __future__ import annotations

"""
Unit tests for the Asset Pruner.

Verifies removal of generated script assets, descending-index chunk
removal with order preservation, and no-op behavior for unmatched input.
"""

import os
from types import SimpleNamespace
from typing import Any, Dict, List

import pytest

from assetbridge.core.paths import PathResolver
from assetbridge.core.pruner import AssetPruner, chunk_indices
from assetbridge.domain.config import PluginConfig

ROOT = os.path.abspath(os.sep + "proj")


@pytest.fixture
def pruner() -> AssetPruner:
    cfg = PluginConfig(context=ROOT, dump_dirs=("static",))
    return AssetPruner(cfg, PathResolver(cfg))


@pytest.fixture
def assets() -> Dict[str, Any]:
    return {
        "static/index.html.js": "generated",
        "static/img/logo.png.js": "generated",
        "main.js": "bundle",
        "static/index.html": "<html></html>",
    }


def test_generated_assets_are_removed(pruner: AssetPruner, assets: Dict[str, Any]) -> None:
    pruner.remove_generated_assets(
        assets,
        [os.path.join(ROOT, "static", "index.html"), "static/img/logo.png"],
    )

    assert sorted(assets) == ["main.js", "static/index.html"]


def test_missing_keys_are_skipped(pruner: AssetPruner, assets: Dict[str, Any]) -> None:
    pruner.remove_generated_assets(assets, "static/unknown.html")
    pruner.remove_generated_assets(assets, "static/index.html")
    pruner.remove_generated_assets(assets, "static/index.html")

    assert "static/index.html.js" not in assets
    assert len(assets) == 3


def test_custom_script_suffix() -> None:
    cfg = PluginConfig(context=ROOT, script_suffix=".mjs")
    store = {"a.html.mjs": 1, "a.html.js": 2}

    AssetPruner(cfg, PathResolver(cfg)).remove_generated_assets(store, "a.html")
    assert store == {"a.html.js": 2}


def test_matching_chunks_are_removed_in_order(pruner: AssetPruner) -> None:
    chunks: List[Any] = [
        {"name": "main"},
        {"name": "static/index.html"},
        SimpleNamespace(name="vendor"),
        SimpleNamespace(name="static/img/logo.png"),
        {"name": "static/index.html"},
        {"id": 7},
    ]

    pruner.remove_generated_assets({}, ["static/index.html", "static/img/logo.png"], chunks)

    assert len(chunks) == 3
    assert chunks[0] == {"name": "main"}
    assert chunks[1].name == "vendor"
    assert chunks[2] == {"id": 7}


def test_chunk_names_must_match_exactly(pruner: AssetPruner) -> None:
    chunks = [{"name": "static/index.html.js"}, {"name": "index.html"}]
    pruner.remove_generated_assets({}, "static/index.html", chunks)

    assert len(chunks) == 2


def test_chunks_untouched_when_not_given(pruner: AssetPruner, assets: Dict[str, Any]) -> None:
    pruner.remove_generated_assets(assets, "static/index.html", None)
    assert "static/index.html.js" not in assets


def test_empty_file_list_is_a_no_op(pruner: AssetPruner, assets: Dict[str, Any]) -> None:
    chunks = [{"name": "main"}]
    pruner.remove_generated_assets(assets, [], chunks)

    assert len(assets) == 4
    assert chunks == [{"name": "main"}]


def test_chunk_indices() -> None:
    chunks = [{"name": "a"}, {"name": "b"}, SimpleNamespace(name="a"), object()]
    assert chunk_indices(chunks, {"a"}) == [0, 2]
