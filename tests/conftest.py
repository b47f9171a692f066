from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A temporary project tree with dump directories.
3. Shared configuration fixtures built on that tree.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from assetbridge.domain.config import PluginConfig  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """
    Create a small source tree.

    Layout:
        proj/static/img/logo.png
        proj/static/index.html
        proj/views/about.html
        proj/js/main.js
    """
    root = tmp_path / "proj"
    (root / "static" / "img").mkdir(parents=True)
    (root / "views").mkdir()
    (root / "js").mkdir()

    (root / "static" / "img" / "logo.png").write_bytes(b"\x89PNG")
    (root / "static" / "index.html").write_text("<html></html>", encoding="utf-8")
    (root / "views" / "about.html").write_text("<p>about</p>", encoding="utf-8")
    (root / "js" / "main.js").write_text("console.log(1)", encoding="utf-8")
    return root


@pytest.fixture
def plugin_config(project_root: Path) -> PluginConfig:
    """Configuration over the temporary project with 'static' and 'views' dumped."""
    return PluginConfig(
        context=str(project_root),
        output_path=str(project_root / "public"),
        dump_dirs=("static", "views"),
        ignore=("**/*.tmp", "!keep.tmp"),
    )
