from __future__ import annotations

"""
Unit tests for compiler lifecycle hooks.
"""

from unittest.mock import MagicMock, call

from assetbridge.core.hooks import RUN_EVENTS, run_all


def test_run_all_registers_both_events() -> None:
    compiler = MagicMock()
    callback = MagicMock(__name__="copy_static")

    run_all(compiler, callback)

    assert compiler.plugin.call_args_list == [call("run", callback), call("watch-run", callback)]
    assert RUN_EVENTS == ("run", "watch-run")
