from __future__ import annotations

"""
Compiler Lifecycle Hooks.
"""

import logging
from typing import Any, Callable, Tuple

from assetbridge.domain.host import Compiler

logger = logging.getLogger(__name__)

# Events fired before a single build and before each watch rebuild
RUN_EVENTS: Tuple[str, ...] = ("run", "watch-run")


def run_all(compiler: Compiler, callback: Callable[..., Any]) -> None:
    """
    Attach a callback to both the compile and watch lifecycles.

    Args:
        compiler: Host compiler exposing plugin(event, callback).
        callback: Function run at the start of every build.
    """
    for event in RUN_EVENTS:
        compiler.plugin(event, callback)
    logger.debug(f"Registered {getattr(callback, '__name__', callback)!r} for {RUN_EVENTS}")
