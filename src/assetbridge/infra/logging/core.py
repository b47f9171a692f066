from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Records are
pushed through a QueueHandler and written by a QueueListener so that file
I/O never blocks the build tool's compilation hooks.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from assetbridge.infra.logging.config import LoggingConfig
from assetbridge.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_assetbridge_configured"
_QUEUE_LISTENER_ATTR: str = "_assetbridge_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the 'assetbridge' logger hierarchy using non-blocking I/O.

    Only the library's own logger is touched so the host keeps full control
    of the root logger. Repeated calls are no-ops unless force is set.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, bypass idempotency checks and re-initialize handlers.

    Returns:
        logging.Logger: The configured 'assetbridge' logger.
    """
    logger = logging.getLogger("assetbridge")

    if getattr(logger, _CONFIGURED_FLAG_ATTR, False) and not force:
        return logger

    level_int = cfg.level_number
    logger.setLevel(level_int)

    _remove_our_handlers(logger)
    _stop_existing_listener(logger)

    handlers_list: List[logging.Handler] = []

    if cfg.stderr:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level_int)
        sh.setFormatter(logging.Formatter(cfg.line_format))
        _tag_handler(sh)
        handlers_list.append(sh)

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_format),
            cfg.rotate_bytes,
            cfg.keep_rotated,
        )
        if fh:
            handlers_list.append(fh)

    setattr(logger, _CONFIGURED_FLAG_ATTR, True)
    if not handlers_list:
        return logger

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()

    logger.addHandler(queue_handler)
    setattr(logger, _QUEUE_LISTENER_ATTR, listener)

    atexit.register(_safe_stop_listener, listener)
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance compliant with the global configuration.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _remove_our_handlers(logger: logging.Logger) -> None:
    for h in list(logger.handlers):
        if _is_our_handler(h):
            logger.removeHandler(h)
            h.close()


def _stop_existing_listener(logger: logging.Logger) -> None:
    listener = getattr(logger, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(logger, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating a listener that was already stopped.

    QueueListener.stop() fails on a second call because its thread is reset
    to None, which happens when tests reset logging before atexit runs.
    """
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
