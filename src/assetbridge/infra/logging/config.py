from __future__ import annotations

"""
Settings for the library's log output.

A build plugin normally stays quiet and lets the host tool print; these
settings exist for debugging path rewrites and pruning from the outside.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

# Levels a host may spell out, in addition to logging's own names
_LEVEL_ALIASES = {"WARN": logging.WARNING, "FATAL": logging.CRITICAL}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Where and how verbosely the 'assetbridge' logger writes.

    Attributes:
        level: Level name ('debug', 'WARN', ...) or numeric level.
        stderr: Mirror records to the host process's stderr.
        log_file: Optional path of a rotating log file.
        rotate_bytes: Size at which the log file rolls over.
        keep_rotated: Number of rolled-over files to keep.
        line_format: Format for stderr lines.
        file_format: Format for log file lines, timestamped.
    """
    level: Union[str, int] = "INFO"
    stderr: bool = True
    log_file: Optional[str] = None

    rotate_bytes: int = 512 * 1024
    keep_rotated: int = 2

    line_format: str = "[assetbridge] %(levelname)s %(name)s: %(message)s"
    file_format: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

    @property
    def level_number(self) -> int:
        """Numeric level; unknown or empty names fall back to INFO."""
        if isinstance(self.level, int):
            return self.level
        name = str(self.level or "").strip().upper()
        if name in _LEVEL_ALIASES:
            return _LEVEL_ALIASES[name]
        value = logging.getLevelName(name)
        return value if isinstance(value, int) else logging.INFO
