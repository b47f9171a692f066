from __future__ import annotations

"""
Plugin Configuration Domain.

Builds the immutable configuration shared by every component for the
lifetime of a plugin instance: source context root, output root, dump
directories, ignore patterns and the suffix the host appends to generated
scripts. Supports construction from a plain mapping or a JSON file.
"""

import json
import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from assetbridge.domain.errors import ConfigError
from assetbridge.infra.fs import POSIX_SEP, normalize_path, to_posix

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_OUTPUT_SUBDIR = "public"
DEFAULT_DUMP_DIRS: Tuple[str, ...] = ("views", "assets")
DEFAULT_SCRIPT_SUFFIX = ".js"


# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class PluginConfig:
    """
    Immutable plugin configuration.

    Attributes:
        context: Absolute source root.
        output_path: Absolute output root. Defaults to '<context>/public'.
        dump_dirs: Ordered source subdirectories stripped on output.
        ignore: Ordered glob patterns for ignored files.
        script_suffix: Extension the host appends when naming entry output.
    """
    context: str = ""
    output_path: str = ""
    dump_dirs: Tuple[str, ...] = DEFAULT_DUMP_DIRS
    ignore: Tuple[str, ...] = field(default_factory=tuple)
    script_suffix: str = DEFAULT_SCRIPT_SUFFIX

    def __post_init__(self) -> None:
        context = normalize_path(self.context, os.getcwd())
        output = normalize_path(
            self.output_path,
            os.path.join(context, DEFAULT_OUTPUT_SUBDIR),
        )
        object.__setattr__(self, "context", context)
        object.__setattr__(self, "output_path", output)
        object.__setattr__(self, "dump_dirs", _normalize_dump_dirs(self.dump_dirs))
        object.__setattr__(self, "ignore", _as_str_tuple("ignore", self.ignore))
        if not isinstance(self.script_suffix, str):
            raise ConfigError(
                f"'script_suffix' must be a string, got {type(self.script_suffix).__name__}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PluginConfig":
        """
        Build a configuration from a plain mapping.

        Unknown keys are ignored with a debug message. Missing keys take
        their defaults.

        Args:
            data: Mapping with any of the PluginConfig field names.

        Returns:
            PluginConfig: Normalized configuration.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"Expected a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key in known:
                kwargs[key] = value
            else:
                logger.debug(f"Ignoring unknown configuration key '{key}'")

        return cls(**kwargs)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None, **overrides: Any) -> PluginConfig:
    """
    Load a PluginConfig from a JSON file, applying keyword overrides on top.

    Relative 'context' values in the file are resolved against the file's
    own directory.

    Args:
        path: Path to a JSON object file. None means defaults only.
        **overrides: Field values taking precedence over the file.

    Returns:
        PluginConfig: The loaded configuration.
    """
    data: Dict[str, Any] = {}

    if path:
        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to load config '{path}': {e}") from e

        if not isinstance(loaded, dict):
            raise ConfigError(f"Config file '{path}' must contain a JSON object")

        base_dir = os.path.dirname(os.path.abspath(path))
        for key in ("context", "output_path"):
            value = loaded.get(key)
            if isinstance(value, str) and value and not os.path.isabs(os.path.expanduser(value)):
                loaded[key] = os.path.join(base_dir, value)

        data.update(loaded)
        logger.debug(f"Configuration loaded from {path}")

    data.update(overrides)
    return PluginConfig.from_mapping(data)


# -----------------------------------------------------------------------------
# Private Helpers
# -----------------------------------------------------------------------------
def _as_str_tuple(name: str, values: Any) -> Tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    if not isinstance(values, Iterable):
        raise ConfigError(f"'{name}' must be a list of strings, got {type(values).__name__}")

    items = tuple(values)
    for item in items:
        if not isinstance(item, str):
            raise ConfigError(f"'{name}' must contain strings only, got {item!r}")
    return items


def _normalize_dump_dirs(values: Any) -> Tuple[str, ...]:
    """Convert dump directory names to bare posix form ('a\\b/' -> 'a/b')."""
    out = []
    for d in _as_str_tuple("dump_dirs", values):
        d = to_posix(d).replace("\\", POSIX_SEP).strip(POSIX_SEP)
        if d.startswith("./"):
            d = d[2:]
        if d:
            out.append(d)
    return tuple(out)
