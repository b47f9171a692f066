from __future__ import annotations

from .domain.config import PluginConfig, load_config
from .domain.errors import (
    AssetBridgeError,
    ConfigError,
    EntryRegistrationError,
    InvalidPathError,
)
from .domain.host import LoaderContext, MultiEntryDependency, SingleEntryDependency
from .domain.paths import RootedPath
from .toolkit import PluginToolkit

__version__ = "0.1.0"

__all__ = [
    "AssetBridgeError",
    "ConfigError",
    "EntryRegistrationError",
    "InvalidPathError",
    "LoaderContext",
    "MultiEntryDependency",
    "PluginConfig",
    "PluginToolkit",
    "RootedPath",
    "SingleEntryDependency",
    "load_config",
]
