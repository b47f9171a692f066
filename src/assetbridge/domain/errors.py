from __future__ import annotations

"""
Domain Error Types.

Every failure raised by assetbridge derives from AssetBridgeError so that
host plugins can catch the library's errors without catching their own.
"""

from typing import Optional


class AssetBridgeError(Exception):
    """Base class for all assetbridge errors."""


class InvalidPathError(AssetBridgeError, ValueError):
    """
    Raised when a path cannot be normalized against its root.

    Attributes:
        path: The offending input as received.
        root: The root the input was resolved against.
    """

    def __init__(self, path: object, root: object, reason: str = "") -> None:
        self.path = path
        self.root = root
        message = f"Cannot resolve path {path!r} against root {root!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EntryRegistrationError(AssetBridgeError):
    """
    Raised when the host build graph rejects an entry.

    Only the first failing registration is reported. The host exception is
    kept as both 'cause' and '__cause__'.

    Attributes:
        name: Root-relative name of the entry that failed.
        cause: Exception raised by the host registry.
    """

    def __init__(self, name: str, cause: Optional[BaseException] = None) -> None:
        self.name = name
        self.cause = cause
        message = f"Failed to register entry '{name}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ConfigError(AssetBridgeError, ValueError):
    """Raised when plugin configuration is malformed or unreadable."""
