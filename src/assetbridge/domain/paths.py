from __future__ import annotations

"""
Rooted Path Value Object.

A RootedPath pairs a configured root directory with an arbitrary input path
and derives both its root-relative and absolute identities.
"""

import os
from dataclasses import dataclass, field

from assetbridge.domain.errors import InvalidPathError
from assetbridge.infra.fs import to_posix


@dataclass(frozen=True)
class RootedPath:
    """
    Immutable (root, input) pair.

    Attributes:
        root: Absolute directory the path is anchored to.
        input: The path as given, absolute or relative to root.
        relative: Normalized root-relative path with forward slashes.
        absolute: Normalized absolute path with native separators.
    """
    root: str
    input: str
    relative: str = field(init=False)
    absolute: str = field(init=False)

    def __post_init__(self) -> None:
        try:
            root = os.path.abspath(os.fspath(self.root))
            raw = os.fspath(self.input)
            if "\0" in raw or "\0" in root:
                raise ValueError("embedded null byte")

            if os.path.isabs(raw):
                absolute = os.path.normpath(raw)
                relative = os.path.relpath(absolute, root)
            else:
                relative = os.path.normpath(raw)
                absolute = os.path.normpath(os.path.join(root, relative))
        except (TypeError, ValueError) as e:
            raise InvalidPathError(self.input, self.root, str(e)) from e

        object.__setattr__(self, "root", root)
        object.__setattr__(self, "input", raw)
        object.__setattr__(self, "relative", to_posix(relative))
        object.__setattr__(self, "absolute", absolute)

    def __str__(self) -> str:
        return self.absolute

    def __fspath__(self) -> str:
        return self.absolute
