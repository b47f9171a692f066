from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path normalization, separator conversion and
deterministic file enumeration. Acts as an abstraction over the 'os'
module so that path identities look the same on Windows and Unix-like systems.
"""

import os
from typing import Iterator, Optional

POSIX_SEP = "/"

# -----------------------------------------------------------------------------
# PATH NORMALIZATION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = os.fspath(path).strip() if path else ""
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def to_posix(path: str) -> str:
    """Convert native separators to forward slashes."""
    if os.sep != POSIX_SEP:
        path = path.replace(os.sep, POSIX_SEP)
    return path

# -----------------------------------------------------------------------------
# FILE ENUMERATION API
# -----------------------------------------------------------------------------

def iter_files(root: str) -> Iterator[str]:
    """
    Walk a directory tree and yield every file relative to the root.

    Directories themselves are not yielded. Each directory's files come
    first in sorted order, then its subdirectories are walked in sorted
    order, so the enumeration is stable across platforms. A missing root
    yields nothing.

    Args:
        root: Absolute directory to enumerate.

    Yields:
        str: Posix path of each file, relative to root.
    """
    if not os.path.isdir(root):
        return

    for current, dirs, files in os.walk(root):
        dirs.sort()
        rel_dir = os.path.relpath(current, root)

        for name in sorted(files):
            rel = name if rel_dir == os.curdir else os.path.join(rel_dir, name)
            yield to_posix(rel)
