from __future__ import annotations

"""
Glob-Based Ignore Rules.

Evaluates ordered glob patterns ('*', '**', '{a,b}' braces and
'+(a|b)' style extglob groups) against project paths. Files under the
context are matched by their context-relative path, so directories above
the project root never influence the result. Patterns are applied in
order and the last matching pattern decides: a later '!negation'
re-includes a path an earlier pattern ignored.
"""

import logging
import os
from typing import Iterable, List, Sequence, Tuple, Union

from wcmatch import glob

from assetbridge.domain.paths import RootedPath
from assetbridge.infra.fs import POSIX_SEP, to_posix

logger = logging.getLogger(__name__)

NEGATION = "!"

# Shared glob dialect: globstar, braces, extglob, forward slashes on every OS
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB | glob.FORCEUNIX

# Slash-free ignore patterns like 'keep.tmp' apply to the basename
IGNORE_FLAGS = GLOB_FLAGS | glob.MATCHBASE

# Filtering keeps everything not excluded when only negations are given
FILTER_FLAGS = GLOB_FLAGS | glob.NEGATE | glob.NEGATEALL


class IgnoreMatcher:
    """
    Boolean predicate over a fixed, ordered set of glob patterns.

    Attributes:
        context: Root that relative inputs are resolved against.
        patterns: The patterns as configured.
    """

    def __init__(self, context: str, patterns: Iterable[str]) -> None:
        self.context = context
        self.patterns = tuple(patterns)
        self._absolute_rules = [_split_negation(p) for p in self.patterns]
        self._relative_rules = [
            (negated, relative_to_root(body, context))
            for negated, body in self._absolute_rules
        ]

    def is_ignored(self, file: Union[str, "os.PathLike[str]"]) -> bool:
        """
        Check whether a file matches the configured ignore patterns.

        Args:
            file: Absolute path, or path relative to the context.

        Returns:
            bool: True if the last matching pattern is a positive one.
        """
        if not self.patterns:
            return False

        f = RootedPath(self.context, file)
        if f.relative == ".." or f.relative.startswith("../"):
            return _last_match_ignores(to_posix(f.absolute), self._absolute_rules)
        return _last_match_ignores(f.relative, self._relative_rules)


def match_globs(strings: Iterable[str], patterns: Union[str, Sequence[str]]) -> List[str]:
    """
    Filter strings through glob patterns.

    A string is kept when it matches a positive pattern and no negated
    one. With negated patterns only, every string not excluded is kept.

    Args:
        strings: Paths to test.
        patterns: One pattern or a list of patterns.

    Returns:
        List[str]: The matching strings, in input order.
    """
    if isinstance(patterns, str):
        patterns = [patterns]
    patterns = list(patterns)
    if not patterns:
        return []
    return [s for s in strings if glob.globmatch(s, patterns, flags=FILTER_FLAGS)]


def relative_to_root(pattern: str, root: str) -> str:
    """
    Rewrite an absolute pattern under root into a root-relative one.

    '/proj/drafts/**' with root '/proj' -> 'drafts/**'. Other patterns are
    returned unchanged.
    """
    prefix = to_posix(os.path.normpath(root)).rstrip(POSIX_SEP) + POSIX_SEP
    if pattern.startswith(prefix):
        return pattern[len(prefix):]
    return pattern


def _split_negation(pattern: str) -> Tuple[bool, str]:
    # '!(a|b)' is an extglob group, not a negation
    if pattern.startswith(NEGATION) and not pattern.startswith(NEGATION + "("):
        return True, pattern[len(NEGATION):]
    return False, pattern


def _last_match_ignores(path: str, rules: Sequence[Tuple[bool, str]]) -> bool:
    ignored = False
    for negated, body in rules:
        if body and glob.globmatch(path, body, flags=IGNORE_FLAGS):
            ignored = not negated
    return ignored
