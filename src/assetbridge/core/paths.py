from __future__ import annotations

"""
Source/Output Path Resolution.

Maps files between the source tree and the output tree. Dump directories
are source subdirectories whose leading segment disappears on output:
with dump_dirs=('static',), 'static/img/logo.png' is emitted as
'img/logo.png'. The reverse direction has to search the source tree,
since the stripped segment cannot be recovered from the output path alone.
"""

import logging
import os
from typing import Union

from assetbridge.domain.config import PluginConfig
from assetbridge.domain.host import LoaderContext
from assetbridge.domain.paths import RootedPath
from assetbridge.infra.fs import POSIX_SEP, iter_files

logger = logging.getLogger(__name__)

PathInput = Union[str, "os.PathLike[str]"]

LOADER_CHAIN_SEP = "!"
# Everything from the first of these on is a query string or fragment
URL_SUFFIX_SEPS = ("?", "#")


class PathResolver:
    """
    Translates paths between the source context and the output root.

    Holds no state beyond the configuration; every call recomputes its
    result, including the filesystem scan of to_source_path.
    """

    def __init__(self, config: PluginConfig) -> None:
        self.config = config

    @staticmethod
    def resolve_relative_and_absolute(root: PathInput, path: PathInput) -> RootedPath:
        """
        Normalize a path against a root.

        Args:
            root: Absolute root directory.
            path: Absolute path, or path relative to root.

        Returns:
            RootedPath: Root-relative and absolute identities of the path.

        Raises:
            InvalidPathError: If the path cannot be normalized.
        """
        return RootedPath(root, path)

    def to_output_path(self, source_file: PathInput) -> RootedPath:
        """
        Compute where a source file ends up in the output tree.

        Dump directory prefixes are tested in configuration order against the
        path produced so far, so a later rule may rewrite an earlier rule's
        result.

        Args:
            source_file: Source path, absolute or relative to the context.

        Returns:
            RootedPath: The path rooted under the output directory.
        """
        file = RootedPath(self.config.context, source_file)
        result = RootedPath(self.config.output_path, file.relative)

        for d in self.config.dump_dirs:
            prefix = d + POSIX_SEP
            if result.relative.startswith(prefix):
                result = RootedPath(self.config.output_path, result.relative[len(prefix):])

        logger.debug(f"Output path for '{file.relative}': '{result.relative}'")
        return result

    def to_source_path(self, output_file: PathInput) -> RootedPath:
        """
        Compute which source file produced an output file.

        Each dump directory is walked (sorted, in configuration order) and the
        first file whose dump-relative path equals the output-relative path
        wins; directories never match. Without a match the output-relative
        path is taken as-is under the context. Walks the filesystem on every
        call.

        Args:
            output_file: Output path, absolute or relative to the output root.

        Returns:
            RootedPath: The path rooted under the source context.
        """
        file = RootedPath(self.config.output_path, output_file)
        context = self.config.context

        for d in self.config.dump_dirs:
            for rel in iter_files(os.path.join(context, d)):
                if rel == file.relative:
                    found = RootedPath(context, d + POSIX_SEP + rel)
                    logger.debug(f"Source path for '{file.relative}': '{found.relative}'")
                    return found

        return RootedPath(context, file.relative)

    @staticmethod
    def file_path_from_loader(loader_context: LoaderContext) -> RootedPath:
        """
        Resolve the file a loader is currently processing.

        The request is a chain like 'a-loader!b-loader?opt!/src/file.css?x';
        the last segment is the file, minus any query string or fragment.

        Args:
            loader_context: The loader's request and context root.

        Returns:
            RootedPath: The file rooted under the loader's context.
        """
        last = loader_context.request.split(LOADER_CHAIN_SEP)[-1]
        path = last
        for sep in URL_SUFFIX_SEPS:
            path = path.partition(sep)[0]
        return RootedPath(loader_context.context, path)
