from __future__ import annotations

"""
Plugin Toolkit Facade.

Single entry point for host plugins. Binds one PluginConfig to the path
resolver, ignore matcher, entry registrar and asset pruner, and exposes
them under plugin-oriented names.
"""

import logging
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from assetbridge.core import hooks
from assetbridge.core.entries import EntryRegistrar, FilesInput
from assetbridge.core.ignore import IgnoreMatcher, match_globs
from assetbridge.core.paths import PathInput, PathResolver
from assetbridge.core.pruner import AssetPruner
from assetbridge.domain.config import PluginConfig
from assetbridge.domain.host import AssetStore, ChunkSequence, Compiler, EntryRegistry, LoaderContext
from assetbridge.domain.paths import RootedPath

logger = logging.getLogger(__name__)


class PluginToolkit:
    """
    Path and asset utilities bound to one plugin configuration.

    Example:
        >>> kit = PluginToolkit({"context": "/proj", "dump_dirs": ["static"]})
        >>> kit.get_output_path("/proj/static/img/logo.png").relative
        'img/logo.png'
    """

    def __init__(self, config: Union[PluginConfig, Mapping[str, Any]]) -> None:
        if not isinstance(config, PluginConfig):
            config = PluginConfig.from_mapping(config)
        self.config = config

        self.resolver = PathResolver(config)
        self.ignore_matcher = IgnoreMatcher(config.context, config.ignore)
        self.registrar = EntryRegistrar(config, self.resolver)
        self.pruner = AssetPruner(config, self.resolver)

        logger.debug(
            f"Toolkit ready: context={config.context}, output={config.output_path}, "
            f"dump_dirs={list(config.dump_dirs)}"
        )

    async def add_files_as_entries(self, registry: EntryRegistry, files: FilesInput) -> List[Any]:
        """Register static files as build entries. See EntryRegistrar.add_entries."""
        return await self.registrar.add_entries(registry, files)

    def get_output_path(self, file: PathInput) -> RootedPath:
        return self.resolver.to_output_path(file)

    def get_source_path(self, file: PathInput) -> RootedPath:
        return self.resolver.to_source_path(file)

    def remove_assets(
            self,
            assets: AssetStore,
            files: FilesInput,
            chunks: Optional[ChunkSequence] = None,
    ) -> None:
        """Drop generated copies of static files. See AssetPruner."""
        self.pruner.remove_generated_assets(assets, files, chunks)

    def is_file_ignored(self, file: PathInput) -> bool:
        return self.ignore_matcher.is_ignored(file)

    def run_all(self, compiler: Compiler, callback: Callable[..., Any]) -> None:
        hooks.run_all(compiler, callback)

    @staticmethod
    def match_globs(strings: Sequence[str], patterns: Union[str, Sequence[str]]) -> List[str]:
        return match_globs(strings, patterns)

    @staticmethod
    def file_path_from_loader(loader_context: LoaderContext) -> RootedPath:
        return PathResolver.file_path_from_loader(loader_context)
