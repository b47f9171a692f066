from __future__ import annotations

"""
Generated Asset Pruning.

Static files registered as entries come out of the compilation twice: once
as the static copy written by the plugin and once as a generated script
named '<relative path><script suffix>'. This module drops the generated
copy and the chunks that exist only to produce it.
"""

import logging
from typing import Any, List, Optional, Set

from assetbridge.core.entries import FilesInput, as_path_list
from assetbridge.core.paths import PathResolver
from assetbridge.domain.config import PluginConfig
from assetbridge.domain.host import AssetStore, ChunkSequence, chunk_name

logger = logging.getLogger(__name__)


class AssetPruner:
    """Removes generated artifacts that duplicate static copies."""

    def __init__(self, config: PluginConfig, resolver: PathResolver) -> None:
        self.config = config
        self.resolver = resolver

    def remove_generated_assets(
            self,
            assets: AssetStore,
            files: FilesInput,
            chunks: Optional[ChunkSequence] = None,
    ) -> None:
        """
        Delete generated assets and chunks for the given source files.

        Missing asset keys are skipped. Chunks are deleted by descending
        index so that pending indices stay valid and the survivors keep
        their relative order.

        Args:
            assets: Host mapping of output artifact name to content.
            files: One path or a sequence of source paths.
            chunks: Optional host chunk sequence.
        """
        names = [self.resolver.resolve_relative_and_absolute(self.config.context, f).relative
                 for f in as_path_list(files)]
        if not names:
            return

        keys = {f"{n}{self.config.script_suffix}" for n in names}
        removed = [key for key in list(assets) if key in keys]
        for key in removed:
            del assets[key]

        removed_chunks = 0
        if chunks is not None:
            indices = chunk_indices(chunks, set(names))
            for i in sorted(indices, reverse=True):
                del chunks[i]
            removed_chunks = len(indices)

        logger.debug(f"Pruned {len(removed)} assets and {removed_chunks} chunks")


def chunk_indices(chunks: ChunkSequence, names: Set[str]) -> List[int]:
    """Return the positions of chunks whose name is one of 'names'."""
    indices: List[int] = []
    for i, chunk in enumerate(chunks):
        name: Any = chunk_name(chunk)
        if isinstance(name, str) and name in names:
            indices.append(i)
    return indices
