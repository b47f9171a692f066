from __future__ import annotations

"""
Static File Entry Registration.

Registers static files as independent build entries so that the host
processes them even though no script imports them. Each file becomes its
own entry named after its context-relative path.
"""

import asyncio
import inspect
import logging
import os
from typing import Any, List, Sequence, Union

from assetbridge.core.paths import PathResolver
from assetbridge.domain.config import PluginConfig
from assetbridge.domain.errors import EntryRegistrationError
from assetbridge.domain.host import EntryRegistry, MultiEntryDependency, SingleEntryDependency

logger = logging.getLogger(__name__)

PathInput = Union[str, "os.PathLike[str]"]
FilesInput = Union[PathInput, Sequence[PathInput]]


class EntryRegistrar:
    """Adds files to the host build graph as entry points."""

    def __init__(self, config: PluginConfig, resolver: PathResolver) -> None:
        self.config = config
        self.resolver = resolver

    async def add_entries(self, registry: EntryRegistry, files: FilesInput) -> List[Any]:
        """
        Register every file as an entry and wait for all registrations.

        Registrations are started together and awaited collectively. The
        first failure aborts the wait; results of sibling registrations are
        discarded.

        Args:
            registry: Host build graph accepting entries.
            files: One path or a sequence of paths, absolute or relative
                   to the context.

        Returns:
            List[Any]: The host's result for each file, in input order.

        Raises:
            EntryRegistrationError: If any registration fails.
        """
        paths = as_path_list(files)
        if not paths:
            return []

        names = [self.resolver.resolve_relative_and_absolute(self.config.context, f).relative
                 for f in paths]
        logger.debug(f"Registering {len(names)} static entries")

        results = await asyncio.gather(*(self._add_entry(registry, n) for n in names))
        return list(results)

    async def _add_entry(self, registry: EntryRegistry, name: str) -> Any:
        dependency = build_entry_dependency(name)
        try:
            result = registry.add_entry(self.config.context, dependency, name)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            logger.error(f"Entry registration failed for '{name}': {e}")
            raise EntryRegistrationError(name, e) from e
        return result


def build_entry_dependency(name: str) -> MultiEntryDependency:
    """Wrap a context-relative path in a single-member entry dependency."""
    return MultiEntryDependency([SingleEntryDependency(f"./{name}")], name)


def as_path_list(files: Any) -> List[Any]:
    """Normalize a single path or a sequence of paths into a list."""
    if files is None:
        return []
    if isinstance(files, (str, os.PathLike)):
        return [files]
    return list(files)
