from __future__ import annotations

"""
Host Build Graph Contracts.

Narrow capability interfaces the host adapter implements, plus the entry
dependency descriptors handed to the host when static files are registered.
The core only talks to the host through these shapes.
"""

from dataclasses import dataclass, field
from typing import (
    Any,
    Awaitable,
    Callable,
    List,
    Mapping,
    MutableMapping,
    MutableSequence,
    Protocol,
    Union,
    runtime_checkable,
)

# -----------------------------------------------------------------------------
# ENTRY DEPENDENCY DESCRIPTORS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SingleEntryDependency:
    """
    Leaf dependency naming one module request relative to the context root.

    Attributes:
        request: Module request, e.g. './assets/img/logo.png'.
    """
    request: str


@dataclass(frozen=True)
class MultiEntryDependency:
    """
    Entry dependency wrapping one or more single-entry leaves.

    Attributes:
        dependencies: Leaves processed under this entry.
        name: Entry name as known to the build graph.
    """
    dependencies: List[SingleEntryDependency] = field(default_factory=list)
    name: str = ""


@dataclass(frozen=True)
class LoaderContext:
    """
    The subset of a loader invocation needed to locate the current file.

    Attributes:
        request: '!'-separated chain of transforms ending with the file path,
                 optionally followed by a '?query'.
        context: Context root of the active compilation.
    """
    request: str
    context: str

# -----------------------------------------------------------------------------
# CAPABILITY INTERFACES
# -----------------------------------------------------------------------------

@runtime_checkable
class EntryRegistry(Protocol):
    """Build graph side that accepts new entry points."""

    def add_entry(
            self,
            context: str,
            dependency: MultiEntryDependency,
            name: str,
    ) -> Union[Awaitable[Any], Any]:
        ...


@runtime_checkable
class Compiler(Protocol):
    """Compiler side that exposes named lifecycle events."""

    def plugin(self, event: str, callback: Callable[..., Any]) -> Any:
        ...


# Generated artifact name -> artifact content
AssetStore = MutableMapping[str, Any]

# A chunk is either a mapping with a 'name' key or an object with '.name'
Chunk = Union[Mapping[str, Any], Any]
ChunkSequence = MutableSequence[Chunk]


def chunk_name(chunk: Chunk) -> Any:
    """Return a chunk's name, or None when it carries none."""
    if isinstance(chunk, Mapping):
        return chunk.get("name")
    return getattr(chunk, "name", None)
