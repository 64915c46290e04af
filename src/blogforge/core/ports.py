"""Protocols for the collaborators around the page generation pipeline."""

from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable

from blogforge.core.types import ContentNode, ContentQuery, FileNode, PagePlanEntry


@runtime_checkable
class NodeLookup(Protocol):
    """Maps a node id to the node it names (used to walk up the file tree)."""

    def get_node(self, node_id: str) -> FileNode | ContentNode | None: ...


@runtime_checkable
class ContentSource(NodeLookup, Protocol):
    """Queryable, sorted access to content nodes."""

    def reload(self) -> None:
        """Drops cached nodes so the next read sees the current sources."""
        ...

    def nodes(self) -> Iterator[FileNode | ContentNode]:
        """Yields every node of every kind, for the ingestion pass."""
        ...

    async def query(self, query: ContentQuery) -> list[ContentNode]:
        """Returns nodes filtered by kind, sorted and capped as requested.

        Raises ``SourceQueryError`` when the source cannot be read.
        """
        ...


@runtime_checkable
class NodeFieldStore(Protocol):
    """Persists derived fields on nodes."""

    def set_field(self, node: ContentNode, name: str, value: Any) -> None: ...


@runtime_checkable
class PageRegistry(Protocol):
    """Accepts page-creation instructions and materializes routable pages."""

    def create_page(self, entry: PagePlanEntry) -> None: ...
