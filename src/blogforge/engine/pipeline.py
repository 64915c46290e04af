"""Build pipeline: ingestion pass, content query, page planning."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from blogforge.core.exceptions import DuplicateSlugError
from blogforge.core.types import ContentNode, ContentQuery, NodeKind, PagePlanEntry
from blogforge.engine.planner import PagePlanner
from blogforge.engine.slugs import SlugDeriver

if TYPE_CHECKING:
    from blogforge.core.config import BlogforgeConfig
    from blogforge.core.ports import ContentSource, NodeFieldStore, PageRegistry

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of a generation pass."""

    slugs: dict[str, str] = field(default_factory=dict)
    entries: list[PagePlanEntry] = field(default_factory=list)


@dataclass
class BuildPipeline:
    """Runs slug derivation over every node, then plans and registers pages.

    A failure at any step propagates to the caller; since every entry is
    planned before the first registration, a failed pass registers nothing.
    """

    source: ContentSource
    store: NodeFieldStore
    registry: PageRegistry
    deriver: SlugDeriver = field(default_factory=SlugDeriver)
    planner: PagePlanner = field(default_factory=lambda: PagePlanner("src/templates/blog-post"))
    query: ContentQuery = field(default_factory=ContentQuery)

    @classmethod
    def from_config(
        cls,
        config: BlogforgeConfig,
        *,
        source: ContentSource,
        store: NodeFieldStore,
        registry: PageRegistry,
    ) -> BuildPipeline:
        pages = config.pages
        return cls(
            source=source,
            store=store,
            registry=registry,
            deriver=SlugDeriver(trailing_slash=pages.trailing_slash),
            planner=PagePlanner(pages.component, limit=pages.limit),
            query=ContentQuery(kind=NodeKind.MARKDOWN, sort_field=pages.sort_field, order=pages.sort_order),
        )

    def ingest(self) -> dict[str, str]:
        """Derive the slug of every recognized node.

        Returns a mapping of source path to slug. Two sources deriving the
        same slug raise ``DuplicateSlugError``.
        """
        by_slug: dict[str, str] = {}
        slugs: dict[str, str] = {}
        for node in self.source.nodes():
            if not isinstance(node, ContentNode):
                continue
            value = self.deriver.on_create_node(node, self.source, self.store)
            if value is None:
                continue

            location = self._source_path(node)
            if value in by_slug:
                raise DuplicateSlugError(value, (by_slug[value], location))
            by_slug[value] = location
            slugs[location] = value

        logger.info("Derived %d slugs", len(slugs))
        return slugs

    async def create_pages(self) -> list[PagePlanEntry]:
        nodes = await self.source.query(self.query)
        logger.info("Content query returned %d nodes", len(nodes))
        return self.planner.create_pages(nodes, self.registry)

    async def run(self) -> BuildResult:
        """Run a full pass over freshly loaded nodes."""
        self.source.reload()
        slugs = self.ingest()
        entries = await self.create_pages()
        return BuildResult(slugs=slugs, entries=entries)

    def _source_path(self, node: ContentNode) -> str:
        return self.deriver.find_file_node(node, self.source).relative_path


def run_build(pipeline: BuildPipeline) -> BuildResult:
    """Synchronous entry point for a full generation pass."""
    return asyncio.run(pipeline.run())
