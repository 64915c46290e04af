"""Turns an ordered sequence of content nodes into page plan entries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blogforge.core.config import DEFAULT_PAGE_LIMIT
from blogforge.core.exceptions import DuplicateSlugError, MissingDerivedFieldError
from blogforge.core.types import SLUG_FIELD, ContentNode, PageContext, PagePlanEntry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from blogforge.core.ports import PageRegistry

logger = logging.getLogger(__name__)


class PagePlanner:
    """Plans one page per node with links to its neighbors.

    The input is expected newest first. Neighbors are positional: the node
    one position later is ``previous`` (older) and the node one position
    earlier is ``next`` (newer). Dates are never compared here, so an input
    that is not strictly sorted yields structurally adjacent neighbors.
    """

    def __init__(self, component: str, *, limit: int | None = DEFAULT_PAGE_LIMIT) -> None:
        if limit is not None and limit <= 0:
            msg = f"limit must be a positive integer or None, got {limit}"
            raise ValueError(msg)
        self.component = component
        self.limit = limit

    def truncate(self, nodes: Sequence[ContentNode]) -> Sequence[ContentNode]:
        """Keep the first ``limit`` nodes; larger inputs are cut, not rejected."""
        if self.limit is None or len(nodes) <= self.limit:
            return nodes
        logger.info("Truncating %d nodes to the first %d", len(nodes), self.limit)
        return nodes[: self.limit]

    def plan(self, nodes: Sequence[ContentNode]) -> list[PagePlanEntry]:
        """Build the plan.

        Every selected node is checked before the first entry is built: a
        missing slug raises ``MissingDerivedFieldError`` and a repeated one
        raises ``DuplicateSlugError``.
        """
        selected = self.truncate(nodes)

        owners: dict[str, str] = {}
        for node in selected:
            if not node.slug:
                raise MissingDerivedFieldError(node.id, SLUG_FIELD)
            if node.slug in owners:
                raise DuplicateSlugError(node.slug, (owners[node.slug], node.id))
            owners[node.slug] = node.id

        entries: list[PagePlanEntry] = []
        last = len(selected) - 1
        for i, node in enumerate(selected):
            previous = selected[i + 1] if i < last else None
            next_ = selected[i - 1] if i > 0 else None
            entries.append(
                PagePlanEntry(
                    path=node.slug,
                    component=self.component,
                    context=PageContext(slug=node.slug, previous=previous, next=next_),
                )
            )
        return entries

    def create_pages(self, nodes: Sequence[ContentNode], registry: PageRegistry) -> list[PagePlanEntry]:
        """Plan every page, then register them in input order."""
        entries = self.plan(nodes)
        for entry in entries:
            registry.create_page(entry)
        logger.info("Registered %d pages", len(entries))
        return entries
