"""Page registries collecting the output of the planner."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from blogforge.core.exceptions import DuplicatePageError

if TYPE_CHECKING:
    from pathlib import Path

    from blogforge.core.types import ContentNode, PagePlanEntry

logger = logging.getLogger(__name__)


class InMemoryPageRegistry:
    """Records registered pages in call order."""

    def __init__(self) -> None:
        self.pages: list[PagePlanEntry] = []
        self._paths: set[str] = set()

    def create_page(self, entry: PagePlanEntry) -> None:
        if entry.path in self._paths:
            raise DuplicatePageError(entry.path)
        self._paths.add(entry.path)
        self.pages.append(entry)

    @property
    def paths(self) -> list[str]:
        return [entry.path for entry in self.pages]

    def get(self, path: str) -> PagePlanEntry | None:
        return next((entry for entry in self.pages if entry.path == path), None)


class ManifestPageRegistry(InMemoryPageRegistry):
    """Collects pages and dumps them as a JSON manifest for a renderer."""

    def to_manifest(self) -> list[dict[str, Any]]:
        return [
            {
                "path": entry.path,
                "component": entry.component,
                "context": {
                    "slug": entry.context.slug,
                    "previous": _summarize(entry.context.previous),
                    "next": _summarize(entry.context.next),
                },
            }
            for entry in self.pages
        ]

    def write(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_manifest(), indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info("Wrote manifest with %d pages to %s", len(self.pages), path)
        return path


def _summarize(node: ContentNode | None) -> dict[str, Any] | None:
    if node is None:
        return None
    return {"id": node.id, "slug": node.slug, "title": node.title}
