"""Content source backed by a directory of markdown files."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import frontmatter
import yaml
from pydantic import ValidationError

from blogforge.core.exceptions import FrontmatterError, SourceQueryError
from blogforge.core.types import ContentNode, ContentQuery, FileNode, Frontmatter, SortOrder

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = frozenset({".md", ".markdown"})


class FilesystemContentSource:
    """Discovers files under a content root and exposes them as nodes.

    Every file and directory becomes a FILE node; every markdown file also
    yields a MARKDOWN node whose parent is its FILE node. Nodes are built once
    and cached; call ``reload()`` after the sources change.
    """

    def __init__(self, root: Path, *, name: str | None = None) -> None:
        self.root = root
        self.name = name or root.name
        self._nodes: dict[str, FileNode | ContentNode] | None = None

    def reload(self) -> None:
        self._nodes = None

    def nodes(self) -> Iterator[FileNode | ContentNode]:
        yield from self._load().values()

    def get_node(self, node_id: str) -> FileNode | ContentNode | None:
        return self._load().get(node_id)

    async def query(self, query: ContentQuery) -> list[ContentNode]:
        return await asyncio.to_thread(self._select, query)

    def _select(self, query: ContentQuery) -> list[ContentNode]:
        candidates = [node for node in self._load().values() if isinstance(node, ContentNode) and node.kind == query.kind]

        present = [(node.lookup(query.sort_field), node) for node in candidates]
        missing = [node for value, node in present if value is None]
        keyed = [(value, node) for value, node in present if value is not None]
        try:
            keyed.sort(key=lambda pair: pair[0], reverse=query.order == SortOrder.DESC)
        except TypeError as e:
            msg = f"Cannot sort {self.name} by '{query.sort_field}': {e}"
            raise SourceQueryError(msg) from e

        ordered = [node for _, node in keyed] + missing
        if query.limit is not None:
            ordered = ordered[: query.limit]
        return ordered

    def _load(self) -> dict[str, FileNode | ContentNode]:
        if self._nodes is None:
            self._nodes = self._scan()
        return self._nodes

    def _scan(self) -> dict[str, FileNode | ContentNode]:
        if not self.root.is_dir():
            msg = f"Content root '{self.root}' does not exist or is not a directory"
            raise SourceQueryError(msg)

        nodes: dict[str, FileNode | ContentNode] = {}
        try:
            paths = sorted(self.root.rglob("*"))
        except OSError as e:
            msg = f"Cannot list content root '{self.root}': {e}"
            raise SourceQueryError(msg) from e

        for path in paths:
            relative = path.relative_to(self.root).as_posix()
            parent_rel = path.parent.relative_to(self.root).as_posix()
            file_node = FileNode(
                id=file_node_id(relative),
                source_instance=self.name,
                relative_path=relative,
                absolute_path=str(path),
                is_directory=path.is_dir(),
                parent=None if parent_rel == "." else file_node_id(parent_rel),
            )
            nodes[file_node.id] = file_node

            if path.is_file() and path.suffix.lower() in MARKDOWN_SUFFIXES:
                markdown = self._parse_markdown(path, file_node)
                nodes[markdown.id] = markdown

        logger.debug("Scanned %d nodes under %s", len(nodes), self.root)
        return nodes

    def _parse_markdown(self, path: Path, file_node: FileNode) -> ContentNode:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Cannot read '{file_node.relative_path}': {e}"
            raise SourceQueryError(msg) from e

        try:
            post = frontmatter.loads(text)
        except (yaml.YAMLError, ValueError) as e:
            raise FrontmatterError(file_node.relative_path, str(e)) from e

        metadata: Any = post.metadata
        if not isinstance(metadata, dict):
            raise FrontmatterError(file_node.relative_path, f"expected a mapping, got {type(metadata).__name__}")

        try:
            parsed = Frontmatter.model_validate(metadata)
        except ValidationError as e:
            raise FrontmatterError(file_node.relative_path, str(e)) from e

        return ContentNode(
            id=markdown_node_id(file_node.relative_path),
            parent=file_node.id,
            frontmatter=parsed,
            body=post.content,
        )


def file_node_id(relative_path: str) -> str:
    return f"file:{relative_path}"


def markdown_node_id(relative_path: str) -> str:
    return f"markdown:{relative_path}"
