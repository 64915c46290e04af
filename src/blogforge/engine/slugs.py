"""Slug derivation from a node's location in the content tree."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from blogforge.core.exceptions import HierarchyLookupError
from blogforge.core.types import RECOGNIZED_CONTENT_KINDS, SLUG_FIELD, ContentNode, FileNode, NodeKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from blogforge.core.ports import NodeFieldStore, NodeLookup

logger = logging.getLogger(__name__)

INDEX_NAME = "index"


class SlugDeriver:
    """Maps markdown nodes to route paths such as ``/blog/my-post/``.

    The slug is a pure function of the source file's path relative to the
    content root: the extension is dropped, an ``index`` file stands for its
    directory, and the result is wrapped in ``/``.

    Examples:
        blog/my-post/index.md  -> /blog/my-post/
        about.md               -> /about/
        index.md               -> /

    """

    def __init__(
        self,
        *,
        trailing_slash: bool = True,
        base_path: str = "",
        recognized_kinds: Iterable[NodeKind] = RECOGNIZED_CONTENT_KINDS,
    ) -> None:
        self.trailing_slash = trailing_slash
        self.base_path = PurePosixPath(base_path) if base_path else None
        self.recognized_kinds = frozenset(recognized_kinds)

    def recognizes(self, node: FileNode | ContentNode) -> bool:
        return node.kind in self.recognized_kinds

    def on_create_node(
        self,
        node: FileNode | ContentNode,
        lookup: NodeLookup,
        store: NodeFieldStore,
    ) -> str | None:
        """Derive and persist the slug of a freshly created node.

        Nodes of an unrecognized kind are skipped and left untouched; the
        return value is ``None`` for them.
        """
        if not self.recognizes(node) or not isinstance(node, ContentNode):
            return None

        value = self.derive(node, lookup)
        store.set_field(node, SLUG_FIELD, value)
        logger.debug("Derived slug %s for node %s", value, node.id)
        return value

    def derive(self, node: ContentNode, lookup: NodeLookup) -> str:
        file_node = self.find_file_node(node, lookup)
        return self.slug_for_path(file_node.relative_path)

    def slug_for_path(self, relative_path: str) -> str:
        """Compute the slug for a POSIX path relative to the content root."""
        path = PurePosixPath(relative_path)
        if self.base_path is not None and path.is_relative_to(self.base_path):
            path = path.relative_to(self.base_path)

        segments = [part for part in path.parent.parts if part not in ("", ".", "/")]
        if path.stem and path.stem != INDEX_NAME:
            segments.append(path.stem)

        if not segments:
            return "/"
        slug = "/" + "/".join(segments)
        return f"{slug}/" if self.trailing_slash else slug

    def find_file_node(self, node: ContentNode, lookup: NodeLookup) -> FileNode:
        """Walk up the parent chain until a FILE node is found."""
        seen: set[str] = {node.id}
        parent_id = node.parent
        while parent_id is not None:
            if parent_id in seen:
                raise HierarchyLookupError(node.id, f"parent cycle through '{parent_id}'")
            seen.add(parent_id)

            parent = lookup.get_node(parent_id)
            if parent is None:
                raise HierarchyLookupError(node.id, f"parent '{parent_id}' not found")
            if isinstance(parent, FileNode) and parent.kind == NodeKind.FILE:
                return parent
            parent_id = parent.parent

        raise HierarchyLookupError(node.id, "no file node among its ancestors")
