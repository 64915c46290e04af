"""In-memory node field store."""

from typing import Any

from blogforge.core.exceptions import DerivedFieldAlreadySetError
from blogforge.core.types import ContentNode


class InMemoryFieldStore:
    """Writes derived fields straight onto the node; each field is write-once."""

    def set_field(self, node: ContentNode, name: str, value: Any) -> None:
        if name in node.fields:
            raise DerivedFieldAlreadySetError(node.id, name)
        node.fields[name] = value
