"""Core data types for the page generation pipeline."""

from datetime import date as date_type
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blogforge.core.dates import parse_datetime_flexible

SLUG_FIELD = "slug"


class NodeKind(str, Enum):
    FILE = "file"
    MARKDOWN = "markdown"


# Kinds the slug deriver acts on; every other kind is left untouched.
RECOGNIZED_CONTENT_KINDS: frozenset[NodeKind] = frozenset({NodeKind.MARKDOWN})


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class FileNode(BaseModel):
    """A file or directory discovered under a content root."""

    id: str
    kind: NodeKind = NodeKind.FILE
    source_instance: str
    relative_path: str
    absolute_path: str
    is_directory: bool = False
    parent: str | None = None


class Frontmatter(BaseModel):
    """YAML metadata block at the top of a markdown document."""

    model_config = ConfigDict(extra="allow")

    title: str | None = None
    date: datetime | None = None

    @field_validator("title", mode="before")
    @classmethod
    def _stringify_title(cls, value: Any) -> Any:
        # YAML turns titles like `2020` or `yes` into non-string scalars.
        if isinstance(value, (int, float, date_type)):
            return str(value)
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> Any:
        if value is None:
            return None
        return parse_datetime_flexible(value)


class ContentNode(BaseModel):
    """One markdown-authored document.

    ``fields`` holds derived values (currently only the slug). It is written
    during the ingestion pass through a ``NodeFieldStore`` and read by the
    page planner.
    """

    id: str
    kind: NodeKind = NodeKind.MARKDOWN
    parent: str | None = None
    frontmatter: Frontmatter = Field(default_factory=Frontmatter)
    fields: dict[str, Any] = Field(default_factory=dict)
    body: str = ""

    @property
    def slug(self) -> str | None:
        return self.fields.get(SLUG_FIELD)

    @property
    def title(self) -> str | None:
        return self.frontmatter.title

    def lookup(self, dotted: str) -> Any:
        """Resolve a dotted field path such as ``frontmatter.date``.

        Returns ``None`` when any segment is missing.
        """
        current: Any = self
        for part in dotted.split("."):
            if current is None:
                return None
            if isinstance(current, dict):
                current = current.get(part)
            elif isinstance(current, BaseModel):
                extra = current.model_extra or {}
                if part in type(current).model_fields:
                    current = getattr(current, part)
                else:
                    current = extra.get(part)
            else:
                return None
        return current


class ContentQuery(BaseModel):
    """Query handed to a content source."""

    model_config = ConfigDict(frozen=True)

    kind: NodeKind = NodeKind.MARKDOWN
    sort_field: str = "frontmatter.date"
    order: SortOrder = SortOrder.DESC
    limit: int | None = None


class PageContext(BaseModel):
    """Context bundle passed to the page template."""

    model_config = ConfigDict(frozen=True)

    slug: str
    previous: ContentNode | None = None
    next: ContentNode | None = None


class PagePlanEntry(BaseModel):
    """One page-creation instruction."""

    model_config = ConfigDict(frozen=True)

    path: str
    component: str
    context: PageContext
