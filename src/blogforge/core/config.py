"""Configuration models for Blogforge."""

from pathlib import Path

from pydantic import BaseModel, Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from blogforge.core.types import SortOrder

DEFAULT_PAGE_LIMIT = 1000


class PathsSettings(BaseModel):
    """Path configuration.

    All paths are relative to ``site_root`` unless absolute.
    """

    site_root: Path = Field(
        default_factory=Path.cwd,
        description="Root directory of the site (defaults to current working directory)",
    )
    content_dir: Path = Field(default=Path("pages"), description="Directory holding markdown sources")
    manifest_path: Path = Field(
        default=Path(".blogforge/pages.json"),
        description="Where the page manifest is written",
    )

    @property
    def abs_content_dir(self) -> Path:
        return self._resolve(self.content_dir)

    @property
    def abs_manifest_path(self) -> Path:
        return self._resolve(self.manifest_path)

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.site_root / path


class PagesSettings(BaseModel):
    """Page planning configuration."""

    component: str = Field(default="src/templates/blog-post", description="Template identifier for post pages")
    limit: PositiveInt | None = Field(
        default=DEFAULT_PAGE_LIMIT,
        description="Keep only the first N nodes after sorting; null disables the cap",
    )
    sort_field: str = Field(default="frontmatter.date", description="Dotted node field to sort by")
    sort_order: SortOrder = Field(default=SortOrder.DESC, description="Sort direction")
    trailing_slash: bool = Field(default=True, description="End derived slugs with '/'")


class BlogforgeConfig(BaseSettings):
    """Root configuration.

    Supports environment variable overrides with the pattern
    BLOGFORGE_SECTION__KEY (e.g. BLOGFORGE_PAGES__LIMIT).
    """

    paths: PathsSettings = Field(default_factory=PathsSettings)
    pages: PagesSettings = Field(default_factory=PagesSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="BLOGFORGE_",
        env_nested_delimiter="__",
    )
