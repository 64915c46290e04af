from __future__ import annotations

import os
from datetime import UTC, datetime
from pathlib import Path
from textwrap import dedent

import pytest

from blogforge.core.types import ContentNode, Frontmatter


@pytest.fixture(autouse=True)
def _clean_blogforge_env(monkeypatch):
    """Keep host BLOGFORGE_* variables out of configuration tests."""
    for key in list(os.environ):
        if key.startswith("BLOGFORGE_"):
            monkeypatch.delenv(key, raising=False)


def write_post(root: Path, relative_path: str, title: str, date: str | None = None, body: str = "Hello.") -> Path:
    """Write a markdown file with YAML frontmatter under ``root``."""
    path = root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = ["---", f'title: "{title}"']
    if date is not None:
        lines.append(f"date: {date}")
    lines.append("---")
    path.write_text("\n".join(lines) + "\n\n" + dedent(body), encoding="utf-8")
    return path


def make_node(name: str, day: int | None = None, *, slug: str | None = None) -> ContentNode:
    fields = {"slug": slug} if slug is not None else {}
    date = datetime(2018, 1, day, tzinfo=UTC) if day is not None else None
    return ContentNode(
        id=f"markdown:{name}",
        parent=f"file:{name}",
        frontmatter=Frontmatter(title=name.upper(), date=date),
        fields=fields,
    )


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A site with three dated posts and one non-markdown asset."""
    pages = tmp_path / "pages"
    write_post(pages, "blog/hello-world/index.md", "Hello World", "2015-05-01")
    write_post(pages, "blog/extending-promise/index.md", "Extending Promise", "2018-02-10")
    write_post(pages, "blog/safe-angles.md", "Safe Angles", "2017-11-23T08:00:00Z")
    (pages / "blog" / "hello-world" / "cover.jpg").write_bytes(b"\xff\xd8")
    return tmp_path
