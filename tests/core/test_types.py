from datetime import UTC, date, datetime

import pytest
from pydantic import ValidationError

from blogforge.core.types import (
    RECOGNIZED_CONTENT_KINDS,
    ContentNode,
    Frontmatter,
    NodeKind,
    PageContext,
    PagePlanEntry,
)


def test_frontmatter_parses_date_objects_and_strings():
    assert Frontmatter(date=date(2018, 2, 10)).date == datetime(2018, 2, 10, tzinfo=UTC)
    assert Frontmatter(date="2017-11-23T10:00:00+02:00").date == datetime(2017, 11, 23, 8, tzinfo=UTC)


def test_frontmatter_rejects_unparseable_date():
    with pytest.raises(ValidationError):
        Frontmatter(date="not a date")


@pytest.mark.parametrize(("value", "expected"), [(2020, "2020"), (True, "True"), (1.5, "1.5")])
def test_frontmatter_title_accepts_scalars(value, expected):
    assert Frontmatter(title=value).title == expected


def test_frontmatter_keeps_extra_keys():
    fm = Frontmatter(title="Post", tags=["js"])
    assert fm.model_extra == {"tags": ["js"]}


def test_content_node_slug_reads_derived_fields():
    node = ContentNode(id="n1")
    assert node.slug is None
    node.fields["slug"] = "/blog/n1/"
    assert node.slug == "/blog/n1/"


def test_lookup_resolves_dotted_paths():
    node = ContentNode(
        id="n1",
        frontmatter=Frontmatter(title="T", date=date(2018, 1, 1), series="promises"),
        fields={"slug": "/n1/"},
    )
    assert node.lookup("frontmatter.title") == "T"
    assert node.lookup("frontmatter.series") == "promises"
    assert node.lookup("fields.slug") == "/n1/"
    assert node.lookup("frontmatter.missing") is None
    assert node.lookup("nothing.here") is None


def test_only_markdown_is_recognized():
    assert RECOGNIZED_CONTENT_KINDS == {NodeKind.MARKDOWN}


def test_plan_entry_is_frozen():
    entry = PagePlanEntry(path="/a/", component="tpl", context=PageContext(slug="/a/"))
    with pytest.raises(ValidationError):
        entry.path = "/b/"
