import pytest

from blogforge.core.config_loader import load_config
from blogforge.core.exceptions import DuplicateSlugError, SourceQueryError
from blogforge.engine.pipeline import BuildPipeline, run_build
from blogforge.infra.fields import InMemoryFieldStore
from blogforge.infra.registry import InMemoryPageRegistry
from blogforge.infra.source import FilesystemContentSource
from tests.conftest import write_post


def _pipeline(site_root, **overrides):
    config = load_config(site_root)
    for key, value in overrides.items():
        setattr(config.pages, key, value)
    registry = InMemoryPageRegistry()
    pipeline = BuildPipeline.from_config(
        config,
        source=FilesystemContentSource(config.paths.abs_content_dir),
        store=InMemoryFieldStore(),
        registry=registry,
    )
    return pipeline, registry


def test_full_build(site_root):
    pipeline, registry = _pipeline(site_root)

    result = run_build(pipeline)

    assert result.slugs == {
        "blog/extending-promise/index.md": "/blog/extending-promise/",
        "blog/hello-world/index.md": "/blog/hello-world/",
        "blog/safe-angles.md": "/blog/safe-angles/",
    }
    assert registry.paths == [
        "/blog/extending-promise/",
        "/blog/safe-angles/",
        "/blog/hello-world/",
    ]
    newest, middle, oldest = registry.pages
    assert newest.context.next is None
    assert newest.context.previous.title == "Safe Angles"
    assert middle.context.next.title == "Extending Promise"
    assert oldest.context.previous is None
    assert result.entries == registry.pages


def test_limit_from_config(site_root):
    pipeline, registry = _pipeline(site_root, limit=2)

    run_build(pipeline)

    assert registry.paths == ["/blog/extending-promise/", "/blog/safe-angles/"]


def test_duplicate_slug_aborts_ingestion(site_root):
    write_post(site_root / "pages", "blog/safe-angles/index.md", "Clash", "2019-01-01")
    pipeline, registry = _pipeline(site_root)

    with pytest.raises(DuplicateSlugError) as excinfo:
        run_build(pipeline)

    assert excinfo.value.slug == "/blog/safe-angles/"
    assert registry.pages == []


def test_missing_content_root_aborts(tmp_path):
    pipeline, registry = _pipeline(tmp_path)

    with pytest.raises(SourceQueryError):
        run_build(pipeline)
    assert registry.pages == []


def test_empty_content_root_builds_nothing(tmp_path):
    (tmp_path / "pages").mkdir()
    pipeline, registry = _pipeline(tmp_path)

    result = run_build(pipeline)

    assert result.entries == []
    assert registry.pages == []


def test_run_twice_on_same_source(site_root):
    pipeline, registry = _pipeline(site_root)
    first = run_build(pipeline)

    pipeline.registry = InMemoryPageRegistry()
    write_post(site_root / "pages", "blog/newer.md", "Newer", "2019-06-01")
    second = run_build(pipeline)

    assert len(first.entries) == 3
    assert [e.path for e in second.entries][0] == "/blog/newer/"
    assert second.slugs["blog/newer.md"] == "/blog/newer/"
    assert len(registry.pages) == 3
