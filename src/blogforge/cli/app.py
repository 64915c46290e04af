from pathlib import Path

import typer
from rich.table import Table

from blogforge.core.config_loader import load_config
from blogforge.core.exceptions import BlogforgeError
from blogforge.core.logging import configure_logging, console
from blogforge.engine.pipeline import BuildPipeline, run_build
from blogforge.infra.fields import InMemoryFieldStore
from blogforge.infra.registry import ManifestPageRegistry
from blogforge.infra.source import FilesystemContentSource

app = typer.Typer(name="blogforge", help="Generate blog page routes from markdown sources.")


def _pipeline(site_root: Path | None, limit: int | None) -> tuple[BuildPipeline, ManifestPageRegistry, Path]:
    config = load_config(site_root)
    if limit is not None:
        config.pages.limit = limit
    paths = config.paths
    registry = ManifestPageRegistry()
    pipeline = BuildPipeline.from_config(
        config,
        source=FilesystemContentSource(paths.abs_content_dir, name=paths.content_dir.name),
        store=InMemoryFieldStore(),
        registry=registry,
    )
    return pipeline, registry, paths.abs_manifest_path


def _fail(error: BlogforgeError) -> None:
    console.print(f"[bold red]Build failed:[/] {error}")
    raise typer.Exit(code=1) from error


@app.callback()
def main(log_level: str = typer.Option(None, "--log-level", help="Logging level (default from BLOGFORGE_LOG_LEVEL).")):
    configure_logging(log_level)


@app.command()
def build(
    site_root: Path = typer.Option(None, "--site-root", help="Site root (defaults to the current directory)."),
    limit: int = typer.Option(None, "--limit", min=1, help="Keep only the first N posts after sorting."),
    manifest: Path = typer.Option(None, "--manifest", help="Where to write the page manifest."),
):
    """
    Derive slugs, plan post pages and write the page manifest.
    """
    try:
        pipeline, registry, manifest_path = _pipeline(site_root, limit)
        result = run_build(pipeline)
    except BlogforgeError as e:
        _fail(e)

    written = registry.write(manifest or manifest_path)

    table = Table(title="Planned pages")
    table.add_column("Route", style="bold cyan")
    table.add_column("Previous")
    table.add_column("Next")
    for entry in result.entries:
        previous, next_ = entry.context.previous, entry.context.next
        table.add_row(entry.path, previous.slug if previous else "-", next_.slug if next_ else "-")
    console.print(table)
    console.print(f"[bold green]{len(result.entries)} pages planned.[/bold green] Manifest: {written}")


@app.command()
def slugs(
    site_root: Path = typer.Option(None, "--site-root", help="Site root (defaults to the current directory)."),
):
    """
    Run the ingestion pass only and list each source file with its slug.
    """
    try:
        pipeline, _, _ = _pipeline(site_root, None)
        derived = pipeline.ingest()
    except BlogforgeError as e:
        _fail(e)

    table = Table(title="Derived slugs")
    table.add_column("Source", style="bold cyan")
    table.add_column("Slug")
    for source_path, slug in derived.items():
        table.add_row(source_path, slug)
    console.print(table)


if __name__ == "__main__":
    app()
