"""CLI interface for folio."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from folio.config import FolioConfig, load_config, merge_cli_overrides
from folio.content.loader import ContentLoader
from folio.content.models import ContentKind
from folio.content.sorting import sort_content
from folio.errors import FolioError
from folio.rendering.formatters import FORMATTERS, create_formatter
from folio.rendering.models import DisplayItem
from folio.rendering.renderer import render_items

app = typer.Typer(
    name="folio",
    help="Order and render blog posts and speaking engagements.",
)

console = Console()

OUTPUT_FORMATS = (*FORMATTERS, "table")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from folio import __version__

        console.print(f"folio {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """Folio - content listings for a personal site."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _content_dir(config: FolioConfig, kind: ContentKind) -> Path:
    if kind is ContentKind.POST:
        return Path(config.content.posts_dir)
    return Path(config.content.talks_dir)


def _render_table(items: list[DisplayItem], kind: ContentKind) -> Table:
    table = Table(title="Speaking" if kind is ContentKind.TALK else "Blog")
    table.add_column("Date", no_wrap=True)
    table.add_column("Title")
    table.add_column("Organizer" if kind is ContentKind.TALK else "Author")
    table.add_column("Link")
    for item in items:
        heading = item.heading if item.status is None else f"{item.heading} ({item.status})"
        table.add_row(
            escape(item.formatted_date),
            escape(heading),
            escape(item.subheading),
            escape(item.primary_link or ""),
        )
    return table


@app.command(name="list")
def list_cmd(
    directory: Annotated[
        Optional[Path],
        typer.Argument(
            help="Content directory. Defaults to the configured directory for the kind.",
            file_okay=False,
            dir_okay=True,
        ),
    ] = None,
    kind: Annotated[
        ContentKind,
        typer.Option("--kind", "-k", help="Content kind to list."),
    ] = ContentKind.TALK,
    output_format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Output format: html, markdown, or table."),
    ] = None,
    show_time: Annotated[
        Optional[bool],
        typer.Option("--show-time/--date-only", help="Include time of day in dates."),
    ] = None,
    timezone: Annotated[
        Optional[str],
        typer.Option("--timezone", "-z", help="IANA timezone for displayed dates."),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to a .folio.toml file."),
    ] = None,
) -> None:
    """List content newest first.

    Loads every markdown file in the directory, orders the records by
    publication time, and prints them as HTML, Markdown, or a table.
    """
    try:
        config = merge_cli_overrides(
            load_config(config_path),
            show_time=show_time,
            timezone=timezone,
            output_format=output_format,
        )
        options = config.to_render_options()
    except ValueError as exc:
        console.print(f"[red]Error:[/red] Invalid configuration: {escape(str(exc))}")
        raise typer.Exit(1)

    fmt = config.output.format.lower()
    if fmt not in OUTPUT_FORMATS:
        console.print(f"[red]Error:[/red] Unsupported format: {escape(fmt)}")
        console.print(f"Choose one of: {', '.join(OUTPUT_FORMATS)}")
        raise typer.Exit(1)

    source = directory if directory is not None else _content_dir(config, kind)
    try:
        snapshot = ContentLoader().load_directory(source, kind)
        items = render_items(sort_content(snapshot.records), options)
    except FolioError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        for note in getattr(exc, "__notes__", []):
            console.print(f"  {note}", markup=False)
        raise typer.Exit(1)

    if not items:
        console.print(f"[yellow]No {kind.value} content found.[/yellow]")
        console.print(f"Searched in: {escape(str(source))}")
        raise typer.Exit(0)

    if fmt == "table":
        console.print(_render_table(items, kind))
    else:
        typer.echo(create_formatter(fmt).format_list(items))
