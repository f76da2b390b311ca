"""Stats Structurizer CLI -- Rich-formatted table extraction from the terminal."""

import logging
import os
import sys
from pathlib import Path

import click

LOG_LEVEL_ENV = "STATS_STRUCTURIZER_LOG_LEVEL"
FORMAT_ENV = "STATS_STRUCTURIZER_DEFAULT_FORMAT"

OUTPUT_FORMATS = ("table", "json", "tsv", "html")


def _read_input(text, file):
    """Text from the argument, a file, or stdin, in that order."""
    if file:
        return Path(file).read_text(encoding="utf-8")
    if text:
        return text
    return click.get_text_stream("stdin").read()


@click.group()
@click.version_option(package_name="stats-structurizer")
@click.option(
    "--log-level",
    default=lambda: os.getenv(LOG_LEVEL_ENV, "WARNING"),
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help=f"Logging verbosity (default: ${LOG_LEVEL_ENV} or WARNING).",
)
def cli(log_level):
    """Stats Structurizer -- Turn pasted sports statistics into tables."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command()
@click.argument("text", required=False)
@click.option("--file", "-f", type=click.Path(exists=True), help="Read text from file.")
@click.option(
    "--format", "-F", "fmt",
    default=lambda: os.getenv(FORMAT_ENV, "table"),
    type=click.Choice(OUTPUT_FORMATS),
    help="Output format.",
)
def parse(text, file, fmt):
    """Parse pasted statistics text into tables."""
    from rich.console import Console
    from rich.panel import Panel
    from rich.table import Table

    from .export import (
        column_group_labels,
        export_table,
        first_column_label,
        is_entity_column,
        tables_to_json,
    )
    from .parser import parse as parse_text

    console = Console()
    text = _read_input(text, file)

    if not text or not text.strip():
        console.print("[red]No input text provided.[/red]")
        raise SystemExit(1)

    tables = parse_text(text)

    if fmt == "json":
        click.echo(tables_to_json(tables))
        return
    if fmt in ("tsv", "html"):
        click.echo("\n\n".join(export_table(t, fmt) for t in tables))
        return

    if not tables:
        console.print(Panel(
            "Paste your statistics text to see the structured result here.",
            title="No Data Parsed Yet",
        ))
        return

    console.print(f"\n[bold]Parsed {len(tables)} table{'s' if len(tables) != 1 else ''}[/bold]\n")

    for parsed in tables:
        grid = Table(title=f"{parsed.title} [dim](ID: {parsed.id[:14]})[/dim]")
        grid.add_column(first_column_label(parsed), style="bold")

        previous = ""
        for group, header in zip(column_group_labels(parsed), parsed.headers):
            label = f"[dim]{group}[/dim]\n{header}" if group and group != previous else header
            previous = group
            justify = "left" if is_entity_column(header) else "center"
            grid.add_column(label, style="cyan", justify=justify)

        for row in parsed.rows:
            grid.add_row(row.metric, *row.values[:len(parsed.headers)])

        console.print(grid)


@cli.command()
@click.argument("text", required=False)
@click.option("--file", "-f", type=click.Path(exists=True), help="Read text from file.")
def detect(text, file):
    """Show which markers were found and which strategy would run."""
    from rich.console import Console
    from rich.table import Table

    from .parser import detect_signature, select_strategy

    console = Console()
    text = _read_input(text, file)

    if not text or not text.strip():
        console.print("[red]No input text provided.[/red]")
        raise SystemExit(1)

    signature = detect_signature(text)

    table = Table(title="Signature")
    table.add_column("Marker", style="cyan")
    table.add_column("Found", justify="center")

    for name, found in signature.model_dump().items():
        table.add_row(name, "[green]Yes[/green]" if found else "[dim]No[/dim]")

    console.print(table)
    console.print(f"\nStrategy: [bold]{select_strategy(signature)}[/bold]")


@cli.command()
@click.argument("name", type=click.Choice(["stats", "league", "complex"]))
def sample(name):
    """Print a bundled example input."""
    from .samples import get_sample

    click.echo(get_sample(name), nl=False)


if __name__ == "__main__":
    cli()
