#!/usr/bin/env python3
"""
Main CLI entry point for dotpager
"""

from typing import Optional

import typer
from rich.table import Table

from dotpager import __version__
from dotpager.config import IndicatorConfig, load_indicator_config, save_indicator_config
from dotpager.exceptions import DotpagerError
from dotpager.indicator.calculator import compute_tiers, is_overflow, window_bounds
from dotpager.indicator.tiers import ScaleTier
from dotpager.utils.logging import setup_cli_logging
from dotpager.utils.output import console, print_json

app = typer.Typer(help="Overflow-aware page indicator dots")
config_app = typer.Typer(help="Show or change saved indicator defaults")
app.add_typer(config_app, name="config")

TIER_STYLES = {
    ScaleTier.GONE: "dim",
    ScaleTier.SMALLEST: "blue",
    ScaleTier.SMALL: "cyan",
    ScaleTier.NORMAL: "green",
    ScaleTier.SELECTED: "bold magenta",
}

OUTPUT_FORMATS = ("table", "json")


def _check_format(format: str) -> None:
    if format not in OUTPUT_FORMATS:
        console.print(
            f"[red]Error: Unknown format '{format}' (choose from {', '.join(OUTPUT_FORMATS)})[/red]"
        )
        raise typer.Exit(1)


def _version_callback(value: bool):
    if value:
        typer.echo(f"dotpager version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
):
    """
    dotpager - page indicator dots that collapse to a sliding window

    [bold]Examples:[/bold]

    Show the dot tiers for page 6 of 20:
        [cyan]dotpager tiers 20 --selected 6[/cyan]

    Try the indicator interactively:
        [cyan]dotpager demo --pages 30[/cyan]
    """
    setup_cli_logging(verbose)


def _tier_row(tiers: list[ScaleTier]) -> list[str]:
    return [f"[{TIER_STYLES[tier]}]{tier.scale:.1f}[/{TIER_STYLES[tier]}]" for tier in tiers]


@app.command()
def tiers(
    pages: int = typer.Argument(..., help="Number of pages"),
    selected: Optional[int] = typer.Option(
        None, "--selected", "-s", help="Selected page (all pages when omitted)"
    ),
    max_visible: Optional[int] = typer.Option(
        None, "--max-visible", "-m", help="Dots shown before overflowing (default from config)"
    ),
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json"),
):
    """Show the scale of every dot for a selection"""
    _check_format(format)
    if pages < 1:
        console.print(f"[red]Error: Need at least one page, got {pages}[/red]")
        raise typer.Exit(1)

    try:
        config = load_indicator_config()
        if max_visible is not None:
            config.max_visible = max_visible
        config.validate()
    except DotpagerError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    positions = range(pages) if selected is None else [selected]
    rows = []
    for position in positions:
        result = compute_tiers(position, pages, config.max_visible)
        if result is None:
            console.print(f"[yellow]Selection {position} ignored for {pages} pages[/yellow]")
            continue
        rows.append((position, result))

    if not rows:
        raise typer.Exit(1)

    overflow = is_overflow(pages, config.max_visible)

    if format == "json":
        data = []
        for position, result in rows:
            entry = {
                "selected": position,
                "overflow": overflow,
                "tiers": [tier.name.lower() for tier in result],
                "scales": [tier.scale for tier in result],
            }
            if overflow:
                start, pinned = window_bounds(position, pages, config.max_visible)
                entry["window_start"] = start
                entry["pinned"] = pinned
            data.append(entry)
        print_json(data)
        return

    mode = "overflow" if overflow else "simple"
    table = Table(title=f"{pages} pages, max {config.max_visible}")
    table.add_column("Sel", style="cyan", no_wrap=True, justify="right")
    for index in range(pages):
        table.add_column(str(index), justify="center")
    for position, result in rows:
        table.add_row(str(position), *_tier_row(result))
    console.print(table)
    console.print(f"Mode: [bold]{mode}[/bold]")


@app.command()
def demo(
    pages: int = typer.Option(20, "--pages", "-p", help="Number of pages to start with"),
    max_visible: Optional[int] = typer.Option(
        None, "--max-visible", "-m", help="Dots shown before overflowing (default from config)"
    ),
):
    """Page through placeholder pages with an indicator underneath"""
    from dotpager.ui.pager_app import run_pager

    try:
        config = load_indicator_config()
        if max_visible is not None:
            config.max_visible = max_visible
        config.validate()
        run_pager(pages, config=config)
    except KeyboardInterrupt:
        pass
    except DotpagerError as e:
        console.print(f"❌ Error: {e}", style="red")
        raise typer.Exit(1) from e


@config_app.command("show")
def config_show(
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json"),
):
    """Show the saved indicator defaults"""
    _check_format(format)
    config = load_indicator_config()
    if format == "json":
        print_json(config.to_dict())
        return

    table = Table(title="Indicator defaults")
    table.add_column("Option", style="cyan")
    table.add_column("Value", style="green")
    for key, value in config.to_dict().items():
        table.add_row(key, str(value))
    console.print(table)


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Option name, e.g. max_visible"),
    value: str = typer.Argument(..., help="New value"),
):
    """Change one saved indicator default"""
    config = load_indicator_config()
    data = config.to_dict()
    if key not in data:
        console.print(f"[red]Error: Unknown option '{key}'[/red]")
        console.print(f"Options: {', '.join(data)}")
        raise typer.Exit(1)

    data[key] = value
    try:
        updated = IndicatorConfig.from_dict(data).validate()
    except DotpagerError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    save_indicator_config(updated)
    console.print(f"[green]✅ Set {key} = {getattr(updated, key)}[/green]")


if __name__ == "__main__":
    app()
