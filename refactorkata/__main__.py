"""CLI for the refactorkata corpus.

Usage:
    python -m refactorkata list                                   # Show katas
    python -m refactorkata update "Aged Brie" -s 2 -q 0           # One update
    python -m refactorkata explain "Backstage passes to a TAFKAL80ETC concert" -s 0 -q 49
    python -m refactorkata simulate --days 5 --engine legacy      # Day table
    python -m refactorkata compare --days 20                      # Legacy vs refactored
    python -m refactorkata judge gilded_rose --engine legacy      # Score an engine
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from refactorkata.environment import default_days
from refactorkata.inventory import InventoryError, default_inventory, load_inventory
from refactorkata.katas import list_katas, load_kata
from refactorkata.models import Engine, Item
from refactorkata.quality import fired_rules
from refactorkata.report import fmt_verdict, render_comparison, render_simulation, render_trace
from refactorkata.simulator import compare, resolve_engine, run_judge, simulate

app = typer.Typer(
    name="refactorkata",
    help="Refactoring kata corpus: before/after code-smell remediation",
    no_args_is_help=True,
)
console = Console(stderr=True)

_ENGINE_CHOICES = ", ".join(e.value for e in Engine)


def _parse_engine(engine: str) -> Engine:
    try:
        return Engine(engine)
    except ValueError:
        console.print(f"[red]Invalid engine: {escape(engine)}[/red]. Choose: {_ENGINE_CHOICES}")
        raise typer.Exit(1)


def _load_items(inventory: Optional[Path]) -> list[Item]:
    if inventory is None:
        return default_inventory()
    try:
        return load_inventory(inventory)
    except InventoryError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _resolve_days(days: Optional[int]) -> int:
    if days is None:
        return default_days()
    if days < 0:
        console.print(f"[red]--days must be >= 0[/red], got {days}")
        raise typer.Exit(1)
    return days


@app.command("list")
def cmd_list() -> None:
    """Show available katas."""
    katas = list_katas()
    if not katas:
        console.print("[yellow]No katas found.[/yellow]")
        raise typer.Exit(1)

    table = Table(title="Available Katas", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=15)
    table.add_column("Description", min_width=30)
    table.add_column("Smells")
    table.add_column("Tests", justify="right")
    table.add_column("Timeout", justify="right")

    for k in katas:
        table.add_row(k.name, k.description, ", ".join(k.smells), str(k.total_tests), f"{k.timeout_s}s")

    console.print()
    console.print(table)
    console.print()


@app.command("update")
def cmd_update(
    name: str = typer.Argument(help="Item name (e.g., 'Aged Brie')"),
    sell_in: int = typer.Option(..., "--sell-in", "-s", help="Days left to sell (may be negative)"),
    quality: int = typer.Option(..., "--quality", "-q", help="Current quality"),
    engine: str = typer.Option(Engine.REFACTORED.value, "--engine", "-e", help=f"Engine: {_ENGINE_CHOICES}"),
) -> None:
    """Apply one quality update to a single item."""
    update = resolve_engine(_parse_engine(engine))
    item = Item(name, sell_in, quality)
    before = item.quality
    update(item)
    console.print(f"[bold]{escape(item.name)}[/bold] ({item.category.value}, sell_in={item.sell_in})")
    console.print(f"  quality: {before} -> [bold]{item.quality}[/bold]")


@app.command("explain")
def cmd_explain(
    name: str = typer.Argument(help="Item name (e.g., 'Aged Brie')"),
    sell_in: int = typer.Option(..., "--sell-in", "-s", help="Days left to sell (may be negative)"),
    quality: int = typer.Option(..., "--quality", "-q", help="Current quality"),
) -> None:
    """Show which refactored rules fire for an item, in order."""
    item = Item(name, sell_in, quality)
    render_trace(item, fired_rules(item), console)


@app.command("simulate")
def cmd_simulate(
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Days to advance (default: REFACTORKATA_DAYS or 10)"),
    inventory: Optional[Path] = typer.Option(None, "--inventory", "-i", help="JSON inventory file"),
    engine: str = typer.Option(Engine.REFACTORED.value, "--engine", "-e", help=f"Engine: {_ENGINE_CHOICES}"),
) -> None:
    """Run an engine over an inventory and show quality day by day."""
    eng = _parse_engine(engine)
    items = _load_items(inventory)
    result = simulate(items, _resolve_days(days), eng)
    render_simulation(result, console)


@app.command("compare")
def cmd_compare(
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Days to advance (default: REFACTORKATA_DAYS or 10)"),
    inventory: Optional[Path] = typer.Option(None, "--inventory", "-i", help="JSON inventory file"),
) -> None:
    """Show where the refactored engine behaves differently from the legacy one."""
    items = _load_items(inventory)
    render_comparison(compare(items, _resolve_days(days)), console)


@app.command("judge")
def cmd_judge(
    kata: str = typer.Argument(help="Kata name (e.g., 'gilded_rose')"),
    engine: str = typer.Option(Engine.REFACTORED.value, "--engine", "-e", help=f"Engine: {_ENGINE_CHOICES}"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print full pytest output"),
) -> None:
    """Run a kata's judge suite against an engine."""
    eng = _parse_engine(engine)
    info = load_kata(kata)
    if not info:
        console.print(f"[red]Error:[/red] Unknown kata: {escape(kata)}")
        raise typer.Exit(1)

    console.print(f"\n[bold]Judging:[/bold] {info.name} / {eng.value}")
    result = run_judge(info, eng)
    if verbose or result.total == 0:
        console.print(result.output, markup=False, highlight=False)
    console.print(f"  Judge: {result.passed}/{result.total} passed ({fmt_verdict(result)})")

    if result.verdict != "pass":
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
