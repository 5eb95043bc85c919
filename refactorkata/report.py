"""refactorkata reports: renders simulations, comparisons and traces as Rich tables."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from refactorkata.models import Comparison, Item, Rule, SimulationResult, TestResult

_VERDICT_COLORS = {"pass": "green", "partial": "yellow", "fail": "red"}

_ENGINE_STYLES = {
    "refactored": "green",
    "legacy": "yellow",
}


def _fmt_delta(n: int) -> str:
    """Format a quality change with sign, dimmed when zero."""
    if n == 0:
        return "[dim]0[/dim]"
    return f"{n:+d}"


def fmt_verdict(result: TestResult) -> str:
    color = _VERDICT_COLORS.get(result.verdict, "white")
    return f"[{color}]{result.verdict}[/{color}]"


def render_simulation(result: SimulationResult, console: Console) -> None:
    """Render a per-day quality table: one row per item, one column per day."""
    if not result.snapshots or not result.snapshots[0].items:
        console.print("[yellow]Empty inventory, nothing to simulate.[/yellow]")
        return

    style = _ENGINE_STYLES.get(result.engine, "white")
    table = Table(
        title=f"Simulation: [{style}]{result.engine}[/{style}] over {result.days} day(s)",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Item", style="dim", min_width=20)
    for snap in result.snapshots:
        table.add_column(f"d{snap.day}", justify="right")

    start = result.snapshots[0].items
    for i, item in enumerate(start):
        vals = [str(snap.items[i].quality) for snap in result.snapshots]
        table.add_row(escape(item.name), *vals)

    console.print()
    console.print(table)
    console.print()


def render_comparison(comparison: Comparison, console: Console) -> None:
    """Render where legacy and refactored engines disagree."""
    if not comparison.divergences:
        console.print(
            f"[green]No divergence[/green] over {comparison.days} day(s): "
            "both engines agree on every item."
        )
        return

    table = Table(
        title=f"Divergences: legacy vs refactored over {comparison.days} day(s)",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Day", justify="right")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Item", min_width=20)
    table.add_column("Sell in", justify="right")
    table.add_column("legacy", justify="right", style=_ENGINE_STYLES["legacy"])
    table.add_column("refactored", justify="right", style=_ENGINE_STYLES["refactored"])
    table.add_column("Delta", justify="right")

    for d in comparison.divergences:
        table.add_row(
            str(d.day),
            str(d.index),
            escape(d.name),
            str(d.sell_in),
            str(d.legacy_quality),
            str(d.refactored_quality),
            _fmt_delta(d.delta),
        )

    console.print()
    console.print(table)
    console.print(
        f"  {len(comparison.divergences)} divergence(s) across "
        f"{len(comparison.diverged_items)} item(s): {escape(', '.join(comparison.diverged_items))}"
    )
    console.print()


def render_trace(item: Item, trace: list[tuple[Rule, bool, int]], console: Console) -> None:
    """Render which rules fire for a single item and what each leaves behind."""
    table = Table(
        title=f"Rules for {escape(repr(item.name))} (sell_in={item.sell_in}, quality={item.quality}, {item.category.value})",
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Rule", min_width=20)
    table.add_column("Fired", justify="center")
    table.add_column("Quality after", justify="right")

    for i, (rule, fired, after) in enumerate(trace, 1):
        mark = "[green]yes[/green]" if fired else "[dim]no[/dim]"
        table.add_row(str(i), rule.value, mark, str(after))

    console.print()
    console.print(table)
    console.print()
