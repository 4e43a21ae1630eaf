"""Report commands for viewing monthly summaries."""

import sqlite3
import sys

from minledger.commands.common import console, format_money, load_cli_settings, open_ledger, resolve_month
from minledger.domain.summary import calculate_histogram_bar_length

BAR_WIDTH = 30


def months_command() -> None:
    """List the months that have expenses, most recent first."""
    settings = load_cli_settings()

    try:
        ledger = open_ledger(settings)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    months = ledger.months()
    if not months:
        console.print("[dim]No expenses yet[/dim]")
        return

    for option in months:
        console.print(f"  {option.key}  {option.label}")


def summary_command(month: str | None = None, histogram: bool = True) -> None:
    """Show total, weekly pace, entry count and top categories for a month."""
    settings = load_cli_settings()

    try:
        ledger = open_ledger(settings)
        selected = resolve_month(ledger, month)
        summary = ledger.summary(selected)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[bold cyan]{summary.label}[/bold cyan]\n")
    console.print(f"  [bold]This month:[/bold]  {format_money(summary.total, settings.currency)}")
    console.print(f"  [bold]Weekly pace:[/bold] {format_money(summary.weekly_average, settings.currency)}")
    console.print(f"  [bold]Entries:[/bold]     {summary.entry_count:02d}\n")

    if not summary.top_categories:
        console.print("[dim]Add expenses to see category insights.[/dim]")
        return

    console.print("[bold]Top categories:[/bold]\n")
    for top in summary.top_categories:
        amount_display = format_money(top.amount, settings.currency)
        if histogram:
            bar = "█" * calculate_histogram_bar_length(top.percentage, BAR_WIDTH)
            console.print(f"  {top.category:12} {amount_display:>12} {top.percentage:5.1f}% {bar}")
        else:
            console.print(f"  {top.category}: {amount_display} ({top.percentage:.0f}%)")
