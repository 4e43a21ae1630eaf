"""CLI entry point for minledger."""

import typer

from minledger.commands.admin import init_command
from minledger.commands.expenses import add_command, list_command, remove_command
from minledger.commands.report import months_command, summary_command

app = typer.Typer(
    name="minledger",
    help="Minimal ledger - log expenses and see where the month went",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Minimal ledger - log expenses and see where the month went."""


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing database and config"),
) -> None:
    """Initialize minledger database and configuration."""
    init_command(force)


@app.command()
def add(
    label: str = typer.Argument(..., help="What the money was spent on"),
    amount: str = typer.Argument(..., help="Amount spent (e.g. 12.50)"),
    category: str = typer.Option(None, "--category", "-c", help="Category (default: Housing)"),
    date: str = typer.Option(None, "--date", "-d", help="Date of the expense (default: today)"),
) -> None:
    """Log a new expense."""
    add_command(label, amount, category, date)


@app.command()
def remove(
    expense_id: str = typer.Argument(..., help="Expense ID or unambiguous prefix (see 'minledger list')"),
) -> None:
    """Remove an expense."""
    remove_command(expense_id)


@app.command(name="list")
def list_expenses(
    month: str = typer.Option(None, "--month", help="Specific month (YYYY-MM, default: latest)"),
) -> None:
    """List your expenses for a month."""
    list_command(month)


@app.command()
def months() -> None:
    """List the months you have logged expenses in."""
    months_command()


@app.command()
def summary(
    month: str = typer.Option(None, "--month", help="Specific month (YYYY-MM, default: latest)"),
    histogram: bool = typer.Option(True, help="Show histogram of your top categories"),
) -> None:
    """Show your monthly total, weekly pace and top categories."""
    summary_command(month, histogram)


if __name__ == "__main__":
    app()
