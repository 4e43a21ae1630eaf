"""Helpers shared by CLI commands."""

import sys

from rich.console import Console

from minledger.config import Settings, load_settings
from minledger.dates import parse_month
from minledger.domain.models import Money, Month
from minledger.log import configure_logging
from minledger.store.ledger import Ledger
from minledger.store.schema import get_db_path

console = Console()


def load_cli_settings() -> Settings:
    """Load settings and set up logging, exiting on a bad config file."""
    try:
        settings = load_settings()
    except ValueError as e:
        console.print(f"[red]Invalid config: {e}[/red]", style="bold")
        sys.exit(1)
    configure_logging(settings.log_level)
    return settings


def open_ledger(settings: Settings) -> Ledger:
    """Build the ledger for the default database and load it.

    Raises:
        sqlite3.Error: If the database cannot be read.
    """
    ledger = Ledger(
        db_path=get_db_path(),
        storage_key=settings.storage_key,
        on_corrupt=settings.on_corrupt,
    )
    ledger.load()
    return ledger


def resolve_month(ledger: Ledger, month: str | None) -> Month:
    """Turn a --month option into a Month, defaulting to the latest month."""
    if month is None:
        return ledger.default_month()
    try:
        return parse_month(month)
    except ValueError:
        console.print(f"[red]Invalid month '{month}' (expected YYYY-MM)[/red]")
        sys.exit(1)


def format_money(amount: Money, currency: str) -> str:
    """Format cents for display (e.g., "$1,234.50")."""
    return f"{currency}{amount / 100:,.2f}"
