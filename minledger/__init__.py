"""Minimal personal expense ledger."""

__version__ = "0.1.0"
