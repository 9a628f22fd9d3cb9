"""Mark named points in time and report the elapsed times between them."""

from .formatting import format_number, is_numeric, max_decimals
from .ledger import MarkLedger, StatEntry
from .render import StatRow, render, stat_rows
from .runtime import get_ledger, mark, measure, scoped_ledger

__all__ = [
    "MarkLedger",
    "StatEntry",
    "StatRow",
    "format_number",
    "get_ledger",
    "is_numeric",
    "mark",
    "max_decimals",
    "measure",
    "render",
    "scoped_ledger",
    "stat_rows",
]
