"""Runtime helpers for sharing a ledger with nested code."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from .ledger import MarkLedger

_CURRENT: ContextVar[Optional[MarkLedger]] = ContextVar("timebenchy_ledger", default=None)


def get_ledger() -> Optional[MarkLedger]:
    """Return the ledger currently in scope, if any."""

    return _CURRENT.get()


@contextmanager
def scoped_ledger(ledger: Optional[MarkLedger]) -> Iterator[Optional[MarkLedger]]:
    """Temporarily expose a ledger to nested code."""

    token = _CURRENT.set(ledger)
    try:
        yield ledger
    finally:
        _CURRENT.reset(token)


def mark(label: str) -> None:
    """Mark ``label`` on the current ledger; no-op when none is in scope."""

    ledger = _CURRENT.get()
    if ledger is None:
        return
    ledger.mark(label)


@contextmanager
def measure(label: str) -> Iterator[None]:
    """Mark ``label`` on the current ledger when the block exits."""

    ledger = _CURRENT.get()
    if ledger is None:
        yield
        return

    with ledger.measure(label):
        yield


__all__ = ["get_ledger", "mark", "measure", "scoped_ledger"]
