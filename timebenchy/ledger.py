"""Mark ledger: named timestamps and the statistics derived from them."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from time import perf_counter
from typing import Callable, Dict, Iterator, List, Optional, TextIO, Tuple

from . import render
from .formatting import format_number

Clock = Callable[[], float]


@dataclass(frozen=True)
class StatEntry:
    """Elapsed-time statistics for a single mark."""

    timestamp: float
    since_start: float
    since_previous: float


class MarkLedger:
    """Records named timestamps for one measurement session.

    Example::

        ledger = MarkLedger()
        ledger.mark("Start")
        load_config()
        ledger.mark("After config")
        query_database()
        ledger.mark("End")
        ledger.print_stats()
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or perf_counter
        self._marks: Dict[str, float] = {}

    # Recording -----------------------------------------------------------------

    def mark(self, label: str) -> None:
        """Record ``label`` at the current time.

        Marking an existing label overwrites its timestamp but keeps its
        original position in the ledger.
        """

        self._marks[label] = self._clock()

    @contextmanager
    def measure(self, label: str) -> Iterator[None]:
        """Mark ``label`` when the managed block exits, even on error."""

        try:
            yield
        finally:
            self.mark(label)

    def reset(self) -> None:
        """Forget every mark."""

        self._marks.clear()

    # Queries -------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._marks)

    def __contains__(self, label: object) -> bool:
        return label in self._marks

    def labels(self) -> List[str]:
        return list(self._marks)

    def timestamp(self, label: str) -> Optional[float]:
        return self._marks.get(label)

    def span(self, point1: str, point2: str) -> Optional[float]:
        """Return seconds elapsed between two marks, or ``None`` if either is missing."""

        if point1 not in self._marks or point2 not in self._marks:
            return None
        return self._marks[point2] - self._marks[point1]

    def time_diff(self, point1: str, point2: str = "", decimals: int = 4) -> str:
        """Return the formatted time between ``point1`` and ``point2``.

        An unknown ``point1`` yields ``""``. An unknown ``point2`` is marked
        at the current time first, so the default ``""`` means "until now" and
        leaves a ``""`` entry behind in the ledger.
        """

        if point1 not in self._marks:
            return ""
        if point2 not in self._marks:
            self.mark(point2)
        return format_number(self._marks[point2] - self._marks[point1], decimals)

    def get_stats(self) -> List[Tuple[str, StatEntry]]:
        """Return per-mark statistics in recording order."""

        stats: List[Tuple[str, StatEntry]] = []
        if not self._marks:
            return stats

        start_time = next(iter(self._marks.values()))
        prev_time = start_time
        for label, mark_time in self._marks.items():
            stats.append(
                (
                    label,
                    StatEntry(
                        timestamp=mark_time,
                        since_start=mark_time - start_time,
                        since_previous=mark_time - prev_time,
                    ),
                )
            )
            prev_time = mark_time
        return stats

    # Output --------------------------------------------------------------------

    def print_stats(
        self,
        decimals: int = 4,
        *,
        fmt: str = "text",
        stream: Optional[TextIO] = None,
    ) -> None:
        """Write a report of the recorded marks; does nothing when empty.

        ``fmt`` is ``"text"`` for a plain table, ``"html"`` for the floating
        page overlay or ``"log"`` to emit one log record per mark.
        """

        stats = self.get_stats()
        if not stats:
            return

        if fmt == "log":
            render.log_stats(stats, decimals=decimals)
            return

        output = render.render(stats, fmt, decimals=decimals)
        target = stream or sys.stdout
        target.write(output)
        target.write("\n")


__all__ = ["Clock", "MarkLedger", "StatEntry"]
