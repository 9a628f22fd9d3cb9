"""Presentation adapters for ledger statistics."""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass
from textwrap import dedent
from typing import TYPE_CHECKING, Final, List, Optional, Sequence, Tuple

from .formatting import format_number

if TYPE_CHECKING:  # pragma: no cover
    from .ledger import StatEntry

LOGGER: Final = logging.getLogger("timebenchy")

FORMATS: Final = ("text", "html", "log")
TIMESTAMP_DECIMALS: Final = 4

HEADERS: Final = ("Label", "since start", "since previous", "timestamp")

_OVERLAY_CSS: Final = dedent(
    """
    #time-benchy {
        position:fixed;
        left:10px;
        bottom:10px;
        opacity:.5;
        color:rgb(220 220 220);
    }

    #time-benchy__button {
        display:inline-block;
        padding: 8px 12px;
        background:rgb(49 49 49);
        border: 1px solid rgb(100 100 100);
    }

    #time-benchy__item {
        display: none;
        max-width:90vw;
        max-height:90vh;
        position: absolute;
        bottom:100%;
        left:0;
        background:rgb(49 49 49);
        overflow:auto;
    }

    #time-benchy__item table {
        width: 100%;
        border-collapse: collapse;
    }

    #time-benchy__item th, #time-benchy__item td {
        padding:5px 10px;
        border:1px solid rgb(100 100 100);
        white-space: nowrap;
    }

    #time-benchy:hover {
        opacity:1;
    }

    #time-benchy:hover #time-benchy__item {
        display: block;
    }

    #time-benchy th,
    #time-benchy td {
        text-align: right;
    }
    #time-benchy th:first-child,
    #time-benchy td:first-child {
        text-align: left;
    }
    """
)


@dataclass(frozen=True)
class StatRow:
    """One formatted report row."""

    label: str
    since_start: str
    since_previous: str
    timestamp: str


def stat_rows(stats: Sequence[Tuple[str, "StatEntry"]], decimals: int = 4) -> List[StatRow]:
    """Format ledger statistics into report rows."""

    return [
        StatRow(
            label=label,
            since_start=format_number(entry.since_start, decimals),
            since_previous=format_number(entry.since_previous, decimals),
            timestamp=format_number(entry.timestamp, TIMESTAMP_DECIMALS),
        )
        for label, entry in stats
    ]


def _footer(decimals: int) -> str:
    return f"Values in seconds, rounded to {max(0, decimals)} decimal places."


def render_text(rows: Sequence[StatRow], decimals: int = 4) -> str:
    """Render rows as a fixed-width plain-text table."""

    if not rows:
        return ""

    table = [HEADERS] + [
        (
            row.label,
            f"{row.since_start} s",
            f"{row.since_previous} s",
            f"{row.timestamp} s",
        )
        for row in rows
    ]
    widths = [max(len(line[column]) for line in table) for column in range(len(HEADERS))]

    def _line(cells: Sequence[str]) -> str:
        label, *values = cells
        parts = [label.ljust(widths[0])]
        parts.extend(value.rjust(width) for value, width in zip(values, widths[1:]))
        return "  ".join(parts).rstrip()

    lines = [_line(table[0]), _line(["-" * width for width in widths])]
    lines.extend(_line(cells) for cells in table[1:])
    lines.append(_footer(decimals))
    return "\n".join(lines)


def render_html(rows: Sequence[StatRow], decimals: int = 4) -> str:
    """Render rows as a floating overlay widget for an HTML page.

    The stylesheet is injected into ``document.head`` by a small script so the
    snippet can be written anywhere in the page body.
    """

    if not rows:
        return ""

    css = re.sub(r"\s+", " ", _OVERLAY_CSS).strip()
    parts = [
        "<script>\n"
        f"    const css = '{css}',\n"
        "    head = document.head || document.getElementsByTagName('head')[0],\n"
        "    style = document.createElement('style');\n"
        "\n"
        "    style.appendChild(document.createTextNode(css));\n"
        "    head.appendChild(style);\n"
        "</script>",
        '<div id="time-benchy">',
        '<div id="time-benchy__button">TimeBenchy</div>',
        '<div id="time-benchy__item">',
        "<table>",
        "<thead>",
        "<tr><th>Label</th>"
        '<th><abbr title="Time elapsed from the first mark to this one">since start</abbr></th>'
        '<th><abbr title="Time elapsed from the previous mark to this one">since previous</abbr></th>'
        "<th>Timestamp</th></tr>",
        "</thead>",
        "<tbody>",
    ]
    for row in rows:
        parts.append(
            f"<tr><th>{html.escape(row.label)}</th>"
            f"<td>{row.since_start} s</td>"
            f"<td>{row.since_previous} s</td>"
            f"<td>{row.timestamp} s</td></tr>"
        )
    parts.extend(
        [
            "</tbody>",
            "<tfoot>",
            f'<tr><td colspan="4"><small>{_footer(decimals)}</small></td></tr>',
            "</tfoot>",
            "</table>",
            "</div>",
            "</div>",
        ]
    )
    return "".join(parts)


def render_log_line(row: StatRow) -> str:
    """Render a single row as a ``key=value`` log message."""

    return (
        f"mark={row.label!r} since_start={row.since_start}s "
        f"since_previous={row.since_previous}s timestamp={row.timestamp}s"
    )


def log_stats(
    stats: Sequence[Tuple[str, "StatEntry"]],
    *,
    decimals: int = 4,
    logger: Optional[logging.Logger] = None,
    level: int = logging.INFO,
) -> None:
    """Emit one log record per mark."""

    target = logger or LOGGER
    for row in stat_rows(stats, decimals):
        target.log(level, render_log_line(row))


def render(stats: Sequence[Tuple[str, "StatEntry"]], fmt: str = "text", *, decimals: int = 4) -> str:
    """Render statistics in one of ``FORMATS``."""

    rows = stat_rows(stats, decimals)
    if fmt == "text":
        return render_text(rows, decimals)
    if fmt == "html":
        return render_html(rows, decimals)
    if fmt == "log":
        return "\n".join(render_log_line(row) for row in rows)
    raise ValueError(f"Unknown report format {fmt!r}; expected one of {', '.join(FORMATS)}")


__all__ = [
    "FORMATS",
    "StatRow",
    "log_stats",
    "render",
    "render_html",
    "render_log_line",
    "render_text",
    "stat_rows",
]
