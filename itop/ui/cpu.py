"""CPU panels: overall gauge, usage history and per-core bars."""

from __future__ import annotations

import math
from typing import Sequence

from rich.console import Console, ConsoleOptions, RenderResult
from rich.panel import Panel
from rich.text import Text

from ..app import App
from ..theme import (
    COLOR_BLUE,
    COLOR_SAPPHIRE,
    COLOR_SUBTEXT,
    COLOR_TEXT,
    usage_color,
)
from .widgets import Gauge, LineChart, titled_panel

_COLUMN_WIDTH = 20
_BAR_WIDTH = 8


def render_gauge(app: App) -> Gauge:
    """Gauge of overall CPU usage, titled with the core count."""
    pct = app.cpu_usage()
    title = Text()
    title.append(" CPU ", style=f"bold {COLOR_BLUE}")
    title.append(f" {app.core_count()} cores ", style=COLOR_SUBTEXT)
    return Gauge(title, pct, f"{pct:.1f}%", usage_color(pct))


def render_chart(app: App) -> Panel:
    """Panel with the CPU usage history chart."""
    title = Text()
    title.append(" CPU History ", style=f"bold {COLOR_BLUE}")
    title.append("60s", style=COLOR_SUBTEXT)
    chart = LineChart(list(app.cpu_history), COLOR_BLUE, ["0%", "50%", "100%"])
    return titled_panel(title, chart)


def _bar(usage: float) -> str:
    filled = int(math.floor(usage / 100.0 * _BAR_WIDTH + 0.5)) if not math.isnan(usage) else 0
    filled = min(max(filled, 0), _BAR_WIDTH)
    return "█" * filled + "░" * (_BAR_WIDTH - filled)


def per_core_lines(usages: Sequence[float], width: int) -> list[Text]:
    """Lay out per-core usage bars in as many columns as fit in ``width``.

    ``width`` is the width of the whole panel, borders included.
    """
    available = max(width - 2, 0)
    columns = max(available // _COLUMN_WIDTH, 1)
    lines: list[Text] = []
    for row_start in range(0, len(usages), columns):
        line = Text(no_wrap=True, overflow="crop")
        for idx, usage in enumerate(usages[row_start:row_start + columns], start=row_start):
            line.append(f"CPU{idx:<2} ", style=COLOR_SUBTEXT)
            line.append(_bar(usage), style=usage_color(usage))
            line.append(f" {usage:5.1f}%  ", style=COLOR_TEXT)
        lines.append(line)
    return lines


class _PerCoreBody:
    def __init__(self, usages: Sequence[float]) -> None:
        self.usages = tuple(usages)

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield from per_core_lines(self.usages, options.max_width + 2)


def render_per_core(app: App) -> Panel:
    """Panel with one usage bar per logical CPU."""
    title = Text(" Per-Core ", style=f"bold {COLOR_SAPPHIRE}")
    return titled_panel(title, _PerCoreBody(app.per_cpu()))