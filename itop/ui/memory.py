"""Memory panels: RAM and swap gauges and the memory usage history."""

from __future__ import annotations

from rich.panel import Panel
from rich.text import Text

from ..app import App
from ..theme import COLOR_MAUVE, COLOR_SAPPHIRE, COLOR_SUBTEXT, usage_color
from .widgets import Gauge, LineChart, titled_panel


def _title(tag: str, tag_color: str, caption: str) -> Text:
    title = Text()
    title.append(tag, style=f"bold {tag_color}")
    title.append(caption, style=COLOR_SUBTEXT)
    return title


def render_mem_gauge(app: App) -> Gauge:
    """Gauge of RAM usage labelled with used and total GiB."""
    pct = app.mem_pct()
    label = f"{app.mem_used_gb():.1f} / {app.mem_total_gb():.1f} GB"
    return Gauge(_title(" MEM ", COLOR_MAUVE, " memory "), pct, label, usage_color(pct))


def render_swap_gauge(app: App) -> Gauge:
    """Gauge of swap usage labelled with used and total GiB."""
    pct = app.swap_pct()
    label = f"{app.swap_used_gb():.1f} / {app.swap_total_gb():.1f} GB"
    return Gauge(_title(" SWP ", COLOR_SAPPHIRE, " swap "), pct, label, usage_color(pct))


def render_chart(app: App) -> Panel:
    """Panel with the memory usage history chart."""
    chart = LineChart(list(app.mem_history), COLOR_MAUVE, ["0%", "50%", "100%"])
    return titled_panel(_title(" MEM History ", COLOR_MAUVE, "60s"), chart)