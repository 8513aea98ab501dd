"""GPU panel: utilisation gauge and history, or a notice when no GPU is found."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.layout import Layout
from rich.text import Text

from ..app import App
from ..gpu import GpuStats
from ..theme import COLOR_OVERLAY, COLOR_PEACH, COLOR_SUBTEXT, usage_color
from .widgets import Gauge, LineChart, titled_panel


def render(app: App) -> RenderableType:
    """Render live GPU statistics, or an explanatory panel if there are none."""
    if app.gpu is None:
        return _render_unavailable()
    return _render_live(app, app.gpu)


def _render_live(app: App, gpu: GpuStats) -> Layout:
    util_pct = gpu.utilization_pct
    title = Text()
    title.append(" GPU ", style=f"bold {COLOR_PEACH}")
    title.append(f" {gpu.device_name} ", style=COLOR_SUBTEXT)
    gauge = Gauge(title, util_pct, f"{util_pct:.1f}%", usage_color(util_pct))

    chart = titled_panel(
        Text(" GPU History ", style=f"bold {COLOR_PEACH}"),
        LineChart(list(app.gpu_history), COLOR_PEACH, ["0%", "100%"]),
    )

    layout = Layout(name="gpu")
    layout.split_column(
        Layout(gauge, name="gauge", size=3),
        Layout(chart, name="history", ratio=1, minimum_size=4),
    )
    return layout


def _render_unavailable() -> RenderableType:
    first = Text("  Apple Silicon MPS", style=COLOR_SUBTEXT, no_wrap=True, overflow="crop")
    second = Text(no_wrap=True, overflow="crop")
    second.append("  querying via ", style=COLOR_SUBTEXT)
    second.append("ioreg", style=COLOR_PEACH)
    second.append("...", style=COLOR_SUBTEXT)
    third = Text(
        "  (no IOAccelerator found)",
        style=f"italic {COLOR_OVERLAY}",
        no_wrap=True,
        overflow="crop",
    )

    title = Text()
    title.append(" GPU ", style=f"bold {COLOR_PEACH}")
    title.append(" (Metal/MPS) ", style=COLOR_SUBTEXT)
    return titled_panel(title, Group(first, second, third))