"""Whole-screen layout combining every panel."""

from __future__ import annotations

from rich.layout import Layout
from rich.styled import Styled

from ..app import App
from ..theme import COLOR_BG
from . import cpu, gpu_panel, header, memory, sysinfo_panel


def draw(app: App) -> Styled:
    """Build the full screen for the current application state."""
    root = Layout(name="root")
    root.split_column(
        Layout(header.render(), name="header", size=2),
        Layout(cpu.render_gauge(app), name="cpu", size=3),
        Layout(memory.render_mem_gauge(app), name="mem", size=3),
        Layout(memory.render_swap_gauge(app), name="swap", size=3),
        Layout(name="charts", ratio=1, minimum_size=8),
        Layout(name="bottom", ratio=1, minimum_size=6),
    )
    root["charts"].split_row(
        Layout(cpu.render_chart(app), name="cpu_chart", ratio=1),
        Layout(memory.render_chart(app), name="mem_chart", ratio=1),
    )
    root["bottom"].split_row(
        Layout(cpu.render_per_core(app), name="per_core", ratio=40),
        Layout(sysinfo_panel.render(app), name="system", ratio=30),
        Layout(gpu_panel.render(app), name="gpu", ratio=30),
    )
    return Styled(root, style=f"on {COLOR_BG}")