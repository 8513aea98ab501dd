import io

from rich.console import Console

from itop.app import BYTES_PER_GIB, App, Snapshot
from itop.ui.memory import render_chart, render_mem_gauge, render_swap_gauge


def _make_app(snapshot):
    return App(sampler=lambda: snapshot, gpu_query=lambda: None)


def _render_text(renderable, width=60, height=None):
    console = Console(width=width, file=io.StringIO(), color_system=None, legacy_windows=False)
    options = console.options.update(width=width)
    if height is not None:
        options = options.update(height=height)
    lines = console.render_lines(renderable, options, pad=True)
    return "\n".join("".join(seg.text for seg in line) for line in lines)


def test_mem_gauge_label_and_title():
    app = _make_app(Snapshot(mem_used=2 * BYTES_PER_GIB, mem_total=8 * BYTES_PER_GIB))
    text = _render_text(render_mem_gauge(app))
    assert "2.0 / 8.0 GB" in text
    assert "MEM" in text
    assert "memory" in text


def test_mem_gauge_percent_matches_app():
    app = _make_app(Snapshot(mem_used=2 * BYTES_PER_GIB, mem_total=8 * BYTES_PER_GIB))
    gauge = render_mem_gauge(app)
    assert gauge.pct == app.mem_pct()
    assert gauge.percent == int(app.mem_pct())


def test_swap_gauge_without_swap():
    app = _make_app(Snapshot(swap_used=0, swap_total=0))
    gauge = render_swap_gauge(app)
    assert gauge.percent == 0
    text = _render_text(gauge)
    assert "0.0 / 0.0 GB" in text
    assert "SWP" in text
    assert "swap" in text


def test_swap_gauge_label():
    app = _make_app(Snapshot(swap_used=BYTES_PER_GIB, swap_total=4 * BYTES_PER_GIB))
    text = _render_text(render_swap_gauge(app))
    assert "1.0 / 4.0 GB" in text


def test_memory_chart_title_and_labels():
    app = _make_app(Snapshot(mem_used=BYTES_PER_GIB, mem_total=2 * BYTES_PER_GIB))
    app.update()
    text = _render_text(render_chart(app), height=8)
    assert "MEM History" in text
    assert "60s" in text
    assert "100%" in text
    assert "0%" in text


def test_memory_chart_uses_history():
    app = _make_app(Snapshot(mem_used=BYTES_PER_GIB, mem_total=2 * BYTES_PER_GIB))
    app.update()
    app.update()
    panel = render_chart(app)
    assert list(panel.renderable.data) == list(app.mem_history)