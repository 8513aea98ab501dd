"""Terminal widgets shared by the panels: bordered panels, gauges and line charts."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Sequence

from rich import box
from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.panel import Panel
from rich.text import Text

from ..theme import COLOR_BG, COLOR_OVERLAY, COLOR_SUBTEXT, COLOR_SURFACE, COLOR_TEXT

_BRAILLE_BASE = 0x2800
# Dot bit for each (row, column) inside a 2x4 braille cell.
_BRAILLE_DOTS = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)
_DEFAULT_CHART_HEIGHT = 6
_Y_BOUNDS = (0.0, 100.0)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def history_bounds(data: Sequence[tuple[float, float]]) -> tuple[float, float]:
    """Return the x range of a history: first and last x, or (0.0, 1.0) when empty."""
    if not data:
        return (0.0, 1.0)
    return (data[0][0], data[-1][0])


def _line_pixels(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def braille_lines(
    points: Iterable[tuple[float, float]],
    x_bounds: tuple[float, float],
    y_bounds: tuple[float, float],
    width: int,
    height: int,
) -> list[str]:
    """Plot points joined by lines into rows of braille characters.

    Returns ``height`` strings of ``width`` characters each; cells without any
    dot are blank. Points outside the bounds are clipped.
    """
    if height <= 0:
        return []
    if width <= 0:
        return [""] * height

    px_w = width * 2
    px_h = height * 4
    x_min, x_max = x_bounds
    y_min, y_max = y_bounds
    x_span = x_max - x_min
    y_span = y_max - y_min

    def to_pixel(point: tuple[float, float]) -> tuple[int, int]:
        x, y = point
        px = 0 if x_span == 0 else _round_half_up((x - x_min) / x_span * (px_w - 1))
        py = px_h - 1 if y_span == 0 else _round_half_up((y_max - y) / y_span * (px_h - 1))
        return px, py

    cells = [[0] * width for _ in range(height)]

    def plot(px: int, py: int) -> None:
        if 0 <= px < px_w and 0 <= py < px_h:
            cells[py // 4][px // 2] |= _BRAILLE_DOTS[py % 4][px % 2]

    pixels = [to_pixel(p) for p in points]
    if len(pixels) == 1:
        plot(*pixels[0])
    for (x0, y0), (x1, y1) in zip(pixels, pixels[1:]):
        for px, py in _line_pixels(x0, y0, x1, y1):
            plot(px, py)

    return [
        "".join(chr(_BRAILLE_BASE + bits) if bits else " " for bits in row)
        for row in cells
    ]


def titled_panel(title: Text | str, body: RenderableType) -> Panel:
    """Wrap a renderable in the rounded, titled panel used across the screen."""
    return Panel(
        body,
        title=title,
        title_align="left",
        box=box.ROUNDED,
        border_style=COLOR_SURFACE,
        style=f"on {COLOR_BG}",
        padding=0,
    )


class Gauge:
    """A one-row horizontal bar filled to a percentage, with a centred label."""

    def __init__(self, title: Text | str, pct: float, label: str, color: str) -> None:
        self.title = title
        self.pct = pct
        self.label = label
        self.color = color

    @property
    def percent(self) -> int:
        """Whole percentage shown by the bar, held to 0..100."""
        if math.isnan(self.pct):
            return 0
        return min(max(int(self.pct), 0), 100)

    def _bar(self, width: int) -> Text:
        bar = Text(no_wrap=True, overflow="crop", end="")
        filled = _round_half_up(width * self.percent / 100.0)
        label_start = max((width - len(self.label)) // 2, 0)
        for column in range(width):
            background = self.color if column < filled else COLOR_SURFACE
            offset = column - label_start
            if 0 <= offset < len(self.label):
                bar.append(self.label[offset], style=f"bold {COLOR_TEXT} on {background}")
            else:
                bar.append(" ", style=f"on {background}")
        return bar

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        inner_width = max(options.max_width - 2, 0)
        yield titled_panel(self.title, self._bar(inner_width))


class LineChart:
    """A braille line chart of (x, y) samples with labels on the y axis."""

    def __init__(
        self,
        data: Sequence[tuple[float, float]],
        color: str,
        y_labels: Sequence[str],
    ) -> None:
        self.data = tuple(data)
        self.color = color
        self.y_labels = tuple(y_labels)

    def _label_rows(self, height: int) -> dict[int, str]:
        count = len(self.y_labels)
        if count == 0 or height <= 0:
            return {}
        if count == 1:
            return {height - 1: self.y_labels[0]}
        rows: dict[int, str] = {}
        for position, label in enumerate(self.y_labels):
            row = height - 1 - _round_half_up(position * (height - 1) / (count - 1))
            rows[row] = label
        return rows

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        width = options.max_width
        height = options.height if options.height is not None else _DEFAULT_CHART_HEIGHT
        label_width = max((len(label) for label in self.y_labels), default=0)
        plot_width = width - label_width - 1
        if plot_width <= 0:
            for _ in range(height):
                yield Text(" " * width, no_wrap=True, overflow="crop")
            return

        rows = braille_lines(
            self.data, history_bounds(self.data), _Y_BOUNDS, plot_width, height
        )
        labels = self._label_rows(height)
        for index, plot_row in enumerate(rows):
            line = Text(no_wrap=True, overflow="crop")
            line.append(labels.get(index, "").rjust(label_width), style=COLOR_SUBTEXT)
            line.append("│", style=COLOR_OVERLAY)
            line.append(plot_row, style=self.color)
            yield line