"""System panel: host name, OS, kernel and uptime."""

from __future__ import annotations

import platform
import time

import psutil
from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from ..app import App
from ..theme import COLOR_GREEN, COLOR_LAVENDER, COLOR_OVERLAY, COLOR_TEXT
from .widgets import titled_panel

_UNKNOWN = "unknown"


def format_uptime(seconds: int) -> str:
    """Format a number of seconds as hours, minutes and seconds."""
    if seconds < 0:
        raise ValueError(f"uptime cannot be negative: {seconds}")
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours}h {minutes}m {secs}s"


def _host_name() -> str | None:
    return platform.node() or None


def _long_os_version() -> str | None:
    system = platform.system()
    if system == "Darwin":
        version = platform.mac_ver()[0]
        return f"macOS {version}" if version else "macOS"
    if system == "Linux":
        try:
            info = platform.freedesktop_os_release()
        except OSError:
            return "Linux"
        pretty = info.get("PRETTY_NAME")
        if pretty:
            return pretty
        return f"Linux {info.get('VERSION_ID', '')}".strip()
    if system == "Windows":
        return f"Windows {platform.release()} ({platform.version()})"
    return system or None


def _kernel_version() -> str | None:
    return platform.release() or None


def _uptime_seconds() -> int:
    return max(int(time.time() - psutil.boot_time()), 0)


def _row(label: str, value: str, style: str) -> Text:
    line = Text(no_wrap=True, overflow="crop")
    line.append(label, style=COLOR_OVERLAY)
    line.append(value, style=style)
    return line


def render(app: App) -> Panel:
    """Panel describing the host the monitor runs on."""
    hostname = _host_name() or _UNKNOWN
    os_version = _long_os_version() or _UNKNOWN
    kernel = _kernel_version() or _UNKNOWN
    uptime = format_uptime(_uptime_seconds())

    body = Group(
        _row("  host   ", hostname, f"bold {COLOR_LAVENDER}"),
        _row("  os     ", os_version, COLOR_TEXT),
        _row("  kernel ", kernel, COLOR_TEXT),
        _row("  uptime ", uptime, COLOR_GREEN),
    )
    return titled_panel(Text(" System ", style=f"bold {COLOR_LAVENDER}"), body)