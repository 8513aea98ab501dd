"""Top header line with the program name and key bindings."""

from __future__ import annotations

from rich.console import Group
from rich.rule import Rule
from rich.text import Text

from ..theme import COLOR_LAVENDER, COLOR_OVERLAY, COLOR_SUBTEXT, COLOR_SURFACE, COLOR_YELLOW


def render() -> Group:
    """Title line followed by a plain bottom border."""
    title = Text(no_wrap=True, overflow="crop")
    title.append(" ⚡ ", style=COLOR_YELLOW)
    title.append("itop", style=f"bold {COLOR_LAVENDER}")
    title.append("  system monitor", style=COLOR_SUBTEXT)
    title.append("  [q] quit  [r] refresh", style=COLOR_OVERLAY)
    return Group(title, Rule(characters="─", style=COLOR_SURFACE))