"""Interactive terminal entry point."""

from __future__ import annotations

import argparse
import os
import select
import sys
import time
from enum import Enum
from typing import Sequence, TextIO

from rich.console import Console
from rich.live import Live

from .app import App
from .ui.screen import draw

try:
    import termios
    import tty

    _HAS_TERMIOS = True
except ImportError:
    _HAS_TERMIOS = False

try:
    import msvcrt

    _HAS_MSVCRT = True
except ImportError:
    _HAS_MSVCRT = False

TICK_RATE = 1.0
PRIME_DELAY = 0.2
_ESCAPE = "\x1b"
_POLL_STEP = 0.05


class _Action(Enum):
    QUIT = "quit"
    REFRESH = "refresh"


def _action_for_keys(keys: str) -> _Action | None:
    """Map keyboard input read in one go to the action it asks for."""
    if keys == _ESCAPE:
        return _Action.QUIT
    if keys.startswith(_ESCAPE):
        return None
    for key in keys:
        if key == "q":
            return _Action.QUIT
        if key == "r":
            return _Action.REFRESH
    return None


def _remaining(tick_rate: float, elapsed: float) -> float:
    """Time left until the next tick, never negative."""
    return max(tick_rate - elapsed, 0.0)


class _KeyReader:
    """Reads keys from a terminal without waiting for Enter."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._fd: int | None = None
        self._saved: list | None = None
        self._interactive = False

    def __enter__(self) -> _KeyReader:
        try:
            self._interactive = self._stream.isatty()
        except ValueError:
            self._interactive = False
        if self._interactive and _HAS_TERMIOS:
            self._fd = self._stream.fileno()
            self._saved = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._fd is not None and self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
        self._saved = None
        self._fd = None

    def read(self, timeout: float) -> str | None:
        """Wait up to ``timeout`` seconds for input; ``None`` if none arrived."""
        if self._fd is not None:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            if not ready:
                return None
            return os.read(self._fd, 32).decode("utf-8", errors="replace")
        if self._interactive and _HAS_MSVCRT:
            deadline = time.monotonic() + timeout
            while True:
                if msvcrt.kbhit():
                    return msvcrt.getwch()
                left = deadline - time.monotonic()
                if left <= 0:
                    return None
                time.sleep(min(left, _POLL_STEP))
        time.sleep(timeout)
        return None


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="itop",
        description="Terminal system monitor for CPU, memory, swap and GPU usage. "
        "Press q or Esc to quit, r to refresh.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the monitor until the user quits."""
    _parse_args(argv)

    app = App()
    # CPU usage is a delta, so it needs two samples some time apart.
    time.sleep(PRIME_DELAY)
    app.update()

    console = Console()
    try:
        with _KeyReader() as keys, Live(
            draw(app),
            console=console,
            screen=True,
            auto_refresh=False,
            redirect_stdout=False,
            redirect_stderr=False,
        ) as live:
            while True:
                live.update(draw(app), refresh=True)
                timeout = _remaining(TICK_RATE, time.monotonic() - app.last_update)
                action = _action_for_keys(keys.read(timeout) or "")
                if action is _Action.QUIT:
                    break
                if action is _Action.REFRESH:
                    app.update()
                if time.monotonic() - app.last_update >= TICK_RATE:
                    app.update()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())