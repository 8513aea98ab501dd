"""Apple Silicon GPU metrics read from ``ioreg``.

Parses ``IOAccelerator`` entries to extract the GPU utilisation reported by
the Metal runtime. No elevated privileges are required.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass

_IOREG_COMMAND = ("ioreg", "-r", "-d", "1", "-w", "0", "-c", "IOAccelerator")
_UTIL_KEY = '"Device Utilization %"='
_UTIL_TERMINATORS = (",", "}", " ")


@dataclass(frozen=True)
class GpuStats:
    """GPU utilisation (0-100) and a display name for the device."""

    utilization_pct: float = 0.0
    device_name: str = ""


def query_gpu() -> GpuStats | None:
    """Query GPU statistics from ioreg; ``None`` if they are unavailable."""
    try:
        result = subprocess.run(list(_IOREG_COMMAND), capture_output=True)
    except OSError:
        return None
    return parse_ioreg(result.stdout.decode("utf-8", errors="replace"))


def parse_ioreg(text: str) -> GpuStats | None:
    """Extract GPU statistics from ioreg output, or ``None`` if absent."""
    util: float | None = None
    name = "Apple GPU"

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if '"IOClass"' in line:
            value = extract_string_value(line)
            if value is not None:
                name = value
        if '"PerformanceStatistics"' in line:
            found = extract_device_util(line)
            if found is not None:
                util = found

    if util is None:
        return None
    return GpuStats(utilization_pct=util, device_name=prettify_class_name(name))


def extract_string_value(line: str) -> str | None:
    """Return ``Value`` from a line of the form ``"Key" = "Value"``."""
    _, sep, rhs = line.partition("=")
    if not sep:
        return None
    rhs = rhs.strip()
    if len(rhs) >= 2 and rhs.startswith('"') and rhs.endswith('"'):
        return rhs[1:-1]
    return None


def extract_device_util(line: str) -> float | None:
    """Return the number following ``"Device Utilization %"=`` in a line."""
    start = line.find(_UTIL_KEY)
    if start < 0:
        return None
    rest = line[start + len(_UTIL_KEY):]
    positions = [pos for pos in (rest.find(t) for t in _UTIL_TERMINATORS) if pos >= 0]
    end = min(positions, default=len(rest))
    number = rest[:end].strip()
    if not number or "_" in number:
        return None
    try:
        return float(number)
    except ValueError:
        return None


def prettify_class_name(raw: str) -> str:
    """Turn an accelerator class name into a friendlier device name."""
    if "AGX" in raw:
        return "Apple Silicon GPU (AGX)"
    return raw