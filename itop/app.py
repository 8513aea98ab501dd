"""Application state: current system sample and bounded usage histories."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from typing import Callable

import psutil

from .gpu import GpuStats, query_gpu

HISTORY_LEN = 60
BYTES_PER_GIB = 1_073_741_824


@dataclass(frozen=True)
class Snapshot:
    """One reading of CPU, memory and swap usage; memory values in bytes."""

    cpu_percent: float = 0.0
    per_cpu: tuple[float, ...] = ()
    mem_used: int = 0
    mem_total: int = 0
    swap_used: int = 0
    swap_total: int = 0


def sample_system() -> Snapshot:
    """Take a reading of the running system."""
    vm = psutil.virtual_memory()
    sw = psutil.swap_memory()
    return Snapshot(
        cpu_percent=float(psutil.cpu_percent(interval=None)),
        per_cpu=tuple(float(p) for p in psutil.cpu_percent(interval=None, percpu=True)),
        mem_used=int(vm.used),
        mem_total=int(vm.total),
        swap_used=int(sw.used),
        swap_total=int(sw.total),
    )


def _percent(used: float, total: float) -> float:
    return 0.0 if total == 0 else used / total * 100.0


class App:
    """Holds the latest sample, GPU stats and per-tick usage histories."""

    def __init__(
        self,
        sampler: Callable[[], Snapshot] = sample_system,
        gpu_query: Callable[[], GpuStats | None] = query_gpu,
    ) -> None:
        self._sampler = sampler
        self._gpu_query = gpu_query
        self.snapshot: Snapshot = sampler()
        self.cpu_history: deque[tuple[float, float]] = deque(maxlen=HISTORY_LEN)
        self.mem_history: deque[tuple[float, float]] = deque(maxlen=HISTORY_LEN)
        self.gpu_history: deque[tuple[float, float]] = deque(maxlen=HISTORY_LEN)
        self.gpu: GpuStats | None = None
        self.tick = 0
        self.last_update = time.monotonic()

    def update(self) -> None:
        """Take a new sample and append one point to every history."""
        self.snapshot = self._sampler()
        t = float(self.tick)
        self.cpu_history.append((t, self.cpu_usage()))
        self.mem_history.append((t, self.mem_pct()))

        self.gpu = self._gpu_query()
        gpu_pct = self.gpu.utilization_pct if self.gpu is not None else 0.0
        self.gpu_history.append((t, gpu_pct))

        self.tick += 1
        self.last_update = time.monotonic()

    def cpu_usage(self) -> float:
        return self.snapshot.cpu_percent

    def core_count(self) -> int:
        return len(self.snapshot.per_cpu)

    def mem_used_gb(self) -> float:
        return self.snapshot.mem_used / BYTES_PER_GIB

    def mem_total_gb(self) -> float:
        return self.snapshot.mem_total / BYTES_PER_GIB

    def mem_pct(self) -> float:
        return _percent(self.snapshot.mem_used, self.snapshot.mem_total)

    def swap_pct(self) -> float:
        return _percent(self.snapshot.swap_used, self.snapshot.swap_total)

    def swap_used_gb(self) -> float:
        return self.snapshot.swap_used / BYTES_PER_GIB

    def swap_total_gb(self) -> float:
        return self.snapshot.swap_total / BYTES_PER_GIB

    def per_cpu(self) -> list[float]:
        return list(self.snapshot.per_cpu)