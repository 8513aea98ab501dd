# itop

A compact terminal system monitor. One full-screen view shows:

- a header with the key bindings
- gauges for overall CPU load (titled with the core count), memory and swap
- history charts of CPU and memory usage over the last 60 samples
- a per-core panel with one usage bar per logical CPU
- host name, operating system, kernel version and uptime
- GPU utilisation and its history on Apple Silicon, read from `ioreg`
  (no elevated privileges needed); where no figures can be read, the GPU
  panel says that no IOAccelerator was found

Gauge colours follow the load: green below 40 %, yellow below 70 %,
peach below 90 % and red from there up.

## Installation

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Usage

```
itop
```

The display takes a new sample once a second.

| Key        | Action          |
|------------|-----------------|
| `q`, `Esc` | quit            |
| `r`        | refresh now     |

`Ctrl-C` also quits. Keys are read without waiting for Enter when standard
input is a terminal; otherwise the screen simply refreshes on its own.

## Using it as a library

The sampling and parsing parts work without the screen:

```python
from itop.app import App
from itop.gpu import parse_ioreg, query_gpu

app = App()
app.update()
print(f"CPU {app.cpu_usage():.1f}% on {app.core_count()} cores")
print(f"MEM {app.mem_used_gb():.1f}/{app.mem_total_gb():.1f} GB ({app.mem_pct():.1f}%)")
print(f"SWP {app.swap_used_gb():.1f}/{app.swap_total_gb():.1f} GB ({app.swap_pct():.1f}%)")
print(app.per_cpu())

stats = query_gpu()          # None when ioreg is missing or reports no utilisation
if stats is not None:
    print(stats.device_name, stats.utilization_pct)
```

- `App` keeps the last 60 samples of CPU, memory and GPU usage in
  `cpu_history`, `mem_history` and `gpu_history` as `(tick, percent)` pairs.
  Its constructor takes a `sampler` returning a `Snapshot` and a `gpu_query`
  returning `GpuStats` or `None`; by default these are `sample_system` and
  `query_gpu`.
- `parse_ioreg(text)` reads the output of
  `ioreg -r -d 1 -w 0 -c IOAccelerator` and returns `GpuStats` or `None`.
- `itop.ui.screen.draw(app)` builds the whole screen as a `rich` renderable,
  which can be printed with a `rich.console.Console`.