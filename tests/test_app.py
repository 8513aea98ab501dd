import psutil

from itop.app import BYTES_PER_GIB, HISTORY_LEN, App, Snapshot, sample_system
from itop.gpu import GpuStats


def _fixed(snapshot):
    return lambda: snapshot


SNAP = Snapshot(
    cpu_percent=25.0,
    per_cpu=(10.0, 20.0, 30.0, 40.0),
    mem_used=BYTES_PER_GIB,
    mem_total=4 * BYTES_PER_GIB,
    swap_used=0,
    swap_total=2 * BYTES_PER_GIB,
)


def test_history_keeps_sixty_points():
    app = App(sampler=_fixed(SNAP), gpu_query=lambda: None)
    for _ in range(70):
        app.update()
    assert len(app.cpu_history) == 60
    assert app.cpu_history[0][0] == 10.0
    assert app.cpu_history[-1][0] == 69.0


def test_accessors():
    app = App(sampler=_fixed(SNAP), gpu_query=lambda: None)
    assert app.cpu_usage() == SNAP.cpu_percent
    assert app.core_count() == len(SNAP.per_cpu)
    assert app.per_cpu() == list(SNAP.per_cpu)
    assert app.mem_used_gb() == 1.0
    assert app.mem_total_gb() == 4.0
    assert app.mem_pct() == 25.0
    assert app.swap_pct() == 0.0
    assert app.swap_used_gb() == 0.0
    assert app.swap_total_gb() == 2.0


def test_zero_totals_give_zero_percent():
    app = App(sampler=_fixed(Snapshot()), gpu_query=lambda: None)
    assert app.mem_pct() == 0.0
    assert app.swap_pct() == 0.0


def test_update_appends_points():
    app = App(sampler=_fixed(SNAP), gpu_query=lambda: None)
    assert len(app.cpu_history) == 0
    app.update()
    app.update()
    assert app.tick == 2
    assert list(app.cpu_history) == [(0.0, SNAP.cpu_percent), (1.0, SNAP.cpu_percent)]
    assert [p for _, p in app.mem_history] == [app.mem_pct(), app.mem_pct()]
    assert [p for _, p in app.gpu_history] == [0.0, 0.0]
    assert app.gpu is None


def test_update_records_gpu():
    stats = GpuStats(utilization_pct=55.0, device_name="Test GPU")
    app = App(sampler=_fixed(SNAP), gpu_query=lambda: stats)
    app.update()
    assert app.gpu == stats
    assert app.gpu_history[-1] == (0.0, stats.utilization_pct)


def test_histories_are_bounded():
    app = App(sampler=_fixed(SNAP), gpu_query=lambda: None)
    for _ in range(HISTORY_LEN + 5):
        app.update()
    for history in (app.cpu_history, app.mem_history, app.gpu_history):
        assert len(history) == HISTORY_LEN
        assert history[0][0] == float(app.tick - HISTORY_LEN)
        assert history[-1][0] == float(app.tick - 1)


def test_update_advances_last_update():
    app = App(sampler=_fixed(SNAP), gpu_query=lambda: None)
    before = app.last_update
    app.update()
    assert app.last_update >= before


def test_update_resamples():
    readings = iter([SNAP, Snapshot(cpu_percent=80.0), Snapshot(cpu_percent=5.0)])
    app = App(sampler=lambda: next(readings), gpu_query=lambda: None)
    app.update()
    app.update()
    assert [p for _, p in app.cpu_history] == [80.0, 5.0]


def test_sample_system_reads_real_values():
    snap = sample_system()
    assert snap.mem_total > 0
    assert 0 <= snap.mem_used <= snap.mem_total
    assert len(snap.per_cpu) == psutil.cpu_count()
    assert 0.0 <= snap.cpu_percent <= 100.0