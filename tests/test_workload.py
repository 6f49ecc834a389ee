import math
import time
from unittest.mock import patch

from cpuapi.services import workload


def test_busy_loop_runs_until_deadline():
    start = time.perf_counter()
    result = workload.cpu_intensive_task(0.05)
    elapsed = time.perf_counter() - start

    assert elapsed >= 0.05
    assert result >= 0


def test_zero_second_busy_loop_returns_immediately():
    start = time.perf_counter()
    workload.cpu_intensive_task(0)
    assert time.perf_counter() - start < 0.5


def test_load_test_slices_run_one_after_another():
    with patch.object(workload, "cpu_intensive_task", wraps=workload.cpu_intensive_task) as spy:
        result = workload.run_load_test(0.2, cores=4)

    assert spy.call_count == 4
    assert all(call.args == (0.05,) for call in spy.call_args_list)
    # Sequential slices: total wall time is the whole duration, not one slice
    assert result.actual_duration >= 0.2
    assert result.requested_duration == 0.2
    assert result.cores == 4


def test_benchmark_defaults_to_one_million_iterations():
    result = workload.run_benchmark()

    assert result.iterations == 1_000_000
    assert result.duration > 0
    assert result.operations_per_second > 0
    assert result.result > 0


def test_calculation_throughput_is_finite():
    result = workload.calculation_load_test(10_000)

    assert result.duration > 0
    assert math.isfinite(result.operations_per_second)
    assert result.operations_per_second > 0
    assert math.isfinite(result.result)


def test_zero_iterations_report_zero_throughput():
    result = workload.calculation_load_test(0)

    assert result.result == 0
    assert result.operations_per_second == 0


def test_operations_per_second_sentinel():
    assert workload.operations_per_second(1000, 0) == 0
    assert workload.operations_per_second(1000, -1) == 0
    assert workload.operations_per_second(1000, 0.5) == 2000
