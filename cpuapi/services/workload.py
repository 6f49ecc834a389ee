"""
Synthetic CPU workloads.

Everything here is synchronous and never yields: a call occupies the calling
thread (and therefore the worker's event loop) until it returns.
"""
import math
import random
import time

from cpuapi.schemas.cpu import (
    BENCHMARK_ITERATIONS,
    BenchmarkResult,
    CalculationResult,
    LoadTestResult,
)


def operations_per_second(iterations: int, duration: float) -> float:
    # Zero-length runs report 0 rather than infinity
    if duration <= 0:
        return 0.0
    return iterations / duration


def cpu_intensive_task(duration_seconds: float) -> float:
    """Spin on random()*random() until the deadline passes."""
    end = time.perf_counter() + duration_seconds
    result = 0.0
    while time.perf_counter() < end:
        result += random.random() * random.random()
    return result


def run_load_test(duration: float, cores: int) -> LoadTestResult:
    """
    One busy loop per core, each for duration / cores seconds.

    The loops run one after another in this process, so the wall time is the
    sum of the slices (roughly `duration`), not `duration / cores`.
    """
    start = time.perf_counter()
    for _ in range(cores):
        cpu_intensive_task(duration / cores)
    actual = time.perf_counter() - start
    return LoadTestResult(requested_duration=duration, actual_duration=actual, cores=cores)


def run_benchmark(iterations: int = BENCHMARK_ITERATIONS) -> BenchmarkResult:
    start = time.perf_counter()
    result = 0.0
    for _ in range(iterations):
        result += math.sqrt(random.random() * math.pi)
    duration = time.perf_counter() - start

    return BenchmarkResult(
        iterations=iterations,
        result=result,
        duration=duration,
        operations_per_second=operations_per_second(iterations, duration),
    )


def calculation_load_test(iterations: int) -> CalculationResult:
    result = 0.0
    start = time.perf_counter()

    for i in range(iterations):
        result += math.sin(i) * math.cos(i)
        result *= random.random() ** 2
        result /= math.sqrt(abs(result) + 1)

    duration = time.perf_counter() - start
    return CalculationResult(
        result=result,
        duration=duration,
        operations_per_second=operations_per_second(iterations, duration),
    )
