import logging
import math
import time

from cpuapi.schemas.cpu import (
    BenchmarkResponse,
    BenchmarkResults,
    CalcTestResponse,
    CalcTestResults,
    CpuDetails,
    CpuInfoResponse,
    CurrentLoad,
    LoadTestResponse,
    LoadTestResults,
    QuickTestResponse,
    QuickTestResults,
)
from cpuapi.services import workload
from cpuapi.services.cpu_info import logical_cpu_count, read_cpu_snapshot

logger = logging.getLogger(__name__)

QUICK_TEST_SECONDS = 2
QUICK_TEST_TOLERANCE = 2.1
LOAD_TEST_TOLERANCE = 1.1

EXCELLENT_SCORE = 1_000_000
GOOD_SCORE = 500_000
OUTSTANDING_OPS = 1_000_000
GREAT_OPS = 500_000


def format_number(value: float) -> str:
    """
    en-US grouping with at most two decimals, trailing zeros dropped.
    1234567.891 -> "1,234,567.89", 1000000 -> "1,000,000"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    text = f"{value:,.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _load_percent(load: float, cores: int) -> str:
    return f"{load * 100 / cores:.1f}%"


def _echo_number(value: float) -> str:
    # Requested values go back as sent: 5.0 -> "5", 0.005 -> "0.005"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class CpuService:
    """Turns workload results into the labelled payloads the routes return."""

    def get_info(self) -> CpuInfoResponse:
        snapshot = read_cpu_snapshot()
        one, five, fifteen = snapshot.load_average

        return CpuInfoResponse(
            message="Here's your CPU information:",
            details=CpuDetails(
                number_of_cores=snapshot.cores,
                cpu_model=snapshot.model,
                speed=f"{format_number(snapshot.speed_mhz / 1000)} GHz",
                architecture=snapshot.architecture,
                current_load=CurrentLoad(
                    last_minute=_load_percent(one, snapshot.cores),
                    last_5_minutes=_load_percent(five, snapshot.cores),
                    last_15_minutes=_load_percent(fifteen, snapshot.cores),
                ),
            ),
        )

    def run_quick_test(self) -> QuickTestResponse:
        start = time.perf_counter()
        workload.cpu_intensive_task(QUICK_TEST_SECONDS)
        duration = time.perf_counter() - start
        logger.info(f"[Test] {QUICK_TEST_SECONDS}s busy loop finished in {duration:.3f}s")

        if duration < QUICK_TEST_TOLERANCE:
            note = "Your CPU handled this test very efficiently!"
        else:
            note = "Your CPU took a bit longer than expected."

        return QuickTestResponse(
            message=f"Completed a quick {QUICK_TEST_SECONDS}-second CPU stress test!",
            results=QuickTestResults(
                test_duration=f"{format_number(duration)} seconds",
                cores_used=logical_cpu_count(),
                performance_note=note,
            ),
        )

    def run_load_test(self, duration: float) -> LoadTestResponse:
        result = workload.run_load_test(duration, logical_cpu_count())
        logger.info(
            f"[Load] requested={duration}s actual={result.actual_duration:.3f}s cores={result.cores}"
        )

        if result.actual_duration <= duration * LOAD_TEST_TOLERANCE:
            performance = "Your CPU handled the load well!"
        else:
            performance = "Your CPU struggled a bit with this load."

        return LoadTestResponse(
            message=f"Ran a {_echo_number(duration)}-second CPU load test across all cores!",
            results=LoadTestResults(
                requested_duration=f"{_echo_number(duration)} seconds",
                actual_duration=f"{format_number(result.actual_duration)} seconds",
                cores_stressed=result.cores,
                performance=performance,
            ),
        )

    def run_benchmark(self) -> BenchmarkResponse:
        result = workload.run_benchmark()
        cpu_score = _round_half_up(result.operations_per_second * logical_cpu_count())
        logger.info(f"[Benchmark] {result.iterations} ops in {result.duration:.3f}s, score={cpu_score}")

        if cpu_score > EXCELLENT_SCORE:
            rating = "Excellent! Your CPU is very powerful!"
        elif cpu_score > GOOD_SCORE:
            rating = "Good! Your CPU handles tasks well."
        else:
            rating = "Fair. Your CPU might struggle with heavy tasks."

        return BenchmarkResponse(
            message="Completed CPU benchmark test!",
            results=BenchmarkResults(
                operations_performed=format_number(result.iterations),
                time_taken=f"{format_number(result.duration)} seconds",
                operations_per_second=format_number(result.operations_per_second),
                cpu_score=format_number(cpu_score),
                performance_rating=rating,
            ),
        )

    def run_calculation_test(self, iterations: int) -> CalcTestResponse:
        result = workload.calculation_load_test(iterations)
        ops = result.operations_per_second
        logger.info(f"[CalcTest] {iterations} iterations in {result.duration:.3f}s")

        if ops > OUTSTANDING_OPS:
            rating = "Outstanding! Your CPU excels at calculations!"
        elif ops > GREAT_OPS:
            rating = "Great! Your CPU handles calculations well."
        else:
            rating = "Average. Your CPU might need more power for heavy calculations."

        return CalcTestResponse(
            message=f"Completed CPU calculation test with {format_number(iterations)} iterations!",
            results=CalcTestResults(
                iterations_performed=format_number(iterations),
                duration=f"{result.duration:.2f} seconds",
                operations_per_second=format_number(ops),
                performance_rating=rating,
            ),
        )


cpu_service = CpuService()
