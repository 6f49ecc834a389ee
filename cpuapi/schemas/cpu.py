import math
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_LOAD_DURATION = 5.0
DEFAULT_CALC_ITERATIONS = 1_000_000
BENCHMARK_ITERATIONS = 1_000_000


def _is_number(value) -> bool:
    # bool is an int subclass, JSON true/false are not durations
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value) and value >= 0
    except OverflowError:
        # JSON integers can be larger than any float
        return False


# ---------------------------------------------------------------------------
# Requests: malformed input falls back to the default, it is never rejected
# ---------------------------------------------------------------------------

class LoadTestRequest(BaseModel):
    """Body of POST /api/cpu/load"""
    duration: float = Field(DEFAULT_LOAD_DURATION, ge=0, description="Test duration in seconds")

    @field_validator("duration", mode="before")
    @classmethod
    def _fallback_duration(cls, value):
        return value if _is_number(value) else DEFAULT_LOAD_DURATION


class CalcTestRequest(BaseModel):
    """Body of POST /api/cpu/calc-test"""
    iterations: int = Field(DEFAULT_CALC_ITERATIONS, ge=0, description="Number of calculation iterations")

    @field_validator("iterations", mode="before")
    @classmethod
    def _fallback_iterations(cls, value):
        if not _is_number(value) or float(value) != int(value):
            return DEFAULT_CALC_ITERATIONS
        return int(value)


# ---------------------------------------------------------------------------
# Workload results (raw numbers, formatted later by the service layer)
# ---------------------------------------------------------------------------

class CpuSnapshot(BaseModel):
    cores: int
    model: str
    speed_mhz: float
    architecture: str
    load_average: tuple[float, float, float]


class LoadTestResult(BaseModel):
    requested_duration: float
    actual_duration: float
    cores: int


class BenchmarkResult(BaseModel):
    iterations: int
    result: float
    duration: float
    operations_per_second: float


class CalculationResult(BaseModel):
    result: float
    duration: float
    operations_per_second: float


# ---------------------------------------------------------------------------
# Responses: keys are the human-readable labels clients see
# ---------------------------------------------------------------------------

class _Labelled(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CurrentLoad(_Labelled):
    last_minute: str = Field(..., alias="Last minute")
    last_5_minutes: str = Field(..., alias="Last 5 minutes")
    last_15_minutes: str = Field(..., alias="Last 15 minutes")


class CpuDetails(_Labelled):
    number_of_cores: int = Field(..., alias="Number of cores")
    cpu_model: str = Field(..., alias="CPU Model")
    speed: str = Field(..., alias="Speed")
    architecture: str = Field(..., alias="Architecture")
    current_load: CurrentLoad = Field(..., alias="Current Load")


class CpuInfoResponse(BaseModel):
    message: str
    details: CpuDetails


class QuickTestResults(_Labelled):
    test_duration: str = Field(..., alias="Test duration")
    cores_used: int = Field(..., alias="Cores used")
    performance_note: str = Field(..., alias="Performance note")


class QuickTestResponse(BaseModel):
    message: str
    results: QuickTestResults


class LoadTestResults(_Labelled):
    requested_duration: str = Field(..., alias="Requested duration")
    actual_duration: str = Field(..., alias="Actual duration")
    cores_stressed: int = Field(..., alias="Cores stressed")
    performance: str = Field(..., alias="Performance")


class LoadTestResponse(BaseModel):
    message: str
    results: LoadTestResults


class BenchmarkResults(_Labelled):
    operations_performed: str = Field(..., alias="Operations performed")
    time_taken: str = Field(..., alias="Time taken")
    operations_per_second: str = Field(..., alias="Operations per second")
    cpu_score: str = Field(..., alias="CPU Score")
    performance_rating: str = Field(..., alias="Performance rating")


class BenchmarkResponse(BaseModel):
    message: str
    results: BenchmarkResults


class CalcTestResults(_Labelled):
    iterations_performed: str = Field(..., alias="Iterations performed")
    duration: str = Field(..., alias="Duration")
    operations_per_second: str = Field(..., alias="Operations per second")
    performance_rating: str = Field(..., alias="Performance rating")


class CalcTestResponse(BaseModel):
    message: str
    results: CalcTestResults


class ErrorResponse(BaseModel):
    message: str
    suggestion: str
