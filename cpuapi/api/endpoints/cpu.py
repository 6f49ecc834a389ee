from fastapi import APIRouter, Depends

from cpuapi.api.deps import get_json_body
from cpuapi.schemas.cpu import (
    BenchmarkResponse,
    CalcTestRequest,
    CalcTestResponse,
    CpuInfoResponse,
    LoadTestRequest,
    LoadTestResponse,
    QuickTestResponse,
)
from cpuapi.services.cpu_service import cpu_service

router = APIRouter()

# Handlers are async and call the workloads inline: a worker's event loop is
# busy for the whole run and picks up the next request only afterwards.


def _optional_body(model) -> dict:
    return {
        "requestBody": {
            "required": False,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


@router.get("/info", response_model=CpuInfoResponse)
async def get_cpu_info():
    """
    Returns basic information about the system's CPU.
    Load percentages are the load averages divided by the core count.
    """
    return cpu_service.get_info()


@router.get("/test", response_model=QuickTestResponse)
async def run_cpu_test():
    """
    Runs a 2-second CPU stress test.
    """
    return cpu_service.run_quick_test()


@router.post("/load", response_model=LoadTestResponse, openapi_extra=_optional_body(LoadTestRequest))
async def run_cpu_load(body: dict = Depends(get_json_body)):
    """
    Runs a CPU load test with the given duration, one slice per core.
    The slices run back to back in this worker.
    """
    request = LoadTestRequest.model_validate(body)
    return cpu_service.run_load_test(request.duration)


@router.get("/benchmark", response_model=BenchmarkResponse)
async def run_cpu_benchmark():
    """
    Runs 1,000,000 sqrt(random() * pi) iterations and derives a CPU score.
    """
    return cpu_service.run_benchmark()


@router.post("/calc-test", response_model=CalcTestResponse, openapi_extra=_optional_body(CalcTestRequest))
async def run_calc_test(body: dict = Depends(get_json_body)):
    """
    Performs a series of trigonometric calculations to test CPU performance.
    """
    request = CalcTestRequest.model_validate(body)
    return cpu_service.run_calculation_test(request.iterations)
