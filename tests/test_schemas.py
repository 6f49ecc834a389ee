import pytest

from cpuapi.schemas.cpu import (
    DEFAULT_CALC_ITERATIONS,
    DEFAULT_LOAD_DURATION,
    CalcTestRequest,
    LoadTestRequest,
)
from cpuapi.services.cpu_service import format_number


@pytest.mark.parametrize("payload", [
    {},
    {"duration": None},
    {"duration": "ten"},
    {"duration": -3},
    {"duration": True},
    {"duration": float("inf")},
    {"duration": [1]},
    {"duration": 10 ** 400},
])
def test_bad_duration_falls_back_to_default(payload):
    assert LoadTestRequest.model_validate(payload).duration == DEFAULT_LOAD_DURATION


def test_duration_is_kept_as_sent():
    assert LoadTestRequest.model_validate({"duration": 0}).duration == 0
    assert LoadTestRequest.model_validate({"duration": 1.5}).duration == 1.5
    assert LoadTestRequest.model_validate({"duration": 3, "extra": "ignored"}).duration == 3


@pytest.mark.parametrize("payload", [
    {},
    {"iterations": None},
    {"iterations": "many"},
    {"iterations": -1},
    {"iterations": 2.5},
    {"iterations": False},
    {"iterations": 10 ** 400},
])
def test_bad_iterations_fall_back_to_default(payload):
    assert CalcTestRequest.model_validate(payload).iterations == DEFAULT_CALC_ITERATIONS


def test_integral_float_iterations_are_accepted():
    request = CalcTestRequest.model_validate({"iterations": 1e4})
    assert request.iterations == 10_000
    assert isinstance(request.iterations, int)
    assert CalcTestRequest.model_validate({"iterations": 0}).iterations == 0


@pytest.mark.parametrize("value, expected", [
    (1234567.891, "1,234,567.89"),
    (1_000_000, "1,000,000"),
    (2.5, "2.5"),
    (2.0, "2"),
    (0, "0"),
    (0.004, "0"),
    (-0.001, "0"),
    (999.999, "1,000"),
    (float("inf"), "∞"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected
