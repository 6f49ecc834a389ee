from fastapi import APIRouter
from cpuapi.api.endpoints import cpu
from cpuapi.schemas.cpu import ErrorResponse

api_router = APIRouter()
api_router.include_router(
    cpu.router,
    tags=["cpu"],
    responses={500: {"model": ErrorResponse, "description": "Unhandled error while running the test"}},
)
