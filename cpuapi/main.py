import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cpuapi.core.config import get_settings
from cpuapi.api.api import api_router

settings = get_settings()
logger = logging.getLogger(__name__)

ERROR_BODY = {
    "message": "Oops! Something went wrong while testing the CPU.",
    "suggestion": "Please try again or check your request.",
}

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    servers=[{"url": settings.SERVER_URL, "description": "Configured server"}],
    docs_url=settings.DOCS_URL,
    redoc_url=None,
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # Traceback stays in the server log, the client gets a fixed body
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content=ERROR_BODY)


app.include_router(api_router, prefix=settings.API_CPU_STR)
