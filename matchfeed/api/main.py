"""
FastAPI application: routes, request logging and error translation.

Pipeline errors become JSON bodies:
- missing payload element -> 404 ``{"error": ...}``
- any other fetch/parse/processing failure -> 500 ``{"error": ..., "details": ...}``
"""
import time

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from matchfeed.api.routers import matches
from matchfeed.config.settings import settings
from matchfeed.extraction.extractor import ExtractionError, PayloadMissingError
from matchfeed.scrapers.base_scraper import ScraperError
from matchfeed.services.match_service import ProcessingError

PAYLOAD_MISSING_MESSAGE = "Matches data script not found on the page."
PROCESSING_FAILED_MESSAGE = "Failed to fetch or process data from all sources."

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Paginated live match feed scraped from mirror sites",
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next) -> Response:
    start_time = time.perf_counter()
    response = await call_next(request)
    duration_ms = int((time.perf_counter() - start_time) * 1000)
    response.headers["X-Process-Time-Ms"] = str(duration_ms)
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} in {duration_ms}ms"
    )
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


# ============ Error translation ============

@app.exception_handler(PayloadMissingError)
async def payload_missing_handler(request: Request, exc: PayloadMissingError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": PAYLOAD_MISSING_MESSAGE})


async def processing_failed_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Error processing request {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": PROCESSING_FAILED_MESSAGE, "details": str(exc)},
    )


for error_type in (ScraperError, ExtractionError, ProcessingError):
    app.add_exception_handler(error_type, processing_failed_handler)


# ============ Routes ============

app.include_router(matches.router)


@app.get("/health")
async def health_check():
    """Liveness only; upstream sources are not contacted."""
    return {
        "status": "ok",
        "version": settings.app_version,
        "service": settings.app_name,
    }
