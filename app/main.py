"""FastAPI application entry point."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.datastore import get_record_store
from app.logging_config import configure_logging
from app.models.schemas import FailureResponse
from app.routers import records
from app.services.errors import ServiceError, error_message, error_status


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_dir)
    # A missing or malformed data file must stop the server from starting.
    store = get_record_store()
    logger.info("Record store ready | %r", store)
    yield


app = FastAPI(title="Workout Records API", lifespan=lifespan)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Render service errors raised outside a route body as FAILED envelopes."""
    logger.error("Request to %s failed: %s", request.url.path, error_message(exc))
    payload = FailureResponse.from_exception(exc)
    return JSONResponse(status_code=error_status(exc), content=payload.model_dump())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render anything else that escapes a request as a 500 FAILED envelope."""
    logger.error("Unhandled error serving %s", request.url.path, exc_info=exc)
    payload = FailureResponse.from_exception(exc)
    return JSONResponse(status_code=error_status(exc), content=payload.model_dump())


@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Simple health probe for liveness checks."""
    return {"status": "ok"}


# Include routers
app.include_router(records.router)
