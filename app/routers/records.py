"""API endpoints exposing stored workout records."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.datastore import get_record_service
from app.models.schemas import FailureResponse, RecordsResponse
from app.services.errors import ServiceError, error_status
from app.services.record_service import RecordService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/workouts", tags=["records"])


def _failure(exc: Exception) -> JSONResponse:
    payload = FailureResponse.from_exception(exc)
    return JSONResponse(status_code=error_status(exc), content=payload.model_dump())


@router.get(
    "/{workout_id}/records",
    response_model=RecordsResponse,
    responses={404: {"model": FailureResponse}, 500: {"model": FailureResponse}},
)
async def get_record_for_workout(
    workout_id: str,
    service: RecordService = Depends(get_record_service),
):
    """
    Get the stored records for a workout.

    Args:
        workout_id: Workout identifier from the path
        service: Record lookup service

    Returns:
        RecordsResponse with the workout's entries, or a FAILED envelope
        carrying the error status (404 when the workout is unknown)
    """
    try:
        records = service.get_record_for_workout(workout_id)
    except ServiceError as e:
        if error_status(e) >= 500:
            logger.exception("Record lookup failed for workout %s", workout_id)
        return _failure(e)
    except Exception as e:
        logger.exception("Unexpected error looking up records for workout %s", workout_id)
        return _failure(e)

    logger.info("Returning %d record(s) for workout %s", len(records), workout_id)
    return RecordsResponse(data=records)
