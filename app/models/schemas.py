"""Pydantic models describing API payloads."""
from typing import Any, Literal

from pydantic import BaseModel

from app.services.errors import error_message


class RecordsResponse(BaseModel):
    """Envelope returned when a workout's records are found."""

    status: Literal["OK"] = "OK"
    data: list[Any] = []


class ErrorDetail(BaseModel):
    error: str


class FailureResponse(BaseModel):
    """Envelope returned for any failed request."""

    status: Literal["FAILED"] = "FAILED"
    data: ErrorDetail

    @classmethod
    def from_exception(cls, exc: BaseException) -> "FailureResponse":
        return cls(data=ErrorDetail(error=error_message(exc)))
