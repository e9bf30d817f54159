"""Exceptions raised by the record services."""
from __future__ import annotations


class ServiceError(Exception):
    """Base error carrying the HTTP status it should be reported with."""

    status: int = 500

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class RecordNotFoundError(ServiceError):
    """Raised when a workout id has no entry in the record store."""

    status = 404

    def __init__(self, workout_id: str) -> None:
        super().__init__(f"Can't find workout with the id '{workout_id}'")
        self.workout_id = workout_id


class RecordStoreError(ServiceError):
    """Raised when the backing JSON document is missing or malformed."""


def error_status(exc: BaseException) -> int:
    """Status for ``exc``; anything without a ``status`` is an internal error."""

    status = getattr(exc, "status", None)
    return status if isinstance(status, int) else 500


def error_message(exc: BaseException) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or exc.__class__.__name__
