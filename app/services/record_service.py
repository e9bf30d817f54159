"""Lookup of workout records by workout id."""
from __future__ import annotations

import copy
import logging
from typing import Any

from app.services.errors import RecordNotFoundError
from app.services.record_store import RecordStore


logger = logging.getLogger(__name__)


class RecordService:
    """Resolve workout ids to their record entries."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def get_record_for_workout(self, workout_id: str) -> list[Any]:
        """
        Return the record entries stored for a workout.

        Args:
            workout_id: Workout identifier

        Returns:
            A fresh copy of the stored entries, in stored order

        Raises:
            RecordNotFoundError: 404 if the workout id is not in the store
        """
        entries = self.store.get(workout_id)
        if entries is None:
            logger.warning("No records for workout %s", workout_id)
            raise RecordNotFoundError(workout_id)

        logger.debug("Found %d record(s) for workout %s", len(entries), workout_id)
        return copy.deepcopy(list(entries))
