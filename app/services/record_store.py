"""In-memory, read-only store of workout records backed by a static JSON file.

The document is read once at startup. Its top level must be an object whose
keys are workout ids and whose values are arrays of record entries::

    {
        "4a3d9aaa-608c-49a7-a004-66305ad4ab50": [
            {"id": "ad75d475-ac57-44f4-a02a-8f6def58ff56", "record": "160 reps"}
        ],
        "e0d2b5c7-1a4c-4f35-9d0c-8f5f0a1f7b2e": []
    }

Entries are opaque: anything JSON can represent is accepted. Changes to the
file are not observed until the process restarts.
"""
from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

from app.services.errors import RecordStoreError


logger = logging.getLogger(__name__)

RecordEntry = Any


class RecordStore:
    """Immutable mapping of workout id -> ordered record entries."""

    def __init__(self, records: Mapping[str, Sequence[RecordEntry]]) -> None:
        self._records: dict[str, tuple[RecordEntry, ...]] = {}
        for workout_id, entries in records.items():
            if entries is None:
                raise RecordStoreError(f"Records for workout '{workout_id}' must not be null")
            self._records[str(workout_id)] = tuple(copy.deepcopy(list(entries)))

    def get(self, workout_id: str) -> tuple[RecordEntry, ...] | None:
        """Return the stored entries for ``workout_id`` or ``None`` when absent.

        The tuple itself cannot be mutated, but the entries inside it are the
        store's own objects; callers handing them out must copy them.
        """
        return self._records.get(workout_id)

    def workout_ids(self) -> list[str]:
        return list(self._records)

    def entry_count(self) -> int:
        return sum(len(entries) for entries in self._records.values())

    def __contains__(self, workout_id: object) -> bool:
        return workout_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"RecordStore(workouts={len(self)}, entries={self.entry_count()})"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name} is not allowed in record data")


def _parse(payload: Any, source: str) -> dict[str, list[RecordEntry]]:
    if not isinstance(payload, dict):
        raise RecordStoreError(
            f"Record data in {source} must be a JSON object keyed by workout id, "
            f"got {type(payload).__name__}"
        )

    parsed: dict[str, list[RecordEntry]] = {}
    for workout_id, entries in payload.items():
        if not isinstance(entries, list):
            raise RecordStoreError(
                f"Records for workout '{workout_id}' in {source} must be a JSON array, "
                f"got {type(entries).__name__ if entries is not None else 'null'}"
            )
        parsed[workout_id] = entries
    return parsed


def load(path: str | Path) -> RecordStore:
    """
    Read the record document at ``path`` and build a ``RecordStore``.

    Args:
        path: Location of the JSON document

    Returns:
        RecordStore holding every workout's entries

    Raises:
        RecordStoreError: file missing, unreadable, not UTF-8, not valid JSON
            (NaN and Infinity included) or not shaped as ``{workout_id: [entry, ...]}``
    """
    source = Path(path)
    try:
        with source.open("r", encoding="utf-8") as fh:
            payload = json.load(fh, parse_constant=_reject_constant)
    except FileNotFoundError as exc:
        raise RecordStoreError(f"Record data file not found: {source}") from exc
    except ValueError as exc:
        # JSONDecodeError, UnicodeDecodeError and rejected NaN/Infinity
        raise RecordStoreError(f"Record data file {source} is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise RecordStoreError(f"Unable to read record data file {source}: {exc}") from exc

    store = RecordStore(_parse(payload, str(source)))
    logger.info(
        "Loaded record store from %s | workouts=%d | entries=%d",
        source,
        len(store),
        store.entry_count(),
    )
    logger.debug("Workout ids in record store: %s", store.workout_ids())
    return store
