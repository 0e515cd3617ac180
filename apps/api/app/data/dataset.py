"""Static raw record dataset loaded once per process."""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)

RawRecord = Mapping[str, Any]


def load_records(path: str | Path) -> tuple[RawRecord, ...]:
    """Read the raw listing records from a JSON file.

    A missing or unreadable file, or a payload that is not a JSON array, yields an
    empty dataset so every view can still answer. Entries that are not JSON objects
    are skipped.
    """

    source = Path(path)
    try:
        payload = json.loads(source.read_text(encoding="utf-8"), parse_constant=_reject_constant)
    except FileNotFoundError:
        logger.warning("Dataset file %s not found; serving an empty dataset", source)
        return ()
    except (OSError, ValueError) as exc:
        logger.warning("Dataset file %s could not be read: %s", source, exc)
        return ()

    if not isinstance(payload, list):
        logger.warning(
            "Dataset file %s holds a %s, expected a list; serving an empty dataset",
            source,
            type(payload).__name__,
        )
        return ()

    records = tuple(MappingProxyType(dict(item)) for item in payload if isinstance(item, dict))
    skipped = len(payload) - len(records)
    if skipped:
        logger.warning("Skipped %d non-object entries in %s", skipped, source)

    return records


class RecordStore:
    """Holds the dataset for the lifetime of the process."""

    def __init__(self) -> None:
        self._records: tuple[RawRecord, ...] = ()
        self._source: Path | None = None

    @property
    def records(self) -> tuple[RawRecord, ...]:
        return self._records

    @property
    def loaded(self) -> bool:
        return self._source is not None

    def load(self, path: str | Path) -> tuple[RawRecord, ...]:
        if self._source is not None:
            logger.debug("Dataset already loaded from %s; ignoring %s", self._source, path)
            return self._records

        self._source = Path(path)
        self._records = load_records(self._source)
        logger.info("Loaded %d records from %s", len(self._records), self._source)
        return self._records


record_store = RecordStore()


def get_records() -> tuple[RawRecord, ...]:
    """FastAPI dependency exposing the loaded dataset."""

    return record_store.records


def _reject_constant(_name: str) -> None:
    # NaN/Infinity are not valid JSON on the way back out; read them as absent.
    return None
