"""JSON adapter for life events."""

from __future__ import annotations

import json
import logging

from life_timeline.errors import RecordFormatError
from life_timeline.records import from_record, to_record, warn_duplicate_ids
from life_timeline.schema import LifeEvent

logger = logging.getLogger(__name__)


def parse(file_path: str) -> list[LifeEvent]:
    """Parse JSON file into life events."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise RecordFormatError("JSON payload must be a list of objects")

    events = [from_record(item, f"Item {i}") for i, item in enumerate(payload, start=1)]
    warn_duplicate_ids(events, file_path)

    logger.debug("Parsed %d events from %s", len(events), file_path)
    return events


def dump(events: list[LifeEvent], file_path: str) -> None:
    """Write events to a JSON file as a list of records.

    Output is ASCII; non-ASCII characters and lone surrogates are escaped.
    """

    payload = [to_record(event) for event in events]
    with open(file_path, "w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)
        handle.write("\n")
    logger.debug("Wrote %d events to %s", len(payload), file_path)
