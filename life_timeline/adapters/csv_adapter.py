"""CSV adapter for life events."""

from __future__ import annotations

import csv
import logging
from collections import Counter

from life_timeline.errors import RecordFormatError
from life_timeline.records import from_record, to_record, warn_duplicate_ids
from life_timeline.schema import FIELDS, LifeEvent

logger = logging.getLogger(__name__)


def parse(file_path: str) -> list[LifeEvent]:
    """Parse CSV file into a list of life events."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        repeated = sorted(name for name, count in Counter(reader.fieldnames).items() if count > 1)
        if repeated:
            raise RecordFormatError(f"Row 1: duplicate header columns {repeated}")

        events: list[LifeEvent] = []
        for row_number, row in enumerate(reader, start=2):
            events.append(from_record(row, f"Row {row_number}"))

    warn_duplicate_ids(events, file_path)
    logger.debug("Parsed %d events from %s", len(events), file_path)
    return events


def dump(events: list[LifeEvent], file_path: str) -> None:
    """Write events to a CSV file with a header row."""

    with open(file_path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(FIELDS))
        writer.writeheader()
        for event in events:
            writer.writerow(to_record(event))
    logger.debug("Wrote %d events to %s", len(events), file_path)
