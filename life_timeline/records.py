"""Plain string-keyed record form of life events."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping

from life_timeline.errors import InvalidTrackError, MissingFieldError, RecordFormatError
from life_timeline.schema import FIELDS, TRACKS, LifeEvent, is_track

logger = logging.getLogger(__name__)


def to_record(event: LifeEvent) -> dict[str, str]:
    """Return the five fields of an event as a plain dict of strings."""

    return {
        "id": event.id,
        "track": event.track.value,
        "date": event.date,
        "title": event.title,
        "text": event.text,
    }


def from_record(item, label: str = "Record") -> LifeEvent:
    """Build a LifeEvent from a mapping, raising on any shape violation.

    Values are used verbatim. The date is not parsed and ids are not checked
    for uniqueness.
    """

    if not isinstance(item, Mapping):
        raise RecordFormatError(f"{label}: expected an object, got {type(item).__name__}")

    missing = [field for field in FIELDS if item.get(field) is None]
    if missing:
        raise MissingFieldError(f"{label}: missing required fields {missing}", missing)

    if None in item:
        raise RecordFormatError(f"{label}: more values than header columns")

    unexpected = sorted(str(key) for key in item if key not in FIELDS)
    if unexpected:
        raise RecordFormatError(f"{label}: unexpected fields {unexpected}")

    for field in FIELDS:
        if not isinstance(item[field], str):
            raise RecordFormatError(f"{label}: field '{field}' must be a string")

    track = item["track"]
    if not is_track(track):
        raise InvalidTrackError(f"{label}: invalid track '{track}', expected one of {list(TRACKS)}")

    return LifeEvent(
        id=item["id"],
        track=track,
        date=item["date"],
        title=item["title"],
        text=item["text"],
    )


def conforms(item) -> bool:
    try:
        from_record(item)
    except ValueError:
        return False
    return True


def warn_duplicate_ids(events: list[LifeEvent], source: str) -> None:
    """Log a warning for every id that appears more than once in source."""

    for event_id, count in Counter(event.id for event in events).items():
        if count > 1:
            logger.warning("Duplicate event id %r appears %d times in %s", event_id, count, source)
