"""Core data schema for life events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from life_timeline.errors import InvalidTrackError


class Track(str, Enum):
    """Life track an event belongs to."""

    CAREER = "career"
    FAMILY = "family"
    TRAVEL = "travel"


TRACKS = tuple(track.value for track in Track)
FIELDS = ("id", "track", "date", "title", "text")


def is_track(value) -> bool:
    """Return True when value is one of the three track labels."""

    return isinstance(value, str) and value in TRACKS


@dataclass(frozen=True)
class LifeEvent:
    """Dated note on one of the life tracks."""

    id: str
    track: Track
    date: str  # "YYYY-MM-DD", kept as given
    title: str
    text: str

    def __post_init__(self) -> None:
        if not is_track(self.track):
            raise InvalidTrackError(f"invalid track {self.track!r}, expected one of {list(TRACKS)}")
        object.__setattr__(self, "track", Track(self.track))
