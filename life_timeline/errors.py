"""Error kinds raised while building or ingesting life events."""

from __future__ import annotations


class LifeEventError(ValueError):
    """Base class for malformed life event data."""


class InvalidTrackError(LifeEventError):
    """Track label outside the closed career/family/travel set."""


class MissingFieldError(LifeEventError):
    """One or more of the five fields is absent or None."""

    def __init__(self, message: str, fields: list[str]):
        super().__init__(message)
        self.fields = fields


class RecordFormatError(LifeEventError):
    """Record is not a mapping of the five string fields."""
