from dataclasses import FrozenInstanceError

import pytest

from life_timeline.errors import InvalidTrackError
from life_timeline.schema import FIELDS, TRACKS, LifeEvent, Track, is_track


def test_tracks_are_the_three_labels():
    assert TRACKS == ("career", "family", "travel")
    for label in ("career", "family", "travel"):
        assert is_track(label)
        assert Track(label).value == label


@pytest.mark.parametrize("label", ["hobby", "", "Career", " travel", None, 3])
def test_other_values_are_not_tracks(label):
    assert not is_track(label)


def test_construct_with_plain_string_track():
    event = LifeEvent("evt-1", "travel", "2023-06-15", "Trip to Lisbon", "Flew out on a sunny morning.")
    assert event.track is Track.TRAVEL
    assert event.track == "travel"


@pytest.mark.parametrize("label", ["hobby", "", "Career"])
def test_construct_rejects_unknown_track(label):
    with pytest.raises(InvalidTrackError):
        LifeEvent("evt-1", label, "2023-06-15", "t", "x")


def test_invalid_track_is_a_value_error():
    with pytest.raises(ValueError):
        LifeEvent("evt-1", "hobby", "2023-06-15", "t", "x")


def test_all_fields_required():
    assert FIELDS == ("id", "track", "date", "title", "text")
    with pytest.raises(TypeError):
        LifeEvent("evt-1", Track.CAREER, "2023-06-15", "Title")


def test_date_is_not_validated():
    event = LifeEvent("evt-1", Track.FAMILY, "2023-13-45", "t", "x")
    assert event.date == "2023-13-45"


def test_event_is_immutable():
    event = LifeEvent("evt-1", Track.CAREER, "2020-01-01", "t", "x")
    with pytest.raises(FrozenInstanceError):
        event.title = "changed"
