import pytest

from meeting_finder.models import Event, TimeRange
from meeting_finder.services import CalendarService, collect_busy


def ev(name, start, end, *attendees):
    return Event(name=name, when=TimeRange.from_start_end(start, end), attendees=frozenset(attendees))


EVENTS = [
    ev("standup", 540, 555, "A", "B", "C"),
    ev("1:1", 600, 630, "B"),
    ev("lunch", 720, 780),
    ev("review", 900, 960, "C"),
]


def test_collect_busy_includes_event_once_per_match():
    busy = collect_busy(EVENTS, {"A", "B"})
    assert busy == [TimeRange.from_start_end(540, 555), TimeRange.from_start_end(600, 630)]


def test_collect_busy_empty_attendees():
    assert collect_busy(EVENTS, frozenset()) == []


def test_collect_busy_ignores_events_without_attendees():
    assert TimeRange.from_start_end(720, 780) not in collect_busy(EVENTS, {"A", "B", "C"})


def test_collect_busy_keeps_duplicate_ranges_from_distinct_events():
    events = [ev("x", 60, 120, "A"), ev("y", 60, 120, "A")]
    assert collect_busy(events, {"A"}) == [TimeRange.from_start_end(60, 120)] * 2


def test_collect_busy_attendee_match_is_exact():
    assert collect_busy(EVENTS, {"a", " B"}) == []


class TestCalendarService:
    def test_create_and_list(self):
        cal = CalendarService()
        cal.create_event("standup", TimeRange.from_start_end(540, 555), ["A"])
        cal.create_event("review", TimeRange.from_start_end(900, 960), ["C"])
        assert [e.name for e in cal.events()] == ["standup", "review"]

    def test_create_replaces_same_name(self):
        cal = CalendarService(EVENTS)
        cal.create_event("1:1", TimeRange.from_start_end(660, 690), ["B"])
        assert len(cal.events()) == len(EVENTS)
        assert cal.events()[-1].when == TimeRange.from_start_end(660, 690)

    def test_delete(self):
        cal = CalendarService(EVENTS)
        cal.delete_event("lunch")
        assert "lunch" not in [e.name for e in cal.events()]
        with pytest.raises(KeyError):
            cal.delete_event("lunch")

    def test_clear(self):
        cal = CalendarService(EVENTS)
        cal.clear()
        assert cal.events() == []

    def test_freebusy_per_attendee_sorted(self):
        cal = CalendarService(reversed(EVENTS))
        busy = cal.freebusy(["C", "B", "Z"])
        assert busy["C"] == [TimeRange.from_start_end(540, 555), TimeRange.from_start_end(900, 960)]
        assert busy["B"] == [TimeRange.from_start_end(540, 555), TimeRange.from_start_end(600, 630)]
        assert busy["Z"] == []
