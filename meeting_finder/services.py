# services.py
from __future__ import annotations
import logging
from typing import Dict, Iterable, List, AbstractSet
from meeting_finder.models import Event, TimeRange, ORDER_BY_START

logger = logging.getLogger(__name__)


def collect_busy(events: Iterable[Event], attendees: AbstractSet[str]) -> List[TimeRange]:
    """Time ranges of the events at least one of ``attendees`` is at.

    Each qualifying event contributes its range once; ranges from distinct
    events are kept even when identical. Order follows ``events``.
    """
    if not attendees:
        return []
    busy: List[TimeRange] = []
    for event in events:
        if any(a in attendees for a in event.attendees):
            busy.append(event.when)
    return busy


class CalendarService:
    """In-memory store of the day's events."""

    def __init__(self, events: Iterable[Event] = ()):
        self._events: Dict[str, Event] = {}
        for e in events:
            self._events[e.name] = e

    def events(self) -> List[Event]:
        return list(self._events.values())

    def create_event(self, name: str, when: TimeRange, attendees: Iterable[str] = ()) -> Event:
        event = Event(name=name, when=when, attendees=frozenset(attendees))
        if name in self._events:
            logger.info("replacing event %r", name)
            del self._events[name]
        self._events[name] = event
        return event

    def delete_event(self, name: str) -> None:
        if name not in self._events:
            raise KeyError(name)
        del self._events[name]

    def clear(self) -> None:
        self._events.clear()

    def freebusy(self, attendees: Iterable[str]) -> Dict[str, List[TimeRange]]:
        out: Dict[str, List[TimeRange]] = {}
        events = self.events()
        for a in attendees:
            out[a] = sorted(collect_busy(events, {a}), key=ORDER_BY_START)
        return out
