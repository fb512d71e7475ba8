# query.py
from __future__ import annotations
import logging
from typing import Collection, List
from meeting_finder.models import Event, MeetingRequest, TimeRange, WHOLE_DAY
from meeting_finder.services import collect_busy
from meeting_finder.intervals import find_free

logger = logging.getLogger(__name__)


class FindMeetingQuery:
    """
    Finds every window of the day a requested meeting fits in.

    Windows that suit mandatory and optional attendees together win. When
    there are none, the answer falls back to the mandatory attendees alone.
    A request with only optional attendees has nothing to fall back to.
    """

    def query(self, events: Collection[Event], request: MeetingRequest) -> List[TimeRange]:
        duration = request.duration

        if duration > WHOLE_DAY.duration:
            return []
        if not events:
            return [WHOLE_DAY]

        mandatory_busy = collect_busy(events, request.attendees)

        if request.optional_attendees:
            everyone = request.attendees | request.optional_attendees
            combined = find_free(collect_busy(events, everyone), duration)
            if combined:
                logger.debug("query: %d window(s) including optional attendees", len(combined))
                return combined
            if not request.attendees:
                logger.debug("query: optional attendees share no window")
                return []

        windows = find_free(mandatory_busy, duration)
        logger.debug("query: %d window(s) for mandatory attendees", len(windows))
        return windows


_default = FindMeetingQuery()


def find_meeting_times(events: Collection[Event], request: MeetingRequest) -> List[TimeRange]:
    return _default.query(events, request)
