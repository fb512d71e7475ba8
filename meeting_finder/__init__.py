"""
Meeting Finder
Finds every window of a day where a meeting fits its attendees' calendars
"""

from .models import TimeRange, Event, MeetingRequest, WHOLE_DAY, START_OF_DAY, END_OF_DAY
from .services import collect_busy, CalendarService
from .intervals import find_free, merge_busy
from .query import FindMeetingQuery, find_meeting_times

__version__ = "1.0.0"
__all__ = [
    "TimeRange", "Event", "MeetingRequest", "WHOLE_DAY", "START_OF_DAY", "END_OF_DAY",
    "collect_busy", "CalendarService", "find_free", "merge_busy",
    "FindMeetingQuery", "find_meeting_times",
]
