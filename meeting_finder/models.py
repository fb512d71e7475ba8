from __future__ import annotations
from datetime import datetime
from operator import attrgetter
from typing import Literal, Optional, Dict, List, FrozenSet, Union
from dateutil.parser import parse as parse_dt
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

START_OF_DAY = 0
END_OF_DAY = 23 * 60 + 59
DAY_MINUTES = 24 * 60

# ---- Time ----
class TimeRange(BaseModel):
    """Half-open span of minutes within a single day: [start, end)."""
    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=START_OF_DAY, le=DAY_MINUTES)
    end: int = Field(ge=START_OF_DAY, le=DAY_MINUTES)

    @model_validator(mode="after")
    def _check_order(self) -> "TimeRange":
        if self.start > self.end:
            raise ValueError(f"start {self.start} is after end {self.end}")
        return self

    @classmethod
    def from_start_end(cls, start: int, end: int, inclusive: bool = False) -> "TimeRange":
        # inclusive is how the last window of the day reaches DAY_MINUTES
        return cls(start=start, end=end + 1 if inclusive else end)

    @classmethod
    def from_start_duration(cls, start: int, duration: int) -> "TimeRange":
        return cls(start=start, end=start + duration)

    @classmethod
    def from_clock(cls, start: str, end: str) -> "TimeRange":
        """Build a range from wall clock strings like "09:30" or "5pm".

        "24:00" is accepted as the end of the day.
        """
        return cls(start=clock_minutes(start), end=clock_minutes(end))

    @property
    def duration(self) -> int:
        return self.end - self.start

    def overlaps(self, other: TimeRange) -> bool:
        return self.contains(other.start) or other.contains(self.start)

    def contains(self, item: Union[int, TimeRange]) -> bool:
        if isinstance(item, TimeRange):
            if item.duration == 0:
                return self.contains(item.start)
            return self.start <= item.start and item.end <= self.end
        return self.start <= item < self.end

    def __str__(self) -> str:
        return f"Range: [{self.start}, {self.end})"


ORDER_BY_START = attrgetter("start", "end")
ORDER_BY_END = attrgetter("end", "start")

WHOLE_DAY = TimeRange.from_start_end(START_OF_DAY, END_OF_DAY, inclusive=True)


_NO_DATE = datetime(1900, 1, 1)


def clock_minutes(value: str) -> int:
    if value.strip() == "24:00":
        return DAY_MINUTES
    t = parse_dt(value, default=_NO_DATE)
    # a bare "10" parses as a day of the month, not a time
    if t.date() != _NO_DATE.date() or t.second or t.microsecond:
        raise ValueError(f"{value!r} is not a whole-minute clock time")
    return t.hour * 60 + t.minute


# ---- Calendar ----
class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    when: TimeRange
    attendees: FrozenSet[str] = frozenset()


class MeetingRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    duration: int = Field(ge=0)
    attendees: FrozenSet[str] = frozenset()
    optional_attendees: FrozenSet[str] = frozenset()


# ---- Common ----
class CommandResult(BaseModel):
    ok: bool
    correlation_id: Optional[str] = None
    error: Optional[Literal["not_found"]] = None


# ---- Intents ----
class EventIn(BaseModel):
    name: str
    start: int = Field(ge=START_OF_DAY, le=DAY_MINUTES)
    end: int = Field(ge=START_OF_DAY, le=DAY_MINUTES)
    attendees: List[str] = Field(default_factory=list)

    @field_validator("start", "end", mode="before")
    @classmethod
    def _parse_clock(cls, v):
        if isinstance(v, str):
            return clock_minutes(v)
        return v

    @model_validator(mode="after")
    def _check_order(self) -> "EventIn":
        if self.start > self.end:
            raise ValueError(f"event {self.name!r} ends before it starts")
        return self

    def to_event(self) -> Event:
        return Event(name=self.name, when=TimeRange(start=self.start, end=self.end), attendees=frozenset(self.attendees))


class FreeBusyIn(BaseModel):
    attendees: List[str]


class FreeBusyOut(BaseModel):
    busy: Dict[str, List[TimeRange]]


class FindMeetingIn(BaseModel):
    request: MeetingRequest
    events: Optional[List[Event]] = None


class FindMeetingOut(BaseModel):
    ok: bool
    windows: List[TimeRange] = Field(default_factory=list)
    error: Optional[Literal["no_window"]] = None
