# server.py
import logging
from typing import List
from fastapi import FastAPI
from meeting_finder.config import Settings, configure_logging
from meeting_finder.models import (
    Event, EventIn, CommandResult,
    FreeBusyIn, FreeBusyOut, FindMeetingIn, FindMeetingOut,
)
from meeting_finder.query import FindMeetingQuery
from meeting_finder.services import CalendarService

logger = logging.getLogger(__name__)

app = FastAPI(title="Meeting Finder")
cal = CalendarService()
finder = FindMeetingQuery()

@app.post("/events", response_model=Event)
async def create_event(args: EventIn):
    ev = args.to_event()
    logger.info("create_event %s %s attendees=%d", ev.name, ev.when, len(ev.attendees))
    return cal.create_event(ev.name, ev.when, ev.attendees)

@app.get("/events", response_model=List[Event])
async def list_events():
    return cal.events()

@app.delete("/events/{name}", response_model=CommandResult)
async def delete_event(name: str):
    try:
        cal.delete_event(name)
    except KeyError:
        return CommandResult(ok=False, error="not_found")
    return CommandResult(ok=True, correlation_id=name)

@app.post("/intents/calendar.freebusy", response_model=FreeBusyOut)
async def calendar_freebusy(args: FreeBusyIn):
    return FreeBusyOut(busy=cal.freebusy(args.attendees))

@app.post("/intents/meeting.find", response_model=FindMeetingOut)
async def meeting_find(args: FindMeetingIn):
    events = cal.events() if args.events is None else args.events
    windows = finder.query(events, args.request)
    logger.info("meeting.find duration=%d events=%d -> %d window(s)",
                args.request.duration, len(events), len(windows))
    if not windows:
        return FindMeetingOut(ok=False, error="no_window")
    return FindMeetingOut(ok=True, windows=windows)


def main():
    import uvicorn
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())

if __name__ == "__main__":
    main()
