# client.py
from typing import Iterable, List, Optional
import httpx
from meeting_finder.config import Settings
from meeting_finder.models import Event, FindMeetingOut, FreeBusyOut, MeetingRequest


def default_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=Settings.from_env().url)


async def _post(path: str, payload: dict, http: Optional[httpx.AsyncClient]) -> dict:
    if http is not None:
        r = await http.post(path, json=payload, timeout=15)
        r.raise_for_status()
        return r.json()
    async with default_client() as own:
        r = await own.post(path, json=payload, timeout=15)
        r.raise_for_status()
        return r.json()


async def add_event(name: str, start: str, end: str, attendees: Iterable[str] = (),
                    http: Optional[httpx.AsyncClient] = None) -> Event:
    payload = {"name": name, "start": start, "end": end, "attendees": list(attendees)}
    return Event.model_validate(await _post("/events", payload, http))


async def calendar_freebusy(attendees: List[str], http: Optional[httpx.AsyncClient] = None) -> FreeBusyOut:
    payload = {"attendees": attendees}
    return FreeBusyOut.model_validate(await _post("/intents/calendar.freebusy", payload, http))


async def find_meeting(request: MeetingRequest, events: Optional[List[Event]] = None,
                       http: Optional[httpx.AsyncClient] = None) -> FindMeetingOut:
    payload = {"request": request.model_dump(mode="json")}
    if events is not None:
        payload["events"] = [e.model_dump(mode="json") for e in events]
    return FindMeetingOut.model_validate(await _post("/intents/meeting.find", payload, http))
