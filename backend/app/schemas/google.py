"""Google Schemas — Google Calendar and quick-add requests/responses.

Invariants:
    - QuickAddRequest.text may be blank here; the parser rejects it (EMPTY_INPUT)
    - ParsedSchedule.start/end are zone-naive YYYY-MM-DDTHH:MM:SS strings
    - googleEvent payloads are passed through from Google unchanged

Design Decisions:
    - defaultMinutes optional: falls back to settings.quick_add_default_minutes
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.events import EventCreate, EventOut


class GoogleStatus(BaseModel):
    configured: bool
    connected: bool
    scopes: str
    calendar_id: str = Field(alias="calendarId")
    timezone: str

    model_config = ConfigDict(populate_by_name=True)


class GoogleStatusResponse(BaseModel):
    ok: bool = True
    google: GoogleStatus


class AuthUrlResponse(BaseModel):
    ok: bool = True
    url: str


class GoogleEventCreate(EventCreate):
    """Same shape as a local event; color is ignored by Google."""


class GoogleEventResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    google_event: dict[str, Any] = Field(alias="googleEvent")
    mirrored_event: EventOut = Field(alias="mirroredEvent")


class GoogleEventListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    events: list[dict[str, Any]]
    calendar_id: str = Field(alias="calendarId")


class DeleteResponse(BaseModel):
    ok: bool = True


class QuickAddRequest(BaseModel):
    """Free text plus optional defaults, e.g. {"text": "coiffeur morgen 13:00 60min"}."""
    model_config = ConfigDict(populate_by_name=True)

    text: str = Field("", max_length=1000)
    default_minutes: int | None = Field(None, alias="defaultMinutes")
    location: str = ""
    notes: str = ""


class ParsedSchedule(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    start: str
    end: str
    minutes: int


class QuickAddResponse(GoogleEventResponse):
    parsed: ParsedSchedule
