"""Event Schemas — local event store requests and responses.

Invariants:
    - EventCreate.title/start/end: non-empty after stripping
    - start/end are passed through verbatim (local timestamp strings)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EventCreate(BaseModel):
    """Local event creation — title/start/end required."""
    title: str = Field(min_length=1, max_length=500)
    start: str = Field(min_length=1, max_length=40)
    end: str = Field(min_length=1, max_length=40)
    location: str = ""
    notes: str = ""
    color: str = ""

    @field_validator("title", "start", "end")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class EventOut(BaseModel):
    """Stored event as returned to the UI."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    title: str
    start: str
    end: str
    location: str = ""
    notes: str = ""
    color: str = ""
    google_event_id: str | None = Field(None, alias="googleEventId")


class EventResponse(BaseModel):
    ok: bool = True
    event: EventOut


class EventListResponse(BaseModel):
    ok: bool = True
    events: list[EventOut]
