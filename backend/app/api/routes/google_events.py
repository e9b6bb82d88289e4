"""Google Events — create/list/delete Google events and quick add.

Invariants:
    - Every write is guarded by require_api_key
    - Every created Google event is mirrored into the local store
    - Deleting a Google event also drops its local mirror
    - quick-add parses before any IO; blank text => 400 EMPTY_INPUT

Design Decisions:
    - Gateway, clock and DB session injected via Depends: tests override all three
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import require_api_key
from app.config import Settings, get_settings
from app.core.domain_types import GoogleEventId
from app.core.quick_schedule import ReferenceClock
from app.infrastructure.clock import get_reference_clock
from app.infrastructure.database import get_db
from app.infrastructure.google_calendar import (
    GoogleCalendarGateway, get_google_calendar,
)
from app.schemas.events import EventOut
from app.schemas.google import (
    DeleteResponse, GoogleEventCreate, GoogleEventListResponse,
    GoogleEventResponse, ParsedSchedule, QuickAddRequest, QuickAddResponse,
)
from app.services.quick_add import quick_add
from app.services.records import RecordStore

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/google", tags=["google"],
    dependencies=[Depends(require_api_key)],
)


@router.post("/events", response_model=GoogleEventResponse)
async def create_google_event(
    body: GoogleEventCreate,
    gateway: GoogleCalendarGateway = Depends(get_google_calendar),
    db: AsyncSession = Depends(get_db),
):
    """Create an event in Google Calendar and mirror it locally."""
    google_event = await run_in_threadpool(
        gateway.create_event,
        title=body.title, start=body.start, end=body.end,
        location=body.location, notes=body.notes,
    )
    mirrored = await RecordStore(db).mirror_google_event(
        google_event, title=body.title, start=body.start, end=body.end,
        location=body.location, notes=body.notes,
    )
    return GoogleEventResponse(
        google_event=google_event,
        mirrored_event=EventOut.model_validate(mirrored),
    )


@router.get("/events", response_model=GoogleEventListResponse)
async def list_google_events(
    time_min: str = Query(..., alias="timeMin"),
    time_max: str = Query(..., alias="timeMax"),
    gateway: GoogleCalendarGateway = Depends(get_google_calendar),
    settings: Settings = Depends(get_settings),
):
    """Expanded single events between timeMin and timeMax (RFC3339)."""
    events = await run_in_threadpool(gateway.list_events, time_min, time_max)
    return GoogleEventListResponse(
        events=events, calendar_id=settings.google_calendar_id,
    )


@router.delete("/events/{event_id}", response_model=DeleteResponse)
async def delete_google_event(
    event_id: str,
    gateway: GoogleCalendarGateway = Depends(get_google_calendar),
    db: AsyncSession = Depends(get_db),
):
    """Delete from Google Calendar, then drop the local mirror if any."""
    await run_in_threadpool(gateway.delete_event, event_id)
    removed = await RecordStore(db).drop_mirrored_event(GoogleEventId(event_id))
    logger.info(
        f"Dropped {removed} mirrored event(s)", extra={"google_event_id": event_id},
    )
    return DeleteResponse()


@router.post("/quick-add", response_model=QuickAddResponse)
async def quick_add_event(
    body: QuickAddRequest,
    now: ReferenceClock = Depends(get_reference_clock),
    gateway: GoogleCalendarGateway = Depends(get_google_calendar),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Free text like "coiffeur morgen 13:00 60min" -> Google event + mirror."""
    outcome = await quick_add(body, now, gateway, RecordStore(db), settings)
    return QuickAddResponse(
        parsed=ParsedSchedule(
            title=outcome.schedule.title,
            start=outcome.start,
            end=outcome.end,
            minutes=outcome.schedule.duration_minutes,
        ),
        google_event=outcome.google_event,
        mirrored_event=EventOut.model_validate(outcome.mirrored_event),
    )
