"""Quick Add — free text to a Google Calendar event plus local mirror.

Invariants:
    - Parsing happens before any IO; EmptyInputError aborts with no side effects
    - Google receives zone-naive local timestamps; the gateway adds the zone
    - The mirrored record carries exactly the strings sent to Google

Design Decisions:
    - Functional core / imperative shell: parse_quick_text is pure, this module
      orchestrates the gateway and the store around it
    - Sync Google client runs in the threadpool to keep the event loop free
"""

import logging
from dataclasses import dataclass

from fastapi.concurrency import run_in_threadpool

from app.config import Settings
from app.core.local_time import format_local_datetime
from app.core.quick_schedule import ReferenceClock, ScheduleResult, parse_quick_text
from app.infrastructure.google_calendar import GoogleCalendarGateway
from app.models.calendar_event import CalendarEvent
from app.schemas.google import QuickAddRequest
from app.services.records import RecordStore

logger = logging.getLogger(__name__)


@dataclass
class QuickAddOutcome:
    schedule: ScheduleResult
    start: str
    end: str
    google_event: dict
    mirrored_event: CalendarEvent


async def quick_add(
    body: QuickAddRequest,
    now: ReferenceClock,
    gateway: GoogleCalendarGateway,
    store: RecordStore,
    settings: Settings,
) -> QuickAddOutcome:
    """Parse body.text, create the Google event, mirror it locally."""
    default_minutes = (
        body.default_minutes
        if body.default_minutes and body.default_minutes > 0
        else settings.quick_add_default_minutes
    )
    schedule = parse_quick_text(
        body.text, default_minutes, now,
        placeholder_title=settings.quick_add_placeholder_title,
    )
    start = format_local_datetime(schedule.start)
    end = format_local_datetime(schedule.end)
    logger.info(f"Quick add parsed: {schedule.title!r} {start} -> {end}")

    google_event = await run_in_threadpool(
        gateway.create_event,
        title=schedule.title,
        start=start,
        end=end,
        location=body.location or "",
        notes=body.notes or "",
    )
    mirrored = await store.mirror_google_event(
        google_event,
        title=schedule.title,
        start=start,
        end=end,
        location=body.location,
        notes=body.notes,
    )
    return QuickAddOutcome(
        schedule=schedule,
        start=start,
        end=end,
        google_event=google_event,
        mirrored_event=mirrored,
    )
