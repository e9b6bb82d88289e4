"""Record Store — events and tasks persistence, including Google mirrors.

Invariants:
    - Local events get evt_<hex> ids, tasks tsk_<hex>
    - A Google event is mirrored under gcal_<google id>; mirroring the same
      Google event again overwrites the row instead of duplicating it
    - Every write commits before returning

Design Decisions:
    - Class with injected AsyncSession, one instance per request
    - session.merge for mirrors: retried quick-adds stay idempotent
"""

import logging
import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import (
    LOCAL_EVENT_PREFIX, MIRRORED_EVENT_PREFIX, TASK_PREFIX, EventId, GoogleEventId,
    TaskId,
)
from app.models.calendar_event import CalendarEvent
from app.models.task import Task
from app.schemas.events import EventCreate
from app.schemas.tasks import TaskCreate

logger = logging.getLogger(__name__)


def new_record_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"


def mirrored_event_id(google_event_id: GoogleEventId) -> EventId:
    return EventId(f"{MIRRORED_EVENT_PREFIX}_{google_event_id}")


class RecordStore:
    """CRUD over the events and tasks tables."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Events ──────────────────────────────────────────────────

    async def list_events(self) -> list[CalendarEvent]:
        result = await self.db.execute(
            select(CalendarEvent).order_by(CalendarEvent.created_at),
        )
        return list(result.scalars().all())

    async def create_event(self, body: EventCreate) -> CalendarEvent:
        event = CalendarEvent(
            id=EventId(new_record_id(LOCAL_EVENT_PREFIX)),
            title=body.title,
            start=body.start,
            end=body.end,
            location=body.location or "",
            notes=body.notes or "",
            color=body.color or "",
        )
        self.db.add(event)
        await self.db.commit()
        await self.db.refresh(event)
        logger.info("Local event created", extra={"event_id": event.id})
        return event

    async def mirror_google_event(
        self,
        google_event: dict,
        title: str,
        start: str,
        end: str,
        location: str = "",
        notes: str = "",
    ) -> CalendarEvent:
        """Copy a freshly created Google event into the local store."""
        google_id = GoogleEventId(
            str(google_event.get("id") or new_record_id(MIRRORED_EVENT_PREFIX)),
        )
        event = await self.db.merge(CalendarEvent(
            id=mirrored_event_id(google_id),
            title=str(title),
            start=str(start),
            end=str(end),
            location=str(location or ""),
            notes=str(notes or ""),
            color="",
            google_event_id=google_id,
        ))
        await self.db.commit()
        logger.info(
            "Google event mirrored",
            extra={"event_id": event.id, "google_event_id": google_id},
        )
        return event

    async def drop_mirrored_event(self, google_event_id: GoogleEventId) -> int:
        """Remove the local mirror of a deleted Google event; returns rows removed."""
        result = await self.db.execute(
            delete(CalendarEvent).where(
                CalendarEvent.google_event_id == google_event_id,
            ),
        )
        await self.db.commit()
        return result.rowcount or 0

    # ─── Tasks ───────────────────────────────────────────────────

    async def list_tasks(self) -> list[Task]:
        result = await self.db.execute(select(Task).order_by(Task.created_at))
        return list(result.scalars().all())

    async def create_task(self, body: TaskCreate) -> Task:
        task = Task(
            id=TaskId(new_record_id(TASK_PREFIX)),
            title=body.title,
            duration_minutes=body.duration_minutes,
            deadline=body.deadline or None,
            importance=body.importance,
            urgency=body.urgency,
            status=body.status,
            scheduled_start=body.scheduled_start or None,
            scheduled_end=body.scheduled_end or None,
        )
        self.db.add(task)
        await self.db.commit()
        await self.db.refresh(task)
        logger.info(f"Task created: {task.id}")
        return task
