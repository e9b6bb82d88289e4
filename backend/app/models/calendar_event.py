"""CalendarEvent ORM — local events and mirrors of Google Calendar events.

Invariants:
    - id is evt_<hex> for local events, gcal_<google id> for mirrored ones
    - start/end are zone-naive local timestamp strings, stored as given
    - google_event_id set only for mirrored events

Design Decisions:
    - String timestamps over DateTime: the store keeps exactly what the client sent
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class CalendarEvent(Base):
    """A calendar entry shown by the UI."""
    __tablename__ = "events"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    start: Mapped[str] = mapped_column(String(40), nullable=False)
    end: Mapped[str] = mapped_column(String(40), nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False, default="")
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    color: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    google_event_id: Mapped[str | None] = mapped_column(
        String(128), nullable=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
