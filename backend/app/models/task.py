"""Task ORM — to-dos with a duration that may later be scheduled.

Invariants:
    - id is tsk_<hex>
    - duration_minutes is required and positive
    - scheduled_start/scheduled_end are local timestamp strings or NULL
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Task(Base):
    """Unscheduled or scheduled to-do item."""
    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    deadline: Mapped[str | None] = mapped_column(String(40), nullable=True)
    importance: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    urgency: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="open",
    )
    scheduled_start: Mapped[str | None] = mapped_column(String(40), nullable=True)
    scheduled_end: Mapped[str | None] = mapped_column(String(40), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
