"""ORM Models — SQLAlchemy declarative models for the flat record store.

Invariants:
    - All models inherit from Base (db/base.py)
    - Events and tasks are independent tables (no relationships)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from app.models.calendar_event import CalendarEvent  # noqa: F401
from app.models.task import Task  # noqa: F401
