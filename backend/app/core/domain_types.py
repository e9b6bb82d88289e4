"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EventId / TaskId are plain strings with a fixed prefix
    - GoogleEventId is the id Google assigned, stored unchanged
    - LocalTimestamp is always zone-naive YYYY-MM-DDTHH:MM:SS
    - Day keywords encoded as an Enum ordered by match priority

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EventId = NewType("EventId", str)              # evt_<hex> | gcal_<google id>
TaskId = NewType("TaskId", str)                # tsk_<hex>
GoogleEventId = NewType("GoogleEventId", str)

LOCAL_EVENT_PREFIX = "evt"
MIRRORED_EVENT_PREFIX = "gcal"
TASK_PREFIX = "tsk"


# ─── Value Types ─────────────────────────────────────────────────

LocalTimestamp = NewType("LocalTimestamp", str)


# ─── Enums ───────────────────────────────────────────────────────

class DayKeyword(str, Enum):
    """Relative day words understood by quick-add, highest priority first."""
    DAY_AFTER_TOMORROW = "übermorgen"
    TOMORROW = "morgen"
    TODAY = "heute"

    @property
    def offset_days(self) -> int:
        return _DAY_OFFSETS[self]


_DAY_OFFSETS = {
    DayKeyword.DAY_AFTER_TOMORROW: 2,
    DayKeyword.TOMORROW: 1,
    DayKeyword.TODAY: 0,
}


class TaskStatus(str, Enum):
    """Default lifecycle state for a newly created task."""
    OPEN = "open"
