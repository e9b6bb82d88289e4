"""Task Schemas — task store requests and responses.

Invariants:
    - TaskCreate.title non-empty, durationMinutes >= 1
    - status defaults to "open"
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.domain_types import TaskStatus


class TaskCreate(BaseModel):
    """Task creation — title/durationMinutes required."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1, max_length=500)
    duration_minutes: int = Field(ge=1, alias="durationMinutes")
    deadline: str | None = None
    importance: bool = False
    urgency: bool = False
    status: str = Field(TaskStatus.OPEN.value, max_length=20)
    scheduled_start: str | None = Field(None, alias="scheduledStart")
    scheduled_end: str | None = Field(None, alias="scheduledEnd")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v

    @field_validator("status")
    @classmethod
    def default_blank_status(cls, v: str) -> str:
        return v.strip() or TaskStatus.OPEN.value


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    title: str
    duration_minutes: int = Field(alias="durationMinutes")
    deadline: str | None = None
    importance: bool
    urgency: bool
    status: str
    scheduled_start: str | None = Field(None, alias="scheduledStart")
    scheduled_end: str | None = Field(None, alias="scheduledEnd")
    created_at: datetime = Field(alias="createdAt")


class TaskResponse(BaseModel):
    ok: bool = True
    task: TaskOut


class TaskListResponse(BaseModel):
    ok: bool = True
    tasks: list[TaskOut]
