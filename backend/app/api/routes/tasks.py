"""Tasks — to-dos with a duration, optionally already scheduled."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import require_api_key
from app.infrastructure.database import get_db
from app.schemas.tasks import TaskCreate, TaskListResponse, TaskOut, TaskResponse
from app.services.records import RecordStore

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=TaskListResponse)
async def list_tasks(db: AsyncSession = Depends(get_db)):
    tasks = await RecordStore(db).list_tasks()
    return TaskListResponse(tasks=[TaskOut.model_validate(t) for t in tasks])


@router.post(
    "", response_model=TaskResponse, dependencies=[Depends(require_api_key)],
)
async def create_task(body: TaskCreate, db: AsyncSession = Depends(get_db)):
    task = await RecordStore(db).create_task(body)
    return TaskResponse(task=TaskOut.model_validate(task))
