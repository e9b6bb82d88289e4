"""Local Events — the UI's own event list (includes Google mirrors)."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import require_api_key
from app.infrastructure.database import get_db
from app.schemas.events import EventCreate, EventListResponse, EventOut, EventResponse
from app.services.records import RecordStore

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("", response_model=EventListResponse)
async def list_events(db: AsyncSession = Depends(get_db)):
    events = await RecordStore(db).list_events()
    return EventListResponse(events=[EventOut.model_validate(e) for e in events])


@router.post(
    "", response_model=EventResponse, dependencies=[Depends(require_api_key)],
)
async def create_event(body: EventCreate, db: AsyncSession = Depends(get_db)):
    """Store a local-only event (not sent to Google)."""
    event = await RecordStore(db).create_event(body)
    return EventResponse(event=EventOut.model_validate(event))
