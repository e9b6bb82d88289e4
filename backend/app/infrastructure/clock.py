"""Wall clock in the configured zone — the only place quick add reads "now"."""

from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import Depends

from app.config import Settings, get_settings
from app.core.quick_schedule import ReferenceClock


def local_now(tz_name: str) -> ReferenceClock:
    """Current wall-clock time in tz_name, zone stripped, to the minute."""
    moment = datetime.now(ZoneInfo(tz_name)).replace(
        tzinfo=None, second=0, microsecond=0,
    )
    return ReferenceClock(moment=moment)


def get_reference_clock(
    settings: Settings = Depends(get_settings),
) -> ReferenceClock:
    """FastAPI dependency; overridden in tests to pin "now"."""
    return local_now(settings.google_timezone)
