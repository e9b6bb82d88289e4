"""Local timestamps — zone-naive serialization for the calendar provider."""

from datetime import datetime

from app.core.domain_types import LocalTimestamp


def format_local_datetime(moment: datetime) -> LocalTimestamp:
    """Render as YYYY-MM-DDTHH:MM:SS with no offset (the provider applies the zone)."""
    return LocalTimestamp(
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
