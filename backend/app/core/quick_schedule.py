"""Quick Schedule Parser — free-text phrase to a start/end/title proposal.

Invariants:
    - Pure: no IO, no logging, "now" arrives as a ReferenceClock
    - duration_minutes always within [5, 720]; end - start == duration
    - start is always a real calendar date (explicit dates roll over) and
      never later than 9999-12-30, so end always exists
    - Title never contains a duration, day or time token
    - EmptyInputError (blank text) is the only failure mode

Design Decisions:
    - One function per extraction pass, each with an explicit priority list:
        duration: minute token > hour token > caller default
        day:      übermorgen > morgen > heute > D.M[.YY[YY]] > reference day
        time:     HH:MM > HH.MM > bare hour > 09:00
    - Each dotted token belongs to exactly one category: D.M.Y is a date,
      A.BB is a time when it cannot be a day.month but fits hh.mm (16.30),
      everything else is a date (24.01, 31.02)
    - Matching runs case-insensitively on the original text, so match spans
      double as cut positions for the title
    - Every candidate of every category is cut from the title, not just winners
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from app.core.domain_types import DayKeyword
from app.core.errors import EmptyInputError

MIN_DURATION_MINUTES = 5
MAX_DURATION_MINUTES = 12 * 60
FALLBACK_DURATION_MINUTES = 60
DEFAULT_TIME_OF_DAY = time(9, 0)
PLACEHOLDER_TITLE = "Termin"
LAST_SCHEDULABLE_DAY = date(9999, 12, 30)

_MINUTES_TOKEN = re.compile(r"\b(\d{1,3})\s*min\b", re.IGNORECASE)
_HOURS_TOKEN = re.compile(r"\b(\d{1,2})\s*h\b", re.IGNORECASE)

_DAY_KEYWORDS: tuple[tuple[DayKeyword, re.Pattern], ...] = tuple(
    (keyword, re.compile(rf"\b{keyword.value}\b", re.IGNORECASE))
    for keyword in DayKeyword
)
_DOTTED_TOKEN = re.compile(r"\b(\d{1,2})\.(\d{1,2})(?:\.(\d{2,4}))?\b")

_COLON_TIME_TOKEN = re.compile(r"\b(\d{1,2}):(\d{2})\b")
_BARE_HOUR_TOKEN = re.compile(r"(?<!\S)(\d{1,2})(?!\S)")

Span = tuple[int, int]


@dataclass(frozen=True)
class ReferenceClock:
    """Caller-supplied "now" as a zone-naive local timestamp."""
    moment: datetime

    @property
    def today(self) -> date:
        return self.moment.date()

    @property
    def time_of_day(self) -> time:
        return time(self.moment.hour, self.moment.minute)


@dataclass(frozen=True)
class ScheduleResult:
    """A usable event proposal: title, local start/end and duration."""
    title: str
    start: datetime
    end: datetime
    duration_minutes: int


def parse_quick_text(
    text: str,
    default_minutes: int | None,
    now: ReferenceClock,
    *,
    placeholder_title: str = PLACEHOLDER_TITLE,
) -> ScheduleResult:
    """Turn a phrase like "arzt 24.01 09:15 30min" into a schedule proposal.

    Raises EmptyInputError when the text is blank. Every other input yields a
    result, falling back to today, 09:00, the default duration and the
    placeholder title.
    """
    raw = (text or "").strip()
    if not raw:
        raise EmptyInputError()

    minutes, duration_spans = extract_duration(raw, default_minutes)
    day, day_spans = extract_day(raw, now.today)
    clock_time, time_spans = extract_time_of_day(
        raw, masked=duration_spans + day_spans,
    )
    title = extract_title(raw, duration_spans + day_spans + time_spans)

    start = datetime.combine(min(day, LAST_SCHEDULABLE_DAY), clock_time)
    return ScheduleResult(
        title=title or placeholder_title,
        start=start,
        end=start + timedelta(minutes=minutes),
        duration_minutes=minutes,
    )


# ─── Pass 1: duration ────────────────────────────────────────────

def extract_duration(
    text: str, default_minutes: int | None,
) -> tuple[int, list[Span]]:
    """Resolve the duration and return every duration-like span.

    A minute token beats an hour token wherever each appears.
    """
    minute_matches = list(_MINUTES_TOKEN.finditer(text))
    hour_matches = list(_HOURS_TOKEN.finditer(text))
    spans = [m.span() for m in minute_matches + hour_matches]

    if minute_matches:
        minutes = int(minute_matches[0].group(1))
    elif hour_matches:
        minutes = int(hour_matches[0].group(1)) * 60
    elif default_minutes and default_minutes > 0:
        minutes = default_minutes
    else:
        minutes = FALLBACK_DURATION_MINUTES

    return _clamp(minutes, MIN_DURATION_MINUTES, MAX_DURATION_MINUTES), spans


# ─── Pass 2: day ─────────────────────────────────────────────────

def extract_day(
    text: str, today: date,
) -> tuple[date, list[Span]]:
    """Resolve the calendar day and return the spans to cut from the title.

    Keywords are checked before explicit dates, so "morgen 24.01" means
    tomorrow. Dotted tokens that read as a time are left to pass 3.
    """
    spans: list[Span] = []
    for _, pattern in _DAY_KEYWORDS:
        spans.extend(m.span() for m in pattern.finditer(text))
    date_matches = [
        m for m in _DOTTED_TOKEN.finditer(text) if not reads_as_dotted_time(m)
    ]
    spans.extend(m.span() for m in date_matches)

    for keyword, pattern in _DAY_KEYWORDS:
        if pattern.search(text):
            return _days_after(today, keyword.offset_days), spans

    if date_matches:
        day_of_month, month, year = date_matches[0].group(1, 2, 3)
        resolved_year = int(year) if year else today.year
        if resolved_year < 100:
            resolved_year += 2000
        return rolled_over_date(resolved_year, int(month), int(day_of_month)), spans

    return today, spans


def reads_as_dotted_time(match: re.Match) -> bool:
    """True for A.BB tokens that fit hh.mm but not day.month (16.30, 7.45).

    Tokens that could be either (12.05) stay dates; D.M.Y is always a date.
    """
    first, second, year = match.group(1, 2, 3)
    if year is not None or len(second) != 2:
        return False
    a, b = int(first), int(second)
    could_be_date = 1 <= a <= 31 and 1 <= b <= 12
    return not could_be_date and a <= 23 and b <= 59


def _days_after(today: date, days: int) -> date:
    return date.fromordinal(
        min(today.toordinal() + days, LAST_SCHEDULABLE_DAY.toordinal()),
    )


def rolled_over_date(year: int, month: int, day: int) -> date:
    """Build a date, carrying overflowing months/days forward (31.02 -> 3 March).

    Day 0 is the last day of the previous month, month 0 is December of the
    previous year. The year is kept inside 1..9998.
    """
    extra_years, month_index = divmod(month - 1, 12)
    year = _clamp(year + extra_years, 1, 9998)
    return date(year, month_index + 1, 1) + timedelta(days=day - 1)


# ─── Pass 3: time of day ─────────────────────────────────────────

def extract_time_of_day(
    text: str, *, masked: list[Span],
) -> tuple[time, list[Span]]:
    """Resolve the time of day and return the spans to cut from the title.

    Out-of-range digits are clamped (99:99 -> 23:59). A bare number only
    counts as an hour when it sits outside every duration, date and time
    candidate.
    """
    colon_matches = list(_COLON_TIME_TOKEN.finditer(text))
    dotted_matches = [
        m for m in _DOTTED_TOKEN.finditer(text) if reads_as_dotted_time(m)
    ]
    candidates = colon_matches + dotted_matches
    spans = [m.span() for m in candidates]

    if candidates:
        hour, minute = candidates[0].group(1, 2)
        return time(_clamp(int(hour), 0, 23), _clamp(int(minute), 0, 59)), spans

    bare = _BARE_HOUR_TOKEN.search(_blank_out(text, masked + spans))
    if bare:
        return time(_clamp(int(bare.group(1)), 0, 23), 0), spans + [bare.span()]

    return DEFAULT_TIME_OF_DAY, spans


# ─── Pass 4: title ───────────────────────────────────────────────

def extract_title(text: str, token_spans: list[Span]) -> str:
    """Original-case text minus all token spans, whitespace collapsed.

    Returns "" when nothing is left; the caller substitutes the placeholder.
    """
    return " ".join(_blank_out(text, token_spans).split())


def _blank_out(text: str, spans: list[Span]) -> str:
    chars = list(text)
    for start, end in spans:
        chars[start:end] = " " * (end - start)
    return "".join(chars)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))
