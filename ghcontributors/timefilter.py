"""
Time window filtering.

Windows are inclusive on both ends and compared at full timestamp precision.
A date-only boundary such as ``2017-09-24`` is midnight UTC of that day, so a
window ending on that literal excludes anything later the same day.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_YEAR_RE = re.compile(r"^(\d{4})$")
_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def as_utc(value):
    """Attach UTC to naive datetimes, convert aware ones to UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value):
    """Parse an ISO 8601 timestamp, date, year-month or year into an aware datetime"""
    if isinstance(value, datetime):
        return as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if not isinstance(value, str):
        raise ValueError(f"Cannot interpret {value!r} as a timestamp")

    text = value.strip()
    match = _YEAR_RE.match(text)
    if match:
        return datetime(int(match.group(1)), 1, 1, tzinfo=timezone.utc)
    match = _MONTH_RE.match(text)
    if match:
        return datetime(int(match.group(1)), int(match.group(2)), 1, tzinfo=timezone.utc)

    try:
        parsed = datetime.fromisoformat(text.replace('Z', '+00:00'))
    except ValueError:
        raise ValueError(f"Invalid timestamp: {value!r}") from None
    return as_utc(parsed)


@dataclass(frozen=True)
class TimeWindow:
    after: Optional[datetime] = None
    before: Optional[datetime] = None

    @classmethod
    def parse(cls, after=None, before=None):
        """Build a window from config or command line values, either may be empty"""
        return cls(
            after=parse_timestamp(after) if after else None,
            before=parse_timestamp(before) if before else None,
        )

    def bounds(self, now=None):
        """Concrete (after, before) with defaults applied"""
        after = as_utc(self.after) if self.after is not None else EPOCH
        if self.before is not None:
            before = as_utc(self.before)
        else:
            before = now if now is not None else datetime.now(timezone.utc)
        return after, before

    def resolved(self, now=None):
        """Copy of the window with both ends fixed, "now" taken once"""
        after, before = self.bounds(now)
        return TimeWindow(after=after, before=before)

    def contains(self, moment):
        after, before = self.bounds()
        return after <= as_utc(moment) <= before


def time_filter(events, window=None):
    """Return the events created inside the window, keeping their order"""
    # Every event is judged against the same "now"
    window = (window or TimeWindow()).resolved()
    return [event for event in events if window.contains(event.created_at)]
