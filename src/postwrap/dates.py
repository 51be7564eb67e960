"""Date parsing and formatting for post metadata and the index."""

import re
from datetime import datetime, timezone
from typing import Optional


# Accepted in addition to ISO 8601
DATE_FORMATS = [
    '%B %d, %Y',   # January 15, 2025
    '%b %d, %Y',   # Jan 15, 2025
    '%d %B %Y',    # 15 January 2025
    '%Y/%m/%d',
    '%Y-%m-%d %H:%M',
    '%Y-%m-%d %H:%M:%S',
]

# "January 15, 2025" as shown on wrapped pages
DISPLAY_DATE_RE = re.compile(r'\b([A-Z][a-z]+ \d{1,2}, \d{4})\b')


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def parse_date(value) -> Optional[datetime]:
    """Parse a front-matter or page date into an aware UTC datetime.

    Naive values are taken as UTC. Returns None if nothing matches.
    """
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value or '').strip()
        if not text:
            return None

        dt = None
        iso = text[:-1] + '+00:00' if text.endswith('Z') else text
        try:
            dt = datetime.fromisoformat(iso)
        except ValueError:
            for fmt in DATE_FORMATS:
                try:
                    dt = datetime.strptime(text, fmt)
                    break
                except ValueError:
                    continue
        if dt is None:
            return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    try:
        return dt.astimezone(timezone.utc)
    except OverflowError:
        # Offset pushes the instant outside years 1-9999
        return None


def to_iso(dt: datetime) -> str:
    """Index timestamp, e.g. 2025-01-15T00:00:00.000Z

    Naive values are taken as UTC; one that cannot be shifted to UTC
    falls back to the current time.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    try:
        dt = dt.astimezone(timezone.utc)
    except OverflowError:
        dt = now_utc()
    return (f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}T"
            f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}.{dt.microsecond // 1000:03d}Z")


def format_display(dt: datetime) -> str:
    """Publish date as shown on a post page, e.g. January 5, 2025"""
    return f"{dt:%B} {dt.day}, {dt.year}"


def resolve_date(value, label: str = '') -> datetime:
    """Parse a metadata date, falling back to now for missing or bad values."""
    parsed = parse_date(value)
    if parsed is None:
        if value:
            print(f"Warning: {label}: unrecognised date {value!r}, using current time")
        parsed = now_utc()
    return parsed
