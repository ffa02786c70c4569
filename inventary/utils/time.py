"""
time.py - time utilities
Single responsibility: common time helpers.
"""
from datetime import datetime, timezone


def now_iso() -> str:
    return datetime.now().isoformat(timespec="seconds")


def parse_iso(value: str | None) -> datetime | None:
    """ISO 8601 (with optional trailing "Z") to an aware datetime; None on failure."""
    if not value:
        return None
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.astimezone()  # naive values are local time
    return dt


def is_expired(expires_at: str | None, now: datetime | None = None) -> bool:
    """Missing or unparsable expiry counts as expired."""
    dt = parse_iso(expires_at)
    if dt is None:
        return True
    return dt < (now or datetime.now(timezone.utc))
