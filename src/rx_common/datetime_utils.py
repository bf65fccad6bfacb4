"""Local-time datetime utilities."""

from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from config.settings import settings


def local_timezone() -> tzinfo | None:
    """Return the configured local zone, or None when unset."""
    if not settings.LOCAL_TIMEZONE:
        return None
    return ZoneInfo(settings.LOCAL_TIMEZONE)


def local_now() -> datetime:
    """Return "now" in the local time reference (timezone-aware)."""
    tz = local_timezone()
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)


def truncate_to_minute(value: datetime) -> datetime:
    """Drop seconds and microseconds: 10:42:37.5 -> 10:42:00."""
    return value.replace(second=0, microsecond=0)
