"""Closing timestamp composition for the auto-finalize setting.

The closing timestamp is edited through two independent pickers: one for the
calendar date, one for the wall-clock time. Each merge keeps the part the user
did not touch and truncates to whole minutes.

Both merges are total. A composition failure falls back to the raw picker
value instead of raising, so the editor never gets stuck on a bad value.
"""

import logging
from datetime import date, datetime, time, tzinfo

from config.settings import settings
from src.rx_common.datetime_utils import local_timezone, truncate_to_minute

logger = logging.getLogger(__name__)

_COMPOSITION_ERRORS = (ValueError, OverflowError, TypeError)


def default_closing_timestamp(now: datetime, tz: tzinfo | None = None) -> datetime:
    """End of ``now``'s local day: 2024-03-01T10:00 -> 2024-03-01T23:59:00.

    ``tz`` overrides the configured local zone. It only applies to an aware
    ``now``; a naive ``now`` is already local wall-clock time.
    """
    zone = tz if tz is not None else local_timezone()
    if zone is not None and now.tzinfo is not None:
        now = now.astimezone(zone)
    return now.replace(
        hour=settings.AUTO_FINALIZE_HOUR,
        minute=settings.AUTO_FINALIZE_MINUTE,
        second=0,
        microsecond=0,
    )


def merge_date_keep_time(date_value: date, reference: datetime) -> datetime:
    """Take year/month/day from ``date_value``, hour/minute from ``reference``."""
    try:
        merged = reference.replace(
            year=date_value.year,
            month=date_value.month,
            day=date_value.day,
        )
        return truncate_to_minute(merged)
    except _COMPOSITION_ERRORS as exc:
        logger.warning("Closing date merge failed, using picker value: %s", exc)
        return _date_fallback(date_value)


def merge_time_keep_date(time_value: time | datetime, reference: datetime) -> datetime:
    """Take year/month/day from ``reference``, hour/minute from ``time_value``."""
    try:
        merged = reference.replace(hour=time_value.hour, minute=time_value.minute)
        return truncate_to_minute(merged)
    except _COMPOSITION_ERRORS as exc:
        logger.warning("Closing time merge failed, using picker value: %s", exc)
        return _time_fallback(time_value, reference)


def _date_fallback(date_value: date) -> datetime:
    if isinstance(date_value, datetime):
        return date_value
    return datetime.combine(date_value, time())


def _time_fallback(time_value: time | datetime, reference: datetime) -> datetime:
    if isinstance(time_value, datetime):
        return time_value
    # a bare time carries no date: anchor it on the reference day
    return datetime.combine(
        reference.date(),
        time_value.replace(second=0, microsecond=0),
        tzinfo=reference.tzinfo,
    )
