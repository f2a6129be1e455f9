from __future__ import annotations
from datetime import datetime, timedelta

from .errors import InvalidTimestampError
from .models import Timepunch, Timestamp

ONE_HOUR = timedelta(hours=1)


def parse_timestamp(value: Timestamp) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidTimestampError(value)
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise InvalidTimestampError(value) from exc


def calculate_timepunch_hours(timepunch: Timepunch) -> float:
    """Return the unrounded hours between a punch's start and end.

    The difference is absolute, so a punch recorded end-first still yields
    positive hours.
    """

    start = parse_timestamp(timepunch.start)
    end = parse_timestamp(timepunch.end)
    try:
        elapsed = end - start
    except TypeError as exc:
        # naive and timezone-aware timestamps cannot be compared
        raise InvalidTimestampError(f"{timepunch.start} / {timepunch.end}") from exc
    return abs(elapsed) / ONE_HOUR
