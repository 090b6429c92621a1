"""
Matching of the current instant against opening time slots.
"""

import logging
from typing import List, Optional

import pendulum
from pendulum import DateTime

from .models import TimeSlot

logger = logging.getLogger(__name__)

FALLBACK_TIME_FORMATS = ("HH:mm:ss", "HH:mm")


def parse_time_of_day(value: Optional[str], time_format: str, day: DateTime) -> Optional[DateTime]:
    """
    Parse a time-of-day string and place it on the calendar day of ``day``.

    The configured format is tried first, then the common "HH:mm:ss" and
    "HH:mm" layouts. Only the time component of the parsed value is kept.

    Args:
        value: Time-of-day text such as "09:00"
        time_format: Pendulum token format, e.g. "HH:mm"
        day: Instant supplying the date and timezone

    Returns:
        DateTime on ``day``'s date, or None if the value cannot be parsed
    """
    if not value:
        return None

    formats: List[str] = [time_format]
    formats.extend(fmt for fmt in FALLBACK_TIME_FORMATS if fmt != time_format)

    for fmt in formats:
        try:
            parsed = pendulum.from_format(value.strip(), fmt)
        except ValueError:
            continue

        return day.set(
            hour=parsed.hour,
            minute=parsed.minute,
            second=parsed.second,
            microsecond=0
        )

    logger.debug("Could not parse time of day %r with format %r", value, time_format)
    return None


def is_current_time_slot(slot: TimeSlot, now: DateTime, time_format: str) -> bool:
    """
    Check whether ``now`` lies inside ``slot`` (both bounds inclusive).

    Slots with a missing or unparseable bound never match.
    """
    if not slot.is_complete:
        return False

    start = parse_time_of_day(slot.start_time, time_format, now)
    end = parse_time_of_day(slot.end_time, time_format, now)

    if start is None or end is None:
        return False

    return start <= now <= end
