"""
Merged day-keyed lookup over the weekly and special calendars.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

import pendulum
from pendulum import Date

from .models import DaySchedule, normalize_weekday, to_day_schedule, weekday_number

logger = logging.getLogger(__name__)


class CalendarIndex:
    """
    Answers "what are the opening hours for this day?".

    Special dates are keyed by their text in ``date_format``; the weekly
    calendar is keyed by Sunday-based weekday number. A lookup checks the
    special calendar for the exact key first and otherwise falls back to the
    weekly schedule of the key's weekday.

    Instances are immutable once built.
    """

    def __init__(
        self,
        weekly: Dict[int, DaySchedule],
        special: Dict[str, DaySchedule],
        date_format: str
    ):
        self._weekly = dict(weekly)
        self._special = dict(special)
        self.date_format = date_format

    @classmethod
    def build(
        cls,
        weekly: Optional[Mapping[Any, Any]],
        special: Optional[Mapping[Any, Any]],
        date_format: str
    ) -> "CalendarIndex":
        """
        Build the index from raw weekly and special calendars.

        Entries whose value is not a list are skipped, as are weekly keys
        that do not name a weekday.
        """
        weekly_days: Dict[int, DaySchedule] = {}
        for key, entries in (weekly or {}).items():
            schedule = to_day_schedule(entries)
            if schedule is None:
                continue

            weekday = normalize_weekday(key)
            if weekday is None:
                logger.warning("Ignoring opening hours under unknown weekday key %r", key)
                continue

            weekly_days[weekday] = schedule

        special_days: Dict[str, DaySchedule] = {}
        for key, entries in (special or {}).items():
            schedule = to_day_schedule(entries)
            if schedule is None:
                continue
            special_days[str(key)] = schedule

        return cls(weekly=weekly_days, special=special_days, date_format=date_format)

    def lookup(self, key: str) -> Optional[DaySchedule]:
        """
        Return the schedule for a ``date_format``-formatted key.

        Returns None when neither calendar defines the key's day or the key
        cannot be parsed as a date.
        """
        return self._resolve(key, lambda: self._parse_key(key))

    def schedule_for(self, day: Date) -> Optional[DaySchedule]:
        """Return the schedule that applies to a given date."""
        return self._resolve(day.format(self.date_format), lambda: day)

    def _resolve(self, key: str, day_of_key: Callable[[], Optional[Date]]) -> Optional[DaySchedule]:
        # A special date replaces the weekly schedule, even when it is empty.
        if key in self._special:
            return self._special[key]

        day = day_of_key()
        if day is None:
            return None

        return self._weekly.get(weekday_number(day))

    def _parse_key(self, key: str) -> Optional[Date]:
        try:
            return pendulum.from_format(key, self.date_format)
        except ValueError:
            logger.debug("Key %r does not match date format %r", key, self.date_format)
            return None
