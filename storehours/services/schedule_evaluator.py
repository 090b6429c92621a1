"""
Application service answering open/closed questions for a store.

The evaluator ties together the calendar index, the time slot matcher and
the list projector. Translation, locale date formatting and the clock are
collaborators described by small protocols, so the real adapters can be
swapped for stubs in tests.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Tuple

import pendulum
from pendulum import Date, DateTime

from ..adapters.date_formatter import PendulumDateFormatter
from ..adapters.translation import CatalogTranslator
from ..config import StoreHoursConfig
from ..domain.calendar_index import CalendarIndex
from ..domain.list_projector import ListProjector, join_opening_times
from ..domain.models import (
    DaySchedule,
    OpeningHoursRow,
    SpecialOpeningHoursRow,
    normalize_weekday,
    weekday_number,
)
from ..domain.time_slot_matcher import is_current_time_slot, parse_time_of_day

logger = logging.getLogger(__name__)

Clock = Callable[[], DateTime]


class TranslatorProtocol(Protocol):
    """Protocol describing the translation lookup used for labels."""

    def translate(self, key: str, *args: object) -> str:
        """Return the translation of ``key`` with ``%1``-style placeholders filled."""


class DateFormatterProtocol(Protocol):
    """Protocol describing the locale-aware date formatter."""

    def format(self, value: Date, pattern: str, locale: str) -> str:
        """Render ``value`` with a pendulum token ``pattern`` in ``locale``."""


@dataclass(frozen=True)
class ScheduleStatus:
    """All status values of a store, evaluated against a single instant."""
    now: DateTime
    is_open_today: bool
    is_open_now: bool
    next_close_time: Optional[str]
    today_opening_hours: Optional[str]
    is_nearly_closed: bool
    label: str


class ScheduleEvaluator:
    """
    Evaluates a store's weekly and special opening hours.

    Every public query reads the clock once and evaluates against that
    instant, so two separate calls may observe different times. The display
    lists are computed once at construction.
    """

    def __init__(
        self,
        config: StoreHoursConfig,
        translator: Optional[TranslatorProtocol] = None,
        date_formatter: Optional[DateFormatterProtocol] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.config = config
        self._translator = translator or CatalogTranslator(config.translations)
        self._date_formatter = date_formatter or PendulumDateFormatter()
        self._clock = clock or (lambda: pendulum.now(config.timezone))

        self.calendar = CalendarIndex.build(
            weekly=config.opening_hours,
            special=config.special_opening_hours,
            date_format=config.date_format,
        )

        self._projector = ListProjector(
            translate=self._translator.translate,
            day_label=self.get_day_label,
            special_day_label=self._special_day_label,
        )
        self.opening_hours_list: Tuple[OpeningHoursRow, ...] = self._projector.build_weekly_list(
            config.opening_hours
        )
        self.special_opening_hours_list: Tuple[SpecialOpeningHoursRow, ...] = self._projector.build_special_list(
            config.special_opening_hours
        )

    # Status queries

    def is_open_today(self) -> bool:
        """Check if the store has any opening slot today."""
        return self._is_open_today(self._clock())

    def is_open_now(self) -> bool:
        """Check if the current instant falls in one of today's slots."""
        return self._is_open_now(self._clock())

    def get_today_next_close_time(self) -> Optional[str]:
        """Return the end time of the slot we are currently in, or None."""
        return self._next_close_time(self._clock())

    def get_today_opening_hours(self) -> Optional[str]:
        """
        Return today's slots as "start - end, start - end".

        None when there is no schedule for today at all; an empty string when
        today's schedule has no complete slot. Unlike the display lists, no
        "Closed" text is substituted here.
        """
        return self._today_opening_hours(self._clock())

    def is_nearly_closed(self) -> bool:
        """Check if the store closes within the configured warning threshold."""
        return self._is_nearly_closed(self._clock())

    def get_link_label(self) -> str:
        """Return the status label shown on the opening hours link."""
        return self._link_label(self._clock())

    def get_status(self) -> ScheduleStatus:
        """Evaluate every status value against one reading of the clock."""
        now = self._clock()

        return ScheduleStatus(
            now=now,
            is_open_today=self._is_open_today(now),
            is_open_now=self._is_open_now(now),
            next_close_time=self._next_close_time(now),
            today_opening_hours=self._today_opening_hours(now),
            is_nearly_closed=self._is_nearly_closed(now),
            label=self._link_label(now),
        )

    # Labels and lists

    def has_special_opening_hours(self) -> bool:
        """Return True if at least one special date is configured."""
        return len(self.config.special_opening_hours) > 0

    def is_current_day(self, day_label: str) -> bool:
        """Check if a localized day label is today's."""
        now = self._clock()
        return self._day_label(weekday_number(now), now) == day_label

    def get_day_label(self, day_of_week: Any) -> str:
        """
        Return the localized, translated name of a weekday.

        Args:
            day_of_week: Sunday-based weekday number (0-6), its digit string,
                or an English weekday name

        Returns:
            Weekday name such as "Monday" or "lundi"
        """
        weekday = normalize_weekday(day_of_week)
        if weekday is None:
            logger.warning("Cannot build a day label for unknown weekday %r", day_of_week)
            return str(day_of_week)

        return self._day_label(weekday, self._clock())

    def get_locale(self) -> str:
        """Return the configured locale with underscores replaced by hyphens."""
        return self.config.locale.replace("_", "-")

    def extract_opening_times(self, entries: Any) -> str:
        """Join a day's raw entries for display, "Closed" when there are none."""
        return self._projector.extract_opening_times(entries)

    # Internals, evaluated against a given instant

    def _today(self, now: DateTime) -> Optional[DaySchedule]:
        return self.calendar.schedule_for(now)

    def _is_open_today(self, now: DateTime) -> bool:
        schedule = self._today(now)
        return bool(schedule)

    def _is_open_now(self, now: DateTime) -> bool:
        for slot in self._today(now) or ():
            if is_current_time_slot(slot, now, self.config.time_format):
                return True
        return False

    def _next_close_time(self, now: DateTime) -> Optional[str]:
        result = None

        # Overlapping slots: the last matching one wins.
        for slot in self._today(now) or ():
            if is_current_time_slot(slot, now, self.config.time_format):
                result = slot.end_time

        return result

    def _today_opening_hours(self, now: DateTime) -> Optional[str]:
        schedule = self._today(now)
        if schedule is None:
            return None
        return join_opening_times(schedule)

    def _is_nearly_closed(self, now: DateTime) -> bool:
        close_time = self._next_close_time(now)
        if not close_time:
            return False

        closing = parse_time_of_day(close_time, self.config.time_format, now)
        if closing is None:
            return False

        minutes_left = math.floor((closing - now).total_seconds() / 60)
        return minutes_left <= self.config.closing_warning_threshold

    def _link_label(self, now: DateTime) -> str:
        if not self._is_open_today(now):
            return self._translator.translate("Closed")

        label = self._translator.translate("Open Today")

        close_time = self._next_close_time(now)
        today_hours = self._today_opening_hours(now)

        # Each rule may overwrite the label set by the previous ones.
        if close_time:
            label = self._translator.translate("Open Today (%1)", today_hours)

        if self._is_nearly_closed(now) and close_time:
            label = self._translator.translate("Closing soon (%1)", close_time)

        if not self._is_open_now(now) and today_hours:
            label = self._translator.translate("Closed (%1)", today_hours)

        return label

    def _day_label(self, weekday: int, now: DateTime) -> str:
        day = now.subtract(days=weekday_number(now)).add(days=weekday)
        name = self._date_formatter.format(day, "dddd", self.get_locale())
        return self._translator.translate(name)

    def _special_day_label(self, key: str) -> str:
        try:
            day = pendulum.from_format(key, self.config.date_format, tz=self.config.timezone)
        except ValueError:
            logger.warning(
                "Special opening hours date %r does not match format %r",
                key,
                self.config.date_format,
            )
            return key

        return self._date_formatter.format(day, self.config.special_date_style, self.get_locale())
