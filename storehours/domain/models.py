"""
Domain models for opening hours and their display rows.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping, Optional, Tuple, Union

# Sunday-based numbering, matching the weekday keys sent by the store backend.
WEEKDAY_NAMES: Dict[str, int] = {
    "sunday": 0,
    "monday": 1,
    "tuesday": 2,
    "wednesday": 3,
    "thursday": 4,
    "friday": 5,
    "saturday": 6,
}

WeekdayKey = Union[int, str]


@dataclass(frozen=True)
class TimeSlot:
    """
    One contiguous opening interval within a single day.

    Upstream data is not validated: either bound may be missing, in which
    case the slot never matches the current time and renders as an empty
    string.
    """
    start_time: Optional[str]
    end_time: Optional[str]
    description: str = ""

    @classmethod
    def from_mapping(cls, raw: Any) -> "TimeSlot":
        """Build a slot from a raw ``{start_time, end_time, description}`` mapping."""
        if not isinstance(raw, Mapping):
            return cls(start_time=None, end_time=None)

        description = raw.get("description")

        return cls(
            start_time=_as_text(raw.get("start_time")),
            end_time=_as_text(raw.get("end_time")),
            description=description if isinstance(description, str) else "",
        )

    @property
    def is_complete(self) -> bool:
        """True when both bounds are present."""
        return self.start_time is not None and self.end_time is not None

    def __str__(self) -> str:
        if not self.is_complete:
            return ""
        return f"{self.start_time} - {self.end_time}"


# Ordered slots for one day; an empty tuple means closed.
DaySchedule = Tuple[TimeSlot, ...]


@dataclass(frozen=True)
class OpeningHoursRow:
    """A row of the regular weekly schedule, ready for display."""
    day: str
    hours: str


@dataclass(frozen=True)
class SpecialOpeningHoursRow:
    """A row of the special (holiday/exception) schedule, ready for display."""
    day: str
    hours: str
    description: str


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def to_day_schedule(entries: Any) -> Optional[DaySchedule]:
    """
    Convert a raw list of slot mappings to a DaySchedule.

    Returns None when ``entries`` is not a list, so callers can skip it.
    """
    if not isinstance(entries, (list, tuple)):
        return None
    return tuple(TimeSlot.from_mapping(entry) for entry in entries)


def normalize_weekday(key: WeekdayKey) -> Optional[int]:
    """
    Resolve a weekday identifier to its Sunday-based number (0-6).

    Accepts integers, digit strings and English weekday names, either full
    ("Monday") or abbreviated ("mon"). Returns None for anything else.
    """
    if isinstance(key, bool):
        return None

    if isinstance(key, int):
        return key if 0 <= key <= 6 else None

    text = str(key).strip().lower()
    if text.isdigit():
        number = int(text)
        return number if 0 <= number <= 6 else None

    if text in WEEKDAY_NAMES:
        return WEEKDAY_NAMES[text]

    for name, number in WEEKDAY_NAMES.items():
        if len(text) >= 3 and name.startswith(text):
            return number

    return None


def weekday_number(day: date) -> int:
    """Return the Sunday-based weekday number (Sunday=0, Saturday=6) of a date."""
    return day.isoweekday() % 7
