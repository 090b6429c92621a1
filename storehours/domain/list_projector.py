"""
Projection of the raw calendars into ordered, display-ready lists.
"""

from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

from .models import (
    OpeningHoursRow,
    SpecialOpeningHoursRow,
    TimeSlot,
    to_day_schedule,
)

Translate = Callable[..., str]


class ListProjector:
    """
    Builds the regular and special opening hours lists shown to customers.

    The projector knows nothing about locales: day and date labels are
    produced by the callables handed in by the evaluator, and the "Closed"
    fallback goes through ``translate``.
    """

    def __init__(
        self,
        translate: Translate,
        day_label: Callable[[Any], str],
        special_day_label: Callable[[str], str]
    ):
        self._translate = translate
        self._day_label = day_label
        self._special_day_label = special_day_label

    def build_weekly_list(self, weekly: Optional[Mapping[Any, Any]]) -> Tuple[OpeningHoursRow, ...]:
        """
        Build one row per weekday key.

        Numeric keys come first in ascending order, other keys follow in
        input order. Keys whose value is not a list are skipped.
        """
        rows: List[OpeningHoursRow] = []

        for day, entries in _ordered_items(weekly):
            if to_day_schedule(entries) is None:
                continue

            rows.append(
                OpeningHoursRow(
                    day=self._day_label(day),
                    hours=self.extract_opening_times(entries)
                )
            )

        return tuple(rows)

    def build_special_list(self, special: Optional[Mapping[Any, Any]]) -> Tuple[SpecialOpeningHoursRow, ...]:
        """
        Build one row per special date, ordered like the weekly list.

        The description of the first entry is shown for the whole day.
        """
        rows: List[SpecialOpeningHoursRow] = []

        for day, entries in _ordered_items(special):
            if to_day_schedule(entries) is None:
                continue

            description = TimeSlot.from_mapping(entries[0]).description if entries else ""

            rows.append(
                SpecialOpeningHoursRow(
                    day=self._special_day_label(str(day)),
                    hours=self.extract_opening_times(entries),
                    description=description
                )
            )

        return tuple(rows)

    def extract_opening_times(self, entries: Any) -> str:
        """
        Join the slots of a day as "start - end, start - end".

        An empty day yields the translated "Closed" label.
        """
        schedule = to_day_schedule(entries) or ()
        hours = [self.opening_times_to_string(slot) for slot in schedule]

        if not hours:
            hours.append(self._translate("Closed"))

        return ", ".join(hours)

    @staticmethod
    def opening_times_to_string(slot: TimeSlot) -> str:
        """Render a slot as "start - end", or "" when a bound is missing."""
        return str(slot)


def _ordered_items(calendar: Optional[Mapping[Any, Any]]) -> List[Tuple[Any, Any]]:
    """Integer-like keys in ascending order, then the remaining keys in input order."""
    items = list((calendar or {}).items())
    numeric = [item for item in items if _integer_key(item[0]) is not None]
    others = [item for item in items if _integer_key(item[0]) is None]
    numeric.sort(key=lambda item: _integer_key(item[0]))
    return numeric + others


def _integer_key(key: Any) -> Optional[int]:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    text = str(key)
    if text.isdigit() and (text == "0" or not text.startswith("0")):
        return int(text)
    return None


def join_opening_times(slots: Iterable[TimeSlot]) -> str:
    """Join the complete slots of a day, skipping incomplete ones."""
    return ", ".join(str(slot) for slot in slots if slot.is_complete)
