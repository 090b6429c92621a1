"""
Domain layer - Pure schedule logic without external dependencies.
"""

from .calendar_index import CalendarIndex
from .exceptions import ConfigurationError, StoreHoursError
from .list_projector import ListProjector
from .models import OpeningHoursRow, SpecialOpeningHoursRow, TimeSlot
from .time_slot_matcher import is_current_time_slot, parse_time_of_day

__all__ = [
    "CalendarIndex",
    "ConfigurationError",
    "ListProjector",
    "OpeningHoursRow",
    "SpecialOpeningHoursRow",
    "StoreHoursError",
    "TimeSlot",
    "is_current_time_slot",
    "parse_time_of_day",
]
