"""
Service layer helpers that combine the domain logic with its collaborators.
"""

from .schedule_evaluator import (
    Clock,
    DateFormatterProtocol,
    ScheduleEvaluator,
    ScheduleStatus,
    TranslatorProtocol,
)

__all__ = [
    "Clock",
    "DateFormatterProtocol",
    "ScheduleEvaluator",
    "ScheduleStatus",
    "TranslatorProtocol",
]
