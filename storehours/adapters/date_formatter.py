"""
Locale-aware date rendering backed by pendulum's locale data.
"""

import logging
from functools import lru_cache
from typing import List

from pendulum import Date
from pendulum.locales.locale import Locale

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"


@lru_cache(maxsize=None)
def resolve_locale(locale: str) -> str:
    """
    Map a BCP-47 style identifier to a locale pendulum ships.

    "fr-FR" is tried as is, then as its language "fr", then falls back to
    English.
    """
    candidates: List[str] = []
    normalized = locale.replace("_", "-").strip()

    if normalized:
        candidates.append(normalized)
        language = normalized.split("-")[0]
        if language not in candidates:
            candidates.append(language)

    for candidate in candidates:
        try:
            Locale.load(candidate)
        except ValueError:
            continue
        return candidate

    logger.warning("Locale %r is not available, falling back to %r", locale, DEFAULT_LOCALE)
    return DEFAULT_LOCALE


class PendulumDateFormatter:
    """Formats dates with pendulum tokens ("dddd, MMMM D, YYYY") in a locale."""

    def format(self, value: Date, pattern: str, locale: str) -> str:
        return value.format(pattern, locale=resolve_locale(locale))
