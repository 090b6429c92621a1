"""
Adapters layer - Default translation and locale date formatting.
"""

from .date_formatter import PendulumDateFormatter
from .translation import CatalogTranslator

__all__ = ["CatalogTranslator", "PendulumDateFormatter"]
