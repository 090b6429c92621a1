"""
Message catalog translator with Magento-style "%1" placeholders.
"""

import re
from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml

from ..domain.exceptions import ConfigurationError

PLACEHOLDER = re.compile(r"%(\d+)")


class CatalogTranslator:
    """
    Translates UI strings through a flat ``source -> translation`` catalog.

    Unknown strings are returned untranslated. Placeholders ``%1``, ``%2``,
    ... are replaced by the positional arguments after lookup.
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None):
        self._messages: Dict[str, str] = dict(messages or {})

    @classmethod
    def load_from_yaml(cls, catalog_path: Path) -> "CatalogTranslator":
        """
        Load a message catalog from a YAML mapping.

        Raises:
            FileNotFoundError: If the catalog file doesn't exist
            ConfigurationError: If the file is not a YAML mapping
        """
        if not catalog_path.exists():
            raise FileNotFoundError(f"Translation catalog not found: {catalog_path}")

        try:
            with open(catalog_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {catalog_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigurationError("Translation catalog must contain a mapping at the root level.")

        return cls({str(key): str(value) for key, value in data.items()})

    def translate(self, key: str, *args: object) -> str:
        """Translate ``key`` and substitute its placeholders."""
        text = self._messages.get(key, key)

        if not args:
            return text

        def substitute(match: "re.Match[str]") -> str:
            index = int(match.group(1)) - 1
            if 0 <= index < len(args):
                return str(args[index])
            return match.group(0)

        return PLACEHOLDER.sub(substitute, text)
