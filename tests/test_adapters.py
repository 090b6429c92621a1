"""
Tests for the default translation and date formatting adapters.
"""

import pendulum
import pytest

from storehours.adapters.date_formatter import PendulumDateFormatter, resolve_locale
from storehours.adapters.translation import CatalogTranslator
from storehours.domain.exceptions import ConfigurationError


class TestCatalogTranslator:
    """Tests for CatalogTranslator."""

    def test_known_key(self):
        """Test a catalog hit."""
        translator = CatalogTranslator({"Closed": "Geschlossen"})

        assert translator.translate("Closed") == "Geschlossen"

    def test_unknown_key_passes_through(self):
        """Test that unknown strings are returned unchanged."""
        translator = CatalogTranslator()

        assert translator.translate("Open Today") == "Open Today"

    def test_placeholders(self):
        """Test %1-style substitution after lookup."""
        translator = CatalogTranslator({"Closing soon (%1)": "Schließt bald (%1)"})

        assert translator.translate("Closing soon (%1)", "18:00") == "Schließt bald (18:00)"
        assert translator.translate("From %1 to %2", "09:00", "12:00") == "From 09:00 to 12:00"

    def test_missing_argument_keeps_placeholder(self):
        """Test that placeholders without an argument are left as is."""
        translator = CatalogTranslator()

        assert translator.translate("%1 and %2", "a") == "a and %2"

    def test_load_from_yaml(self, tmp_path):
        """Test loading a catalog file."""
        catalog = tmp_path / "fr.yaml"
        catalog.write_text('"Closed": "Fermé"\n"Closed (%1)": "Fermé (%1)"\n', encoding="utf-8")

        translator = CatalogTranslator.load_from_yaml(catalog)

        assert translator.translate("Closed (%1)", "09:00 - 12:00") == "Fermé (09:00 - 12:00)"

    def test_load_from_yaml_rejects_list(self, tmp_path):
        """Test that a catalog must be a mapping."""
        catalog = tmp_path / "bad.yaml"
        catalog.write_text("- Closed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            CatalogTranslator.load_from_yaml(catalog)

    def test_load_from_yaml_missing_file(self, tmp_path):
        """Test that a missing catalog raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            CatalogTranslator.load_from_yaml(tmp_path / "missing.yaml")


class TestPendulumDateFormatter:
    """Tests for PendulumDateFormatter."""

    def test_english_long_date(self):
        """Test the default long date style."""
        formatter = PendulumDateFormatter()
        day = pendulum.parse("2024-12-24", tz="Europe/Berlin")

        assert formatter.format(day, "dddd, MMMM D, YYYY", "en-US") == "Tuesday, December 24, 2024"

    def test_regional_locale_falls_back_to_language(self):
        """Test that a region-qualified locale uses its language's data."""
        formatter = PendulumDateFormatter()
        day = pendulum.parse("2024-11-25", tz="Europe/Berlin")

        assert formatter.format(day, "dddd", "fr-FR") == "lundi"
        assert formatter.format(day, "dddd", "de_DE") == "Montag"

    def test_unknown_locale_falls_back_to_english(self):
        """Test that an unknown locale does not raise."""
        assert resolve_locale("xx-YY") == "en"
        assert resolve_locale("") == "en"
