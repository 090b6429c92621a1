"""
Tests for the command line interface.
"""

from pathlib import Path

from typer.testing import CliRunner

from storehours.cli.app import app


runner = CliRunner()


CONFIG_YAML = """
openingHours:
  0: []
  1:
    - {start_time: "09:00", end_time: "12:00"}
    - {start_time: "14:00", end_time: "18:00"}
specialOpeningHours:
  "2024-12-24":
    - {start_time: "09:00", end_time: "13:00", description: "Christmas Eve"}
closingWarningThresold: 30
"""


def _write_config(tmp_path: Path) -> Path:
    config_path = tmp_path / "storehours.yaml"
    config_path.write_text(CONFIG_YAML, encoding="utf-8")
    return config_path


def test_status_reports_label(tmp_path):
    """The status command prints the evaluated label."""
    config_path = _write_config(tmp_path)

    result = runner.invoke(app, ["status", "--config", str(config_path), "--at", "2024-11-25 13:00"])

    assert result.exit_code == 0
    assert "Closed (09:00 - 12:00, 14:00 - 18:00)" in result.output


def test_status_closing_soon(tmp_path):
    """The status command shows the close time near closing."""
    config_path = _write_config(tmp_path)

    result = runner.invoke(app, ["status", "-c", str(config_path), "--at", "2024-11-25 17:45"])

    assert result.exit_code == 0
    assert "Closing soon (18:00)" in result.output
    assert "Closes at: 18:00" in result.output


def test_hours_lists_weekly_and_special(tmp_path):
    """The hours command prints both tables."""
    config_path = _write_config(tmp_path)

    result = runner.invoke(app, ["hours", "--config", str(config_path), "--at", "2024-11-25 10:00"])

    assert result.exit_code == 0
    assert "Monday" in result.output
    assert "Sunday" in result.output
    assert "Christmas Eve" in result.output


def test_missing_config_exits_with_error(tmp_path):
    """A missing configuration file exits with code 1."""
    result = runner.invoke(app, ["status", "--config", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_invalid_at_value(tmp_path):
    """An unparseable --at value exits with code 1."""
    config_path = _write_config(tmp_path)

    result = runner.invoke(app, ["status", "--config", str(config_path), "--at", "tomorrow"])

    assert result.exit_code == 1


def test_version():
    """The version command prints the package version."""
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "storehours" in result.output


def test_status_with_translation_catalog(tmp_path):
    """The --translations catalog is used for the status label."""
    config_path = _write_config(tmp_path)
    catalog_path = tmp_path / "fr.yaml"
    catalog_path.write_text('"Closed (%1)": "Fermé (%1)"\n', encoding="utf-8")

    result = runner.invoke(app, [
        "status",
        "--config", str(config_path),
        "--translations", str(catalog_path),
        "--at", "2024-11-25 13:00",
    ])

    assert result.exit_code == 0
    assert "Fermé (09:00 - 12:00, 14:00 - 18:00)" in result.output


def test_missing_translation_catalog_exits_with_error(tmp_path):
    """A missing catalog file exits with code 1."""
    config_path = _write_config(tmp_path)

    result = runner.invoke(app, [
        "status",
        "--config", str(config_path),
        "--translations", str(tmp_path / "missing.yaml"),
    ])

    assert result.exit_code == 1
    assert "Translation catalog not found" in result.output
