"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .domain.exceptions import ConfigurationError

DEFAULT_CONFIG_FILENAME = "storehours.yaml"


class StoreHoursConfig(BaseModel):
    """
    Store schedule configuration.

    Field aliases mirror the keys emitted by the store backend
    (``openingHours``, ``closingWarningThresold``, ...), so its JSON/YAML
    payload can be loaded unchanged.
    """
    model_config = ConfigDict(populate_by_name=True)

    opening_hours: Dict[Any, Any] = Field(default_factory=dict, alias="openingHours")
    special_opening_hours: Dict[Any, Any] = Field(default_factory=dict, alias="specialOpeningHours")
    date_format: str = Field(default="YYYY-MM-DD", alias="dateFormat")
    time_format: str = Field(default="HH:mm", alias="timeFormat")
    locale: str = "en_US"
    closing_warning_threshold: int = Field(alias="closingWarningThresold", ge=0)
    timezone: str = "Europe/Berlin"
    special_date_style: str = Field(default="dddd, MMMM D, YYYY", alias="specialDateStyle")
    translations: Dict[str, str] = Field(default_factory=dict)

    @field_validator("opening_hours", "special_opening_hours", mode="before")
    @classmethod
    def validate_calendar(cls, value: Any) -> Any:
        """Treat an empty YAML value as an empty calendar."""
        if value is None:
            return {}
        return value

    @field_validator("date_format", "time_format", "locale", "timezone", "special_date_style")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        """Ensure format strings and identifiers are not blank."""
        if not value.strip():
            raise ValueError("value must not be blank")
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "StoreHoursConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            StoreHoursConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a {DEFAULT_CONFIG_FILENAME} file. "
                f"See storehours.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigurationError("Config file must contain a mapping at the root level.")

        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration in {config_path}:\n{exc}") from exc


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for storehours.yaml in current directory
    config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / DEFAULT_CONFIG_FILENAME

    return config_path
