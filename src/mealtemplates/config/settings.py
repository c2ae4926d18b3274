"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from mealtemplates.template.models import DEFAULT_MEAL_PLAN_TYPE


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".mealtemplates"


@dataclass
class ScalingConfig:
    """Portion scaling configuration."""

    default_portion_scale: float = 1.0


@dataclass
class AssignmentConfig:
    """Bulk assignment defaults."""

    meal_plan_type: str = DEFAULT_MEAL_PLAN_TYPE
    assigned_by: Optional[str] = None


@dataclass
class LoggingConfig:
    """Logging configuration for the command line."""

    level: str = "WARNING"


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    output_format: str = "table"  # "table", "json", "markdown"


@dataclass
class Settings:
    """Main application settings."""

    scaling: ScalingConfig = field(default_factory=ScalingConfig)
    assignment: AssignmentConfig = field(default_factory=AssignmentConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.mealtemplates/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse scaling config
        if "scaling" in data:
            scaling_data = data["scaling"] or {}
            if "default_portion_scale" in scaling_data:
                settings.scaling.default_portion_scale = float(
                    scaling_data["default_portion_scale"]
                )

        # Parse assignment config
        if "assignment" in data:
            assignment_data = data["assignment"] or {}
            if "meal_plan_type" in assignment_data:
                settings.assignment.meal_plan_type = str(assignment_data["meal_plan_type"])
            if "assigned_by" in assignment_data:
                settings.assignment.assigned_by = assignment_data["assigned_by"]

        # Parse logging config
        if "logging" in data:
            logging_data = data["logging"] or {}
            if "level" in logging_data:
                settings.logging.level = str(logging_data["level"]).upper()

        # Parse defaults
        if "defaults" in data:
            def_data = data["defaults"] or {}
            if "output_format" in def_data:
                settings.defaults.output_format = def_data["output_format"]

        return settings

    def to_dict(self) -> dict:
        return {
            "scaling": {
                "default_portion_scale": self.scaling.default_portion_scale,
            },
            "assignment": {
                "meal_plan_type": self.assignment.meal_plan_type,
                "assigned_by": self.assignment.assigned_by,
            },
            "logging": {
                "level": self.logging.level,
            },
            "defaults": {
                "output_format": self.defaults.output_format,
            },
        }

    def save(self, config_path: Optional[Path] = None) -> Path:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.mealtemplates/config.yaml

        Returns:
            Path the settings were written to
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
        return config_path


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings
