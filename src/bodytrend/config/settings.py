"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".bodytrend"


def default_config_path() -> Path:
    """Return the default config file path."""
    return _default_config_dir() / "config.yaml"


@dataclass
class AnalysisConfig:
    """Thresholds and windows for progression analysis."""

    plateau_threshold_per_day: float = 0.02
    plateau_min_days: int = 14
    moving_average_window: int = 7
    min_points: int = 5
    prediction_horizon_days: int = 30


@dataclass
class DisplayConfig:
    """Output defaults."""

    language: str = "de"  # "de" or "en"
    output_format: str = "table"  # "table" or "json"


@dataclass
class Settings:
    """Main application settings."""

    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.bodytrend/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        if "analysis" in data:
            an_data = data["analysis"] or {}
            if "plateau_threshold_per_day" in an_data:
                settings.analysis.plateau_threshold_per_day = float(
                    an_data["plateau_threshold_per_day"]
                )
            if "plateau_min_days" in an_data:
                settings.analysis.plateau_min_days = int(an_data["plateau_min_days"])
            if "moving_average_window" in an_data:
                settings.analysis.moving_average_window = int(an_data["moving_average_window"])
            if "min_points" in an_data:
                settings.analysis.min_points = int(an_data["min_points"])
            if "prediction_horizon_days" in an_data:
                settings.analysis.prediction_horizon_days = int(
                    an_data["prediction_horizon_days"]
                )

        if "display" in data:
            disp_data = data["display"] or {}
            if "language" in disp_data:
                settings.display.language = disp_data["language"]
            if "output_format" in disp_data:
                settings.display.output_format = disp_data["output_format"]

        return settings

    def save(self, config_path: Optional[Path] = None) -> Path:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.bodytrend/config.yaml

        Returns:
            The path written
        """
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "analysis": {
                "plateau_threshold_per_day": self.analysis.plateau_threshold_per_day,
                "plateau_min_days": self.analysis.plateau_min_days,
                "moving_average_window": self.analysis.moving_average_window,
                "min_points": self.analysis.min_points,
                "prediction_horizon_days": self.analysis.prediction_horizon_days,
            },
            "display": {
                "language": self.display.language,
                "output_format": self.display.output_format,
            },
        }

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

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
