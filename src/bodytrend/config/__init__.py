"""Configuration loading."""

from bodytrend.config.settings import (
    AnalysisConfig,
    DisplayConfig,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "AnalysisConfig",
    "DisplayConfig",
    "Settings",
    "get_settings",
    "reload_settings",
]
