"""Configuration management for the Actions dashboard."""

from .duration import parse_lookback
from .loader import Config, default_config_path, load_config
from .models import ConfigModel, DashboardConfig, GhConfig, ThemeConfig

__all__ = [
    "Config",
    "ConfigModel",
    "DashboardConfig",
    "GhConfig",
    "ThemeConfig",
    "default_config_path",
    "load_config",
    "parse_lookback",
]
