"""Dashboard data collection."""

from .collector import DashboardCollector, err_console

__all__ = ["DashboardCollector", "err_console"]
