"""Exception types raised while building a dashboard."""


class DashboardError(Exception):
    """Base class for errors that abort a dashboard run."""


class ConfigurationError(DashboardError, ValueError):
    """Invalid arguments or configuration."""


class DiscoveryError(DashboardError):
    """Selector matched neither an organization nor a user."""


class FetchError(DashboardError):
    """A call to the gh CLI failed or returned unusable output."""
