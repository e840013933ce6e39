"""Version information for date-facades."""

__version__ = "0.1.0"
