"""Version information for workhere."""

__version__ = "1.0.0"
