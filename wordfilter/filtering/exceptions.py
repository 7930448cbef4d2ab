class FilterError(Exception):
    """Base exception for all word filter errors."""


class ReplacementMethodError(FilterError, ValueError):
    """Raised when an unknown replacement method is selected."""


class SeedLoadError(FilterError):
    """Raised when a named seed dictionary cannot be loaded."""
