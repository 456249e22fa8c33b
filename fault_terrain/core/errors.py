"""Exceptions raised by terrain generation."""


class ConfigurationError(ValueError):
    """Generation parameters violate their minimums."""


class DegenerateGridError(ConfigurationError):
    """Grid is too small to pick two distinct fault endpoints."""


class IncompleteGenerationError(RuntimeError):
    """Generation stopped before every requested fault was applied."""
