"""Fault-line terrain generator."""

from .core import Grid, TerrainEngine, GenerationResult, ConfigurationError

__version__ = "0.1.0"

__all__ = ["Grid", "TerrainEngine", "GenerationResult", "ConfigurationError"]
