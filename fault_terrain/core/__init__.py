"""
Core terrain generation functionality.
"""

from .errors import ConfigurationError, DegenerateGridError, IncompleteGenerationError
from .fault_budget import FaultBudget
from .fault_generator import FaultGenerator, is_left, left_mask
from .grid import Grid, Point, TerrainStats
from .terrain_engine import GenerationResult, TerrainConfig, TerrainEngine, validate_config

__all__ = ['Grid', 'Point', 'TerrainStats', 'FaultBudget',
           'FaultGenerator', 'is_left', 'left_mask',
           'TerrainEngine', 'TerrainConfig', 'GenerationResult', 'validate_config',
           'ConfigurationError', 'DegenerateGridError', 'IncompleteGenerationError']
