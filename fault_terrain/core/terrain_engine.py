"""
Concurrent terrain generation engine.

Builds the grid and fault budget, runs one FaultGenerator per thread and
waits for all of them before handing the finished grid to the caller.
"""

import threading
import time
from dataclasses import dataclass
from typing import List, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError, IncompleteGenerationError
from .fault_budget import FaultBudget
from .fault_generator import FaultGenerator
from .grid import Grid

logger = structlog.get_logger()

MIN_DIMENSION = 5


class TerrainConfig(BaseModel):
    """Validated parameters of one generation run."""

    model_config = ConfigDict(strict=True, frozen=True)

    width: int = Field(512, ge=MIN_DIMENSION, description="Grid width")
    height: int = Field(512, ge=MIN_DIMENSION, description="Grid height")
    thread_count: int = Field(1, ge=1, description="Number of generator threads")
    fault_count: int = Field(1000, ge=1, description="Total number of fault passes")


def validate_config(**params) -> TerrainConfig:
    """
    Validate generation parameters.

    Raises:
        ConfigurationError: listing every invalid field
    """
    try:
        return TerrainConfig(**params)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(f"Invalid terrain configuration: {problems}") from e


@dataclass
class GenerationResult:
    """Outcome of one generation run."""

    grid: Grid
    faults_requested: int
    faults_applied: int
    thread_count: int
    elapsed_ms: float

    @property
    def complete(self) -> bool:
        return self.faults_applied == self.faults_requested

    def raise_if_incomplete(self) -> None:
        if not self.complete:
            raise IncompleteGenerationError(
                f"Only {self.faults_applied} of {self.faults_requested} faults were applied"
            )


class TerrainEngine:
    """Runs fault-line generation across a fixed set of threads."""

    def __init__(self):
        self.last_result: Optional[GenerationResult] = None

    @property
    def grid(self) -> Optional[Grid]:
        """Grid produced by the most recent run, if any."""
        return self.last_result.grid if self.last_result else None

    def generate(
        self,
        width: int,
        height: int,
        thread_count: int,
        fault_count: int,
        cancel_event: Optional[threading.Event] = None,
    ) -> GenerationResult:
        """
        Generate a terrain.

        Args:
            width: Grid width, at least 5
            height: Grid height, at least 5
            thread_count: Number of worker threads, at least 1
            fault_count: Total fault passes across all workers, at least 1
            cancel_event: Optional event that stops workers between passes

        Returns:
            GenerationResult holding the finished grid

        Raises:
            ConfigurationError: if any parameter is below its minimum
        """
        config = validate_config(
            width=width, height=height, thread_count=thread_count, fault_count=fault_count
        )

        grid = Grid(config.width, config.height)
        budget = FaultBudget(config.fault_count)
        generators = [
            FaultGenerator(grid, budget, cancel_event, name=f"generator-{i}")
            for i in range(config.thread_count)
        ]
        threads = [
            threading.Thread(target=generator.run, name=generator.name)
            for generator in generators
        ]

        logger.info(
            "Starting terrain generation",
            width=config.width,
            height=config.height,
            threads=config.thread_count,
            faults=config.fault_count,
        )

        time_start = time.perf_counter()
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        elapsed_ms = (time.perf_counter() - time_start) * 1000.0

        self._raise_worker_error(generators)

        result = GenerationResult(
            grid=grid,
            faults_requested=config.fault_count,
            faults_applied=sum(g.faults_applied for g in generators),
            thread_count=config.thread_count,
            elapsed_ms=elapsed_ms,
        )
        self.last_result = result

        logger.info(
            "Terrain generated",
            elapsed_ms=round(elapsed_ms, 3),
            faults_applied=result.faults_applied,
        )
        if not result.complete:
            logger.warning(
                "Terrain generation cancelled",
                faults_applied=result.faults_applied,
                faults_requested=result.faults_requested,
            )

        return result

    def _raise_worker_error(self, generators: List[FaultGenerator]) -> None:
        failed = [g for g in generators if g.error is not None]
        if failed:
            logger.error(
                "Terrain generation failed",
                failed_workers=[g.name for g in failed],
                error=str(failed[0].error),
            )
            raise failed[0].error
