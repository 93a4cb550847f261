"""
Attempt loop driving a mosaic run.

The generator owns the run context (grid, placement list, random stream and
counters) and performs one attempt per iteration: seeding while the attempts
counter is within the seed quota, growth afterwards. A success resets the
miss counter; the run ends once the counter reaches the timeout.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import structlog

from ..config import MosaicParams, Settings, settings as default_settings
from .grid import PlacementGrid, PlacementRecord
from .growth import growth_attempt, seed_attempt
from .random_source import RandomSource

logger = structlog.get_logger()


class Phase(str, Enum):
    """Kind of attempt made by an iteration."""

    SEEDING = "seeding"
    GROWTH = "growth"


@dataclass
class RunState:
    """Counters of a run."""

    misses: int = 0
    max_misses: int = 0
    attempts: int = 0

    def record_success(self) -> None:
        self.misses = 0

    def record_miss(self) -> None:
        self.misses += 1
        self.max_misses = max(self.max_misses, self.misses)


@dataclass
class MosaicRun:
    """Everything a run mutates, owned by one generator."""

    params: MosaicParams
    grid: PlacementGrid
    rng: RandomSource
    state: RunState = field(default_factory=RunState)

    @classmethod
    def start(cls, params: MosaicParams) -> "MosaicRun":
        return cls(
            params=params,
            grid=PlacementGrid(params.size),
            rng=RandomSource(params.seed),
        )


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


class MosaicGenerator:
    """
    Grows a mosaic for one parameter set.

    Args:
        params: Run parameters
        settings: Application settings (walk tracing)
        frame_recorder: Optional object with an ``observe(grid)`` method,
            called at the top of every iteration
    """

    def __init__(
        self,
        params: MosaicParams,
        settings: Optional[Settings] = None,
        frame_recorder=None,
    ):
        self.params = params
        self.settings = settings or default_settings
        self.frame_recorder = frame_recorder
        self.run = MosaicRun.start(params)
        self._start_time = time.monotonic()

    @property
    def finished(self) -> bool:
        return self.run.state.misses >= self.params.timeout

    @property
    def phase(self) -> Phase:
        """Phase of the next attempt."""
        if self.run.state.attempts + 1 <= self.params.num_seeds:
            return Phase.SEEDING
        return Phase.GROWTH

    def generate(self) -> MosaicRun:
        """Run attempts until ``timeout`` consecutive misses."""
        logger.info(
            "Starting mosaic generation",
            size=self.params.size,
            num_samples=self.params.num_samples,
            num_seeds=self.params.num_seeds,
            circle_frac=self.params.circle_frac,
            timeout=self.params.timeout,
            seed=self.params.seed,
        )
        while not self.finished:
            self.run_attempt()

        logger.info(
            "Mosaic generation completed",
            placed=len(self.run.grid),
            attempts=self.run.state.attempts,
            max_misses=self.run.state.max_misses,
            percent_filled=self.run.grid.percent_filled(),
        )
        return self.run

    def run_attempt(self) -> Optional[PlacementRecord]:
        """One loop iteration: progress bookkeeping, then one attempt."""
        run = self.run
        state = run.state

        if self.frame_recorder is not None:
            self.frame_recorder.observe(run.grid)
        if is_power_of_two(state.attempts):
            self._log_progress()

        phase = self.phase
        state.attempts += 1
        color = run.rng.random_color()

        if phase is Phase.SEEDING:
            record = seed_attempt(run.grid, run.rng, color)
        else:
            record = growth_attempt(
                run.grid,
                run.rng,
                color,
                self.params.num_samples,
                self.params.circle_frac,
                trace=self.settings.trace_walk,
            )

        if record is None:
            state.record_miss()
        else:
            state.record_success()
        return record

    def _log_progress(self) -> None:
        run = self.run
        logger.info(
            "Progress",
            percent_filled=run.grid.percent_filled(),
            percent_attempted=int(100.0 * run.state.attempts / run.grid.area),
            max_misses=run.state.max_misses,
            elapsed_seconds=int(time.monotonic() - self._start_time),
        )
