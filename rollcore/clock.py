"""Simulation lifecycle: idle, preview, running, finished.

The clock owns a single :class:`SimulationRun` snapshot and swaps it for a
new one on every transition; a snapshot is never edited in place.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from . import constants
from .params import SimulationParameters
from .physics import distance_travelled

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    PREVIEW = "preview"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass(frozen=True)
class SimulationRun:
    parameters: SimulationParameters
    elapsed_time: float = 0.0
    phase: Phase = Phase.PREVIEW

    @property
    def distance(self) -> float:
        return distance_travelled(self.parameters.acceleration, self.elapsed_time, self.parameters.ramp_length)


def sanitize_delta(delta_seconds: float) -> float:
    # Negative, NaN and zero deltas never move time; huge stalls are capped
    if not delta_seconds > 0:
        return 0.0
    return min(delta_seconds, constants.MAX_FRAME_DELTA)


class SimulationClock:
    """Advances the current run by externally supplied frame deltas."""

    def __init__(self) -> None:
        self._run: Optional[SimulationRun] = None

    @property
    def run(self) -> Optional[SimulationRun]:
        return self._run

    @property
    def phase(self) -> Phase:
        return self._run.phase if self._run is not None else Phase.IDLE

    @property
    def elapsed_time(self) -> float:
        return self._run.elapsed_time if self._run is not None else 0.0

    def _swap(self, run: SimulationRun) -> SimulationRun:
        if self._run is None or self._run.phase is not run.phase:
            logger.debug("phase %s -> %s", self.phase.value, run.phase.value)
        self._run = run
        return run

    def submit(self, parameters: SimulationParameters) -> SimulationRun:
        """Discard any current run and preview ``parameters`` from rest."""
        return self._swap(SimulationRun(parameters, 0.0, Phase.PREVIEW))

    def start(self) -> Optional[SimulationRun]:
        """Start (or restart) the current run from rest."""
        if self._run is None:
            logger.warning("start ignored: no parameters submitted yet")
            return None
        run = self._swap(replace(self._run, elapsed_time=0.0, phase=Phase.RUNNING))
        logger.info("Run started (%s, expected %.3fs)", run.parameters.shape.value, run.parameters.travel_time)
        return run

    def tick(self, delta_seconds: float) -> Optional[SimulationRun]:
        """Advance a running simulation; other phases are left unchanged."""
        run = self._run
        if run is None or run.phase is not Phase.RUNNING:
            return run

        delta = sanitize_delta(delta_seconds)
        if delta == 0.0:
            return run

        params = run.parameters
        elapsed = run.elapsed_time + delta
        if 0.5 * params.acceleration * elapsed * elapsed >= params.ramp_length:
            # Stop exactly at the end of the ramp instead of one tick past it
            finished = self._swap(replace(run, elapsed_time=params.travel_time, phase=Phase.FINISHED))
            logger.info("Run finished after %.3fs", finished.elapsed_time)
            return finished
        return self._swap(replace(run, elapsed_time=elapsed))
