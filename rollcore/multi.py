"""Batch and parallel shape comparisons on a shared incline."""
from __future__ import annotations

import logging
from dataclasses import replace
from multiprocessing import Pool, cpu_count
from typing import Dict, Iterable, Optional, Tuple

from .params import SimulationParameters
from .physics import ShapeKind
from .single import SimulationResult, run_headless

logger = logging.getLogger(__name__)


def _result_to_dict(result: SimulationResult) -> Dict[str, object]:
    return {
        "time": result.time_to_finish,
        "log": result.physics_log,
        "inertia": result.inertia,
        "acceleration": result.acceleration,
        "travel_time": result.travel_time,
    }


def with_shape(base: SimulationParameters, shape: ShapeKind) -> SimulationParameters:
    # Derived physics is recomputed because replace() rebuilds the value
    return replace(base, shape=shape)


def run_multi(base: SimulationParameters, shapes: Optional[Iterable[ShapeKind]] = None) -> Dict[str, Dict[str, object]]:
    """Roll each shape down the same incline (sequential)."""
    shapes = list(ShapeKind) if shapes is None else [ShapeKind(s) for s in shapes]
    results = {}
    for shape in shapes:
        logger.info("Simulating %s", shape.value)
        results[shape.value] = _result_to_dict(run_headless(with_shape(base, shape)))
    return results


def _sim_worker(args: Tuple[SimulationParameters, ShapeKind]):
    # Child-process worker for multiprocessing Pool
    base, shape = args
    return shape.value, _result_to_dict(run_headless(with_shape(base, shape)))


def run_multi_parallel(
    base: SimulationParameters,
    shapes: Optional[Iterable[ShapeKind]] = None,
    processes: Optional[int] = None,
) -> Dict[str, Dict[str, object]]:
    """Roll several shapes in parallel (headless)."""
    shapes = list(ShapeKind) if shapes is None else [ShapeKind(s) for s in shapes]
    args = [(base, shape) for shape in shapes]
    n_procs = processes or min(cpu_count(), len(args)) or 1
    logger.info("Running %d simulations on %d processes (headless)...", len(args), n_procs)

    results = {}
    with Pool(processes=n_procs) as pool:
        for name, data in pool.map(_sim_worker, args):
            results[name] = data
    return results
