"""Closed-form rolling physics.

Inertia of the supported bodies and the kinematics of rolling without
slipping down a straight incline. Everything here is a pure function.
"""
from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Union

import pymunk

from . import constants
from .errors import InvalidParameterError, NonPositiveAccelerationError

logger = logging.getLogger(__name__)


class ShapeKind(str, Enum):
    SOLID_SPHERE = "solid_sphere"
    HOLLOW_SPHERE = "hollow_sphere"
    SOLID_CYLINDER = "solid_cylinder"
    HOLLOW_CYLINDER = "hollow_cylinder"

    @property
    def is_hollow(self) -> bool:
        return self in (ShapeKind.HOLLOW_SPHERE, ShapeKind.HOLLOW_CYLINDER)

    @property
    def is_sphere(self) -> bool:
        return self in (ShapeKind.SOLID_SPHERE, ShapeKind.HOLLOW_SPHERE)


def inner_radius(radius: float, thickness: float) -> float:
    # Walls thicker than the radius collapse to a solid body
    return max(0.0, radius - thickness)


def _zero_wall(shape: ShapeKind) -> float:
    # With no wall the shell ratio is 0/0. The divisor is replaced by 1, which
    # leaves the zero numerator: an input guard, not the thin-shell limit.
    logger.warning("Degenerate %s wall, using unit denominator", shape.value)
    return 0.0


def _shell_ratio(k: float, high: int, low: int) -> float:
    # (1 - k^high) / (1 - k^low) for 0 <= k <= 1, written as a ratio of
    # geometric sums so thin walls (k -> 1) never cancel to 0/0
    return sum(k ** i for i in range(high)) / sum(k ** i for i in range(low))


def compute_inertia(shape: Union[ShapeKind, str], mass: float, radius: float, thickness: float = 0.0) -> float:
    """Moment of inertia of ``shape`` about its rolling axis.

    ``thickness`` is only read for hollow shapes. An unrecognised shape is
    treated as a point mass and yields 0. Hollow shapes use the ratio
    ``(R^n - r^n) / (R^m - r^m)`` in the scaled form ``R^(n-m)`` times a
    function of ``r / R``, so large radii do not overflow.
    """
    try:
        kind = ShapeKind(shape)
    except ValueError:
        logger.debug("Unknown shape %r treated as a point mass", shape)
        return 0.0

    if kind.is_hollow and thickness == 0:
        return _zero_wall(kind)

    r_in = inner_radius(radius, thickness)
    rolling_mass = mass * radius * radius

    if kind is ShapeKind.SOLID_SPHERE:
        inertia = (2 / 5) * rolling_mass
    elif kind is ShapeKind.SOLID_CYLINDER:
        inertia = pymunk.moment_for_circle(mass, 0, radius)
    elif kind is ShapeKind.HOLLOW_SPHERE:
        inertia = (2 / 5) * rolling_mass * _shell_ratio(r_in / radius, 5, 3)
    else:
        # A thick-walled tube is an annulus in cross-section
        inertia = pymunk.moment_for_circle(mass, r_in, radius)

    if not math.isfinite(inertia):
        raise InvalidParameterError("radius", radius, "too large for a finite moment of inertia")
    return inertia


def compute_acceleration(incline_angle_rad: float, inertia: float, mass: float, radius: float) -> float:
    """Acceleration along the incline: ``g sin(theta) / (1 + I / (m r^2))``."""
    rolling_mass = mass * radius * radius
    if not rolling_mass > 0:
        raise InvalidParameterError("mass*radius^2", rolling_mass, "must be positive")

    acceleration = constants.GRAVITY * math.sin(incline_angle_rad) / (1 + inertia / rolling_mass)
    if not acceleration > 0:
        raise NonPositiveAccelerationError(acceleration)
    return acceleration


def compute_travel_time(length: float, acceleration: float) -> float:
    """Time to cover ``length`` from rest, solving ``length = a t^2 / 2``."""
    if not (acceleration > 0 and math.isfinite(acceleration)):
        raise NonPositiveAccelerationError(acceleration)
    # sqrt(2) is split off so 2 * length cannot overflow on its own
    travel_time = math.sqrt(2) * math.sqrt(length / acceleration)
    if not math.isfinite(travel_time):
        raise InvalidParameterError(
            "ramp_length", length, f"not coverable in finite time at acceleration {acceleration!r}"
        )
    return travel_time


def distance_travelled(acceleration: float, elapsed: float, length: float) -> float:
    # Clamped to the finite ramp regardless of how far past arrival we are
    return min(0.5 * acceleration * elapsed * elapsed, length)
