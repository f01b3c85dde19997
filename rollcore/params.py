"""Immutable simulation parameters and their derived physics."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Union

from . import constants
from .errors import InvalidParameterError
from .physics import ShapeKind, compute_acceleration, compute_inertia, compute_travel_time

logger = logging.getLogger(__name__)


def _check_finite(name: str, value: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(name, value, "must be a number") from None
    if not math.isfinite(number):
        raise InvalidParameterError(name, value, "must be finite")
    return number


@dataclass(frozen=True)
class SimulationParameters:
    """One complete parameter set for a rolling body on an incline.

    Validation happens on construction; derived physics (inertia,
    acceleration, travel time) is computed once and stored with the value.
    """

    shape: ShapeKind
    radius: float
    mass: float
    incline_angle_rad: float
    ramp_length: float
    thickness: float = 0.0

    inertia: float = field(init=False)
    acceleration: float = field(init=False)
    travel_time: float = field(init=False)

    def __post_init__(self) -> None:
        try:
            shape = ShapeKind(self.shape)
        except ValueError:
            raise InvalidParameterError("shape", self.shape, "unknown shape") from None

        radius = _check_finite("radius", self.radius)
        mass = _check_finite("mass", self.mass)
        angle = _check_finite("incline_angle_rad", self.incline_angle_rad)
        length = _check_finite("ramp_length", self.ramp_length)
        thickness = _check_finite("thickness", self.thickness)

        if radius <= 0:
            raise InvalidParameterError("radius", radius, "must be positive")
        if mass <= 0:
            raise InvalidParameterError("mass", mass, "must be positive")
        if not 0 < angle < math.pi / 2:
            raise InvalidParameterError("incline_angle_rad", angle, "must lie strictly between 0 and pi/2")
        if length <= 0:
            raise InvalidParameterError("ramp_length", length, "must be positive")
        if thickness < 0:
            raise InvalidParameterError("thickness", thickness, "must not be negative")

        inertia = compute_inertia(shape, mass, radius, thickness)
        acceleration = compute_acceleration(angle, inertia, mass, radius)
        travel_time = compute_travel_time(length, acceleration)

        # Frozen dataclass: normalised inputs and derived values are set once here
        for name, value in (
            ("shape", shape),
            ("radius", radius),
            ("mass", mass),
            ("incline_angle_rad", angle),
            ("ramp_length", length),
            ("thickness", thickness),
            ("inertia", inertia),
            ("acceleration", acceleration),
            ("travel_time", travel_time),
        ):
            object.__setattr__(self, name, value)

        logger.debug(
            "%s: I=%.6g a=%.6g t=%.6g", shape.value, inertia, acceleration, travel_time
        )

    @classmethod
    def from_controls(
        cls,
        shape: Union[ShapeKind, str] = ShapeKind.SOLID_SPHERE,
        angle_deg: float = constants.DEFAULT_ANGLE_DEG,
        length: float = constants.DEFAULT_LENGTH,
        diameter: float = constants.DEFAULT_DIAMETER,
        thickness: float = constants.DEFAULT_THICKNESS,
        mass: float = constants.DEFAULT_MASS,
    ) -> "SimulationParameters":
        """Build parameters from control-surface units (degrees, diameter)."""
        angle_deg = _check_finite("angle_deg", angle_deg)
        diameter = _check_finite("diameter", diameter)
        return cls(
            shape=shape,
            radius=diameter / 2,
            mass=mass,
            incline_angle_rad=math.radians(angle_deg),
            ramp_length=length,
            thickness=thickness,
        )

    @property
    def angle_deg(self) -> float:
        return math.degrees(self.incline_angle_rad)

    @property
    def diameter(self) -> float:
        return 2 * self.radius
