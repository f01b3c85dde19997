"""Placement of the rolling body on the incline.

Scene convention: +Y is up and the ramp is tilted about the X axis. Its
raised end lies toward +Z and its lower edge sits on the ground plane
(y = 0). The body starts at the raised end and rolls toward -Z.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from . import constants
from .params import SimulationParameters
from .physics import ShapeKind, distance_travelled

LOCAL_UP = np.array([0.0, 1.0, 0.0])
SPIN_AXIS = np.array([1.0, 0.0, 0.0])


def rotation_x(angle_rad: float) -> np.ndarray:
    c, s = math.cos(angle_rad), math.sin(angle_rad)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0, c, -s],
        [0.0, s, c],
    ])


@dataclass(frozen=True)
class RampTransform:
    """Placement of a ramp of ``length`` tilted by ``angle_rad``."""

    length: float
    angle_rad: float

    @property
    def rotation(self) -> np.ndarray:
        # Negative tilt lifts the +Z end
        return rotation_x(-self.angle_rad)

    @property
    def translation(self) -> np.ndarray:
        return np.array([0.0, 0.5 * self.length * math.sin(self.angle_rad), 0.0])

    @property
    def normal(self) -> np.ndarray:
        n = self.rotation @ LOCAL_UP
        return n / np.linalg.norm(n)

    def to_world(self, local_points: np.ndarray) -> np.ndarray:
        """Map ramp-local points (N x 3 or a single 3-vector) into the scene."""
        pts = np.asarray(local_points, dtype=float)
        return pts @ self.rotation.T + self.translation

    @classmethod
    def for_parameters(cls, params: SimulationParameters) -> "RampTransform":
        return cls(params.ramp_length, params.incline_angle_rad)


@dataclass(frozen=True, eq=False)
class BodyPose:
    position: np.ndarray
    rotation_angle: float
    distance: float

    @property
    def spin_axis(self) -> np.ndarray:
        return SPIN_AXIS


def ramp_corners(ramp: RampTransform, width: float = constants.RAMP_WIDTH) -> np.ndarray:
    """World-space corners of the ramp surface, ordered around the quad."""
    hw, hl = 0.5 * width, 0.5 * ramp.length
    local = np.array([
        [-hw, 0.0, hl],
        [hw, 0.0, hl],
        [hw, 0.0, -hl],
        [-hw, 0.0, -hl],
    ])
    return ramp.to_world(local)


def compute_pose(params: SimulationParameters, elapsed_time: float, ramp: Optional[RampTransform] = None) -> BodyPose:
    """Pose of the body ``elapsed_time`` seconds after release.

    Computed directly from the travelled distance, so identical inputs
    always give identical output and no rotation error accumulates.
    """
    if ramp is None:
        ramp = RampTransform.for_parameters(params)

    s = distance_travelled(params.acceleration, elapsed_time, params.ramp_length)
    surface_point = ramp.to_world(np.array([0.0, 0.0, 0.5 * params.ramp_length - s]))
    position = surface_point + ramp.normal * params.radius

    return BodyPose(position=position, rotation_angle=-(s / params.radius), distance=s)


def body_extent(shape: ShapeKind, radius: float) -> np.ndarray:
    """Half-size of the body's axis-aligned box; cylinders lie along X."""
    if ShapeKind(shape).is_sphere:
        return np.array([radius, radius, radius])
    return np.array([0.5 * constants.CYLINDER_LENGTH_FACTOR * radius, radius, radius])
