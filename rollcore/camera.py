"""Camera presets and bounding-box framing."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

import numpy as np

from . import constants
from .params import SimulationParameters
from .placement import RampTransform, body_extent, compute_pose, ramp_corners

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CameraPreset:
    name: str
    label: str
    direction: Tuple[float, float, float]

    @property
    def unit_direction(self) -> np.ndarray:
        d = np.asarray(self.direction, dtype=float)
        return d / np.linalg.norm(d)


ANGLED = CameraPreset("angled", "View: angled", (-0.8, 0.45, 1.0))
SIDE = CameraPreset("side", "View: side", (-0.25, 0.3, 1.0))
HIGH_SIDE = CameraPreset("high_side", "View: high side", (-1.15, 0.55, 0.35))

PRESETS: Dict[str, CameraPreset] = {p.name: p for p in (ANGLED, SIDE, HIGH_SIDE)}
PRESET_CYCLE: Tuple[CameraPreset, ...] = (ANGLED, HIGH_SIDE, SIDE)


def next_preset(current: CameraPreset) -> CameraPreset:
    # Wraps around; an unknown preset restarts the cycle
    try:
        index = PRESET_CYCLE.index(current)
    except ValueError:
        return PRESET_CYCLE[0]
    return PRESET_CYCLE[(index + 1) % len(PRESET_CYCLE)]


@dataclass(frozen=True, eq=False)
class BoundingBox:
    minimum: np.ndarray
    maximum: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "minimum", np.asarray(self.minimum, dtype=float))
        object.__setattr__(self, "maximum", np.asarray(self.maximum, dtype=float))

    @classmethod
    def from_points(cls, points: Iterable) -> "BoundingBox":
        pts = np.asarray(list(points), dtype=float).reshape(-1, 3)
        return cls(pts.min(axis=0), pts.max(axis=0))

    @property
    def size(self) -> np.ndarray:
        return self.maximum - self.minimum

    @property
    def center(self) -> np.ndarray:
        return 0.5 * (self.minimum + self.maximum)

    def union(self, other: "BoundingBox") -> "BoundingBox":
        return BoundingBox(np.minimum(self.minimum, other.minimum), np.maximum(self.maximum, other.maximum))


@dataclass(frozen=True, eq=False)
class CameraPose:
    position: np.ndarray
    target: np.ndarray
    distance: float
    up: Tuple[float, float, float] = (0.0, 1.0, 0.0)


def scene_bounding_box(params: SimulationParameters, width: float = constants.RAMP_WIDTH) -> BoundingBox:
    """Box around the ramp and the body at both ends of its path."""
    ramp = RampTransform.for_parameters(params)
    box = BoundingBox.from_points(ramp_corners(ramp, width))
    half = body_extent(params.shape, params.radius)
    for t in (0.0, params.travel_time):
        centre = compute_pose(params, t, ramp).position
        box = box.union(BoundingBox(centre - half, centre + half))
    return box


def framing_distance(
    box: BoundingBox,
    fov_rad: float,
    aspect: float,
    padding: float = constants.FRAME_PADDING,
    zoom: float = constants.CANVAS_SCALE,
) -> float:
    """Distance from the box centre at which the padded box fits the view."""
    width, height, depth = (float(v) * padding for v in box.size)
    tan_half = math.tan(fov_rad / 2)
    height_distance = height / (2 * tan_half)
    width_distance = width / (2 * tan_half * aspect)
    return (max(height_distance, width_distance) + 0.5 * depth) / zoom


def compute_camera_pose(
    box: BoundingBox,
    fov_rad: float,
    aspect: float,
    preset: CameraPreset = ANGLED,
    padding: float = constants.FRAME_PADDING,
    zoom: float = constants.CANVAS_SCALE,
) -> CameraPose:
    """Place the camera along ``preset`` so that ``box`` stays in view."""
    distance = framing_distance(box, fov_rad, aspect, padding, zoom)
    center = box.center
    position = center + preset.unit_direction * distance
    logger.debug("camera %s at distance %.4f", preset.name, distance)
    return CameraPose(position=position, target=center, distance=distance)
