"""Frame-driven engine tying parameters, clock, placement and camera together.

One :class:`RollingEngine` serves one view. Within a tick the order is
fixed: clock advance, then body placement, then camera framing, then the
frame is handed to the renderer.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from . import constants
from .camera import ANGLED, CameraPose, CameraPreset, compute_camera_pose, next_preset, scene_bounding_box
from .clock import Phase, SimulationClock, SimulationRun
from .errors import InvalidParameterError
from .params import SimulationParameters
from .placement import BodyPose, RampTransform, compute_pose, ramp_corners

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class RampDescriptor:
    length: float
    angle_rad: float
    width: float
    corners: np.ndarray
    normal: np.ndarray


@dataclass(frozen=True, eq=False)
class FrameOutput:
    phase: Phase
    elapsed_time: float
    ramp: RampDescriptor
    body: BodyPose
    camera: CameraPose
    preset: CameraPreset


class RollingEngine:
    """Command surface for a single rolling-body view."""

    def __init__(
        self,
        viewport: Tuple[int, int] = constants.WINDOW_SIZE,
        fov_deg: float = constants.FOV_DEG,
        preset: CameraPreset = ANGLED,
    ) -> None:
        self.clock = SimulationClock()
        self.fov_rad = math.radians(fov_deg)
        self.preset = preset
        width, height = viewport
        if not (width > 0 and height > 0):
            raise InvalidParameterError("viewport", viewport, "width and height must be positive")
        self._width, self._height = width, height
        self._ramp: Optional[RampDescriptor] = None
        self._camera: Optional[CameraPose] = None

    # ---- commands -------------------------------------------------

    def submit_parameters(self, params: SimulationParameters) -> SimulationRun:
        """Replace the current run with a fresh preview of ``params``.

        ``params`` is already validated; anything else is rejected before
        the current state is touched.
        """
        if not isinstance(params, SimulationParameters):
            raise TypeError(f"expected SimulationParameters, got {type(params).__name__}")
        run = self.clock.submit(params)
        ramp = RampTransform.for_parameters(params)
        self._ramp = RampDescriptor(
            length=params.ramp_length,
            angle_rad=params.incline_angle_rad,
            width=constants.RAMP_WIDTH,
            corners=ramp_corners(ramp),
            normal=ramp.normal,
        )
        self._reframe()
        return run

    def start_run(self) -> Optional[SimulationRun]:
        return self.clock.start()

    def cycle_preset(self) -> CameraPreset:
        self.preset = next_preset(self.preset)
        logger.info("Camera preset: %s", self.preset.name)
        self._reframe()
        return self.preset

    def on_viewport_resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            logger.warning("Ignoring viewport size %sx%s", width, height)
            return
        self._width, self._height = width, height
        self._reframe()

    def tick(self, delta_seconds: float) -> Optional[FrameOutput]:
        """Advance one frame and return what the renderer should draw."""
        self.clock.tick(delta_seconds)
        return self.frame()

    # ---- queries --------------------------------------------------

    def current_phase(self) -> Phase:
        return self.clock.phase

    def current_elapsed_time(self) -> float:
        return self.clock.elapsed_time

    def current_travel_time(self) -> Optional[float]:
        run = self.clock.run
        return run.parameters.travel_time if run is not None else None

    @property
    def parameters(self) -> Optional[SimulationParameters]:
        run = self.clock.run
        return run.parameters if run is not None else None

    @property
    def aspect(self) -> float:
        return self._width / self._height

    @property
    def viewport(self) -> Tuple[int, int]:
        return self._width, self._height

    @property
    def camera(self) -> Optional[CameraPose]:
        return self._camera

    def frame(self) -> Optional[FrameOutput]:
        run = self.clock.run
        if run is None:
            return None
        body = compute_pose(run.parameters, run.elapsed_time)
        return FrameOutput(
            phase=run.phase,
            elapsed_time=run.elapsed_time,
            ramp=self._ramp,
            body=body,
            camera=self._camera,
            preset=self.preset,
        )

    # ---- internals ------------------------------------------------

    def _reframe(self) -> None:
        params = self.parameters
        if params is None:
            return
        box = scene_bounding_box(params)
        self._camera = compute_camera_pose(box, self.fov_rad, self.aspect, self.preset)
