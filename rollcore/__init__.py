"""Rolling-body kinematics on an inclined plane."""
from .camera import PRESET_CYCLE, PRESETS, BoundingBox, CameraPose, CameraPreset, compute_camera_pose
from .clock import Phase, SimulationClock, SimulationRun
from .engine import FrameOutput, RollingEngine
from .errors import InvalidParameterError, NonPositiveAccelerationError, RollingSimError
from .params import SimulationParameters
from .physics import ShapeKind, compute_acceleration, compute_inertia, compute_travel_time
from .placement import BodyPose, RampTransform, compute_pose

__all__ = [
    "BodyPose",
    "BoundingBox",
    "CameraPose",
    "CameraPreset",
    "FrameOutput",
    "InvalidParameterError",
    "NonPositiveAccelerationError",
    "PRESETS",
    "PRESET_CYCLE",
    "Phase",
    "RampTransform",
    "RollingEngine",
    "RollingSimError",
    "ShapeKind",
    "SimulationClock",
    "SimulationParameters",
    "SimulationRun",
    "compute_acceleration",
    "compute_camera_pose",
    "compute_inertia",
    "compute_pose",
    "compute_travel_time",
]
