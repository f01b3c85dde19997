"""Core simulation constants.

These defaults are shared across headless and interactive runs.
"""

GRAVITY = 9.81            # Gravitational acceleration (m/s^2)
DT = 1 / 60               # Fixed tick for headless runs
FPS = 60                  # Interactive frame rate
MAX_FRAME_DELTA = 0.25    # Upper clamp for a single tick delta (s)

RAMP_WIDTH = 3.0                  # Ramp width across the rolling direction
CYLINDER_LENGTH_FACTOR = 1.2      # Cylinder length as a multiple of its radius

FOV_DEG = 50              # Vertical field of view of the perspective camera
FRAME_PADDING = 1.35      # Margin multiplier applied to the framed box
CANVAS_SCALE = 1.3        # Zoom divisor applied to the framing distance
NEAR = 0.1
FAR = 200

WINDOW_SIZE = (900, 600)

# Control surface defaults and bounds
DEFAULT_ANGLE_DEG = 30.0
DEFAULT_LENGTH = 2.0
DEFAULT_DIAMETER = 1.0
DEFAULT_THICKNESS = 0.1
DEFAULT_MASS = 1.0

ANGLE_RANGE_DEG = (1.0, 89.0)
LENGTH_RANGE = (0.5, 10.0)
DIAMETER_RANGE = (0.1, 2.0)
THICKNESS_RANGE = (0.0, 1.0)
MASS_RANGE = (0.1, 10.0)

ANGLE_STEP_DEG = 1.0
LENGTH_STEP = 0.1
DIAMETER_STEP = 0.05
THICKNESS_STEP = 0.01
MASS_STEP = 0.1
