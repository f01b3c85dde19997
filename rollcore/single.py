"""Single simulation runner (headless or interactive).

Headless runs feed the engine a fixed ``DT`` and record a kinematic log;
interactive runs take their frame delta from the pygame clock and let
the user change parameters while watching the body roll.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

import pygame

from . import constants
from .clock import Phase
from .engine import FrameOutput, RollingEngine
from .errors import RollingSimError
from .params import SimulationParameters
from .physics import ShapeKind

logger = logging.getLogger(__name__)

SHAPE_KEYS = {
    pygame.K_1: ShapeKind.SOLID_SPHERE,
    pygame.K_2: ShapeKind.HOLLOW_SPHERE,
    pygame.K_3: ShapeKind.SOLID_CYLINDER,
    pygame.K_4: ShapeKind.HOLLOW_CYLINDER,
}

# key -> (control name, step sign, step size, allowed range)
ADJUST_KEYS = {
    pygame.K_UP: ("angle_deg", +1, constants.ANGLE_STEP_DEG, constants.ANGLE_RANGE_DEG),
    pygame.K_DOWN: ("angle_deg", -1, constants.ANGLE_STEP_DEG, constants.ANGLE_RANGE_DEG),
    pygame.K_RIGHT: ("length", +1, constants.LENGTH_STEP, constants.LENGTH_RANGE),
    pygame.K_LEFT: ("length", -1, constants.LENGTH_STEP, constants.LENGTH_RANGE),
    pygame.K_RIGHTBRACKET: ("diameter", +1, constants.DIAMETER_STEP, constants.DIAMETER_RANGE),
    pygame.K_LEFTBRACKET: ("diameter", -1, constants.DIAMETER_STEP, constants.DIAMETER_RANGE),
    pygame.K_EQUALS: ("thickness", +1, constants.THICKNESS_STEP, constants.THICKNESS_RANGE),
    pygame.K_MINUS: ("thickness", -1, constants.THICKNESS_STEP, constants.THICKNESS_RANGE),
    pygame.K_PERIOD: ("mass", +1, constants.MASS_STEP, constants.MASS_RANGE),
    pygame.K_COMMA: ("mass", -1, constants.MASS_STEP, constants.MASS_RANGE),
}


@dataclass
class SimulationResult:
    """Container for the output of a single simulation run."""

    shape: ShapeKind
    time_to_finish: Optional[float]
    physics_log: List[Dict[str, Any]]
    inertia: float
    acceleration: float
    travel_time: float


def controls_for(params: SimulationParameters) -> Dict[str, Any]:
    return {
        "shape": params.shape,
        "angle_deg": params.angle_deg,
        "length": params.ramp_length,
        "diameter": params.diameter,
        "thickness": params.thickness,
        "mass": params.mass,
    }


def adjust_control(controls: Dict[str, Any], key: int) -> Dict[str, Any]:
    # Return a new control dict with the key's effect applied (unknown keys: unchanged)
    updated = dict(controls)
    if key in SHAPE_KEYS:
        updated["shape"] = SHAPE_KEYS[key]
    elif key in ADJUST_KEYS:
        name, sign, step, (low, high) = ADJUST_KEYS[key]
        updated[name] = round(min(high, max(low, controls[name] + sign * step)), 6)
    return updated


def log_frame(physics_log: List[Dict[str, Any]], frame: FrameOutput, params: SimulationParameters) -> None:
    # Capture kinematics and energies for the current frame
    t = frame.elapsed_time
    s = frame.body.distance
    speed = params.acceleration * t
    omega = speed / params.radius
    height = (params.ramp_length - s) * math.sin(params.incline_angle_rad)
    ke_trans = 0.5 * params.mass * speed ** 2
    ke_rot = 0.5 * params.inertia * omega ** 2
    pe = params.mass * constants.GRAVITY * height
    x, y, z = (float(v) for v in frame.body.position)

    physics_log.append({
        "t": t,
        "s": s,
        "x": x,
        "y": y,
        "z": z,
        "angle": frame.body.rotation_angle,
        "speed": speed,
        "omega": omega,
        "KE_trans": ke_trans,
        "KE_rot": ke_rot,
        "PE": pe,
        "TE": ke_trans + ke_rot + pe,
        "phase": frame.phase.value,
    })


def run_headless(params: SimulationParameters, dt: float = constants.DT, max_steps: int = 1_000_000) -> SimulationResult:
    """Roll ``params`` to the end of the ramp with a fixed tick."""
    engine = RollingEngine()
    engine.submit_parameters(params)
    engine.start_run()

    physics_log: List[Dict[str, Any]] = []
    frame = engine.frame()
    log_frame(physics_log, frame, params)

    for _ in range(max_steps):
        frame = engine.tick(dt)
        log_frame(physics_log, frame, params)
        if frame.phase is Phase.FINISHED:
            return SimulationResult(params.shape, frame.elapsed_time, physics_log,
                                    params.inertia, params.acceleration, params.travel_time)

    logger.warning("Run did not finish within %d steps", max_steps)
    return SimulationResult(params.shape, None, physics_log, params.inertia, params.acceleration, params.travel_time)


def run_sim(
    params: Optional[SimulationParameters] = None,
    display: bool = True,
    show_buttons: bool = True,
    fps: int = constants.FPS,
    tick_source: Optional[Callable[[], float]] = None,
) -> SimulationResult:
    """Run a single simulation.

    With ``display=False`` this is :func:`run_headless`. Otherwise a
    pygame window opens and stays until closed; the returned result holds
    the log of the last run that was started.
    """
    if params is None:
        params = SimulationParameters.from_controls()
    if not display:
        return run_headless(params)

    # Deferred so headless use never needs the renderer
    from .render import SceneRenderer

    pygame.init()
    screen = pygame.display.set_mode(constants.WINDOW_SIZE, pygame.RESIZABLE)
    pygame.display.set_caption("Rolling Down an Incline")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 24)
    if tick_source is None:
        def tick_source() -> float:
            return clock.tick(fps) / 1000.0

    engine = RollingEngine(viewport=screen.get_size())
    engine.submit_parameters(params)
    renderer = SceneRenderer(screen, engine.fov_rad)
    controls = controls_for(params)
    physics_log: List[Dict[str, Any]] = []
    finish_time: Optional[float] = None

    def layout() -> Tuple[pygame.Rect, pygame.Rect]:
        w, _ = screen.get_size()
        return pygame.Rect(w - 150, 20, 130, 44), pygame.Rect(w - 150, 74, 130, 36)

    def apply(new_controls: Dict[str, Any]) -> None:
        # Invalid combinations keep the previous scene
        nonlocal controls, params, finish_time
        try:
            candidate = SimulationParameters.from_controls(**new_controls)
        except RollingSimError as exc:
            logger.warning("Rejected parameters: %s", exc)
            return
        controls, params, finish_time = new_controls, candidate, None
        engine.submit_parameters(candidate)
        physics_log.clear()

    def start() -> None:
        nonlocal finish_time
        if engine.start_run() is not None:
            physics_log.clear()
            finish_time = None

    while True:
        start_button, view_button = layout()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                return SimulationResult(params.shape, finish_time, physics_log,
                                        params.inertia, params.acceleration, params.travel_time)
            if event.type == pygame.VIDEORESIZE:
                if screen.get_size() != (event.w, event.h):
                    screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                    renderer.surface = screen
                engine.on_viewport_resize(event.w, event.h)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if show_buttons and start_button.collidepoint(event.pos):
                    start()
                elif show_buttons and view_button.collidepoint(event.pos):
                    engine.cycle_preset()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    pygame.event.post(pygame.event.Event(pygame.QUIT))
                elif event.key == pygame.K_SPACE:
                    start()
                elif event.key == pygame.K_v:
                    engine.cycle_preset()
                else:
                    updated = adjust_control(controls, event.key)
                    if updated != controls:
                        apply(updated)

        was_running = engine.current_phase() is Phase.RUNNING
        frame = engine.tick(tick_source())
        if was_running:
            log_frame(physics_log, frame, params)
            if frame.phase is Phase.FINISHED:
                finish_time = frame.elapsed_time

        renderer.draw(frame, params)

        overlay_lines = [
            f"shape: {params.shape.value}  (1-4)",
            f"angle: {params.angle_deg:.0f} deg  (up/down)",
            f"length: {params.ramp_length:.2f} m  (left/right)",
            f"diameter: {params.diameter:.2f} m  ([ ])",
            f"thickness: {params.thickness:.2f} m  (- =)",
            f"mass: {params.mass:.1f} kg  (, .)",
            f"a: {params.acceleration:.3f} m/s^2",
            f"t: {frame.elapsed_time:.2f} s / {params.travel_time:.2f} s",
            f"phase: {frame.phase.value}",
        ]
        for i, line in enumerate(overlay_lines):
            screen.blit(font.render(line, True, (30, 30, 30)), (10, 10 + 22 * i))

        if show_buttons:
            pygame.draw.rect(screen, (70, 140, 220), start_button)
            screen.blit(font.render("START", True, (255, 255, 255)), (start_button.x + 38, start_button.y + 14))
            pygame.draw.rect(screen, (90, 90, 90), view_button)
            screen.blit(font.render(engine.preset.label, True, (255, 255, 255)), (view_button.x + 6, view_button.y + 10))

        pygame.display.flip()
