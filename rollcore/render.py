"""Perspective drawing of a rolling-body frame with pygame."""
from __future__ import annotations

import math
from typing import Tuple

import numpy as np
import pygame

from . import constants
from .camera import CameraPose
from .engine import FrameOutput
from .params import SimulationParameters
from .physics import inner_radius

BACKGROUND = (250, 250, 250)
GRID_COLOR = (200, 200, 200)
RAMP_COLOR = (14, 165, 233)
RAMP_EDGE = (8, 100, 150)
BODY_COLOR = (212, 175, 55)
HOLLOW_COLOR = (231, 235, 240)
STRIPE_COLOR = (248, 250, 252)


def view_basis(camera: CameraPose) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Right, up and forward unit vectors of a look-at camera."""
    forward = camera.target - camera.position
    forward = forward / np.linalg.norm(forward)
    right = np.cross(forward, np.asarray(camera.up, dtype=float))
    right = right / np.linalg.norm(right)
    up = np.cross(right, forward)
    return right, up, forward


def project_points(
    points: np.ndarray,
    camera: CameraPose,
    fov_rad: float,
    aspect: float,
    viewport: Tuple[int, int],
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Project world points to pixel coordinates.

    Returns ``(pixels, depth, visible)``; ``visible`` is False for points
    closer than the near plane, whose pixel values are meaningless.
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 3)
    right, up, forward = view_basis(camera)
    rel = pts - camera.position
    xc, yc, depth = rel @ right, rel @ up, rel @ forward

    visible = depth > constants.NEAR
    safe_depth = np.where(visible, depth, 1.0)
    tan_half = math.tan(fov_rad / 2)
    x_ndc = xc / (safe_depth * tan_half * aspect)
    y_ndc = yc / (safe_depth * tan_half)

    width, height = viewport
    pixels = np.column_stack(((x_ndc + 1) * 0.5 * width, (1 - y_ndc) * 0.5 * height))
    return pixels, depth, visible


class SceneRenderer:
    """Draws frames from :class:`RollingEngine` onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, fov_rad: float, grid_extent: int = 10) -> None:
        self.surface = surface
        self.fov_rad = fov_rad
        self.grid_extent = grid_extent

    def _project(self, points, camera: CameraPose):
        w, h = self.surface.get_size()
        return project_points(points, camera, self.fov_rad, w / max(h, 1), (w, h))

    def _line(self, camera: CameraPose, a, b, color, width: int = 1) -> None:
        px, _, vis = self._project([a, b], camera)
        if vis.all():
            pygame.draw.line(self.surface, color, px[0], px[1], width)

    def draw(self, frame: FrameOutput, params: SimulationParameters) -> None:
        self.surface.fill(BACKGROUND)
        camera = frame.camera

        n = self.grid_extent
        for i in range(-n, n + 1):
            self._line(camera, (i, 0, -n), (i, 0, n), GRID_COLOR)
            self._line(camera, (-n, 0, i), (n, 0, i), GRID_COLOR)

        px, _, vis = self._project(frame.ramp.corners, camera)
        if vis.all():
            pygame.draw.polygon(self.surface, RAMP_COLOR, px)
            pygame.draw.polygon(self.surface, RAMP_EDGE, px, 2)

        self._draw_body(frame, params)

    def _draw_body(self, frame: FrameOutput, params: SimulationParameters) -> None:
        camera = frame.camera
        centre = frame.body.position
        px, depth, vis = self._project(centre, camera)
        if not vis[0]:
            return
        _, h = self.surface.get_size()
        scale = 0.5 * h / (depth[0] * math.tan(self.fov_rad / 2))
        cx, cy = px[0]
        radius_px = max(2, int(params.radius * scale))
        pygame.draw.circle(self.surface, BODY_COLOR, (int(cx), int(cy)), radius_px)

        if params.shape.is_hollow:
            r_in = inner_radius(params.radius, params.thickness)
            if r_in > 0:
                pygame.draw.circle(self.surface, HOLLOW_COLOR, (int(cx), int(cy)), max(1, int(r_in * scale)))

        # Marker stripe turns with the body so rolling is visible
        angle = frame.body.rotation_angle
        for offset in (0.0, math.pi / 2):
            a = angle + offset
            rim = np.array([0.0, math.cos(a), math.sin(a)]) * params.radius
            self._line(camera, centre - rim, centre + rim, STRIPE_COLOR, 2)
