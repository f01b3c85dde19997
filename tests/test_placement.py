import math

import numpy as np
import pytest

from rollcore.physics import ShapeKind
from rollcore.placement import RampTransform, body_extent, compute_pose, ramp_corners


def test_ramp_normal_is_perpendicular_to_slope(sphere_params):
    ramp = RampTransform.for_parameters(sphere_params)
    theta = sphere_params.incline_angle_rad
    slope = np.array([0.0, math.sin(theta), math.cos(theta)])
    assert np.dot(ramp.normal, slope) == pytest.approx(0.0, abs=1e-12)
    assert np.linalg.norm(ramp.normal) == pytest.approx(1.0)
    assert ramp.normal[1] > 0


def test_ramp_rests_on_ground(sphere_params):
    corners = ramp_corners(RampTransform.for_parameters(sphere_params))
    heights = corners[:, 1]
    assert heights.min() == pytest.approx(0.0, abs=1e-12)
    assert heights.max() == pytest.approx(sphere_params.ramp_length * math.sin(sphere_params.incline_angle_rad))


def test_start_pose_is_at_raised_end(sphere_params):
    pose = compute_pose(sphere_params, 0.0)
    ramp = RampTransform.for_parameters(sphere_params)
    contact = pose.position - sphere_params.radius * ramp.normal
    assert contact == pytest.approx(np.array([0.0, 1.0, math.sqrt(3) / 2]))
    assert pose.rotation_angle == 0.0
    assert pose.distance == 0.0


def test_end_pose_is_at_ground(sphere_params):
    pose = compute_pose(sphere_params, sphere_params.travel_time)
    ramp = RampTransform.for_parameters(sphere_params)
    contact = pose.position - sphere_params.radius * ramp.normal
    assert contact == pytest.approx(np.array([0.0, 0.0, -math.sqrt(3) / 2]))
    assert pose.distance == pytest.approx(sphere_params.ramp_length)
    assert pose.rotation_angle == pytest.approx(-sphere_params.ramp_length / sphere_params.radius)


def test_body_sits_radius_above_surface(sphere_params):
    ramp = RampTransform.for_parameters(sphere_params)
    corner = ramp_corners(ramp)[0]
    for t in (0.0, 0.4, 0.9):
        pose = compute_pose(sphere_params, t)
        height_above_plane = np.dot(pose.position - corner, ramp.normal)
        assert height_above_plane == pytest.approx(sphere_params.radius)


def test_pose_is_clamped_past_arrival(sphere_params):
    late = compute_pose(sphere_params, sphere_params.travel_time * 3)
    end = compute_pose(sphere_params, sphere_params.travel_time * 2)
    assert late.distance == sphere_params.ramp_length
    assert np.array_equal(late.position, end.position)
    assert late.rotation_angle == end.rotation_angle


def test_pose_is_reproducible(sphere_params):
    a = compute_pose(sphere_params, 0.5123)
    b = compute_pose(sphere_params, 0.5123)
    assert np.array_equal(a.position, b.position)
    assert a.rotation_angle == b.rotation_angle


def test_body_moves_downhill_and_spins_forward(sphere_params):
    times = np.linspace(0.0, sphere_params.travel_time, 12)
    poses = [compute_pose(sphere_params, t) for t in times]
    heights = [p.position[1] for p in poses]
    angles = [p.rotation_angle for p in poses]
    assert heights == sorted(heights, reverse=True)
    assert angles == sorted(angles, reverse=True)
    for pose in poses:
        assert pose.rotation_angle == pytest.approx(-pose.distance / sphere_params.radius)


def test_body_extent():
    assert body_extent(ShapeKind.SOLID_SPHERE, 0.5) == pytest.approx(np.array([0.5, 0.5, 0.5]))
    assert body_extent(ShapeKind.HOLLOW_CYLINDER, 0.5) == pytest.approx(np.array([0.3, 0.5, 0.5]))
