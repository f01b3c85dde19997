import pytest

from rollcore.multi import run_multi, with_shape
from rollcore.params import SimulationParameters
from rollcore.physics import ShapeKind


@pytest.fixture
def base():
    return SimulationParameters.from_controls(angle_deg=30, length=2.0, diameter=1.0, thickness=0.1, mass=1.0)


def test_run_multi_covers_every_shape(base):
    results = run_multi(base)
    assert set(results) == {s.value for s in ShapeKind}
    for data in results.values():
        assert data["time"] == data["travel_time"]


def test_shape_ranking(base):
    results = run_multi(base)
    ranking = sorted(results, key=lambda name: results[name]["time"])
    assert ranking == ["solid_sphere", "solid_cylinder", "hollow_sphere", "hollow_cylinder"]


def test_run_multi_subset(base):
    results = run_multi(base, ["solid_cylinder"])
    assert list(results) == ["solid_cylinder"]
    assert results["solid_cylinder"]["inertia"] == pytest.approx(0.125)


def test_with_shape_keeps_geometry(base):
    params = with_shape(base, ShapeKind.HOLLOW_SPHERE)
    assert params.shape is ShapeKind.HOLLOW_SPHERE
    assert params.ramp_length == base.ramp_length
    assert params.thickness == base.thickness
    assert params.inertia > base.inertia


def test_parallel_matches_sequential(base):
    from rollcore.multi import run_multi_parallel

    shapes = [ShapeKind.SOLID_SPHERE, ShapeKind.HOLLOW_CYLINDER]
    parallel = run_multi_parallel(base, shapes, processes=2)
    sequential = run_multi(base, shapes)
    assert set(parallel) == set(sequential)
    for name in parallel:
        assert parallel[name]["time"] == sequential[name]["time"]
        assert len(parallel[name]["log"]) == len(sequential[name]["log"])
