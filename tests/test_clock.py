import dataclasses

import pytest

from rollcore import constants
from rollcore.clock import Phase, SimulationClock, sanitize_delta


def test_new_clock_is_idle():
    clock = SimulationClock()
    assert clock.phase is Phase.IDLE
    assert clock.elapsed_time == 0.0
    assert clock.run is None


def test_start_while_idle_is_ignored(caplog):
    clock = SimulationClock()
    assert clock.start() is None
    assert clock.phase is Phase.IDLE
    assert "start ignored" in caplog.text


def test_submit_enters_preview(sphere_params):
    clock = SimulationClock()
    run = clock.submit(sphere_params)
    assert run.phase is Phase.PREVIEW
    assert run.elapsed_time == 0.0
    assert run.parameters is sphere_params


def test_preview_does_not_advance(sphere_params):
    clock = SimulationClock()
    clock.submit(sphere_params)
    clock.tick(0.1)
    assert clock.phase is Phase.PREVIEW
    assert clock.elapsed_time == 0.0


def test_running_accumulates_delta(sphere_params):
    clock = SimulationClock()
    clock.submit(sphere_params)
    clock.start()
    clock.tick(0.1)
    clock.tick(0.2)
    assert clock.phase is Phase.RUNNING
    assert clock.elapsed_time == pytest.approx(0.3)


@pytest.mark.parametrize("delta", [0.0, -0.5, float("nan")])
def test_non_positive_delta_is_a_no_op(sphere_params, delta):
    clock = SimulationClock()
    clock.submit(sphere_params)
    clock.start()
    clock.tick(0.1)
    clock.tick(delta)
    assert clock.elapsed_time == pytest.approx(0.1)


def test_large_delta_is_capped():
    assert sanitize_delta(10.0) == constants.MAX_FRAME_DELTA
    assert sanitize_delta(0.01) == 0.01


def test_finish_clamps_to_exact_travel_time(sphere_params):
    clock = SimulationClock()
    clock.submit(sphere_params)
    clock.start()
    for _ in range(100):
        clock.tick(0.07)
        if clock.phase is Phase.FINISHED:
            break
    assert clock.phase is Phase.FINISHED
    assert clock.elapsed_time == sphere_params.travel_time
    assert clock.run.distance == pytest.approx(sphere_params.ramp_length)


def test_finished_run_stays_put(sphere_params):
    clock = SimulationClock()
    clock.submit(sphere_params)
    clock.start()
    clock.tick(constants.MAX_FRAME_DELTA)
    while clock.phase is Phase.RUNNING:
        clock.tick(constants.MAX_FRAME_DELTA)
    clock.tick(1.0)
    assert clock.elapsed_time == sphere_params.travel_time


def test_restart_after_finish(sphere_params):
    clock = SimulationClock()
    clock.submit(sphere_params)
    clock.start()
    while clock.phase is not Phase.FINISHED:
        clock.tick(0.2)
    run = clock.start()
    assert run.phase is Phase.RUNNING
    assert run.elapsed_time == 0.0


def test_start_while_running_restarts(sphere_params):
    clock = SimulationClock()
    clock.submit(sphere_params)
    clock.start()
    clock.tick(0.2)
    clock.start()
    assert clock.phase is Phase.RUNNING
    assert clock.elapsed_time == 0.0


def test_parameter_change_mid_run_returns_to_preview(sphere_params, cylinder_params):
    clock = SimulationClock()
    clock.submit(sphere_params)
    clock.start()
    clock.tick(0.3)
    run = clock.submit(cylinder_params)
    assert run.phase is Phase.PREVIEW
    assert run.elapsed_time == 0.0
    assert clock.run.parameters is cylinder_params


def test_snapshots_are_replaced_not_mutated(sphere_params):
    clock = SimulationClock()
    first = clock.submit(sphere_params)
    clock.start()
    clock.tick(0.1)
    assert first.phase is Phase.PREVIEW
    assert first.elapsed_time == 0.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        clock.run.elapsed_time = 5.0
