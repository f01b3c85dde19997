import pytest

import ramp_sim


def test_headless_prints_result(capsys):
    assert ramp_sim.main(["--headless", "--shape", "solid_cylinder", "--log-level", "ERROR"]) == 0
    out = capsys.readouterr().out
    assert "shape=solid_cylinder" in out
    assert "inertia=0.125000" in out
    assert "time=1.106" in out


def test_compare_lists_shapes_fastest_first(capsys):
    assert ramp_sim.main(["--compare", "--log-level", "ERROR"]) == 0
    lines = [line for line in capsys.readouterr().out.splitlines() if " I=" in line]
    assert [line.split()[0] for line in lines] == [
        "solid_sphere", "solid_cylinder", "hollow_sphere", "hollow_cylinder"
    ]


def test_invalid_angle_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        ramp_sim.main(["--headless", "--angle", "90", "--log-level", "ERROR"])
    assert excinfo.value.code == 2
    assert "incline_angle_rad" in capsys.readouterr().err


def test_params_from_args():
    args = ramp_sim.build_parser().parse_args(["--diameter", "0.4", "--angle", "45"])
    params = ramp_sim.params_from_args(args)
    assert params.radius == pytest.approx(0.2)
    assert params.angle_deg == pytest.approx(45)


def test_oversized_body_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        ramp_sim.main(["--headless", "--shape", "hollow_sphere", "--diameter", "2e300", "--log-level", "ERROR"])
    assert excinfo.value.code == 2
    assert "radius" in capsys.readouterr().err


def test_log_level_names_are_accepted(capsys):
    assert ramp_sim.main(["--headless", "--log-level", "DEBUG"]) == 0
    assert "Routing rollcore logs" in capsys.readouterr().out
