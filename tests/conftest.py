import logging
import os

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from rollcore.params import SimulationParameters


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    # setup_logging binds handlers to the stream captured during a test
    logger = logging.getLogger("rollcore")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sphere_params():
    return SimulationParameters.from_controls(
        shape="solid_sphere", angle_deg=30, length=2.0, diameter=1.0, thickness=0.0, mass=1.0
    )


@pytest.fixture
def cylinder_params():
    return SimulationParameters.from_controls(
        shape="solid_cylinder", angle_deg=30, length=2.0, diameter=1.0, thickness=0.0, mass=1.0
    )
