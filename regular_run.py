from rollcore.logging_config import setup_logging
from rollcore.params import SimulationParameters
from rollcore.single import run_sim

# Example interactive run: hollow cylinder on a 25 degree ramp

setup_logging()

params = SimulationParameters.from_controls(
    shape="hollow_cylinder",
    angle_deg=25,
    length=3.0,
    diameter=0.8,
    thickness=0.05,
    mass=2.0,
)

result = run_sim(params, display=True)

if result.time_to_finish is not None:
    print(f"{result.shape.value} -> time={result.time_to_finish:.4f} s")
