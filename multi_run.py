from rollcore.logging_config import setup_logging
from rollcore.multi import run_multi_parallel
from rollcore.params import SimulationParameters
from rollcore.visualize import visualize_results_grid

if __name__ == "__main__":
    setup_logging()

    base = SimulationParameters.from_controls(angle_deg=30, length=2.0, diameter=1.0, thickness=0.1, mass=1.0)

    # 1) Run every shape in parallel, headless
    results = run_multi_parallel(base)

    for name, data in sorted(results.items(), key=lambda kv: kv[1]["time"]):
        print(f"{name}: t={data['time']:.4f} s  a={data['acceleration']:.4f} m/s^2")

    # 2) Replay all runs in one Pygame window
    visualize_results_grid(base, results, window_size=(1200, 800))
