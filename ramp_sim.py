"""Command-line entry point for the rolling-body simulation."""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from rollcore import constants
from rollcore.errors import RollingSimError
from rollcore.logging_config import setup_logging
from rollcore.params import SimulationParameters
from rollcore.physics import ShapeKind


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Roll a sphere or cylinder down an incline.")
    parser.add_argument("--shape", choices=[s.value for s in ShapeKind], default=ShapeKind.SOLID_SPHERE.value)
    parser.add_argument("--angle", type=float, default=constants.DEFAULT_ANGLE_DEG, help="Incline angle in degrees.")
    parser.add_argument("--length", type=float, default=constants.DEFAULT_LENGTH, help="Ramp length in metres.")
    parser.add_argument("--diameter", type=float, default=constants.DEFAULT_DIAMETER, help="Body diameter in metres.")
    parser.add_argument("--thickness", type=float, default=constants.DEFAULT_THICKNESS,
                        help="Wall thickness in metres (hollow shapes only).")
    parser.add_argument("--mass", type=float, default=constants.DEFAULT_MASS, help="Body mass in kg.")
    parser.add_argument("--headless", action="store_true", help="Print the result without opening a window.")
    parser.add_argument("--compare", action="store_true", help="Compare all shapes on the same incline.")
    parser.add_argument("--replay", action="store_true", help="With --compare, replay the runs in a grid window.")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    return parser


def params_from_args(args: argparse.Namespace) -> SimulationParameters:
    return SimulationParameters.from_controls(
        shape=args.shape,
        angle_deg=args.angle,
        length=args.length,
        diameter=args.diameter,
        thickness=args.thickness,
        mass=args.mass,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        params = params_from_args(args)
    except RollingSimError as exc:
        parser.error(str(exc))

    if args.compare:
        from rollcore.multi import run_multi

        results = run_multi(params)
        for name, data in sorted(results.items(), key=lambda kv: kv[1]["travel_time"]):
            print(f"{name:16s} I={data['inertia']:.4f}  a={data['acceleration']:.4f} m/s^2  "
                  f"t={data['travel_time']:.4f} s")
        if args.replay:
            from rollcore.visualize import visualize_results_grid

            visualize_results_grid(params, results)
        return 0

    if args.headless:
        print(f"shape={params.shape.value}")
        print(f"inertia={params.inertia:.6f}")
        print(f"acceleration={params.acceleration:.6f}")
        print(f"time={params.travel_time:.6f}")
        return 0

    from rollcore.single import run_sim

    result = run_sim(params, display=True)
    if result.time_to_finish is not None:
        print(f"{result.shape.value}: finished in {result.time_to_finish:.3f} s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
