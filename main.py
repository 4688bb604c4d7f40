"""
Симуляция пускового тока трёхфазного двигателя.

    python main.py --motor woundRotor --angle 90 --plot output/inrush.png
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from core.catalog import describe_catalog, lookup, motor_ids
from core.errors import InrushSimulationError
from core.parameters import SimulationRequest
from scenarios.motor_start import DirectOnLineStartScenario
from simulation import SimulationBuilder

_DEFAULTS = SimulationRequest()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Three-phase motor inrush current simulation."
    )
    parser.add_argument("--motor", default="squirrelCage", choices=motor_ids(),
                        help="Motor type from the catalog.")
    parser.add_argument("--power", type=float, default=_DEFAULTS.rated_power_kw,
                        help="Rated power, kW (0.75 .. 37).")
    parser.add_argument("--voltage", type=float, default=_DEFAULTS.rated_voltage_v,
                        help="Rated line voltage, V (200, 400, 6600).")
    parser.add_argument("--frequency", type=float, default=_DEFAULTS.frequency_hz,
                        help="Supply frequency, Hz (50, 60).")
    parser.add_argument("--angle", type=float, default=_DEFAULTS.switching_angle_deg,
                        help="Switching angle, degrees [0, 360).")
    parser.add_argument("--tau-dc", type=float, default=_DEFAULTS.dc_time_constant_ms,
                        help="DC offset time constant, ms (10 .. 200).")
    parser.add_argument("--stop-time", type=float, default=_DEFAULTS.stop_time_ms,
                        help="Dead time before connection, ms (0 .. 100).")
    parser.add_argument("--cycles", type=int, default=_DEFAULTS.view_cycles,
                        help="Supply cycles after connection (3 .. 30).")
    parser.add_argument("--list", action="store_true",
                        help="Print the motor catalog and exit.")
    parser.add_argument("--csv", type=Path, default=None,
                        help="Write samples to this CSV file.")
    parser.add_argument("--plot", type=Path, default=None,
                        help="Save waveform plot to this file.")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log progress.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        print(describe_catalog())
        return 0

    scenario = DirectOnLineStartScenario(
        motor_id=args.motor,
        rated_power_kw=args.power,
        rated_voltage_v=args.voltage,
        frequency_hz=args.frequency,
        switching_angle_deg=args.angle,
        dc_time_constant_ms=args.tau_dc,
        stop_time_ms=args.stop_time,
        view_cycles=args.cycles,
    )

    try:
        res = SimulationBuilder().scenario(scenario).run()
    except InrushSimulationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print("\n")
    print(f"  {scenario.describe()}")
    print(lookup(args.motor).info())
    print(res.request.info())
    print("\n")
    print(res.summary())
    print("\n")

    if args.csv is not None:
        res.save_csv(args.csv)
        print(f"  Saved CSV: {args.csv}")

    if args.plot is not None:
        from plotting import plot_inrush

        args.plot.parent.mkdir(parents=True, exist_ok=True)
        plot_inrush(res, save_path=str(args.plot))
        print(f"  Saved plot: {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
