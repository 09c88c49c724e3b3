"""CLI to run a RAW Max-Min simulation or the default parameter sweep.

Usage:
    python -m raw_maxmin.cli --groups 4 --stations 100 --rate 5 --seed 1 --plot results.png
    python -m raw_maxmin.cli --sweep --seed 1 --out sweep.csv
"""

import argparse
import logging
from pathlib import Path

from .config import DEFAULT_GROUP_DURATION_MS, DEFAULT_SLOTS, RawConfig
from .errors import RawMaxMinError
from .kpi import performance_summary
from .plots import plot_results
from .simulation import run_simulation
from .sweep import SweepGrid, print_table, rows_to_table, run_sweep, save_sweep_csv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="RAW Max-Min grouping simulation")
    parser.add_argument("--groups", type=int, default=4)
    parser.add_argument("--stations", type=int, default=100)
    parser.add_argument("--rate", type=float, default=5.0, help="Poisson mean packets per station")
    parser.add_argument("--slots", type=int, default=DEFAULT_SLOTS)
    parser.add_argument("--duration", type=float, default=DEFAULT_GROUP_DURATION_MS, help="RAW group duration (ms)")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--plot", type=Path, default=None, help="save the results figure (PNG)")
    parser.add_argument("--sweep", action="store_true", help="run the default parameter sweep instead")
    parser.add_argument("--out", type=Path, default=None, help="sweep CSV output path")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        level=logging.INFO if args.verbose else logging.WARNING,
    )

    if args.sweep:
        try:
            rows = run_sweep(SweepGrid(n_slots=args.slots), seed=args.seed)
        except RawMaxMinError as exc:
            parser.error(str(exc))
        print_table(rows_to_table(rows))
        if args.out is not None:
            save_sweep_csv(rows, args.out)
            print(f"Saved {len(rows)} rows to {args.out}")
        return 0

    try:
        cfg = RawConfig(
            n_groups=args.groups,
            n_stations=args.stations,
            arrival_rate=args.rate,
            n_slots=args.slots,
            group_duration=args.duration,
        )
    except RawMaxMinError as exc:
        parser.error(str(exc))

    res = run_simulation(cfg, seed=args.seed)
    metrics = performance_summary(res)
    print("Performance Metrics:")
    print(f"Average Throughput: {metrics['avg_throughput']:.2f} packets")
    print(f"Total Throughput: {metrics['total_throughput']:.2f} packets")
    print(f"Fairness Index: {metrics['fairness']:.4f}")
    print(f"Load Imbalance (max/min): {metrics['load_imbalance']:.3f}")
    if args.plot is not None:
        out = plot_results(res, args.plot)
        print(f"Saved figure to {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
