"""Parameter sweep over station count, group count and arrival rate.

Every grid point is an independent run with its own random generator,
spawned from one seed so the whole sweep is reproducible.
"""

import csv
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd

from .config import DEFAULT_SLOTS, RawConfig
from .kpi import fairness_or_nan
from .simulation import run_simulation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SweepGrid:
    n_stations: Sequence[int] = (50, 100, 150, 200)
    n_groups: Sequence[int] = (2, 4, 6, 8)
    arrival_rates: Sequence[float] = (1.0, 3.0, 5.0, 7.0)
    n_slots: int = DEFAULT_SLOTS

    def configs(self) -> List[RawConfig]:
        return [
            RawConfig(n_groups=g, n_stations=s, arrival_rate=r, n_slots=self.n_slots)
            for s in self.n_stations
            for g in self.n_groups
            for r in self.arrival_rates
        ]


@dataclass
class SweepRow:
    """One sweep result."""
    n_stations: int
    n_groups: int
    arrival_rate: float
    avg_throughput: float
    fairness: float


def run_sweep(grid: Optional[SweepGrid] = None, seed: Optional[int] = None) -> List[SweepRow]:
    grid = grid or SweepGrid()
    configs = grid.configs()
    children = np.random.SeedSequence(seed).spawn(len(configs))
    rows: List[SweepRow] = []
    for cfg, child in zip(configs, children):
        res = run_simulation(cfg, rng=np.random.default_rng(child))
        rows.append(SweepRow(
            n_stations=cfg.n_stations,
            n_groups=cfg.n_groups,
            arrival_rate=cfg.arrival_rate,
            avg_throughput=float(np.mean(res.throughput)),
            fairness=fairness_or_nan(res.throughput),
        ))
    logger.info("Sweep finished: %d runs", len(rows))
    return rows


def rows_to_table(rows: Iterable[SweepRow]) -> List[List[str]]:
    """Convert sweep rows to a simple table (strings) for printing or CSV export."""
    table = [["n_stations", "n_groups", "arrival_rate", "avg_throughput", "fairness"]]
    for r in rows:
        table.append([
            str(r.n_stations),
            str(r.n_groups),
            f"{r.arrival_rate:g}",
            f"{r.avg_throughput:.2f}",
            f"{r.fairness:.4f}",
        ])
    return table


def print_table(table: List[List[str]]) -> None:
    """Pretty-print a simple table to the console."""
    widths = [max(len(row[i]) for row in table) for i in range(len(table[0]))]
    for row in table:
        print("  ".join(cell.ljust(widths[j]) for j, cell in enumerate(row)))


def save_sweep_csv(rows: Iterable[SweepRow], path: str | Path) -> Path:
    table = rows_to_table(rows)
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        csv.writer(f).writerows(table)
    return p


def sweep_to_frame(rows: Iterable[SweepRow]) -> pd.DataFrame:
    """Sweep rows as a DataFrame (numeric columns, one row per run)."""
    return pd.DataFrame([asdict(r) for r in rows],
                        columns=["n_stations", "n_groups", "arrival_rate", "avg_throughput", "fairness"])
