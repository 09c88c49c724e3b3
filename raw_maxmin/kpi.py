from typing import Iterable

import numpy as np

from .throughput import group_collision_probabilities
from .errors import DegenerateMetricError


def jain_fairness_index(throughput: Iterable[float]) -> float:
    """Jain's fairness index (sum x)^2 / (n * sum x^2).

    Args:
        throughput: per-group throughput values (non-negative)
    Returns:
        index in [1/n, 1]; 1 means every group gets the same throughput
    Raises:
        DegenerateMetricError: if the vector is empty or all zero (0/0)
    """
    x = np.asarray(list(throughput), dtype=float)
    if x.size == 0:
        raise DegenerateMetricError("fairness of an empty throughput vector is undefined")
    sum_sq = float(np.sum(x ** 2))
    if sum_sq == 0.0:
        raise DegenerateMetricError("fairness of an all-zero throughput vector is undefined")
    return float(np.sum(x)) ** 2 / (x.size * sum_sq)


def fairness_or_nan(throughput: Iterable[float]) -> float:
    """Like :func:`jain_fairness_index` but returns NaN for degenerate input (for reports)."""
    try:
        return jain_fairness_index(throughput)
    except DegenerateMetricError:
        return float("nan")


def performance_summary(result) -> dict:
    """Compute simple metrics from a run result (object with config/group_load/throughput/assignment).

    Returns a dict with throughput, fairness, group load and collision stats.
    Fairness is NaN when every group has zero throughput.
    """
    tp = np.asarray(result.throughput, dtype=float)
    loads = np.asarray(result.group_load, dtype=float)
    total = float(tp.sum())
    min_load = float(loads.min())
    max_load = float(loads.max())
    if min_load > 0:
        imbalance = max_load / min_load
    else:
        imbalance = float("inf") if max_load > 0 else 1.0

    colls = group_collision_probabilities(result.assignment, result.config.n_slots)
    # NaN marks empty groups
    mean_coll = float(np.nanmean(colls)) if not np.isnan(colls).all() else 0.0

    return {
        "avg_throughput": float(tp.mean()),
        "total_throughput": total,
        "throughput_per_s": total / (result.config.simulation_time / 1000.0),
        "fairness": fairness_or_nan(tp),
        "min_group_load": min_load,
        "max_group_load": max_load,
        "load_imbalance": imbalance,
        "mean_collision_probability": mean_coll,
    }
