"""Read-only numeric views of a run for plotting/reporting collaborators."""

from typing import Tuple

import numpy as np


def assignment_matrix(result) -> np.ndarray:
    """Station x group indicator matrix."""
    return result.assignment.matrix


def throughput_series(result) -> np.ndarray:
    """Per-group throughput (bar series)."""
    return result.throughput


def traffic_histogram(result) -> Tuple[np.ndarray, np.ndarray]:
    """Distinct traffic values and how many stations offered each."""
    values, counts = np.unique(np.asarray(result.traffic_load), return_counts=True)
    return values, counts


def cumulative_throughput(result) -> np.ndarray:
    """Running total of throughput with groups sorted largest first."""
    tp = np.sort(np.asarray(result.throughput, dtype=float))[::-1]
    return np.cumsum(tp)
