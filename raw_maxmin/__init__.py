from .errors import (
    RawMaxMinError,
    ConfigurationError,
    DimensionMismatchError,
    DegenerateMetricError,
)
from .config import (
    RawConfig,
    DEFAULT_SLOTS,
    DEFAULT_GROUP_DURATION_MS,
    DEFAULT_SIMULATION_TIME_MS,
)
from .traffic import generate_poisson_traffic, generate_traffic
from .collision import collision_probability, success_probability
from .assigner import Assignment, max_min_assign
from .throughput import estimate_throughput, group_collision_probabilities
from .kpi import jain_fairness_index, fairness_or_nan, performance_summary
from .simulation import (
    RunResult,
    run_max_min_scheduling,
    compute_fairness_index,
    run_simulation,
)
from .views import (
    assignment_matrix,
    throughput_series,
    traffic_histogram,
    cumulative_throughput,
)
from .plots import plot_results
from .sweep import (
    SweepGrid,
    SweepRow,
    run_sweep,
    rows_to_table,
    print_table,
    save_sweep_csv,
    sweep_to_frame,
)

__all__ = [
    "RawMaxMinError",
    "ConfigurationError",
    "DimensionMismatchError",
    "DegenerateMetricError",
    "RawConfig",
    "DEFAULT_SLOTS",
    "DEFAULT_GROUP_DURATION_MS",
    "DEFAULT_SIMULATION_TIME_MS",
    "generate_poisson_traffic",
    "generate_traffic",
    "collision_probability",
    "success_probability",
    "Assignment",
    "max_min_assign",
    "estimate_throughput",
    "group_collision_probabilities",
    "jain_fairness_index",
    "fairness_or_nan",
    "performance_summary",
    "RunResult",
    "run_max_min_scheduling",
    "compute_fairness_index",
    "run_simulation",
    "assignment_matrix",
    "throughput_series",
    "traffic_histogram",
    "cumulative_throughput",
    "plot_results",
    "SweepGrid",
    "SweepRow",
    "run_sweep",
    "rows_to_table",
    "print_table",
    "save_sweep_csv",
    "sweep_to_frame",
]
