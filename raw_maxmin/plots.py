"""Result figure for one RAW Max-Min run (PNG).

Four panels, matching the usual RAW grouping report:
- station-to-group assignment matrix
- throughput per RAW group
- traffic distribution across stations
- cumulative throughput with groups sorted largest first
"""

from pathlib import Path

import matplotlib.pyplot as plt

from .views import assignment_matrix, cumulative_throughput, throughput_series, traffic_histogram


def plot_results(result, outfile: str | Path = "raw_maxmin_results.png") -> Path:
    mat = assignment_matrix(result)
    tp = throughput_series(result)
    values, counts = traffic_histogram(result)
    cum = cumulative_throughput(result)
    groups = range(1, len(tp) + 1)

    fig, axes = plt.subplots(2, 2, figsize=(10, 8), dpi=120)
    ax = axes[0, 0]
    im = ax.imshow(mat, aspect="auto", cmap="jet", interpolation="nearest")
    fig.colorbar(im, ax=ax)
    ax.set_title("Station-to-Group Assignment")
    ax.set_xlabel("RAW Groups")
    ax.set_ylabel("Stations")

    ax = axes[0, 1]
    ax.bar(list(groups), tp)
    ax.set_title("Throughput per RAW Group")
    ax.set_xlabel("RAW Groups")
    ax.set_ylabel("Throughput (packets)")

    ax = axes[1, 0]
    ax.bar(values, counts, width=0.9)
    ax.set_title("Traffic Distribution")
    ax.set_xlabel("Number of Packets")
    ax.set_ylabel("Frequency")

    ax = axes[1, 1]
    ax.plot(list(groups), cum, marker="o")
    ax.set_title("Cumulative Throughput")
    ax.set_xlabel("Number of Groups")
    ax.set_ylabel("Cumulative Throughput")

    outp = Path(outfile)
    outp.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(outp)
    plt.close(fig)
    return outp
