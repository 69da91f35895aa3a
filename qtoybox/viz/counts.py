"""Bar charts of measurement histograms."""

from __future__ import annotations

from typing import Mapping, Optional

try:
    from matplotlib.axes import Axes
    from matplotlib import pyplot as plt
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False


def plot_counts(
    counts: Mapping[str, int],
    ax: Optional["Axes"] = None,
    title: Optional[str] = None,
) -> "Axes":
    """
    Draw ``counts`` (bitstring -> occurrences) as a bar chart.

    Bars are ordered by bitstring. Keys may be plain bitstrings (``'010'``)
    or ket labels (``'|010>'``).

    Raises
    ------
    ValueError
        If ``counts`` is empty.
    RuntimeError
        If matplotlib is not installed.
    """
    if not HAS_MATPLOTLIB:
        raise RuntimeError(
            "matplotlib required for plotting; install with pip install matplotlib"
        )
    if not counts:
        raise ValueError("counts must contain at least one outcome.")

    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 4))

    labels = sorted(counts)
    values = [counts[label] for label in labels]
    ax.bar(range(len(labels)), values, color="steelblue")
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels)
    ax.set_xlabel("Outcome")
    ax.set_ylabel("Count")
    ax.set_title(title if title is not None else f"{sum(values)} shots")

    return ax
