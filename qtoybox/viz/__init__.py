"""Visualization helpers for qubits and measurement histograms.

Plotting requires matplotlib; coordinate helpers do not.
"""

from .bloch import bloch_coords_from_qubit, plot_bloch_vector
from .counts import plot_counts

__all__ = [
    "bloch_coords_from_qubit",
    "plot_bloch_vector",
    "plot_counts",
]
