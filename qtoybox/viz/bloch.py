"""Bloch sphere coordinates of real-amplitude qubits.

Real amplitudes keep every state on the great circle ``y = 0``, so the
plotting helper draws the X-Z plane.
"""

from __future__ import annotations

from typing import Optional, Tuple

from qtoybox.quantum.qubit import Qubit

# Type hint for matplotlib Axes (optional dependency)
try:
    from matplotlib.axes import Axes
    from matplotlib import pyplot as plt
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False


def bloch_coords_from_qubit(qubit: Qubit) -> Tuple[float, float, float]:
    """
    Compute Bloch coordinates (x, y, z) of ``qubit``.

    For ``a|0> + b|1>`` with real ``a`` and ``b``:
        x = 2ab
        y = 0
        z = a^2 - b^2

    The amplitudes are used as they are, so an unnormalized qubit yields a
    vector off the unit sphere.
    """
    a = qubit.amp0
    b = qubit.amp1
    return 2.0 * a * b, 0.0, a * a - b * b


def plot_bloch_vector(
    qubit: Qubit,
    ax: Optional["Axes"] = None,
) -> "Axes":
    """
    Plot the Bloch vector of ``qubit`` as an arrow in the X-Z plane.

    Parameters
    ----------
    qubit:
        Qubit to draw.
    ax:
        Matplotlib axes to plot on. If None, creates a new figure.

    Returns
    -------
    matplotlib.axes.Axes
        The axes object used for plotting.

    Raises
    ------
    RuntimeError
        If matplotlib is not installed.
    """
    if not HAS_MATPLOTLIB:
        raise RuntimeError(
            "matplotlib required for plotting; install with pip install matplotlib"
        )

    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))

    x, _, z = bloch_coords_from_qubit(qubit)

    ax.arrow(0, 0, x, z, head_width=0.1, head_length=0.1, fc="green", ec="green")
    ax.set_xlim(-1.2, 1.2)
    ax.set_ylim(-1.2, 1.2)
    ax.set_xlabel("X")
    ax.set_ylabel("Z")
    ax.set_title(f"{qubit} (x={x:.3f}, z={z:.3f})")
    ax.grid(True)
    ax.set_aspect("equal")

    circle = plt.Circle((0, 0), 1.0, fill=False, linestyle="--", color="gray")
    ax.add_patch(circle)

    return ax
