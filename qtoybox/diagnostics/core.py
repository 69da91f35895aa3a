"""Normalization diagnostics for real-amplitude qubits."""

from __future__ import annotations

import math
from typing import Optional

NORMALIZATION_ATOL = 1e-3


def amplitude_norm(amp0: float, amp1: float) -> float:
    """
    Return the L2 norm of the amplitude pair ``(amp0, amp1)``.

    Parameters
    ----------
    amp0:
        Amplitude of the |0> basis state.
    amp1:
        Amplitude of the |1> basis state.

    Returns
    -------
    float
        ``sqrt(amp0**2 + amp1**2)``.
    """
    return math.sqrt(amp0 * amp0 + amp1 * amp1)


def is_normalized(
    amp0: float,
    amp1: float,
    atol: float = NORMALIZATION_ATOL,
) -> bool:
    """
    Check whether the probabilities ``amp0**2 + amp1**2`` sum to 1.

    The tolerance applies to the probability sum, not to the norm.
    """
    total = amp0 * amp0 + amp1 * amp1
    if not math.isfinite(total):
        return False
    return abs(total - 1.0) <= atol


def assert_normalized(
    amp0: float,
    amp1: float,
    atol: float = NORMALIZATION_ATOL,
    label: Optional[str] = None,
) -> None:
    """
    Assert that an amplitude pair describes a normalized state.

    Parameters
    ----------
    amp0, amp1:
        Amplitudes of |0> and |1>.
    atol:
        Absolute tolerance for ``|amp0**2 + amp1**2 - 1|``.
    label:
        Optional description of the offending state, prefixed to the
        error message (for example ``"Qubit at index 3"``).

    Raises
    ------
    ValueError
        If the state is not normalized within the tolerance.
    """
    if is_normalized(amp0, amp1, atol=atol):
        return
    total = amp0 * amp0 + amp1 * amp1
    subject = label if label is not None else "State"
    raise ValueError(
        f"{subject} is not normalized within tolerance {atol}: "
        f"amp0={amp0}, amp1={amp1}, probability sum={total}"
    )
