"""Shared helpers: random-source resolution and ket-notation rendering.

Amplitudes are rendered with three decimals and trailing zeros stripped, so
``1/sqrt(2)`` prints as ``0.707`` and ``0.5`` as ``0.5``. Pairs whose
amplitudes both have magnitude ``0.707`` get the named ``1/√2`` forms.
"""

from __future__ import annotations

from typing import Union

import numpy as np

RandomSource = Union[np.random.Generator, int, None]

_HALF = "0.707"
_MINUS_HALF = "-0.707"


def resolve_rng(rng: RandomSource = None) -> np.random.Generator:
    """Return ``rng`` if it is a Generator, otherwise seed a new one from it."""

    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def format_amplitude(value: float) -> str:
    """Format ``value`` to three decimals with trailing zeros removed."""

    return f"{value:.3f}".rstrip("0")


def render_amplitude_pair(
    amp0: float,
    amp1: float,
    zero_ket: str = "0",
    one_ket: str = "1",
    named_states: bool = True,
) -> str:
    """
    Render a superposition ``amp0|zero_ket> + amp1|one_ket>``.

    ``named_states`` selects the single-qubit shorthands ``|+>`` and ``|->``;
    multi-qubit callers pass ``False`` to get the explicit ``1/√2`` sums.
    Exact basis states are not special-cased here.
    """

    zero = format_amplitude(amp0)
    one = format_amplitude(amp1)
    ket0 = f"|{zero_ket}>"
    ket1 = f"|{one_ket}>"

    if one.startswith(_HALF) and zero.startswith(_HALF):
        return "|+>" if named_states else f"1/√2({ket0} + {ket1})"
    if one.startswith(_MINUS_HALF) and zero.startswith(_HALF):
        return "|->" if named_states else f"1/√2({ket0} - {ket1})"
    if one.startswith(_HALF) and zero.startswith(_MINUS_HALF):
        return f"(-1/√2{ket0} + 1/√2{ket1})"
    if one.startswith(_MINUS_HALF) and zero.startswith(_MINUS_HALF):
        return f"-1/√2({ket0} + {ket1})"
    if one == zero:
        return f"{zero}({ket0} + {ket1})"
    return f"({zero}{ket0} + {one}{ket1})"


__all__ = [
    "RandomSource",
    "format_amplitude",
    "render_amplitude_pair",
    "resolve_rng",
]
