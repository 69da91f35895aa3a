"""
Single qubit with two real amplitudes and in-place gate operations.

A :class:`Qubit` stores the amplitude of ``|0>`` and of ``|1>`` as plain
floats. Gates mutate those floats directly and never raise: a gate whose
precondition is not met leaves the qubit untouched. Normalization is only
checked when a qubit is measured, or after every gate while debug mode is on.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional

from qtoybox.diagnostics import assert_normalized, is_debug_enabled
from qtoybox.logging import get_logger

from .utils import RandomSource, render_amplitude_pair, resolve_rng

logger = get_logger(__name__)

CNOT_PROBABILITY_THRESHOLD = 0.5
ORACLE_TAG = "U_f"

_SQRT2 = math.sqrt(2.0)


class OracleType(Enum):
    """The four one-bit Deutsch-Jozsa oracles, keyed by their output bit."""

    CONSTANT_ZERO = 0
    CONSTANT_ONE = 1
    BALANCED_ONE_FOR_ONE = 2
    BALANCED_ONE_FOR_ZERO = 3

    @property
    def output(self) -> int:
        """Bit returned by the oracle for the fixed implicit input."""
        return _ORACLE_OUTPUTS[self]

    @property
    def is_constant(self) -> bool:
        return self in (OracleType.CONSTANT_ZERO, OracleType.CONSTANT_ONE)


_ORACLE_OUTPUTS = {
    OracleType.CONSTANT_ZERO: 0,
    OracleType.CONSTANT_ONE: 1,
    OracleType.BALANCED_ONE_FOR_ONE: 1,
    OracleType.BALANCED_ONE_FOR_ZERO: 0,
}


def classify_oracle(value: float) -> OracleType:
    """Map a uniform draw in ``[0, 1)`` onto one of four equally likely oracles."""

    if value < 0.25:
        return OracleType.CONSTANT_ZERO
    if value < 0.50:
        return OracleType.CONSTANT_ONE
    if value < 0.75:
        return OracleType.BALANCED_ONE_FOR_ONE
    return OracleType.BALANCED_ONE_FOR_ZERO


class Qubit:
    """A qubit ``amp0|0> + amp1|1>`` with real amplitudes, ``|0>`` by default."""

    def __init__(self, amp0: float = 1.0, amp1: float = 0.0) -> None:
        self.amp0 = float(amp0)
        self.amp1 = float(amp1)
        # Display-only marker set by the oracle.
        self.function_tag: Optional[str] = None

    def __repr__(self) -> str:
        return f"Qubit(amp0={self.amp0!r}, amp1={self.amp1!r})"

    def __str__(self) -> str:
        prefix = self.function_tag or ""
        if self.amp1 == 0.0:
            return f"{prefix}{self.amp0}|0>"
        if self.amp0 == 0.0:
            return f"{prefix}{self.amp1}|1>"
        return prefix + render_amplitude_pair(self.amp0, self.amp1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Qubit):
            return NotImplemented
        return self.amp0 == other.amp0 and self.amp1 == other.amp1

    __hash__ = None  # type: ignore[assignment]

    def _swap(self) -> None:
        self.amp0, self.amp1 = self.amp1, self.amp0

    def _check(self, gate: str) -> None:
        if is_debug_enabled():
            assert_normalized(self.amp0, self.amp1, label=f"Qubit after {gate}")

    def apply_xor(self) -> None:
        """Bit flip: exchange the two amplitudes."""
        self._swap()
        self._check("XOR")

    def apply_hadamard(self) -> None:
        """
        Hadamard transform, defined only on the two classical basis states.

        When neither amplitude is exactly zero the qubit is already in a
        superposition and the call leaves it unchanged, so a second Hadamard
        does not undo the first.
        """
        if self.amp0 == 0.0 or self.amp1 == 0.0:
            amp0 = (self.amp0 + self.amp1) / _SQRT2
            amp1 = (self.amp0 - self.amp1) / _SQRT2
            self.amp0, self.amp1 = amp0, amp1
        else:
            logger.debug("Hadamard skipped on superposed %r", self)
        self._check("Hadamard")

    def apply_cnot(self, control: Qubit) -> None:
        """Flip this qubit when ``control`` measures 1 with probability above 0.5."""
        if control.amp1 * control.amp1 > CNOT_PROBABILITY_THRESHOLD:
            self._swap()
        else:
            logger.debug("CNOT not triggered by control %r", control)
        self._check("CNOT")

    def apply_ccnot(self, control1: Qubit, control2: Qubit) -> None:
        """Flip this qubit when both controls carry any ``|1>`` amplitude."""
        if control1.amp1 != 0.0 and control2.amp1 != 0.0:
            self._swap()
        else:
            logger.debug("CCNOT not triggered by controls %r, %r", control1, control2)
        self._check("CCNOT")

    @staticmethod
    def cnot(target: Qubit, control: Qubit) -> Qubit:
        """Apply CNOT to ``target`` and return it."""
        target.apply_cnot(control)
        return target

    @staticmethod
    def ccnot(target: Qubit, control1: Qubit, control2: Qubit) -> Qubit:
        """Apply CCNOT to ``target`` and return it."""
        target.apply_ccnot(control1, control2)
        return target

    def set_state(self, bit: int) -> None:
        """Force the qubit into the basis state ``|bit>``."""
        if bit == 0:
            self.amp0, self.amp1 = 1.0, 0.0
        elif bit == 1:
            self.amp0, self.amp1 = 0.0, 1.0
        else:
            raise ValueError(f"bit must be 0 or 1, got {bit!r}.")

    def copy(self) -> Qubit:
        """Return an independent qubit with the same amplitudes (no tag)."""
        return Qubit(self.amp0, self.amp1)

    def apply_oracle_uf(self, rng: RandomSource = None) -> int:
        """
        Pass the qubit through the black-box oracle ``U_f``.

        Tags the qubit for display, picks one of the four oracles uniformly
        at random and returns that oracle's output bit. Amplitudes are not
        changed.
        """
        self.function_tag = ORACLE_TAG
        oracle = classify_oracle(float(resolve_rng(rng).random()))
        logger.debug("Oracle drawn: %s", oracle.name)
        return oracle.output


def is_definite_one(qubit: Qubit) -> bool:
    """True when the ``|1>`` amplitude is exactly 1.0."""
    return qubit.amp1 == 1.0


def is_definite_zero(qubit: Qubit) -> bool:
    """True when the ``|0>`` amplitude is exactly 1.0."""
    return qubit.amp0 == 1.0


__all__ = [
    "CNOT_PROBABILITY_THRESHOLD",
    "ORACLE_TAG",
    "OracleType",
    "Qubit",
    "classify_oracle",
    "is_definite_one",
    "is_definite_zero",
]
