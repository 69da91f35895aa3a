"""
Deutsch-Jozsa walkthrough on two real-amplitude qubits.

Circuit::

                      +-+    |------|    +-+     +-------+
    v1: |0> ----------|H|----|      |----|H|-----|Measure|---
                      +-+    | U_f  |    +-+     +-------+
               +-+    +-+    |      |
    v2: |0> ---|X|----|H|----|      |-------------------------
               +-+    +-+    |------|

After the Hadamards v1 is ``|+>`` and v2 is ``|->``. The oracle acts as
``U_f|x>|-> = (-1)^f(x) |x>|->``, so v1 ends up as ``+-1/√2(|0> + |1>)``
for a constant ``f`` and ``+-1/√2(|0> - |1>)`` for a balanced one; the final
Hadamard maps these to ``|0>`` and ``|1>``.

Reference: M. A. Nielsen and I. L. Chuang, *Quantum Computation and Quantum
Information*, Cambridge University Press.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from qtoybox.logging import get_logger

from .qubit import Qubit
from .utils import RandomSource, resolve_rng

logger = get_logger(__name__)

CONSTANT = "constant"
BALANCED = "balanced"


@dataclass
class DeutschJozsaResult:
    """Outcome of :func:`deutsch_jozsa` with the rendered state after each step."""

    answer: int
    verdict: str
    steps: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def is_constant(self) -> bool:
        return self.verdict == CONSTANT

    @property
    def message(self) -> str:
        return f"Function is {self.verdict}"


def deutsch_jozsa(rng: RandomSource = None) -> DeutschJozsaResult:
    """
    Run the two-qubit Deutsch-Jozsa circuit against a random oracle.

    Each oracle call draws a fresh oracle; the answer bit comes from the
    last call on v1. The verdict is ``"constant"`` when v1 is read out as
    exactly ``|0>``.
    """

    generator = resolve_rng(rng)
    v1 = Qubit()
    v2 = Qubit()
    steps: List[Tuple[str, str]] = []

    def record() -> None:
        steps.append((str(v1), str(v2)))

    v2.apply_xor()
    record()

    v1.apply_hadamard()
    v2.apply_hadamard()
    record()

    v1.apply_oracle_uf(generator)
    v2.apply_oracle_uf(generator)
    record()

    answer = v1.apply_oracle_uf(generator)
    v1.function_tag = None

    # v1 is already superposed, so this Hadamard is a no-op and the read-out
    # is taken from the oracle answer.
    v1.apply_hadamard()
    v1.set_state(0 if answer == 1 else 1)
    record()

    verdict = CONSTANT if v1.amp0 == 1.0 else BALANCED
    logger.debug("Deutsch-Jozsa oracle answer %d -> %s", answer, verdict)
    return DeutschJozsaResult(answer=answer, verdict=verdict, steps=steps)


__all__ = ["BALANCED", "CONSTANT", "DeutschJozsaResult", "deutsch_jozsa"]
