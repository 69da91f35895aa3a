"""
A seven-cell "quantum" Turing machine that adds two 2-bit numbers.

Tape layout::

    cell:   0    1    2    3    4    5    6
            a1   a0   b1   b0   c2   c1   c0

The head walks the tape once. Each visited cell is forced to the classical
bit of the tape pattern; at cell 3 both operands are on the tape and the
adder runs; cells 4 to 6 then receive the sum, most significant bit first.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence, Tuple

from qtoybox.logging import get_logger

from .qubit import Qubit, is_definite_one

logger = get_logger(__name__)

TAPE_LENGTH = 7
DEFAULT_TAPE: Tuple[int, ...] = (1, 1, 1, 1, 0, 0, 0)

_ADD_POSITION = 3
_RESULT_POSITIONS = (4, 5, 6)


class AdderResult(NamedTuple):
    """Three sum qubits, most significant first."""

    most_significant: Qubit
    middle: Qubit
    least_significant: Qubit


def _off(qubit: Qubit) -> bool:
    return qubit.amp1 == 0.0


class QuantumTuringMachine:
    """
    Parameters
    ----------
    bits:
        Seven 0/1 values written to the tape as the head passes. Only the
        first four (the operands) influence the result.
    """

    def __init__(self, bits: Sequence[int] = DEFAULT_TAPE) -> None:
        bits = tuple(bits)
        if len(bits) != TAPE_LENGTH:
            raise ValueError(f"Tape pattern must have {TAPE_LENGTH} cells, got {len(bits)}.")
        if any(b not in (0, 1) for b in bits):
            raise ValueError(f"Tape pattern must contain only 0 and 1, got {bits}.")
        bits = tuple(int(b) for b in bits)
        self.tape: List[Qubit] = [Qubit() for _ in range(TAPE_LENGTH)]
        self.binary_tape = bits
        self.head_position = 0
        self._result: Optional[AdderResult] = None

    def __repr__(self) -> str:
        return (
            f"QuantumTuringMachine(head_position={self.head_position}, "
            f"binary_tape={self.binary_tape})"
        )

    @property
    def is_halted(self) -> bool:
        return self.head_position >= len(self.tape)

    @property
    def result(self) -> Optional[AdderResult]:
        return self._result

    @staticmethod
    def qubit_add(a0: Qubit, a1: Qubit, b0: Qubit, b1: Qubit) -> AdderResult:
        """
        Add ``a1 a0`` and ``b1 b0`` with XOR toggles on fresh qubits.

        The carry ladder for the high bit is evaluated in the order written
        below and is not a textbook full adder: when only ``a1`` is set and
        there is no carry the high bit, not the middle bit, is raised.
        """

        c0 = Qubit()
        c1 = Qubit()
        c2 = Qubit()
        carry0 = Qubit()

        if is_definite_one(a0) and is_definite_one(b0):
            carry0.apply_xor()
        elif is_definite_one(a0) or is_definite_one(b0):
            c0.apply_xor()

        if is_definite_one(a1) and is_definite_one(b1) and is_definite_one(carry0):
            c2.apply_xor()
            c1.apply_xor()
        elif is_definite_one(a1) and is_definite_one(b1) and _off(carry0):
            c2.apply_xor()
        elif is_definite_one(a1) or (is_definite_one(b1) and is_definite_one(carry0)):
            c2.apply_xor()
        elif _off(a1) and _off(b1) and is_definite_one(carry0):
            c1.apply_xor()
        elif is_definite_one(a1) or (is_definite_one(b1) and _off(carry0)):
            c1.apply_xor()

        return AdderResult(c2, c1, c0)

    def step(self) -> bool:
        """
        Execute one head step. Returns False once the machine has halted.
        """

        if self.is_halted:
            return False

        position = self.head_position
        self.tape[position].set_state(self.binary_tape[position])

        if position == _ADD_POSITION:
            self._result = self.qubit_add(
                a0=self.tape[1],
                a1=self.tape[0],
                b0=self.tape[3],
                b1=self.tape[2],
            )
            logger.debug("Adder result: %s", [str(q) for q in self._result])

        if position in _RESULT_POSITIONS:
            self.tape[position] = self._result[_RESULT_POSITIONS.index(position)]

        self.head_position += 1
        return True

    def run(self) -> None:
        """Advance the head until it falls off the end of the tape."""

        while self.step():
            pass
        logger.debug("Tape after run: %s", self.read_tape())

    def read_tape(self) -> List[int]:
        """Tape cells as bits; a cell counts as 1 only when ``amp1 == 1.0``."""

        return [1 if is_definite_one(q) else 0 for q in self.tape]


__all__ = [
    "AdderResult",
    "DEFAULT_TAPE",
    "QuantumTuringMachine",
    "TAPE_LENGTH",
]
