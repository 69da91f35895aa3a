"""Ordered collection of independently owned qubits."""

from __future__ import annotations

from typing import Iterator, List, Optional

from qtoybox.diagnostics import NORMALIZATION_ATOL, is_normalized
from qtoybox.logging import get_logger

from .qubit import Qubit
from .utils import RandomSource, resolve_rng

logger = get_logger(__name__)


class QuantumSystem:
    """
    A growable, ordered list of qubits.

    The position of a qubit in the system is its address for every indexed
    operation. Qubits belong to exactly one system; use :meth:`copy` to get
    an independent system.

    Parameters
    ----------
    rng:
        Random source used by measurements when no per-call source is given:
        a ``numpy.random.Generator``, an integer seed, or None.
    """

    def __init__(self, rng: RandomSource = None) -> None:
        self.qubits: List[Qubit] = []
        self._rng = resolve_rng(rng)

    def __len__(self) -> int:
        return len(self.qubits)

    def __getitem__(self, index: int) -> Qubit:
        return self.qubits[index]

    def __iter__(self) -> Iterator[Qubit]:
        return iter(self.qubits)

    def __repr__(self) -> str:
        return f"QuantumSystem({self.qubits!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(q) for q in self.qubits) + "]"

    def add_qubit(self, qubit: Qubit) -> None:
        """Append ``qubit``; the system takes ownership of it."""

        self.qubits.append(qubit)

    def add_qubit_amount(self, amount: int) -> None:
        """Append ``amount`` fresh qubits in state ``|0>``."""

        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}.")
        for _ in range(amount):
            self.qubits.append(Qubit())

    def measure_qubit(self, index: int, rng: Optional[RandomSource] = None) -> int:
        """
        Sample the qubit at ``index`` in the computational basis.

        Returns 1 with probability ``amp1**2``. The qubit's amplitudes are
        left as they are.

        Raises
        ------
        ValueError
            If the qubit's probabilities do not sum to 1 within 0.001.
        """

        qubit = self.qubits[index]
        if not is_normalized(qubit.amp0, qubit.amp1, atol=NORMALIZATION_ATOL):
            logger.error("Unnormalized qubit at index %d: %r", index, qubit)
            raise ValueError(
                f"Qubit amplitudes do not compute to 1! Qubit: {qubit!r} "
                f"at index: {index}"
            )
        generator = self._rng if rng is None else resolve_rng(rng)
        probability_of_one = qubit.amp1 * qubit.amp1
        return 1 if generator.random() < probability_of_one else 0

    def measure_all_qubits(self, rng: Optional[RandomSource] = None) -> List[int]:
        """Measure every qubit independently, in system order."""

        generator = self._rng if rng is None else resolve_rng(rng)
        return [self.measure_qubit(i, generator) for i in range(len(self.qubits))]

    def copy(self) -> QuantumSystem:
        """Return a system holding independent copies of every qubit.

        The copy measures with a generator spawned from this system's, so
        measuring one never advances the other's random stream.
        """

        clone = QuantumSystem(self._rng.spawn(1)[0])
        for qubit in self.qubits:
            clone.qubits.append(qubit.copy())
        return clone


__all__ = ["QuantumSystem"]
