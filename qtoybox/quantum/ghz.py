"""
GHZ (Greenberger-Horne-Zeilinger) states built from a :class:`QuantumSystem`.

Instead of a joint state vector the entangled group is summarized by one
shared amplitude pair, taken from the first qubit after a Hadamard, and two
marker vectors recording which collapse branch ("all zeros" or "all ones")
each qubit was assigned to. Measurement collapses the whole group with a
single random draw.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from qtoybox.diagnostics import NORMALIZATION_ATOL
from qtoybox.logging import get_logger

from .qubit import is_definite_zero
from .system import QuantumSystem
from .utils import RandomSource, render_amplitude_pair, resolve_rng

logger = get_logger(__name__)


@dataclass
class EntangledState:
    """Shared amplitude pair plus per-qubit branch markers of a GHZ group."""

    zeros_amplitude: float
    ones_amplitude: float
    zeros_vector: List[int] = field(default_factory=list)
    ones_vector: List[int] = field(default_factory=list)

    @property
    def n_qubits(self) -> int:
        return len(self.zeros_vector)

    def append_branch(self, in_zeros_branch: bool) -> None:
        """Record one more qubit in the zeros branch or the ones branch."""

        if in_zeros_branch:
            self.zeros_vector.append(1)
            self.ones_vector.append(0)
        else:
            self.zeros_vector.append(0)
            self.ones_vector.append(1)


class GHZSystem:
    """
    Builds and measures a GHZ-style entangled state.

    Parameters
    ----------
    rng:
        Default random source for :meth:`measure_ghz_state`.

    Example
    -------
    >>> system = QuantumSystem()
    >>> system.add_qubit_amount(3)
    >>> ghz = GHZSystem()
    >>> _ = ghz.create_ghz_state_from_system(system.copy())
    >>> str(ghz)
    '1/√2(|000> + |111>)'
    """

    def __init__(self, rng: RandomSource = None) -> None:
        self._rng = resolve_rng(rng)
        self._state: Optional[EntangledState] = None

    @property
    def entangled_state(self) -> EntangledState:
        if self._state is None:
            raise RuntimeError("No GHZ state: call create_ghz_state_from_system first.")
        return self._state

    def __repr__(self) -> str:
        return f"GHZSystem({self._state!r})"

    def __str__(self) -> str:
        state = self.entangled_state
        return render_amplitude_pair(
            state.zeros_amplitude,
            state.ones_amplitude,
            zero_ket="0" * len(state.zeros_vector),
            one_ket="1" * len(state.ones_vector),
            named_states=False,
        )

    def create_ghz_state_from_system(self, system: QuantumSystem) -> EntangledState:
        """
        Entangle the qubits of ``system`` and record the result.

        ``system`` is mutated (Hadamard on qubit 0, CNOT on the rest), so
        callers normally pass ``system.copy()``.
        """

        if len(system) == 0:
            raise ValueError("Cannot build a GHZ state from an empty system.")

        head = system[0]
        head.apply_hadamard()
        state = EntangledState(
            zeros_amplitude=head.amp0,
            ones_amplitude=head.amp1,
            zeros_vector=[0],
            ones_vector=[1],
        )

        for qubit in system.qubits[1:]:
            qubit.apply_cnot(head)
            state.append_branch(is_definite_zero(qubit))

        logger.debug("Built GHZ state over %d qubits: %r", len(system), state)
        self._state = state
        return state

    def measure_ghz_state(self, rng: Optional[RandomSource] = None) -> str:
        """
        Collapse the whole group at once.

        Returns ``|1...1>`` with probability ``ones_amplitude**2`` and
        ``|0...0>`` otherwise; there are no mixed outcomes.

        Raises
        ------
        ValueError
            If the branch probabilities do not sum to 1 within 0.001.
        """

        state = self.entangled_state
        probability_of_one = state.ones_amplitude * state.ones_amplitude
        probability_of_zero = state.zeros_amplitude * state.zeros_amplitude
        if abs(probability_of_zero + probability_of_one - 1) > NORMALIZATION_ATOL:
            logger.error("Unnormalized GHZ state: %r", state)
            raise ValueError(
                f"GHZ state amplitudes do not compute to 1! GHZ State: {state!r}"
            )

        generator = self._rng if rng is None else resolve_rng(rng)
        if generator.random() < probability_of_one:
            return "|" + "1" * len(state.ones_vector) + ">"
        return "|" + "0" * len(state.zeros_vector) + ">"


__all__ = ["EntangledState", "GHZSystem"]
