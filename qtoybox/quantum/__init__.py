"""Real-amplitude qubits, multi-qubit systems, GHZ states and the tape adder."""

from .algorithms import DeutschJozsaResult, deutsch_jozsa
from .ghz import EntangledState, GHZSystem
from .qubit import (
    OracleType,
    Qubit,
    classify_oracle,
    is_definite_one,
    is_definite_zero,
)
from .system import QuantumSystem
from .turing import DEFAULT_TAPE, AdderResult, QuantumTuringMachine
from .utils import format_amplitude, render_amplitude_pair, resolve_rng

__all__ = [
    "AdderResult",
    "DEFAULT_TAPE",
    "DeutschJozsaResult",
    "EntangledState",
    "GHZSystem",
    "OracleType",
    "QuantumSystem",
    "QuantumTuringMachine",
    "Qubit",
    "classify_oracle",
    "deutsch_jozsa",
    "format_amplitude",
    "is_definite_one",
    "is_definite_zero",
    "render_amplitude_pair",
    "resolve_rng",
]
