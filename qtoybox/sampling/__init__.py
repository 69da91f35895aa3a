"""Sampling and histogram utilities for qubit systems and GHZ states."""

from .bitstrings import (
    ghz_outcome_tally,
    ket_to_bits,
    sample_ghz,
    sample_system,
)
from .hist import (
    bitstring_counts,
    counts_to_probs,
)

__all__ = [
    "ghz_outcome_tally",
    "ket_to_bits",
    "sample_ghz",
    "sample_system",
    "bitstring_counts",
    "counts_to_probs",
]
