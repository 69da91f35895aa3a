"""Repeated-shot sampling of quantum systems and GHZ states into bit tensors."""

from __future__ import annotations

from typing import Optional, Tuple

import torch

from qtoybox.quantum.ghz import GHZSystem
from qtoybox.quantum.system import QuantumSystem
from qtoybox.quantum.utils import RandomSource, resolve_rng
from qtoybox.sampling.hist import bitstring_counts


def _check_shots(n_shots: int) -> None:
    if n_shots <= 0:
        raise ValueError(f"n_shots must be positive, got {n_shots}.")


def ket_to_bits(label: str) -> torch.Tensor:
    """
    Parse a ket label such as ``'|0110>'`` into a 1D int64 tensor of bits.
    """
    if len(label) < 3 or not (label.startswith("|") and label.endswith(">")):
        raise ValueError(f"Not a ket label: {label!r}.")
    body = label[1:-1]
    if any(ch not in "01" for ch in body):
        raise ValueError(f"Ket label must contain only 0 and 1, got {label!r}.")
    return torch.tensor([int(ch) for ch in body], dtype=torch.int64)


def sample_system(
    system: QuantumSystem,
    n_shots: int,
    rng: Optional[RandomSource] = None,
) -> torch.Tensor:
    """
    Measure every qubit of ``system`` ``n_shots`` times.

    Measurement does not change the qubits, so each shot samples the same
    amplitudes.

    Returns
    -------
    torch.Tensor
        Integer tensor of shape (n_shots, len(system)) with bits in {0, 1}.
    """
    _check_shots(n_shots)
    generator = None if rng is None else resolve_rng(rng)
    shots = [system.measure_all_qubits(generator) for _ in range(n_shots)]
    return torch.tensor(shots, dtype=torch.int64).reshape(n_shots, len(system))


def sample_ghz(
    ghz: GHZSystem,
    n_shots: int,
    rng: Optional[RandomSource] = None,
) -> torch.Tensor:
    """
    Collapse ``ghz`` ``n_shots`` times.

    Returns
    -------
    torch.Tensor
        Integer tensor of shape (n_shots, n_qubits); every row is all zeros
        or all ones.
    """
    _check_shots(n_shots)
    generator = None if rng is None else resolve_rng(rng)
    rows = [ket_to_bits(ghz.measure_ghz_state(generator)) for _ in range(n_shots)]
    return torch.stack(rows)


def ghz_outcome_tally(
    ghz: GHZSystem,
    trials: int,
    rng: Optional[RandomSource] = None,
) -> Tuple[int, int]:
    """
    Count ``(zeros, ones)`` outcomes over ``trials`` GHZ measurements.

    The counts are read off the ``|0..0>`` and ``|1..1>`` entries of the
    shot histogram, so they always sum to ``trials``.
    """
    counts = bitstring_counts(sample_ghz(ghz, trials, rng))
    n_qubits = ghz.entangled_state.n_qubits
    return counts.get("0" * n_qubits, 0), counts.get("1" * n_qubits, 0)


__all__ = [
    "ghz_outcome_tally",
    "ket_to_bits",
    "sample_ghz",
    "sample_system",
]
