"""Outcome histograms over measured qubit systems and GHZ states.

Shot tensors produced by :mod:`qtoybox.sampling.bitstrings` hold one row per
measurement and one column per qubit. A histogram key is the row written as
a bitstring, with qubit ``0`` first, so ``'011'`` is the ket ``|011>``.
"""

from __future__ import annotations

from typing import Dict, Mapping

import torch


def bitstring_counts(samples: torch.Tensor) -> Dict[str, int]:
    """
    Tally the distinct outcomes in a ``(n_shots, n_qubits)`` shot tensor.

    Returns
    -------
    Dict[str, int]
        Outcome bitstring to number of shots, keys in ascending order.
    """
    if samples.dim() != 2:
        raise ValueError(
            f"samples must be a (shots, qubits) tensor, got shape {tuple(samples.shape)}."
        )
    if samples.shape[0] == 0:
        return {}
    bits = samples.to(torch.int64)
    if torch.any((bits != 0) & (bits != 1)):
        raise ValueError("samples must contain only 0 and 1.")

    outcomes, tallies = torch.unique(bits, dim=0, return_counts=True)
    return {
        "".join(str(b) for b in row): int(n)
        for row, n in zip(outcomes.tolist(), tallies.tolist())
    }


def counts_to_probs(counts: Mapping[str, int]) -> Dict[str, float]:
    """Turn an outcome histogram into observed frequencies."""
    if any(n < 0 for n in counts.values()):
        raise ValueError("Outcome counts must be non-negative.")
    total = sum(counts.values())
    if total <= 0:
        raise ValueError("Outcome counts must have a positive total.")
    return {key: n / total for key, n in counts.items()}


__all__ = ["bitstring_counts", "counts_to_probs"]
