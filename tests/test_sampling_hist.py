"""Tests for outcome histograms over measured systems and GHZ states."""

from __future__ import annotations

import pytest
import torch

from qtoybox.quantum import GHZSystem, QuantumSystem, Qubit
from qtoybox.sampling import (
    bitstring_counts,
    counts_to_probs,
    sample_ghz,
    sample_system,
)


def _ghz(n: int, rng) -> GHZSystem:
    system = QuantumSystem()
    system.add_qubit_amount(n)
    ghz = GHZSystem(rng=rng)
    ghz.create_ghz_state_from_system(system)
    return ghz


def test_ghz_samples_hold_only_pure_keys(rng) -> None:
    counts = bitstring_counts(sample_ghz(_ghz(3, rng), n_shots=400))
    assert set(counts) == {"000", "111"}
    assert sum(counts.values()) == 400

    probs = counts_to_probs(counts)
    assert abs(sum(probs.values()) - 1.0) < 1e-12
    assert abs(probs["111"] - 0.5) < 0.1


def test_definite_system_has_a_single_outcome(rng) -> None:
    system = QuantumSystem(rng=rng)
    system.add_qubit(Qubit())
    system.add_qubit(Qubit(0.0, 1.0))
    system.add_qubit(Qubit(-1.0, 0.0))

    counts = bitstring_counts(sample_system(system, n_shots=50))
    assert counts == {"010": 50}
    assert counts_to_probs(counts) == {"010": 1.0}


def test_keys_follow_qubit_order(rng) -> None:
    """Qubit 0 is the first character of every key."""
    system = QuantumSystem(rng=rng)
    superposed = Qubit()
    superposed.apply_hadamard()
    system.add_qubit(superposed)
    system.add_qubit(Qubit(0.0, 1.0))

    counts = bitstring_counts(sample_system(system, n_shots=1000))
    assert list(counts) == ["01", "11"]
    assert abs(counts_to_probs(counts)["11"] - 0.5) < 0.06


def test_counts_ignore_shot_order(rng, torch_rng) -> None:
    samples = sample_ghz(_ghz(4, rng), n_shots=200)
    shuffled = samples[torch.randperm(samples.shape[0], generator=torch_rng)]
    assert bitstring_counts(shuffled) == bitstring_counts(samples)


def test_bitstring_counts_rejects_bad_shapes() -> None:
    with pytest.raises(ValueError, match="shots, qubits"):
        bitstring_counts(torch.tensor([0, 1]))
    with pytest.raises(ValueError, match="shots, qubits"):
        bitstring_counts(torch.zeros((2, 2, 2), dtype=torch.int64))


def test_bitstring_counts_rejects_non_bits() -> None:
    with pytest.raises(ValueError, match="only 0 and 1"):
        bitstring_counts(torch.tensor([[0, 2]]))


def test_counts_to_probs_rejects_empty() -> None:
    with pytest.raises(ValueError, match="positive"):
        counts_to_probs({})
    with pytest.raises(ValueError, match="non-negative"):
        counts_to_probs({"0": 3, "1": -1})
