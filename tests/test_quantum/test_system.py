import numpy as np
import pytest

from qtoybox.quantum import QuantumSystem, Qubit


def test_add_qubit_amount_creates_zero_qubits():
    system = QuantumSystem()
    system.add_qubit_amount(3)
    assert len(system) == 3
    assert all(q == Qubit() for q in system)


def test_add_qubit_amount_rejects_negative():
    with pytest.raises(ValueError, match="non-negative"):
        QuantumSystem().add_qubit_amount(-1)


def test_add_qubit_takes_the_given_instance():
    system = QuantumSystem()
    q = Qubit(0.0, 1.0)
    system.add_qubit(q)
    assert system[0] is q


def test_measure_definite_states(rng):
    system = QuantumSystem(rng=rng)
    system.add_qubit(Qubit())
    system.add_qubit(Qubit(0.0, 1.0))
    system.add_qubit(Qubit(-1.0, 0.0))
    system.add_qubit(Qubit(0.0, -1.0))
    for _ in range(20):
        assert system.measure_all_qubits() == [0, 1, 0, 1]


def test_measurement_leaves_amplitudes_untouched(rng):
    system = QuantumSystem(rng=rng)
    system.add_qubit(Qubit(0.6, 0.8))
    system.measure_all_qubits()
    assert (system[0].amp0, system[0].amp1) == (0.6, 0.8)


def test_measure_frequency_follows_amp1_squared(rng):
    system = QuantumSystem(rng=rng)
    system.add_qubit(Qubit(0.6, 0.8))
    n = 5000
    ones = sum(system.measure_all_qubits()[0] for _ in range(n))
    assert abs(ones / n - 0.64) < 0.03


def test_measure_reports_unnormalized_qubit_index():
    system = QuantumSystem()
    system.add_qubit(Qubit())
    system.add_qubit(Qubit(0.5, 0.5))
    with pytest.raises(ValueError, match="index: 1"):
        system.measure_all_qubits()


def test_tolerance_is_one_thousandth():
    system = QuantumSystem()
    system.add_qubit(Qubit(np.sqrt(1.0005), 0.0))
    assert system.measure_all_qubits() == [0]

    system = QuantumSystem()
    system.add_qubit(Qubit(np.sqrt(1.002), 0.0))
    with pytest.raises(ValueError, match="do not compute to 1"):
        system.measure_all_qubits()


def test_same_seed_gives_same_outcomes():
    def build(seed):
        system = QuantumSystem(rng=seed)
        for _ in range(8):
            q = Qubit()
            q.apply_hadamard()
            system.add_qubit(q)
        return system

    assert build(11).measure_all_qubits() == build(11).measure_all_qubits()


def test_per_call_rng_overrides_default():
    system = QuantumSystem(rng=1)
    system.add_qubit_amount(6)
    for q in system:
        q.apply_hadamard()
    first = system.measure_all_qubits(rng=5)
    second = system.measure_all_qubits(rng=np.random.default_rng(5))
    assert first == second


def test_copy_is_deep_and_ordered():
    system = QuantumSystem()
    system.add_qubit(Qubit())
    system.add_qubit(Qubit(0.0, 1.0))
    system.add_qubit(Qubit(0.6, 0.8))

    clone = system.copy()
    assert [(q.amp0, q.amp1) for q in clone] == [(q.amp0, q.amp1) for q in system]
    assert all(a is not b for a, b in zip(clone, system))

    clone[0].apply_xor()
    clone.add_qubit_amount(1)
    assert system[0] == Qubit()
    assert len(system) == 3


def test_str_lists_qubits():
    system = QuantumSystem()
    system.add_qubit(Qubit())
    system.add_qubit(Qubit(0.0, 1.0))
    assert str(system) == "[1.0|0>, 1.0|1>]"


def test_copy_has_its_own_random_stream():
    def build():
        system = QuantumSystem(rng=21)
        for _ in range(6):
            q = Qubit()
            q.apply_hadamard()
            system.add_qubit(q)
        return system

    system = build()
    clone = system.copy()
    assert clone._rng is not system._rng

    for _ in range(10):
        clone.measure_all_qubits()
    assert system.measure_all_qubits() == build().measure_all_qubits()
