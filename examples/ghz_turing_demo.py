"""GHZ and Turing machine example.

Builds a GHZ state from a system of fresh qubits, measures it, runs the
tape adder and prints a histogram of repeated GHZ measurements.
"""

from __future__ import annotations

import argparse

import numpy as np

import qtoybox as qt


def main() -> None:
    """Run the GHZ and tape-adder demonstration."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--qubits", type=int, default=10)
    parser.add_argument("--trials", type=int, default=100)
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)

    system = qt.QuantumSystem(rng=rng)
    system.add_qubit_amount(args.qubits)

    ghz = qt.GHZSystem(rng=rng)
    ghz.create_ghz_state_from_system(system.copy())
    print(f"GHZ state: {ghz}")
    print(f"GHZ measurement: {ghz.measure_ghz_state()}")

    qtm = qt.QuantumTuringMachine()
    qtm.run()
    print("Quantum tape: [" + ", ".join(str(q) for q in qtm.tape) + "]")
    print(f"Tape bits: {qtm.read_tape()}")

    counts = qt.bitstring_counts(qt.sample_ghz(ghz, args.trials))
    probs = qt.counts_to_probs(counts)
    print(f"After {args.trials} measurements, the results were:")
    for key, n in counts.items():
        print(f"  |{key}>: {n} ({probs[key]:.2f})")
    zeros = counts.get("0" * args.qubits, 0)
    ones = counts.get("1" * args.qubits, 0)
    print(f"Ones: {ones}, Zeros: {zeros}")


if __name__ == "__main__":
    main()
