"""Deutsch-Jozsa example: is the hidden one-bit function constant or balanced?

Walks two qubits through X, Hadamard, the oracle U_f and a final Hadamard,
printing both qubits after every step, then prints the verdict.
"""

from __future__ import annotations

import argparse

import qtoybox as qt

_STEP_NAMES = [
    "X on v2",
    "Hadamard on v1 and v2",
    "Oracle U_f on v1 and v2",
    "Hadamard on v1 and read-out",
]


def main() -> None:
    """Run the Deutsch-Jozsa walkthrough once."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--seed", type=int, default=None, help="seed for the oracle draw")
    args = parser.parse_args()

    result = qt.deutsch_jozsa(rng=args.seed)

    for name, (v1, v2) in zip(_STEP_NAMES, result.steps):
        print(f"{name:<28} v1: {v1}, v2: {v2}")

    print(result.message)


if __name__ == "__main__":
    main()
