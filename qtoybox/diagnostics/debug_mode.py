"""Switch for the per-gate normalization checks on qubits.

Gates in :mod:`qtoybox.quantum.qubit` move amplitudes around without
rescaling them, so a qubit built with bad amplitudes stays bad until a
system measures it. With debug mode on, every XOR, Hadamard, CNOT and
CCNOT re-checks ``amp0**2 + amp1**2`` on its target and raises
``ValueError`` naming the gate that left it unnormalized.

The switch starts from the ``QTOYBOX_DEBUG`` environment variable
(``1``, ``true``, ``yes`` or ``on``) and can be flipped at runtime::

    with debug_context():
        target.apply_cnot(control)
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Mapping

_DEBUG_ENV_VAR = "QTOYBOX_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(environ: Mapping[str, str] = os.environ) -> bool:
    return environ.get(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env()


def is_debug_enabled() -> bool:
    """Return whether qubit gates currently verify normalization."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Turn the gate normalization checks on or off for the whole process."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block of gate applications with the checks set to ``enabled``.

    The previous setting comes back on exit, including when a gate inside
    the block raised.
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
