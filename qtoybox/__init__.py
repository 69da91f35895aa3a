"""qtoybox - a toy, classically simulated model of qubits and gates."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    amplitude_norm,
    assert_normalized,
    debug_context,
    is_debug_enabled,
    is_normalized,
    set_debug_enabled,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Core simulation
from .quantum import (
    DEFAULT_TAPE,
    AdderResult,
    DeutschJozsaResult,
    EntangledState,
    GHZSystem,
    OracleType,
    QuantumSystem,
    QuantumTuringMachine,
    Qubit,
    classify_oracle,
    deutsch_jozsa,
    is_definite_one,
    is_definite_zero,
)

# Sampling
from .sampling import (
    bitstring_counts,
    counts_to_probs,
    ghz_outcome_tally,
    ket_to_bits,
    sample_ghz,
    sample_system,
)

__all__ = [
    "__version__",
    # Core simulation
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
    "is_definite_one",
    "is_definite_zero",
    # Sampling
    "bitstring_counts",
    "counts_to_probs",
    "ghz_outcome_tally",
    "ket_to_bits",
    "sample_ghz",
    "sample_system",
    # Diagnostics
    "amplitude_norm",
    "assert_normalized",
    "debug_context",
    "is_debug_enabled",
    "is_normalized",
    "set_debug_enabled",
    # Logging
    "configure_logging",
    "get_logger",
    "set_log_level",
]
