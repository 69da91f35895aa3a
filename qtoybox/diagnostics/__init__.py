"""Diagnostics and debugging utilities for qtoybox."""

from .core import (
    NORMALIZATION_ATOL,
    amplitude_norm,
    assert_normalized,
    is_normalized,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "NORMALIZATION_ATOL",
    "amplitude_norm",
    "assert_normalized",
    "is_normalized",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
