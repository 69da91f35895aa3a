"""Pytest configuration and shared fixtures for qtoybox tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Reset of global debug mode between tests
"""

import os

import numpy as np
import pytest
import torch

from qtoybox.diagnostics import is_debug_enabled, set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic CPU torch RNG for tests."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    generator = torch.Generator(device="cpu")
    generator.manual_seed(seed)
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set global random seeds for reproducibility."""
    np.random.seed(int(os.environ.get("TEST_RNG_SEED", "0")))
    torch.manual_seed(int(os.environ.get("TEST_RNG_SEED", "0")))


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Keep debug mode changes from leaking between tests."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)
