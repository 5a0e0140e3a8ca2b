"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from spectral_eigen.network.config import NetworkConfig
from spectral_eigen.network.initializer import create_network, make_rng
from spectral_eigen.network.step_engine import StepEngine


@pytest.fixture
def default_config():
    return NetworkConfig()


@pytest.fixture
def seeded_engine(default_config):
    """Engine over a freshly initialized default network, seed 1234."""
    rng = make_rng(1234)
    network = create_network(default_config, rng)
    return StepEngine(network, rng)


@pytest.fixture
def spectra():
    """Fifty 128-bin byte-magnitude frames, as a 256-point analyser emits."""
    rng = np.random.default_rng(99)
    return rng.integers(0, 256, size=(50, 128), dtype=np.uint8)
