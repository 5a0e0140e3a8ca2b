# tests/network/test_initializer.py
"""Tests for initial network construction."""
import numpy as np
import pytest

from spectral_eigen.network.config import NetworkConfig
from spectral_eigen.network.errors import InvalidConfiguration
from spectral_eigen.network.initializer import (
    create_network,
    make_rng,
    network_from_weights,
)
from spectral_eigen.network.units import CompetitiveUnit, Network


@pytest.mark.parametrize(
    "n_units,synapse_count", [(1, 1), (2, 2), (10, 40), (7, 64)]
)
def test_create_network_shapes_and_ranges(n_units, synapse_count):
    """Weights are synapse_count uniforms in [0, 1); eigenvalues are zero."""
    config = NetworkConfig(n_units=n_units, synapse_count=synapse_count)
    network = create_network(config, make_rng(5))

    assert len(network) == n_units
    for unit in network:
        assert unit.weights.shape == (synapse_count,)
        assert unit.weights.dtype == np.float64
        assert np.all(unit.weights >= 0.0)
        assert np.all(unit.weights < 1.0)
        assert unit.eigenvalue == 0.0
        assert unit.win_count == 0
    assert network.step_count == 0
    assert network.last_winner is None


def test_create_network_defaults():
    network = create_network()
    assert len(network) == 10
    assert network.synapse_count == 40


def test_create_network_consumes_draws_in_unit_order():
    """Initial weights are the first n_units * synapse_count draws, unit by unit."""
    config = NetworkConfig(n_units=3, synapse_count=5)
    network = create_network(config, make_rng(42))

    reference = make_rng(42)
    for unit in network:
        np.testing.assert_array_equal(unit.weights, reference.random(5))


def test_same_seed_same_network():
    config = NetworkConfig(n_units=4, synapse_count=6)
    a = create_network(config, make_rng(3))
    b = create_network(config, make_rng(3))
    np.testing.assert_array_equal(a.weights, b.weights)


class TestNetworkFromWeights:
    """Tests for building a network from explicit weights."""

    def test_builds_units_in_order(self):
        config = NetworkConfig(n_units=2, synapse_count=2)
        network = network_from_weights(config, [[1, 0], [0, 1]], eigenvalues=[0.5, 0.0])

        np.testing.assert_array_equal(network[0].weights, [1.0, 0.0])
        np.testing.assert_array_equal(network[1].weights, [0.0, 1.0])
        assert network[0].eigenvalue == 0.5
        assert network[0].weights.dtype == np.float64

    def test_wrong_row_count_raises(self):
        config = NetworkConfig(n_units=3, synapse_count=2)
        with pytest.raises(InvalidConfiguration, match="Expected 3 units"):
            network_from_weights(config, [[1, 0], [0, 1]])

    def test_wrong_row_length_raises(self):
        config = NetworkConfig(n_units=2, synapse_count=2)
        with pytest.raises(InvalidConfiguration, match="Unit 1 weights"):
            network_from_weights(config, [[1, 0], [0, 1, 0]])

    def test_wrong_eigenvalue_count_raises(self):
        config = NetworkConfig(n_units=2, synapse_count=2)
        with pytest.raises(InvalidConfiguration, match="eigenvalues"):
            network_from_weights(config, [[1, 0], [0, 1]], eigenvalues=[0.0])


class TestNetworkAccessors:
    """Tests for Network read helpers."""

    def test_weights_and_eigenvalues_are_copies(self):
        config = NetworkConfig(n_units=2, synapse_count=2)
        network = network_from_weights(config, [[1, 0], [0, 1]])

        weights = network.weights
        weights[0, 0] = 99.0
        evals = network.eigenvalues
        evals[0] = 99.0

        assert network[0].weights[0] == 1.0
        assert network[0].eigenvalue == 0.0

    def test_direction_is_unit_norm(self):
        config = NetworkConfig(n_units=2, synapse_count=2)
        network = network_from_weights(config, [[3, 4], [0, 0]])
        assert np.allclose(network[0].direction, [0.6, 0.8])
        assert np.array_equal(network[1].direction, [0.0, 0.0])


class TestNetworkShape:
    """Network rejects unit lists that disagree with its config."""

    def test_units_are_required(self):
        with pytest.raises(TypeError):
            Network(config=NetworkConfig(n_units=3, synapse_count=2))

    def test_empty_units_rejected(self):
        with pytest.raises(InvalidConfiguration, match="Expected 3 units, got 0"):
            Network(config=NetworkConfig(n_units=3, synapse_count=2), units=[])

    def test_unit_count_mismatch_rejected(self):
        config = NetworkConfig(n_units=2, synapse_count=2)
        units = [CompetitiveUnit(weights=np.zeros(2))]
        with pytest.raises(InvalidConfiguration, match="Expected 2 units, got 1"):
            Network(config=config, units=units)

    def test_weight_shape_mismatch_rejected(self):
        config = NetworkConfig(n_units=2, synapse_count=2)
        units = [CompetitiveUnit(weights=np.zeros(2)), CompetitiveUnit(weights=np.zeros((2, 1)))]
        with pytest.raises(InvalidConfiguration, match="Unit 1 weights"):
            Network(config=config, units=units)

    def test_matching_units_accepted(self):
        config = NetworkConfig(n_units=3, synapse_count=2)
        network = Network(config=config, units=[CompetitiveUnit(weights=np.zeros(2)) for _ in range(3)])
        assert len(network) == 3
