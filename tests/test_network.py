# SPDX-License-Identifier: MIT
import numpy as np
import pytest

from evosim.core.exceptions import InvalidTopologyError, LengthMismatchError
from evosim.nn import LayerTopology, NeuralNetwork


@pytest.mark.parametrize("topology", [[1, 1], [3, 2], [9, 9, 2], [4, 6, 5, 3]])
def test_random_network_output_shape_and_sign(rng, topology):
    network = NeuralNetwork.random(rng, topology)
    for _ in range(5):
        output = network.propagate(rng.uniform(-2.0, 2.0, size=topology[0]))
        assert len(output) == topology[-1]
        assert all(value >= 0.0 for value in output)


def test_random_weights_are_within_unit_range(rng):
    flat = NeuralNetwork.random(rng, [5, 4, 2]).flatten()
    assert len(flat) == LayerTopology([5, 4, 2]).weight_count() == 4 * 6 + 2 * 5
    assert all(-1.0 <= w <= 1.0 for w in flat)


def test_random_is_reproducible_for_a_seed():
    a = NeuralNetwork.random(np.random.default_rng(7), [3, 4, 2])
    b = NeuralNetwork.random(np.random.default_rng(7), [3, 4, 2])
    assert a.flatten() == b.flatten()


def test_zero_network_outputs_zeros():
    topology = [3, 4, 2]
    network = NeuralNetwork.from_weights(topology, [0.0] * LayerTopology(topology).weight_count())
    assert list(network.propagate([5.0, -3.0, 0.25])) == [0.0, 0.0]


def test_propagate_applies_bias_weights_and_relu():
    # single neuron: bias 0.5, weights [-0.3, 0.8]
    network = NeuralNetwork.from_weights([2, 1], [0.5, -0.3, 0.8])
    assert network.propagate([0.5, 1.0])[0] == pytest.approx((-0.3 * 0.5) + (0.8 * 1.0) + 0.5)
    assert network.propagate([-10.0, -10.0])[0] == 0.0


def test_propagate_feeds_layers_in_order():
    # hidden: h0 = relu(1 + x), h1 = relu(-1 + x); output: relu(0 + 2*h0 + 3*h1)
    network = NeuralNetwork.from_weights([1, 2, 1], [1.0, 1.0, -1.0, 1.0, 0.0, 2.0, 3.0])
    assert network.propagate([2.0])[0] == pytest.approx(2 * 3.0 + 3 * 1.0)
    assert network.propagate([0.0])[0] == pytest.approx(2 * 1.0)


def test_flatten_layout_is_bias_then_weights():
    network = NeuralNetwork.from_weights([2, 2], [0.1, 0.2, 0.3, 0.4, 0.5, 0.6])
    first, second = network.layers[0].neurons
    assert first.bias == 0.1
    assert list(first.weights) == [0.2, 0.3]
    assert second.bias == 0.4
    assert list(second.weights) == [0.5, 0.6]


def test_from_weights_round_trip(rng):
    topology = LayerTopology([4, 3, 2])
    genes = list(rng.normal(size=topology.weight_count()))
    assert NeuralNetwork.from_weights(topology, genes).flatten() == genes


def test_from_weights_rejects_wrong_length():
    with pytest.raises(LengthMismatchError):
        NeuralNetwork.from_weights([2, 2], [0.0] * 5)


def test_propagate_rejects_wrong_input_width(rng):
    network = NeuralNetwork.random(rng, [3, 2])
    with pytest.raises(LengthMismatchError):
        network.propagate([1.0, 2.0])


@pytest.mark.parametrize("topology", [[], [3]])
def test_topology_needs_two_layers(rng, topology):
    with pytest.raises(InvalidTopologyError):
        NeuralNetwork.random(rng, topology)


def test_topology_of_rebuilt_network():
    network = NeuralNetwork.from_weights([2, 3, 1], [0.0] * LayerTopology([2, 3, 1]).weight_count())
    assert network.topology() == LayerTopology([2, 3, 1])
    assert network.input_width == 2
    assert network.output_width == 1
