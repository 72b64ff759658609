# SPDX-License-Identifier: MIT
"""
Fully-connected feed-forward network with rectified activation.

Weights are kept per neuron so the network can be flattened into (and rebuilt
from) the flat gene vector the genetic algorithm works on. The flat layout is
layer by layer, neuron by neuron, each neuron contributing its bias followed by
its input weights.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Union

import numpy as np

from ..core.exceptions import InvalidTopologyError, LengthMismatchError

TopologyLike = Union["LayerTopology", Sequence[int]]


@dataclass(frozen=True)
class LayerTopology:
    """Neuron count per layer, input and output layers included."""

    neurons: tuple

    def __init__(self, neurons: Iterable[int]):
        object.__setattr__(self, "neurons", tuple(int(n) for n in neurons))
        if len(self.neurons) < 2:
            raise InvalidTopologyError(
                f"topology needs at least an input and an output layer, got {list(self.neurons)}"
            )

    @classmethod
    def of(cls, topology: TopologyLike) -> "LayerTopology":
        return topology if isinstance(topology, LayerTopology) else cls(topology)

    def __len__(self) -> int:
        return len(self.neurons)

    def __iter__(self) -> Iterator[int]:
        return iter(self.neurons)

    def __getitem__(self, idx: int) -> int:
        return self.neurons[idx]

    @property
    def input_width(self) -> int:
        return self.neurons[0]

    @property
    def output_width(self) -> int:
        return self.neurons[-1]

    def weight_count(self) -> int:
        """Number of parameters (bias + weights) over all neurons."""
        return sum(
            output_size * (input_size + 1)
            for input_size, output_size in zip(self.neurons, self.neurons[1:])
        )


class Neuron:
    __slots__ = ("bias", "weights")

    def __init__(self, bias: float, weights: Sequence[float]):
        self.bias = float(bias)
        self.weights = np.asarray(weights, dtype=np.float64)

    @classmethod
    def random(cls, rng: np.random.Generator, input_size: int) -> "Neuron":
        bias = rng.uniform(-1.0, 1.0)
        weights = [rng.uniform(-1.0, 1.0) for _ in range(input_size)]
        return cls(bias, weights)

    def propagate(self, inputs: np.ndarray) -> float:
        if len(inputs) != len(self.weights):
            raise LengthMismatchError(
                f"neuron expects {len(self.weights)} inputs, got {len(inputs)}"
            )
        return max(0.0, self.bias + float(np.dot(inputs, self.weights)))


class Layer:
    __slots__ = ("neurons",)

    def __init__(self, neurons: List[Neuron]):
        self.neurons = neurons

    @classmethod
    def random(cls, rng: np.random.Generator, input_size: int, output_size: int) -> "Layer":
        return cls([Neuron.random(rng, input_size) for _ in range(output_size)])

    def propagate(self, inputs: np.ndarray) -> np.ndarray:
        return np.array([neuron.propagate(inputs) for neuron in self.neurons], dtype=np.float64)


class NeuralNetwork:
    def __init__(self, layers: List[Layer]):
        self.layers = layers

    @classmethod
    def random(cls, rng: np.random.Generator, topology: TopologyLike) -> "NeuralNetwork":
        """Draw every bias and weight uniformly from [-1, 1]."""
        topology = LayerTopology.of(topology)
        layers = [
            Layer.random(rng, input_size, output_size)
            for input_size, output_size in zip(topology, topology[1:])
        ]
        return cls(layers)

    @classmethod
    def from_weights(cls, topology: TopologyLike, weights: Iterable[float]) -> "NeuralNetwork":
        """Rebuild a network from the flat layout produced by `flatten`."""
        topology = LayerTopology.of(topology)
        flat = [float(w) for w in weights]
        expected = topology.weight_count()
        if len(flat) != expected:
            raise LengthMismatchError(
                f"topology {list(topology)} needs {expected} weights, got {len(flat)}"
            )

        pos = 0
        layers: List[Layer] = []
        for input_size, output_size in zip(topology, topology[1:]):
            neurons = []
            for _ in range(output_size):
                neurons.append(Neuron(flat[pos], flat[pos + 1:pos + 1 + input_size]))
                pos += input_size + 1
            layers.append(Layer(neurons))
        return cls(layers)

    @property
    def input_width(self) -> int:
        return len(self.layers[0].neurons[0].weights)

    @property
    def output_width(self) -> int:
        return len(self.layers[-1].neurons)

    def propagate(self, inputs: Sequence[float]) -> np.ndarray:
        values = np.asarray(inputs, dtype=np.float64)
        if len(values) != self.input_width:
            raise LengthMismatchError(
                f"network expects {self.input_width} inputs, got {len(values)}"
            )
        for layer in self.layers:
            values = layer.propagate(values)
        return values

    def flatten(self) -> List[float]:
        flat: List[float] = []
        for layer in self.layers:
            for neuron in layer.neurons:
                flat.append(neuron.bias)
                flat.extend(float(w) for w in neuron.weights)
        return flat

    def topology(self) -> LayerTopology:
        return LayerTopology([self.input_width] + [len(layer.neurons) for layer in self.layers])
