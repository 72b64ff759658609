# SPDX-License-Identifier: MIT
"""
Feed-forward neural networks used as animal brains.
"""

from .network import Layer, LayerTopology, NeuralNetwork, Neuron  # noqa: F401

__all__ = [
    "NeuralNetwork",
    "LayerTopology",
    "Layer",
    "Neuron",
]
