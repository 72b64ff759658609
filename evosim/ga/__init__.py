# SPDX-License-Identifier: MIT
"""
Generic genetic algorithm over fixed-length real-valued chromosomes.
"""

from .algorithm import GeneticAlgorithm, Statistics  # noqa: F401
from .chromosome import Chromosome, Individual  # noqa: F401
from .operators import (  # noqa: F401
    CrossoverMethod,
    GaussianMutation,
    MutationMethod,
    RouletteWheelSelection,
    SelectionMethod,
    UniformCrossover,
)

__all__ = [
    "GeneticAlgorithm",
    "Statistics",
    "Chromosome",
    "Individual",
    "SelectionMethod",
    "CrossoverMethod",
    "MutationMethod",
    "RouletteWheelSelection",
    "UniformCrossover",
    "GaussianMutation",
]
