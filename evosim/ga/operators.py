# SPDX-License-Identifier: MIT
"""
Selection, crossover and mutation strategies.

Each strategy takes the random source explicitly; the number and order of draws
is part of the reproducibility contract of `GeneticAlgorithm.evolve`.
"""

from __future__ import annotations

from typing import Protocol, Sequence

import numpy as np

from ..core.exceptions import ConfigurationError, EmptyPopulationError, ParityError
from .chromosome import Chromosome, I


class SelectionMethod(Protocol):
    def select(self, rng: np.random.Generator, population: Sequence[I]) -> I:
        ...


class CrossoverMethod(Protocol):
    def crossover(
        self, rng: np.random.Generator, parent_a: Chromosome, parent_b: Chromosome
    ) -> Chromosome:
        ...


class MutationMethod(Protocol):
    def mutate(self, rng: np.random.Generator, child: Chromosome) -> None:
        ...


class RouletteWheelSelection:
    """
    Fitness-proportionate selection.

    One uniform draw in [0, total fitness) is located in the cumulative fitness
    array. When every fitness is zero the wheel has no area and the pick falls
    back to a uniform choice.
    """

    def select(self, rng: np.random.Generator, population: Sequence[I]) -> I:
        if not population:
            raise EmptyPopulationError("cannot select from an empty population")

        weights = np.array([individual.fitness() for individual in population], dtype=np.float64)
        if np.any(weights < 0.0):
            raise ValueError("roulette wheel selection requires non-negative fitness")

        total = float(weights.sum())
        if total <= 0.0:
            return population[int(rng.integers(len(population)))]

        cumulative = np.cumsum(weights)
        point = rng.random() * total
        idx = int(np.searchsorted(cumulative, point, side="right"))
        return population[min(idx, len(population) - 1)]


class UniformCrossover:
    """Per gene, an unbiased coin picks which parent donates it."""

    def crossover(
        self, rng: np.random.Generator, parent_a: Chromosome, parent_b: Chromosome
    ) -> Chromosome:
        if len(parent_a) != len(parent_b):
            raise ParityError(
                f"parents differ in length: {len(parent_a)} vs {len(parent_b)}"
            )
        return Chromosome(
            a if rng.random() < 0.5 else b for a, b in zip(parent_a, parent_b)
        )


class GaussianMutation:
    """
    Per gene, with probability `chance`, add an offset drawn uniformly from
    [-coeff, coeff).
    """

    def __init__(self, chance: float, coeff: float):
        if not 0.0 <= chance <= 1.0:
            raise ConfigurationError(f"mutation chance must be within [0, 1], got {chance}")
        if coeff < 0.0:
            raise ConfigurationError(f"mutation coefficient must be >= 0, got {coeff}")
        self.chance = float(chance)
        self.coeff = float(coeff)

    def mutate(self, rng: np.random.Generator, child: Chromosome) -> None:
        for idx in range(len(child)):
            if rng.random() < self.chance:
                child[idx] += self.coeff * (rng.random() * 2.0 - 1.0)
