# SPDX-License-Identifier: MIT
from __future__ import annotations

from typing import Optional

import numpy as np
import pytest

from evosim.core.config import SimulationConfig
from evosim.core.exceptions import UnsupportedOperationError
from evosim.ga import Chromosome


class FakeIndividual:
    """
    Either fitness-only, or chromosome-backed with fitness equal to the sum of
    its genes.
    """

    def __init__(self, fitness: Optional[float] = None, chromosome: Optional[Chromosome] = None):
        self._fitness = fitness
        self._chromosome = chromosome

    @classmethod
    def with_fitness(cls, fitness: float) -> "FakeIndividual":
        return cls(fitness=fitness)

    @classmethod
    def with_chromosome(cls, genes) -> "FakeIndividual":
        return cls(chromosome=Chromosome(genes))

    @classmethod
    def create(cls, chromosome: Chromosome) -> "FakeIndividual":
        return cls(chromosome=chromosome)

    def fitness(self) -> float:
        if self._chromosome is not None:
            return float(sum(self._chromosome))
        return float(self._fitness)

    def chromosome(self) -> Chromosome:
        if self._chromosome is None:
            raise UnsupportedOperationError("fitness-only individual has no chromosome")
        return self._chromosome


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def individual_cls():
    return FakeIndividual


@pytest.fixture
def small_config() -> SimulationConfig:
    config = SimulationConfig()
    config.world.animals = 6
    config.world.predators = 2
    config.world.foods = 8
    config.sim.generation_length = 10
    return config
