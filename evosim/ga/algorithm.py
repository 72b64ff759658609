# SPDX-License-Identifier: MIT
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from ..core.exceptions import EmptyPopulationError
from .chromosome import I
from .operators import CrossoverMethod, MutationMethod, SelectionMethod


@dataclass(frozen=True)
class Statistics:
    """Fitness summary of one generation, taken before it is replaced."""

    min_fitness: float
    max_fitness: float
    avg_fitness: float
    median_fitness: float

    @classmethod
    def from_population(cls, population: Sequence[I]) -> "Statistics":
        if not population:
            raise EmptyPopulationError("cannot compute statistics of an empty population")

        fitnesses = sorted(individual.fitness() for individual in population)
        n = len(fitnesses)
        mid = n // 2
        if n % 2 == 0:
            median = (fitnesses[mid - 1] + fitnesses[mid]) / 2.0
        else:
            median = fitnesses[mid]

        return cls(
            min_fitness=float(fitnesses[0]),
            max_fitness=float(fitnesses[-1]),
            avg_fitness=float(sum(fitnesses) / n),
            median_fitness=float(median),
        )


class GeneticAlgorithm:
    def __init__(
        self,
        selection_method: SelectionMethod,
        crossover_method: CrossoverMethod,
        mutation_method: MutationMethod,
    ) -> None:
        self.selection_method = selection_method
        self.crossover_method = crossover_method
        self.mutation_method = mutation_method

    def evolve(self, rng: np.random.Generator, population: Sequence[I]) -> Tuple[List[I], Statistics]:
        """
        Breed a new population of the same size.

        Every child draws two parents (with replacement), crosses their
        chromosomes, mutates the result in place and is rebuilt through the
        individual's `create`.
        """
        if not population:
            raise EmptyPopulationError("cannot evolve an empty population")

        statistics = Statistics.from_population(population)

        new_population: List[I] = []
        for _ in range(len(population)):
            parent_a = self.selection_method.select(rng, population)
            parent_b = self.selection_method.select(rng, population)
            child = self.crossover_method.crossover(rng, parent_a.chromosome(), parent_b.chromosome())
            self.mutation_method.mutate(rng, child)
            new_population.append(parent_a.create(child))

        return new_population, statistics
