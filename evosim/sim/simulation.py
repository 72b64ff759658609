# SPDX-License-Identifier: MIT
"""
Stepping and generational evolution of the world.

A simulation is either stepping (the default) or, for the duration of a single
`evolve` call, evolving. Each `step` resolves food collisions, runs prey
brains, moves every animal and then ages the generation; once the age exceeds
`sim.generation_length` the populations are bred anew.

Only prey eat and think. Predators keep the brain they were born with and
drift along their heading, so their satiation (and hence fitness) stays at
zero and their selection is uniform.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
from loguru import logger

from ..core.config import SimulationConfig
from ..ga import GaussianMutation, GeneticAlgorithm, RouletteWheelSelection, UniformCrossover
from ..ga import Statistics as GaStatistics
from .animal import Animal, AnimalIndividual
from .world import Role, World


@dataclass(frozen=True)
class Statistics:
    generation: int
    prey: Optional[GaStatistics]
    predators: Optional[GaStatistics]

    def __str__(self) -> str:
        lines = [f"generation {self.generation}:"]
        for label, stats in (("Prey", self.prey), ("Predators", self.predators)):
            if stats is None:
                continue
            lines.append(
                f"{label}: min[{stats.min_fitness:.2f}] max[{stats.max_fitness:.2f}] "
                f"avg[{stats.avg_fitness:.2f}] median[{stats.median_fitness:.2f}]"
            )
        return "\n".join(lines)


class Simulation:
    def __init__(self, config: SimulationConfig, world: World):
        self.config = config
        self.world = world
        self.age = 0
        self.generation = 0
        self.ga = GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(config.ga.mut_chance, config.ga.mut_coeff),
        )

    @classmethod
    def random(cls, config: SimulationConfig, rng: np.random.Generator) -> "Simulation":
        world = World.random(config, rng)
        logger.debug(
            "World created: {} prey, {} predators, {} foods",
            len(world.prey),
            len(world.predators),
            len(world.foods),
        )
        return cls(config, world)

    def step(self, rng: np.random.Generator) -> Optional[Statistics]:
        self._process_collisions(rng)
        self._process_brains()
        self._process_movements()
        return self._try_evolving(rng)

    def train(self, rng: np.random.Generator) -> Statistics:
        """Step until the current generation ends."""
        while True:
            statistics = self.step(rng)
            if statistics is not None:
                return statistics

    def evolve(self, rng: np.random.Generator) -> Statistics:
        self.age = 0
        self.generation += 1

        prey, prey_stats = self._evolve_role(rng, self.world.prey)
        predators, predator_stats = self._evolve_role(rng, self.world.predators)

        self.world.prey = [i.into_animal(self.config, rng, Role.PREY) for i in prey]
        self.world.predators = [i.into_animal(self.config, rng, Role.PREDATOR) for i in predators]

        for food in self.world.foods:
            food.respawn(rng)

        logger.debug(
            "Evolved generation {} ({} prey, {} predators)",
            self.generation - 1,
            len(self.world.prey),
            len(self.world.predators),
        )
        return Statistics(
            generation=self.generation - 1,
            prey=prey_stats,
            predators=predator_stats,
        )

    def _process_collisions(self, rng: np.random.Generator) -> None:
        food_size = self.config.sim.food_size
        for animal in self.world.prey:
            for food in self.world.foods:
                if math.hypot(animal.x - food.x, animal.y - food.y) <= food_size:
                    animal.satiation += 1
                    food.respawn(rng)

    def _process_brains(self) -> None:
        for animal in self.world.prey:
            animal.process_brain(self.config, self.world.foods)

    def _process_movements(self) -> None:
        for animal in self.world.animals():
            animal.process_movement()

    def _try_evolving(self, rng: np.random.Generator) -> Optional[Statistics]:
        self.age += 1
        if self.age > self.config.sim.generation_length:
            return self.evolve(rng)
        return None

    def _evolve_role(
        self, rng: np.random.Generator, animals: List[Animal]
    ) -> Tuple[List[AnimalIndividual], Optional[GaStatistics]]:
        if not animals:
            return [], None

        individuals = [AnimalIndividual.from_animal(animal) for animal in animals]
        if self.config.ga.reverse:
            best = max(individual.fitness() for individual in individuals)
            for individual in individuals:
                individual.fitness_score = best - individual.fitness_score

        return self.ga.evolve(rng, individuals)
