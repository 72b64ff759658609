# SPDX-License-Identifier: MIT
from __future__ import annotations

import math
from typing import List

import numpy as np

from ..core.config import SimulationConfig
from ..ga import Chromosome
from ..nn import NeuralNetwork
from .eye import Eye
from .world import Food, Role


def wrap(v: float) -> float:
    """Wrap a coordinate onto the unit torus."""
    v %= 1.0
    # tiny negatives round up to exactly 1.0
    return 0.0 if v >= 1.0 else v


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(v, hi))


class Animal:
    __slots__ = ("x", "y", "rotation", "speed", "satiation", "role", "eye", "brain")

    def __init__(
        self,
        config: SimulationConfig,
        rng: np.random.Generator,
        brain: NeuralNetwork,
        role: Role,
    ):
        self.x = rng.random()
        self.y = rng.random()
        self.rotation = rng.uniform(0.0, 2 * math.pi)
        self.speed = config.sim.speed_max
        self.satiation = 0
        self.role = role
        self.eye = Eye.from_config(config.eye)
        self.brain = brain

    @classmethod
    def random(cls, config: SimulationConfig, rng: np.random.Generator, role: Role) -> "Animal":
        brain = NeuralNetwork.random(rng, config.topology())
        return cls(config, rng, brain, role)

    @classmethod
    def from_chromosome(
        cls,
        config: SimulationConfig,
        rng: np.random.Generator,
        chromosome: Chromosome,
        role: Role,
    ) -> "Animal":
        brain = NeuralNetwork.from_weights(config.topology(), chromosome)
        return cls(config, rng, brain, role)

    @property
    def position(self):
        return self.x, self.y

    @property
    def is_prey(self) -> bool:
        return self.role is Role.PREY

    @property
    def is_predator(self) -> bool:
        return self.role is Role.PREDATOR

    def as_chromosome(self) -> Chromosome:
        return Chromosome(self.brain.flatten())

    def process_brain(self, config: SimulationConfig, foods: List[Food]) -> None:
        vision = self.eye.process(self.x, self.y, self.rotation, foods)
        response = self.brain.propagate(vision)

        speed = clamp(float(response[0]), -config.sim.speed_accel, config.sim.speed_accel)
        rotation = clamp(float(response[1]), -config.sim.rotation_accel, config.sim.rotation_accel)

        self.speed = clamp(self.speed + speed, config.sim.speed_min, config.sim.speed_max)
        self.rotation = (self.rotation + rotation) % (2 * math.pi)

    def process_movement(self) -> None:
        # heading 0 points along +y
        self.x = wrap(self.x - math.sin(self.rotation) * self.speed)
        self.y = wrap(self.y + math.cos(self.rotation) * self.speed)


class AnimalIndividual:
    """
    Genetic-algorithm view of an animal: its flattened brain as the chromosome
    and its satiation as fitness.
    """

    def __init__(self, fitness: float, chromosome: Chromosome):
        self.fitness_score = float(fitness)
        self._chromosome = chromosome

    @classmethod
    def from_animal(cls, animal: Animal) -> "AnimalIndividual":
        return cls(animal.satiation, animal.as_chromosome())

    @classmethod
    def create(cls, chromosome: Chromosome) -> "AnimalIndividual":
        return cls(0.0, chromosome)

    def fitness(self) -> float:
        return self.fitness_score

    def chromosome(self) -> Chromosome:
        return self._chromosome

    def into_animal(self, config: SimulationConfig, rng: np.random.Generator, role: Role) -> Animal:
        return Animal.from_chromosome(config, rng, self._chromosome, role)
