# SPDX-License-Identifier: MIT
import math

import pytest

from evosim.ga import Chromosome
from evosim.nn import LayerTopology, NeuralNetwork
from evosim.sim import Animal, AnimalIndividual, Food, Role
from evosim.sim.animal import wrap


@pytest.mark.parametrize("value, expected", [(0.25, 0.25), (1.25, 0.25), (-0.25, 0.75), (1.0, 0.0)])
def test_wrap_onto_unit_torus(value, expected):
    assert wrap(value) == pytest.approx(expected)


def test_random_animal(small_config, rng):
    animal = Animal.random(small_config, rng, Role.PREY)
    assert 0.0 <= animal.x < 1.0 and 0.0 <= animal.y < 1.0
    assert animal.speed == small_config.sim.speed_max
    assert animal.satiation == 0
    assert animal.is_prey and not animal.is_predator
    assert animal.brain.topology() == LayerTopology(small_config.topology())
    assert animal.eye.cells == small_config.eye.cells


def test_movement_follows_heading_and_wraps(small_config, rng):
    animal = Animal.random(small_config, rng, Role.PREDATOR)
    animal.x, animal.y, animal.rotation, animal.speed = 0.5, 0.95, 0.0, 0.1

    animal.process_movement()

    assert animal.x == pytest.approx(0.5)
    assert animal.y == pytest.approx(0.05)

    animal.x, animal.y, animal.rotation = 0.02, 0.5, math.pi / 2
    animal.process_movement()
    assert animal.x == pytest.approx(0.92)
    assert animal.y == pytest.approx(0.5)


def test_brain_response_is_clamped(small_config, rng):
    topology = LayerTopology(small_config.topology())
    # every bias huge, so both outputs saturate the accelerations
    animal = Animal.random(small_config, rng, Role.PREY)
    animal.brain = NeuralNetwork.from_weights(topology, [10.0] * topology.weight_count())
    animal.speed = small_config.sim.speed_min
    animal.rotation = 0.0

    animal.process_brain(small_config, [Food(0.5, 0.5)])

    assert animal.speed == small_config.sim.speed_max
    assert animal.rotation == pytest.approx(small_config.sim.rotation_accel)


def test_silent_brain_keeps_heading_and_speed(small_config, rng):
    topology = LayerTopology(small_config.topology())
    animal = Animal.random(small_config, rng, Role.PREY)
    animal.brain = NeuralNetwork.from_weights(topology, [0.0] * topology.weight_count())
    speed, rotation = animal.speed, animal.rotation

    animal.process_brain(small_config, [])

    assert animal.speed == speed
    assert animal.rotation == pytest.approx(rotation)


def test_individual_round_trip(small_config, rng):
    animal = Animal.random(small_config, rng, Role.PREY)
    animal.satiation = 7

    individual = AnimalIndividual.from_animal(animal)
    assert individual.fitness() == 7.0
    assert individual.chromosome() == Chromosome(animal.brain.flatten())

    reborn = individual.into_animal(small_config, rng, Role.PREY)
    assert reborn.brain.flatten() == animal.brain.flatten()
    assert reborn.satiation == 0
    assert reborn.role is Role.PREY


def test_created_individual_starts_without_fitness(small_config, rng):
    genes = Animal.random(small_config, rng, Role.PREDATOR).as_chromosome()
    individual = AnimalIndividual.create(genes)
    assert individual.fitness() == 0.0
    assert individual.into_animal(small_config, rng, Role.PREDATOR).is_predator
