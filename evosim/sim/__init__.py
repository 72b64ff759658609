# SPDX-License-Identifier: MIT
"""
Simulation modules: the world, its animals and the generational loop.
"""

from .animal import Animal, AnimalIndividual  # noqa: F401
from .eye import Eye  # noqa: F401
from .simulation import Simulation, Statistics  # noqa: F401
from .world import Food, Role, World  # noqa: F401

__all__ = [
    "Simulation",
    "Statistics",
    "World",
    "Animal",
    "AnimalIndividual",
    "Eye",
    "Food",
    "Role",
]
