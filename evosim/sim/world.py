# SPDX-License-Identifier: MIT
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

import numpy as np

from ..core.config import SimulationConfig

if TYPE_CHECKING:
    from .animal import Animal


class Role(enum.Enum):
    PREY = "prey"
    PREDATOR = "predator"


@dataclass
class Food:
    x: float
    y: float

    @classmethod
    def random(cls, rng: np.random.Generator) -> "Food":
        return cls(rng.random(), rng.random())

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def respawn(self, rng: np.random.Generator) -> None:
        self.x = rng.random()
        self.y = rng.random()


class World:
    """Animals partitioned by role, plus the food they compete for."""

    def __init__(
        self,
        prey: Optional[List["Animal"]] = None,
        predators: Optional[List["Animal"]] = None,
        foods: Optional[List[Food]] = None,
    ):
        self.prey: List["Animal"] = prey if prey is not None else []
        self.predators: List["Animal"] = predators if predators is not None else []
        self.foods: List[Food] = foods if foods is not None else []

    @classmethod
    def random(cls, config: SimulationConfig, rng: np.random.Generator) -> "World":
        from .animal import Animal

        prey = [Animal.random(config, rng, Role.PREY) for _ in range(config.world.animals)]
        predators = [Animal.random(config, rng, Role.PREDATOR) for _ in range(config.world.predators)]
        foods = [Food.random(rng) for _ in range(config.world.foods)]
        return cls(prey, predators, foods)

    def animals(self) -> List["Animal"]:
        return [*self.prey, *self.predators]
