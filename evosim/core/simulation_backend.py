# SPDX-License-Identifier: MIT
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol

import numpy as np
from loguru import logger

from ..sim.simulation import Simulation, Statistics
from ..sim.world import World
from .config import SimulationConfig
from .recorder import GenerationRecorder


@dataclass
class SimulationState:
    tick: int = 0
    generation: int = 0
    age: int = 0
    prey: int = 0
    predators: int = 0
    food_count: int = 0
    frame: Dict | None = None
    statistics: Optional[Statistics] = None


class SimulationBackend(Protocol):
    """Interface a renderer or runner uses to drive a simulation."""

    def configure(self, config: SimulationConfig) -> None:
        ...

    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...

    def step(self) -> SimulationState:
        ...

    def train(self, generations: int = 1) -> List[Statistics]:
        ...

    def snapshot(self) -> Dict:
        ...


class EvolutionBackend:
    """
    Owns a `Simulation` and its random source and exposes read-only frames of
    the world after every step.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        *,
        seed: Optional[int] = None,
        recorder: Optional[GenerationRecorder] = None,
    ) -> None:
        self._config = (config or SimulationConfig()).validate()
        self._seed = seed
        self._lock = threading.Lock()
        self._running = False
        self.recorder = recorder or GenerationRecorder()
        self._rng = np.random.default_rng(seed)
        self._simulation = Simulation.random(self._config, self._rng)
        self._state = SimulationState()

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def simulation(self) -> Simulation:
        return self._simulation

    def configure(self, config: SimulationConfig) -> None:
        with self._lock:
            self._config = config.validate()
            self._reset_locked(self._seed)

    def reset(self, seed: Optional[int] = None) -> None:
        with self._lock:
            self._seed = seed
            self._reset_locked(seed)

    def start(self) -> None:
        with self._lock:
            self._running = True

    def stop(self) -> None:
        with self._lock:
            self._running = False

    def step(self) -> SimulationState:
        with self._lock:
            statistics = None
            if self._running:
                statistics = self._simulation.step(self._rng)
                self._state.tick += 1
                if statistics is not None:
                    self._on_generation(statistics)
            self._refresh_state(statistics)
            return self._state

    def train(self, generations: int = 1) -> List[Statistics]:
        """Fast-forward whole generations regardless of the running flag."""
        results = []
        with self._lock:
            for _ in range(max(0, int(generations))):
                start_age = self._simulation.age
                statistics = self._simulation.train(self._rng)
                self._state.tick += self._config.sim.generation_length + 1 - start_age
                self._on_generation(statistics)
                results.append(statistics)
            self._refresh_state(results[-1] if results else None)
        return results

    def snapshot(self) -> Dict:
        with self._lock:
            return {
                "config": self._config.to_dict(),
                "state": {
                    "tick": self._state.tick,
                    "generation": self._simulation.generation,
                    "age": self._simulation.age,
                },
                "frame": capture_frame(self._simulation.world),
            }

    # ----- internals -----
    def _reset_locked(self, seed: Optional[int]) -> None:
        logger.debug("Resetting simulation (seed={})", seed)
        self._rng = np.random.default_rng(seed)
        self._simulation = Simulation.random(self._config, self._rng)
        self._state = SimulationState()
        self.recorder.clear()

    def _on_generation(self, statistics: Statistics) -> None:
        self.recorder.record(statistics)

    def _refresh_state(self, statistics: Optional[Statistics]) -> None:
        world = self._simulation.world
        self._state.generation = self._simulation.generation
        self._state.age = self._simulation.age
        self._state.prey = len(world.prey)
        self._state.predators = len(world.predators)
        self._state.food_count = len(world.foods)
        self._state.frame = capture_frame(world)
        self._state.statistics = statistics


def capture_frame(world: World) -> Dict:
    frame: Dict = {"prey": [], "predators": [], "foods": []}
    for key, animals in (("prey", world.prey), ("predators", world.predators)):
        for animal in animals:
            frame[key].append(
                {
                    "x": float(animal.x),
                    "y": float(animal.y),
                    "rotation": float(animal.rotation),
                    "satiation": int(animal.satiation),
                }
            )
    for food in world.foods:
        frame["foods"].append({"x": float(food.x), "y": float(food.y)})
    return frame
