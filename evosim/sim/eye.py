# SPDX-License-Identifier: MIT
from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from ..core.config import EyeConfig
from ..core.exceptions import ConfigurationError
from .world import Food


def wrap_angle(angle: float) -> float:
    """Map an angle into [-pi, pi)."""
    return (angle + math.pi) % (2 * math.pi) - math.pi


class Eye:
    """
    Photoreceptor strip spanning `fov_angle` centred on the heading.

    Every food closer than `fov_range` and inside the angular window adds
    `(fov_range - distance) / fov_range` to the cell its bearing falls into, so
    near food reads brighter than far food. The output always has `cells`
    entries.
    """

    def __init__(self, fov_range: float, fov_angle: float, cells: int):
        if fov_range <= 0.0:
            raise ConfigurationError(f"fov_range must be > 0, got {fov_range}")
        if not 0.0 < fov_angle <= 2 * math.pi:
            raise ConfigurationError(f"fov_angle must be within (0, 2*pi], got {fov_angle}")
        if cells <= 0:
            raise ConfigurationError(f"cells must be > 0, got {cells}")
        self.fov_range = float(fov_range)
        self.fov_angle = float(fov_angle)
        self.cells = int(cells)

    @classmethod
    def from_config(cls, config: EyeConfig) -> "Eye":
        return cls(config.fov_range, config.fov_angle, config.cells)

    def process(self, x: float, y: float, rotation: float, foods: Iterable[Food]) -> np.ndarray:
        cells = np.zeros(self.cells, dtype=np.float64)
        half_fov = self.fov_angle / 2.0

        for food in foods:
            dx = food.x - x
            dy = food.y - y
            dist = math.hypot(dx, dy)
            if dist >= self.fov_range:
                continue

            # bearing measured from the +y axis, the direction an unrotated animal faces
            angle = wrap_angle(math.atan2(-dx, dy) - rotation)
            if angle < -half_fov or angle > half_fov:
                continue

            cell = int((angle + half_fov) / self.fov_angle * self.cells)
            cells[min(cell, self.cells - 1)] += (self.fov_range - dist) / self.fov_range

        return cells
