# SPDX-License-Identifier: MIT
from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..sim.simulation import Statistics


@dataclass(frozen=True)
class GenerationSample:
    generation: int
    role: str
    min_fitness: float
    max_fitness: float
    avg_fitness: float
    median_fitness: float


class GenerationRecorder:
    """Collects per-generation fitness statistics for later export."""

    HEADERS = ["generation", "role", "min", "max", "avg", "median"]

    def __init__(self) -> None:
        self._samples: List[GenerationSample] = []

    def record(self, statistics: Statistics) -> None:
        for role, stats in (("prey", statistics.prey), ("predators", statistics.predators)):
            if stats is None:
                continue
            self._samples.append(
                GenerationSample(
                    generation=statistics.generation,
                    role=role,
                    min_fitness=stats.min_fitness,
                    max_fitness=stats.max_fitness,
                    avg_fitness=stats.avg_fitness,
                    median_fitness=stats.median_fitness,
                )
            )

    def clear(self) -> None:
        self._samples.clear()

    def has_data(self) -> bool:
        return bool(self._samples)

    def sample_count(self) -> int:
        return len(self._samples)

    def samples(self) -> List[GenerationSample]:
        return list(self._samples)

    def export_csv(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="") as fh:
            writer = csv.writer(fh)
            writer.writerow(self.HEADERS)
            for sample in self._samples:
                writer.writerow(
                    [
                        sample.generation,
                        sample.role,
                        f"{sample.min_fitness:.4f}",
                        f"{sample.max_fitness:.4f}",
                        f"{sample.avg_fitness:.4f}",
                        f"{sample.median_fitness:.4f}",
                    ]
                )
