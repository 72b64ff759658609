# SPDX-License-Identifier: MIT
from __future__ import annotations

from typing import Iterable, Iterator, List, Protocol, TypeVar


class Chromosome:
    """Ordered, fixed-length sequence of real-valued genes."""

    __slots__ = ("genes",)

    def __init__(self, genes: Iterable[float]):
        self.genes: List[float] = [float(g) for g in genes]

    def __len__(self) -> int:
        return len(self.genes)

    def __iter__(self) -> Iterator[float]:
        return iter(self.genes)

    def __getitem__(self, idx: int) -> float:
        return self.genes[idx]

    def __setitem__(self, idx: int, value: float) -> None:
        self.genes[idx] = float(value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Chromosome):
            return self.genes == other.genes
        return NotImplemented

    def __repr__(self) -> str:
        return f"Chromosome({self.genes!r})"

    def to_list(self) -> List[float]:
        return list(self.genes)


I = TypeVar("I", bound="Individual")


class Individual(Protocol):
    """Anything the genetic algorithm can evaluate and breed."""

    def fitness(self) -> float:
        ...

    def chromosome(self) -> Chromosome:
        ...

    @classmethod
    def create(cls: type[I], chromosome: Chromosome) -> I:
        ...
