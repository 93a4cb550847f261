"""
Random draws used by the mosaic generator.

Every random decision in a run comes from one ``RandomSource``. The order of
calls is part of the output: a run draws one color per attempt, one
coordinate pair per seeding attempt and one sample per growth attempt.
"""

from typing import List, Sequence, Tuple, TypeVar

from .alea_prng import AleaPRNG

T = TypeVar("T")

Color = Tuple[int, int, int]
Location = Tuple[int, int]


class RandomSource:
    """Seeded stream of colors, grid coordinates and samples."""

    def __init__(self, seed: int):
        self.seed = seed
        self._prng = AleaPRNG(seed)

    @property
    def call_count(self) -> int:
        """Number of raw values consumed so far."""
        return self._prng.call_count

    def random_color(self) -> Color:
        """Uniform 8-bit RGB triple."""
        rand = self._prng.randrange
        return (rand(256), rand(256), rand(256))

    def random_location(self, size: int) -> Location:
        """Uniform grid location with both coordinates in [0, size)."""
        return (self._prng.randrange(size), self._prng.randrange(size))

    def sample(self, population: Sequence[T], k: int) -> List[T]:
        """
        Choose ``min(k, len(population))`` items without replacement.

        Partial Fisher-Yates shuffle over indices. Only displaced indices are
        stored, so the cost is proportional to ``k`` rather than to the
        population size. Items are returned in selection order.
        """
        n = len(population)
        k = min(k, n)
        displaced = {}
        chosen = []
        for i in range(k):
            j = i + self._prng.randrange(n - i)
            picked = displaced.get(j, j)
            displaced[j] = displaced.get(i, i)
            chosen.append(population[picked])
        return chosen
