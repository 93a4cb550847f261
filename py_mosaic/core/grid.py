"""
Placement grid: per-location cell state plus the ordered placement list.

Cells start empty and are filled at most once. Every fill appends a
``PlacementRecord``; growth samples from that list, so it is never
reordered or shrunk.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Union

import numpy as np

from .random_source import Color, Location


@dataclass(frozen=True)
class Empty:
    """Cell that has not been colored yet."""


@dataclass(frozen=True)
class Filled:
    """Cell holding its final color."""

    color: Color


Cell = Union[Empty, Filled]

EMPTY = Empty()


class PlacementRecord(NamedTuple):
    """One successful placement, in placement order."""

    color: Color
    location: Location


class PlacementGrid:
    """
    Square grid of cells backed by NumPy arrays.

    ``colors[x, y]`` holds the RGB value of location ``(x, y)`` and is only
    meaningful where ``filled[x, y]`` is set.
    """

    def __init__(self, size: int):
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.colors = np.zeros((size, size, 3), dtype=np.uint8)
        self.filled = np.zeros((size, size), dtype=bool)
        self.records: List[PlacementRecord] = []

    def __len__(self) -> int:
        return len(self.records)

    @property
    def area(self) -> int:
        return self.size * self.size

    def is_empty(self, location: Location) -> bool:
        x, y = location
        return not self.filled[x, y]

    def cell(self, location: Location) -> Cell:
        """Cell state at ``location``."""
        x, y = location
        if not self.filled[x, y]:
            return EMPTY
        return Filled(tuple(int(c) for c in self.colors[x, y]))

    def fill(self, location: Location, color: Color) -> PlacementRecord:
        """Color an empty cell and record the placement."""
        x, y = location
        if self.filled[x, y]:
            raise ValueError(f"Cell {location} is already filled")
        self.colors[x, y] = color
        self.filled[x, y] = True
        record = PlacementRecord(color, (x, y))
        self.records.append(record)
        return record

    def wrap(self, x: int, y: int) -> Location:
        """Map unbounded walk coordinates onto the grid (torus wraparound)."""
        return (x % self.size, y % self.size)

    def percent_filled(self) -> int:
        """Whole percent of the area that is filled, rounded down."""
        return int(100.0 * len(self.records) / self.area)
