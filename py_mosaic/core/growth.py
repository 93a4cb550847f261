"""
Seeding and growth attempts.

A seeding attempt drops a color at a random location. A growth attempt
samples earlier placements, takes the three whose colors are closest to the
new color, and walks part of their circumcircle looking for an empty cell.
Either kind of attempt returns the new ``PlacementRecord`` on success and
``None`` on a miss.
"""

from typing import List, Optional, Sequence

import structlog

from .geometry import arc_walk, circumcenter, order_vertices, squared_distance, walk_budget
from .grid import PlacementGrid, PlacementRecord
from .random_source import Color, RandomSource

logger = structlog.get_logger()

TRIANGLE = 3


def color_distance(c1: Color, c2: Color) -> int:
    """Squared Euclidean distance between two RGB colors."""
    return sum((int(a) - int(b)) ** 2 for a, b in zip(c1, c2))


def closest_colors(
    color: Color, samples: Sequence[PlacementRecord], count: int = TRIANGLE
) -> List[PlacementRecord]:
    """The ``count`` samples nearest to ``color``; ties keep sample order."""
    ranked = sorted(samples, key=lambda record: color_distance(color, record.color))
    return ranked[:count]


def seed_attempt(
    grid: PlacementGrid, rng: RandomSource, color: Color
) -> Optional[PlacementRecord]:
    """Place ``color`` at a uniformly random location if that cell is empty."""
    location = rng.random_location(grid.size)
    if not grid.is_empty(location):
        return None
    return grid.fill(location, color)


def growth_attempt(
    grid: PlacementGrid,
    rng: RandomSource,
    color: Color,
    num_samples: int,
    circle_frac: float,
    trace: bool = False,
) -> Optional[PlacementRecord]:
    """
    Grow ``color`` from the circumcircle of its three nearest colors.

    Misses when fewer than three records are available, when the three
    locations are collinear, when the circumcenter lands on one of them, or
    when the walk budget runs out before an empty cell is found.
    """
    samples = rng.sample(grid.records, num_samples)
    if len(samples) < TRIANGLE:
        return None

    a, b, c = (record.location for record in closest_colors(color, samples))
    center = circumcenter(a, b, c)
    if center is None:
        return None
    if center in (a, b, c):
        # bearing from the center is undefined
        return None

    middle, second = order_vertices(center, a, b, c)
    steps = walk_budget(squared_distance(center, middle), circle_frac)
    if trace:
        logger.debug(
            "Arc walk",
            center=center,
            middle=middle,
            second=second,
            steps=steps,
        )

    for point in arc_walk(center, middle, second, steps):
        location = grid.wrap(*point)
        if trace:
            logger.debug("Walk step", point=point, location=location)
        if grid.is_empty(location):
            return grid.fill(location, color)
    return None
