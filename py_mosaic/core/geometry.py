"""
Circle geometry on the integer grid.

Covers the circumcenter of three grid points, bearings around that center,
the choice of start vertex and walk direction, and the discretized arc walk
that traces the circle one 8-connected step at a time.

All coordinates here are unbounded integers; callers wrap them onto the grid
only when they look up a cell.
"""

import math
from typing import Iterator, List, Optional, Sequence, Tuple

from .random_source import Location

TAU = 2.0 * math.pi

# Neighbor offsets in the order they are considered for the first step.
NEIGHBOR_OFFSETS = (
    (1, 1),
    (1, 0),
    (1, -1),
    (0, 1),
    (0, -1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)


class MosaicInvariantError(RuntimeError):
    """A geometric invariant of the growth procedure was broken."""


class AngularOrderingError(MosaicInvariantError):
    """Pairwise angular comparisons of three vertices are not transitive."""


class WalkInvariantError(MosaicInvariantError):
    """The arc walk stopped advancing."""


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def squared_distance(p: Location, q: Location) -> int:
    return (p[0] - q[0]) ** 2 + (p[1] - q[1]) ** 2


def circumcenter(a: Location, b: Location, c: Location) -> Optional[Location]:
    """
    Integer circumcenter of triangle ``a, b, c``.

    Uses the Cartesian determinant formula with every division truncated
    toward zero. Returns ``None`` for collinear points.
    """
    ax, ay = a
    bx, by = b
    cx, cy = c
    a2 = ax * ax + ay * ay
    b2 = bx * bx + by * by
    c2 = cx * cx + cy * cy
    sx = trunc_div(a2 * by + b2 * cy + c2 * ay - a2 * cy - b2 * ay - c2 * by, 2)
    sy = trunc_div(ax * b2 + bx * c2 + cx * a2 - ax * c2 - bx * a2 - cx * b2, 2)
    da = ax * by + bx * cy + cx * ay - ax * cy - bx * ay - cx * by
    if da == 0:
        return None
    return (trunc_div(sx, da), trunc_div(sy, da))


def bearing(center: Location, point: Location) -> float:
    """Angle of ``point`` as seen from ``center``."""
    return math.atan2(center[0] - point[0], center[1] - point[1])


def angular_distance(diff: float) -> float:
    """Shortest absolute angle equivalent to ``diff``, in [0, pi]."""
    return min(abs(diff + TAU), abs(diff), abs(diff - TAU))


def order_vertices(
    center: Location, a: Location, b: Location, c: Location
) -> Tuple[Location, Location]:
    """
    Pick the walk's start vertex and the vertex it walks toward.

    The middle vertex lies angularly between the other two: it is the one
    left out of the widest pair. The second vertex is its nearer neighbor,
    the other member of the narrowest pair.

    Raises:
        AngularOrderingError: if the three pairwise comparisons contradict
            each other.
    """
    ang_a = bearing(center, a)
    ang_b = bearing(center, b)
    ang_c = bearing(center, c)
    diff_ab = angular_distance(ang_a - ang_b)
    diff_ac = angular_distance(ang_a - ang_c)
    diff_bc = angular_distance(ang_b - ang_c)

    ab_le_ac = diff_ab <= diff_ac
    ab_le_bc = diff_ab <= diff_bc
    ac_le_bc = diff_ac <= diff_bc

    if ab_le_ac and ac_le_bc and not ab_le_bc:
        raise AngularOrderingError(
            f"ab <= ac <= bc but ab > bc (ab={diff_ab!r}, ac={diff_ac!r}, bc={diff_bc!r})"
        )
    if not ab_le_ac and not ac_le_bc and ab_le_bc:
        raise AngularOrderingError(
            f"ab > ac > bc but ab <= bc (ab={diff_ab!r}, ac={diff_ac!r}, bc={diff_bc!r})"
        )

    if ab_le_bc and ac_le_bc:
        # bc is the widest pair
        return a, (b if ab_le_ac else c)
    if ab_le_ac:
        # ac is the widest pair
        return b, (a if ab_le_bc else c)
    # ab is the widest pair
    return c, (a if ac_le_bc else b)


def first_step(center: Location, middle: Location, second: Location) -> Location:
    """Neighbor of ``middle`` whose bearing is closest to that of ``second``."""
    target = bearing(center, second)
    candidates = [
        (middle[0] + dx, middle[1] + dy) for dx, dy in NEIGHBOR_OFFSETS
    ]
    candidates = [p for p in candidates if p != second]
    return min(
        candidates,
        key=lambda p: angular_distance(target - bearing(center, p)),
    )


def next_candidates(cur: Location, nxt: Location) -> List[Location]:
    """
    Points that could follow ``nxt`` when continuing the step ``cur -> nxt``.

    The straight continuation is ``2 * nxt - cur``; for axis-aligned steps it
    is flanked by both diagonal neighbors, for diagonal steps the two
    axis-aligned continuations are offered instead.
    """
    new0 = nxt[0] * 2 - cur[0]
    new1 = nxt[1] * 2 - cur[1]
    if cur[0] == nxt[0]:
        return [(nxt[0] + 1, new1), (nxt[0], new1), (nxt[0] - 1, new1)]
    if cur[1] == nxt[1]:
        return [(new0, nxt[1] + 1), (new0, nxt[1]), (new0, nxt[1] - 1)]
    return [(new0, new1), (new0, nxt[1]), (nxt[0], new1)]


def closest_to_circle(
    center: Location, sq_radius: int, candidates: Sequence[Location]
) -> Location:
    """Candidate whose squared distance from ``center`` best matches ``sq_radius``."""
    return min(
        candidates,
        key=lambda p: abs(squared_distance(center, p) - sq_radius),
    )


def walk_budget(sq_radius: int, circle_frac: float) -> int:
    """Maximum number of arc-walk steps for a circle of the given size."""
    return int(math.sqrt(sq_radius) * TAU * circle_frac)


def arc_walk(
    center: Location, middle: Location, second: Location, steps: int
) -> Iterator[Location]:
    """
    Trace the circle around ``center`` from ``middle`` toward ``second``.

    Yields at most ``steps`` unwrapped grid points, starting with the first
    neighbor of ``middle``. Each following point is the continuation that
    stays closest to the circle through ``middle``.

    Raises:
        WalkInvariantError: if two consecutive points coincide.
    """
    sq_radius = squared_distance(center, middle)
    cur = middle
    nxt = first_step(center, middle, second)
    for _ in range(steps):
        yield nxt
        if cur == nxt:
            raise WalkInvariantError(f"Arc walk stalled at {nxt} around {center}")
        new = closest_to_circle(center, sq_radius, next_candidates(cur, nxt))
        cur, nxt = nxt, new
