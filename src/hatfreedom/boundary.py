"""Walk a tile boundary through the clock vectors."""

from __future__ import annotations

from typing import Iterable, List, Sequence

import numpy as np

from hatfreedom.clock import HOURS
from hatfreedom.errors import InvalidInputError
from hatfreedom.geometry_utils import ORIGIN, Vec3, vadd


def _check_directions(v: Sequence[Vec3]) -> None:
    if len(v) != HOURS:
        raise InvalidInputError(f"expected {HOURS} direction vectors, got {len(v)}")


def _step(v: Sequence[Vec3], index: int) -> Vec3:
    # a negative index would silently wrap
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)) \
       or not 0 <= index < HOURS:
        raise InvalidInputError(f"direction index out of range: {index!r}")
    return v[index]


def walk_boundary(v: Sequence[Vec3],
                  preamble: Sequence[int],
                  amble: Sequence[int]) -> List[Vec3]:
    """Return the boundary points of one tile.

    The walk starts at the origin and follows ``preamble`` to the tile's
    starting vertex without emitting anything.  That vertex is emitted,
    followed by the point after every step of ``amble`` except the
    last: the boundary is a closed loop, so the final step leads back to
    the first point and is left implicit.  The result has
    ``len(amble)`` points.
    """

    _check_directions(v)
    point = ORIGIN
    for index in preamble:
        point = vadd(point, _step(v, index))

    points = [point]
    for index in amble[:-1]:
        point = vadd(point, _step(v, index))
        points.append(point)
    if amble:
        _step(v, amble[-1])
    return points


def path_sum(v: Sequence[Vec3], path: Iterable[int]) -> Vec3:
    """Return the sum of the direction vectors named by ``path``."""

    _check_directions(v)
    total = ORIGIN
    for index in path:
        total = vadd(total, _step(v, index))
    return total


def flatten(points: Iterable[Sequence[float]]) -> np.ndarray:
    """Return ``[x, y, z, x, y, z, ...]`` as a float32 array."""

    flat = [c for p in points for c in p[:3]]
    return np.asarray(flat, dtype=np.float32)


__all__ = ["walk_boundary", "path_sum", "flatten"]
