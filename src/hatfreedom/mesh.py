"""Utilities for handing triangulated hats to a renderer."""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

import numpy as np

from hatfreedom.geometry_utils import Vec3, triangle_normal
from hatfreedom.patch import PatchTile

TriTuple = Tuple[Vec3, Vec3, Vec3, Vec3]


def _triplets(points: Sequence[Vec3]) -> Iterator[Tuple[Vec3, Vec3, Vec3]]:
    for i in range(0, len(points) - 2, 3):
        yield points[i], points[i + 1], points[i + 2]


def mesh_view(tile: PatchTile) -> Iterator[TriTuple]:
    """Yield the triangles of a tile as ``(normal, v0, v1, v2)``.

    Normals are unit vectors.  Triangles with zero area are skipped
    silently.
    """

    for v0, v1, v2 in _triplets(tile.triangles):
        calc_normal = triangle_normal(v0, v1, v2)
        if calc_normal is None:
            continue
        yield calc_normal, v0, v1, v2


def vertex_normals(tile: PatchTile) -> np.ndarray:
    """Return flat float32 per-vertex normals matching ``tile.positions()``.

    Every vertex of a triangle gets that triangle's face normal, which
    keeps the creases of a non-planar hat sharp.  Degenerate triangles
    get zero normals.
    """

    normals = []
    for v0, v1, v2 in _triplets(tile.triangles):
        n = triangle_normal(v0, v1, v2) or (0.0, 0.0, 0.0)
        normals.extend((n, n, n))
    return np.asarray(normals, dtype=np.float32).reshape(-1)


__all__ = ["mesh_view", "vertex_normals"]
