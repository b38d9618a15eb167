"""Triangulation of hat boundaries.

A non-planar hat is rendered as a polyhedral surface with a fixed crease
pattern: twelve triangles over the fourteen boundary points, chosen so
the surface does not fold through itself over the expected range of
tilt angles.  The table only makes sense for the hat outline indexed
anticlockwise from its peak.

A planar hat is filled with ``mapbox-earcut`` (the fast ear clipping
implementation used by Mapbox GL) applied to the projection of the
boundary onto its own plane, since a fixed crease pattern is not always
appropriate for a flat tile.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

try:
    import mapbox_earcut as _earcut
except ImportError as exc:  # pragma: no cover - import guard
    raise ImportError(
        "mapbox-earcut must be installed to triangulate planar hats"
    ) from exc

from hatfreedom.errors import InvalidConfigurationError, InvalidInputError
from hatfreedom.geometry_utils import Vec3, to_vec3

HAT_POINTS = 14

# twice the enclosed area below which a loop counts as flat
AREA_EPSILON = 1e-9

CREASE_TRIANGLES: Tuple[Tuple[int, int, int], ...] = (
    (1, 0, 13),
    (2, 1, 3),
    (3, 1, 13),
    (4, 3, 5),
    (5, 3, 6),
    (6, 3, 7),
    (7, 3, 8),
    (8, 3, 13),
    (12, 8, 13),
    (9, 8, 12),
    (11, 9, 12),
    (10, 9, 11),
)


def _boundary_points(boundary: Sequence[Sequence[float]]) -> List[Vec3]:
    try:
        return [to_vec3(p) for p in boundary]
    except InvalidConfigurationError as exc:
        raise InvalidInputError(f"malformed boundary point: {exc}") from exc


def triangulate_hat(boundary: Sequence[Sequence[float]]) -> List[Vec3]:
    """Return the crease-pattern triangles of a 14-point hat boundary.

    The result is flattened to ``3 * len(CREASE_TRIANGLES)`` points, one
    triplet per triangle.  Any other boundary length raises
    ``InvalidInputError``.
    """

    if len(boundary) != HAT_POINTS:
        raise InvalidInputError(
            f"invalid boundary length {len(boundary)} passed to triangulate_hat, "
            f"expected {HAT_POINTS}")
    pts = _boundary_points(boundary)
    tri_verts = []
    for tri in CREASE_TRIANGLES:
        tri_verts.extend(pts[j] for j in tri)
    return tri_verts


def newell_normal(points: Sequence[Vec3]) -> np.ndarray:
    """Return the (unnormalized) Newell normal of a closed loop.

    Its length is twice the area enclosed by the loop.
    """

    p = np.asarray(points, dtype=np.float64)
    q = np.roll(p, -1, axis=0)
    return np.array([
        np.sum((p[:, 1] - q[:, 1]) * (p[:, 2] + q[:, 2])),
        np.sum((p[:, 2] - q[:, 2]) * (p[:, 0] + q[:, 0])),
        np.sum((p[:, 0] - q[:, 0]) * (p[:, 1] + q[:, 1])),
    ])


def triangulate_planar(boundary: Sequence[Sequence[float]]) -> List[Vec3]:
    """Return triangles covering a flat boundary loop.

    The loop is projected onto the plane perpendicular to its Newell
    normal, so it may lie in any plane.  Triangles are returned as
    flattened triplets of the original 3D boundary points.  The closing
    point must not be repeated.  A loop enclosing no area raises
    ``InvalidInputError``.
    """

    if len(boundary) < 3:
        raise InvalidInputError("planar triangulation needs at least three points")
    pts = _boundary_points(boundary)

    n = newell_normal(pts)
    length = np.linalg.norm(n)
    if not np.isfinite(length) or length <= AREA_EPSILON:
        raise InvalidInputError("boundary encloses no area, cannot triangulate")
    n = n / length

    # in-plane basis, seeded from the axis least aligned with the normal
    seed = np.zeros(3)
    seed[int(np.argmin(np.abs(n)))] = 1.0
    u = np.cross(n, seed)
    u /= np.linalg.norm(u)
    w = np.cross(n, u)

    p = np.asarray(pts, dtype=np.float64)
    vertices = np.column_stack((p.dot(u), p.dot(w)))
    ring_array = np.asarray([len(pts)], dtype=np.uint32)
    indices = _earcut.triangulate_float64(vertices, ring_array)
    return [pts[int(i)] for i in indices]


__all__ = [
    "HAT_POINTS",
    "CREASE_TRIANGLES",
    "newell_normal",
    "triangulate_hat",
    "triangulate_planar",
]
