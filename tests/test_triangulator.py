import math

import numpy as np
import pytest

from hatfreedom.boundary import walk_boundary
from hatfreedom.clock import GeneratorState
from hatfreedom.errors import InvalidInputError
from hatfreedom.geometry_utils import triangle_area, triangle_is_degenerate
from hatfreedom.orientation import HAT_DEFINITION, reorient
from hatfreedom.triangulator import (
    CREASE_TRIANGLES,
    newell_normal,
    triangulate_hat,
    triangulate_planar,
)

SQRT3 = math.sqrt(3)


def _shoelace(points):
    total = 0.0
    for i, p in enumerate(points):
        q = points[(i + 1) % len(points)]
        total += p[0] * q[1] - q[0] * p[1]
    return total / 2.0


def _triangles(flat):
    return [flat[i:i + 3] for i in range(0, len(flat), 3)]


def test_crease_table():
    assert CREASE_TRIANGLES == (
        (1, 0, 13), (2, 1, 3), (3, 1, 13), (4, 3, 5), (5, 3, 6), (6, 3, 7),
        (7, 3, 8), (8, 3, 13), (12, 8, 13), (9, 8, 12), (11, 9, 12), (10, 9, 11),
    )
    used = {i for tri in CREASE_TRIANGLES for i in tri}
    assert used == set(range(14))


def test_triangulate_hat_uses_table():
    boundary = [(float(i), float(i * i), 0.0) for i in range(14)]
    tris = triangulate_hat(boundary)
    assert len(tris) == 36
    assert tris[:3] == [boundary[1], boundary[0], boundary[13]]
    assert tris[-3:] == [boundary[10], boundary[9], boundary[11]]


def test_nonplanar_triangles_are_not_degenerate():
    v = GeneratorState.planar().tilted().vectors()
    boundary = walk_boundary(v, [], HAT_DEFINITION)
    tris = _triangles(triangulate_hat(boundary))
    assert len(tris) == 12
    for tri in tris:
        assert not triangle_is_degenerate(*tri, tol=1e-6)


def test_crease_pattern_covers_planar_hat():
    v = GeneratorState.planar().vectors()
    boundary = walk_boundary(v, [], HAT_DEFINITION)
    area = sum(triangle_area(*tri) for tri in _triangles(triangulate_hat(boundary)))
    assert area == pytest.approx(abs(_shoelace(boundary)))


@pytest.mark.parametrize("count", [0, 3, 13, 15, 28])
def test_wrong_boundary_length(count):
    with pytest.raises(InvalidInputError):
        triangulate_hat([(0.0, 0.0, 0.0)] * count)


@pytest.mark.parametrize("r,flip", [(0, False), (2, False), (-4, False), (-2, True)])
def test_planar_fill_covers_tile(r, flip):
    v = GeneratorState.planar().vectors()
    boundary = walk_boundary(v, [4, 6], reorient(HAT_DEFINITION, r, flip))
    flat = triangulate_planar(boundary)
    assert len(flat) % 3 == 0
    assert 0 < len(flat) <= 36
    assert all(p in boundary for p in flat)
    area = sum(triangle_area(*tri) for tri in _triangles(flat))
    assert area == pytest.approx(abs(_shoelace(boundary)))


def test_planar_fill_square():
    square = [(0, 0, 0), (2, 0, 0), (2, 2, 0), (0, 2, 0)]
    flat = triangulate_planar(square)
    assert len(flat) == 6
    assert sum(triangle_area(*tri) for tri in _triangles(flat)) == pytest.approx(4.0)


def test_planar_fill_needs_a_polygon():
    with pytest.raises(InvalidInputError):
        triangulate_planar([(0, 0, 0), (1, 0, 0)])


def test_newell_normal_square():
    square = [(0, 0, 0), (2, 0, 0), (2, 2, 0), (0, 2, 0)]
    assert newell_normal(square) == pytest.approx([0.0, 0.0, 8.0])


def test_planar_fill_outside_xy_plane():
    # faces lie in the XZ plane, edge-on to XY
    state = GeneratorState((0, 0, SQRT3), (0, 0, 1), (0, 1, 0), (0, 1, 0))
    assert state.is_planar()
    boundary = walk_boundary(state.vectors(), [], HAT_DEFINITION)
    flat = triangulate_planar(boundary)
    assert 0 < len(flat) <= 36
    area = sum(triangle_area(*tri) for tri in _triangles(flat))
    assert area == pytest.approx(8 * SQRT3)


def test_planar_fill_tilted_plane():
    square = [(0, 0, 0), (1, 1, 1), (0, 3, 3), (-1, 2, 2)]
    flat = triangulate_planar(square)
    area = sum(triangle_area(*tri) for tri in _triangles(flat))
    assert area == pytest.approx(np.linalg.norm(newell_normal(square)) / 2)


def test_planar_fill_rejects_flat_loop():
    with pytest.raises(InvalidInputError):
        triangulate_planar([(0, 0, 0), (1, 0, 0), (2, 0, 0)])


@pytest.mark.parametrize("bad", [(1.0, 2.0), None, 3.0])
def test_malformed_boundary_point(bad):
    boundary = [(float(i), 0.0, 0.0) for i in range(14)]
    boundary[5] = bad
    with pytest.raises(InvalidInputError):
        triangulate_hat(boundary)
    with pytest.raises(InvalidInputError):
        triangulate_planar([(0, 0, 0), (1, 0, 0), bad, (0, 1, 0)])
