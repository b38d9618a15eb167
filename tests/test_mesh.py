import math

import numpy as np
import pytest

from hatfreedom.clock import GeneratorState
from hatfreedom.mesh import mesh_view, vertex_normals
from hatfreedom.patch import build_patch


@pytest.fixture
def nonplanar_tiles():
    return build_patch(GeneratorState.planar().tilted().vectors(), True)


def test_mesh_view_nonplanar(nonplanar_tiles):
    for tile in nonplanar_tiles:
        tris = list(mesh_view(tile))
        assert len(tris) == 12
        for normal, v0, v1, v2 in tris:
            assert math.isclose(math.hypot(*normal), 1.0)
            assert v0 in tile.boundary and v1 in tile.boundary and v2 in tile.boundary


def test_mesh_view_planar_normals_are_vertical():
    tiles = build_patch(GeneratorState.planar().vectors(), False)
    for tile in tiles:
        for normal, _, _, _ in mesh_view(tile):
            assert abs(normal[2]) == pytest.approx(1.0)


def test_vertex_normals_match_positions(nonplanar_tiles):
    tile = nonplanar_tiles[3]
    normals = vertex_normals(tile)
    assert normals.dtype == np.float32
    assert normals.shape == tile.positions().shape
    first = normals[:9].reshape(3, 3)
    assert np.allclose(first[0], first[1]) and np.allclose(first[1], first[2])


def test_tilted_surface_is_creased(nonplanar_tiles):
    normals = {tuple(np.round(n, 6)) for n, _, _, _ in mesh_view(nonplanar_tiles[0])}
    assert len(normals) > 1
