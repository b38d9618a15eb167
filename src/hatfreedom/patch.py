"""A fixed patch of eight hats.

Each patch entry is the path from the shared origin to the peak of a
tile, followed by the path around that tile.  The entries are constant;
only the geometry they evaluate to changes with the generator state.
"""

from __future__ import annotations

import colorsys
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from hatfreedom.boundary import flatten, walk_boundary
from hatfreedom.clock import GeneratorState
from hatfreedom.geometry_checks import check_hat
from hatfreedom.geometry_utils import Vec3
from hatfreedom.orientation import HAT_DEFINITION, reorient
from hatfreedom.triangulator import triangulate_hat, triangulate_planar

SATURATION = 0.4
LIGHTNESS = 0.7

# from the peak of a hat to the peak of the next one along
_ALONG = (4, 2, 11, 9, 0, 10)

PATCH: Tuple[Tuple[Tuple[int, ...], Tuple[int, ...]], ...] = (
    ((), HAT_DEFINITION),
    (_ALONG, HAT_DEFINITION),
    (_ALONG + _ALONG, HAT_DEFINITION),
    (_ALONG + (7, 9), reorient(HAT_DEFINITION, 2)),
    ((4, 6), reorient(HAT_DEFINITION, -4)),
    ((7, 9) + reorient((11, 9, 0, 10), -2), reorient(HAT_DEFINITION, -2)),
    ((7, 9, 6, 8, 5, 3), reorient(HAT_DEFINITION, -2, True)),
    (_ALONG + _ALONG + reorient((3, 1, 4, 2, 11, 9, 0, 10), -2, True),
     reorient(HAT_DEFINITION, -2, True)),
)


def tile_color(i: int, n: int = len(PATCH)) -> Tuple[float, float, float]:
    """Return the ``(hue, saturation, lightness)`` of tile ``i`` of ``n``."""

    return (i / n, SATURATION, LIGHTNESS)


@dataclass(frozen=True)
class PatchTile:
    """Evaluated geometry of one patch entry.

    ``boundary`` is the open boundary loop and ``triangles`` the fill,
    flattened to one point triplet per triangle.
    """

    index: int
    boundary: Tuple[Vec3, ...]
    triangles: Tuple[Vec3, ...]
    hsl: Tuple[float, float, float]
    nonplanar: bool

    @property
    def hue(self) -> float:
        return self.hsl[0]

    @property
    def rgb(self) -> Tuple[float, float, float]:
        h, s, l = self.hsl
        # colorsys orders the arguments hue, lightness, saturation
        return colorsys.hls_to_rgb(h, l, s)

    def positions(self) -> np.ndarray:
        """Flat float32 triangle vertex buffer."""
        return flatten(self.triangles)

    def outline(self) -> np.ndarray:
        """Flat float32 boundary buffer."""
        return flatten(self.boundary)


def build_patch(v: Sequence[Vec3], nonplanar: bool) -> List[PatchTile]:
    """Evaluate every patch entry against the direction vectors ``v``.

    Non-planar tiles are filled with the fixed crease pattern, planar
    ones by ear clipping.  Any fault aborts the whole build.
    """

    tiles = []
    for i, (preamble, amble) in enumerate(PATCH):
        boundary = walk_boundary(v, preamble, amble)
        if nonplanar:
            triangles = triangulate_hat(boundary)
        else:
            triangles = triangulate_planar(boundary)
        tiles.append(PatchTile(index=i,
                               boundary=tuple(boundary),
                               triangles=tuple(triangles),
                               hsl=tile_color(i),
                               nonplanar=nonplanar))
    return tiles


def hat_patch(state: GeneratorState, nonplanar: bool) -> List[PatchTile]:
    """Generate vectors for ``state``, validate the hat, build the patch."""

    v = state.vectors()
    check_hat(HAT_DEFINITION, v, nonplanar)
    return build_patch(v, nonplanar)


__all__ = [
    "PATCH",
    "PatchTile",
    "tile_color",
    "build_patch",
    "hat_patch",
]
