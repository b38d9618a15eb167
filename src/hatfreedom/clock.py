"""Generate the twelve "clock position" direction vectors.

The hat is drawn with steps taken from two clock faces.  Each face is
described by its twelve o'clock vector and its face normal; the hour
positions are the twelve o'clock vector rotated clockwise (``-30``
degrees per hour) about the normal.  Even hours come from face A, odd
hours from face B, so the returned list is indexed ``0`` (twelve
o'clock on face A) through ``11``.

When both faces share a normal the tiles are planar.  Tilting the face B
normal makes them non-planar while every hat boundary stays closed.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import degrees, isfinite, sqrt
from typing import List, Sequence

from hatfreedom.errors import InvalidConfigurationError
from hatfreedom.geometry_utils import Vec3, to_vec3, vclose, vmag
from hatfreedom.xform import rotate, unit_axis

HOURS = 12
DEGREES_PER_HOUR = 30.0

# default tilt of face B in radians for the non-planar set-up
DEFAULT_TILT = -1.0


def _twelve(vec: Sequence[float], name: str) -> Vec3:
    v = to_vec3(vec)
    if not all(isfinite(c) for c in v):
        raise InvalidConfigurationError(f"non-finite {name} vector: {v}")
    if vmag(v) == 0.0:
        raise InvalidConfigurationError(f"zero-length {name} vector")
    return v


def generate_vectors(twelve_a: Sequence[float],
                     twelve_b: Sequence[float],
                     normal_a: Sequence[float],
                     normal_b: Sequence[float]) -> List[Vec3]:
    """Return the twelve direction vectors for the given clock faces.

    ``v[i]`` is the twelve o'clock vector of face ``i % 2`` rotated by
    ``-30 * i`` degrees about that face's normal.  ``v[0]`` is therefore
    exactly ``twelve_a``.  Normals need not be unit length; a zero or
    non-finite normal raises ``InvalidConfigurationError``.
    """

    twelves = (_twelve(twelve_a, "twelve o'clock A"),
               _twelve(twelve_b, "twelve o'clock B"))
    normals = (unit_axis(normal_a), unit_axis(normal_b))

    v = []
    for i in range(HOURS):
        v.append(rotate(twelves[i % 2], normals[i % 2], -DEGREES_PER_HOUR * i))
    return v


@dataclass(frozen=True)
class GeneratorState:
    """The two (twelve o'clock, normal) pairs that define the tiles.

    Instances are immutable; an animation driver produces a new state
    for each frame.
    """

    twelve_a: Vec3
    twelve_b: Vec3
    normal_a: Vec3
    normal_b: Vec3

    def __post_init__(self):
        for name in ("twelve_a", "twelve_b", "normal_a", "normal_b"):
            object.__setattr__(self, name, to_vec3(getattr(self, name)))

    @classmethod
    def planar(cls) -> "GeneratorState":
        """Both faces in the XY plane, face A scaled by sqrt(3)."""

        return cls(twelve_a=(0.0, sqrt(3.0), 0.0),
                   twelve_b=(0.0, 1.0, 0.0),
                   normal_a=(0.0, 0.0, 1.0),
                   normal_b=(0.0, 0.0, 1.0))

    def vectors(self) -> List[Vec3]:
        return generate_vectors(self.twelve_a, self.twelve_b,
                                self.normal_a, self.normal_b)

    def is_planar(self, tol: float = 1e-9) -> bool:
        """``True`` when both face normals point the same way."""

        return vclose(unit_axis(self.normal_a), unit_axis(self.normal_b), tol)

    def tilted(self, theta: float = DEFAULT_TILT) -> "GeneratorState":
        """Return a copy with the face B normal rotated by ``theta``
        radians about the face B twelve o'clock vector."""

        return GeneratorState(self.twelve_a, self.twelve_b, self.normal_a,
                              rotate(self.normal_b, self.twelve_b, degrees(theta)))


__all__ = [
    "HOURS",
    "DEFAULT_TILT",
    "GeneratorState",
    "generate_vectors",
]
