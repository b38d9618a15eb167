"""Small XYZ tuple helpers shared by the walker, checker and mesh view."""

from __future__ import annotations

from math import sqrt
from typing import Sequence, Tuple

from hatfreedom.errors import InvalidConfigurationError

Vec3 = Tuple[float, float, float]

ORIGIN: Vec3 = (0.0, 0.0, 0.0)

# area below which a triangle counts as collapsed
epsilon = 1e-9


def to_vec3(point_like: Sequence[float]) -> Vec3:
    """Return the XYZ components of a point/vector as a float tuple."""

    try:
        n = len(point_like)
    except TypeError:
        raise InvalidConfigurationError(f"not a vector: {point_like!r}") from None
    if n < 3:
        raise InvalidConfigurationError("value must have at least three components")
    return float(point_like[0]), float(point_like[1]), float(point_like[2])


def vadd(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def vsub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def vcross(a: Vec3, b: Vec3) -> Vec3:
    return (a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0])


def vmag(a: Vec3) -> float:
    return sqrt(a[0] * a[0] + a[1] * a[1] + a[2] * a[2])


def vclose(a: Vec3, b: Vec3, tol: float = 1e-9) -> bool:
    """Return ``True`` if ``a`` and ``b`` are within ``tol`` of each other."""

    return vmag(vsub(a, b)) <= tol


def triangle_normal(v0: Vec3, v1: Vec3, v2: Vec3) -> Vec3 | None:
    """Return the unit normal of a triangle or ``None`` if degenerate."""

    n = vcross(vsub(v1, v0), vsub(v2, v0))
    length = vmag(n)
    if length <= epsilon:
        return None
    return (n[0] / length, n[1] / length, n[2] / length)


def triangle_area(v0: Vec3, v1: Vec3, v2: Vec3) -> float:
    """Return the area of a triangle."""

    return 0.5 * vmag(vcross(vsub(v1, v0), vsub(v2, v0)))


def triangle_is_degenerate(v0: Vec3, v1: Vec3, v2: Vec3, tol: float = epsilon) -> bool:
    """Return ``True`` if a triangle collapses under the given tolerance."""

    return triangle_area(v0, v1, v2) <= tol


__all__ = [
    "Vec3",
    "ORIGIN",
    "to_vec3",
    "vadd",
    "vsub",
    "vcross",
    "vmag",
    "vclose",
    "triangle_normal",
    "triangle_area",
    "triangle_is_degenerate",
]
