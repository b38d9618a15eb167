"""Validation helpers for hat geometry.

Both checks raise on failure.  They are diagnostics rather than part of
every build, but ``check_hat`` runs them the way a patch build does.
"""

from __future__ import annotations

import logging
from typing import Sequence

from hatfreedom.boundary import path_sum
from hatfreedom.errors import GeometryInconsistencyError, MirrorInconsistencyError
from hatfreedom.geometry_utils import ORIGIN, Vec3, vadd, vmag
from hatfreedom.orientation import reorient

logger = logging.getLogger(__name__)

# accumulated error over fourteen summed vectors stays well below this;
# the ``tol`` keywords exist for tests only
TOLERANCE = 1e-5


def check_closed(hat_def: Sequence[int], v: Sequence[Vec3], *, tol: float = TOLERANCE) -> None:
    """Raise ``GeometryInconsistencyError`` unless the path around the
    hat returns to its start."""

    p = path_sum(v, hat_def)
    if vmag(p) > tol:
        logger.error("hat %s is not closed: residual %s, vectors %s", list(hat_def), p, list(v))
        raise GeometryInconsistencyError(hat_def, p)


def check_mirror(hat_def: Sequence[int], v: Sequence[Vec3], *, tol: float = TOLERANCE) -> None:
    """Raise ``MirrorInconsistencyError`` unless the hat flipped about
    twelve o'clock is its mirror image in x.

    Only meaningful for planar vectors; see ``check_hat``.
    """

    flipped_def = reorient(hat_def, 0, True)
    # validates the indices of both paths up front
    path_sum(v, hat_def)
    path_sum(v, flipped_def)

    p1 = ORIGIN
    p2 = ORIGIN
    for i, (a, b) in enumerate(zip(hat_def, flipped_def)):
        p1 = vadd(p1, v[a])
        p2 = vadd(p2, v[b])
        error = (p1[0] + p2[0], p1[1] - p2[1], p1[2] - p2[2])  # expect to be flipped in x
        if vmag(error) > tol:
            logger.error("flipped hat %s is not mirror of %s at step %d: %s vs %s",
                         list(flipped_def), list(hat_def), i, p1, p2)
            raise MirrorInconsistencyError(i, p1, p2, hat_def)


def check_hat(hat_def: Sequence[int], v: Sequence[Vec3], nonplanar: bool, *,
              tol: float = TOLERANCE) -> None:
    """Run the closure check, and the mirror check for planar tiles."""

    check_closed(hat_def, v, tol=tol)
    if nonplanar:
        # no mirror invariant is defined for tilted faces
        logger.debug("skipping mirror check for non-planar hat")
        return
    check_mirror(hat_def, v, tol=tol)


__all__ = [
    "TOLERANCE",
    "check_closed",
    "check_mirror",
    "check_hat",
]
