"""Hat definitions and their rotated / mirrored orientations.

A hat definition is the anticlockwise path around the tile boundary
starting from its peak; each entry is an index into the twelve clock
vectors.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from hatfreedom.clock import HOURS

HAT_DEFINITION: Tuple[int, ...] = (7, 9, 6, 8, 5, 3, 3, 1, 4, 2, 11, 9, 0, 10)


def reorient(hat_def: Sequence[int], r: int, flip: bool = False) -> Tuple[int, ...]:
    """Rotate a path by ``r`` clock positions, optionally mirrored.

    With ``flip`` each index ``p`` is first reflected about twelve
    o'clock to ``(12 - p) % 12`` and only then rotated.  Mirroring after
    rotating gives a different tile; the mirror-symmetry check relies on
    this order.  ``r`` may be any integer, including negative.
    """

    new_def = []
    for p in hat_def:
        if flip:
            p = (HOURS - p) % HOURS
        new_def.append((HOURS + p + r) % HOURS)
    return tuple(new_def)


__all__ = ["HAT_DEFINITION", "reorient"]
