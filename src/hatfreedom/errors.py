"""Exceptions raised by the hat geometry routines.

Every fault is a ``ValueError`` so callers that already guard geometry
construction with ``except ValueError`` keep working.  None of them is
fatal; a caller should treat any of them as aborting the current
geometry build.
"""

from typing import Optional, Sequence


class HatGeometryError(ValueError):
    """Base class for all hat geometry faults."""


class InvalidConfigurationError(HatGeometryError):
    """Generator vectors that cannot define a rotation or a direction."""


class InvalidInputError(HatGeometryError):
    """Malformed input: bad direction index, wrong point count, etc."""


class GeometryInconsistencyError(HatGeometryError):
    """A hat boundary does not return to its starting point."""

    def __init__(self, hat_def: Sequence[int], residual: Sequence[float]) -> None:
        self.hat_def = list(hat_def)
        self.residual = tuple(residual)
        message = f"hat is not closed: {self.hat_def} ends at offset {self.residual}"
        super().__init__(message)


class MirrorInconsistencyError(HatGeometryError):
    """The flipped hat is not the mirror image of the original."""

    def __init__(self, step: int,
                 original: Sequence[float],
                 flipped: Sequence[float],
                 hat_def: Optional[Sequence[int]] = None) -> None:
        self.step = step
        self.original = tuple(original)
        self.flipped = tuple(flipped)
        self.hat_def = list(hat_def) if hat_def is not None else None
        message = (f"flipped hat is not mirror at step {step}: "
                   f"{self.original} vs {self.flipped}")
        super().__init__(message)


__all__ = [
    "HatGeometryError",
    "InvalidConfigurationError",
    "InvalidInputError",
    "GeometryInconsistencyError",
    "MirrorInconsistencyError",
]
