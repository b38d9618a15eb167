"""Deterministic tilt sweep for animating the hat.

The sweep swings the face B normal back and forth about the face B
twelve o'clock vector.  It holds no timing state; whoever drives it
decides when to ask for the next frame, and may skip frames.
"""

from __future__ import annotations

from typing import Iterator

from hatfreedom.clock import DEFAULT_TILT, GeneratorState

DEFAULT_STEP = 0.03
DEFAULT_LIMIT = 1.0


class TiltSweep:
    """Iterator over generator states for a bouncing tilt angle.

    Each state is derived from ``base`` by a single rotation of
    ``theta`` radians, so no rounding error builds up over long runs.
    The step reverses once ``|theta|`` exceeds ``limit``.
    """

    def __init__(self, base: GeneratorState | None = None,
                 theta: float = DEFAULT_TILT,
                 dtheta: float = DEFAULT_STEP,
                 limit: float = DEFAULT_LIMIT):
        if dtheta == 0.0:
            raise ValueError('sweep step must be non-zero')
        self.base = base if base is not None else GeneratorState.planar()
        self.theta = theta
        self.dtheta = dtheta
        self.limit = limit

    def __iter__(self) -> Iterator[GeneratorState]:
        return self

    def state(self) -> GeneratorState:
        """The state for the current angle, without advancing."""
        return self.base.tilted(self.theta)

    def __next__(self) -> GeneratorState:
        self.theta += self.dtheta
        if abs(self.theta) > self.limit:
            self.dtheta *= -1.0
        return self.state()


__all__ = ["TiltSweep"]
