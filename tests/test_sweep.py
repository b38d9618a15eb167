import pytest

from hatfreedom.clock import GeneratorState
from hatfreedom.geometry_checks import check_closed
from hatfreedom.orientation import HAT_DEFINITION
from hatfreedom.sweep import TiltSweep


def test_defaults():
    sweep = TiltSweep()
    assert sweep.theta == -1.0
    assert sweep.dtheta == 0.03
    assert sweep.base == GeneratorState.planar()
    assert sweep.state() == GeneratorState.planar().tilted(-1.0)


def test_step():
    sweep = TiltSweep()
    state = next(sweep)
    assert sweep.theta == pytest.approx(-0.97)
    assert state == GeneratorState.planar().tilted(sweep.theta)
    assert not state.is_planar()


def test_bounce():
    sweep = TiltSweep(theta=0.99, dtheta=0.03)
    next(sweep)
    assert sweep.theta == pytest.approx(1.02)
    assert sweep.dtheta == pytest.approx(-0.03)
    next(sweep)
    assert sweep.theta == pytest.approx(0.99)


def test_sweep_stays_in_range_and_closed():
    sweep = TiltSweep()
    for _, state in zip(range(150), sweep):
        assert abs(sweep.theta) <= 1.0 + 0.03 + 1e-9
        check_closed(HAT_DEFINITION, state.vectors())


def test_zero_step_rejected():
    with pytest.raises(ValueError):
        TiltSweep(dtheta=0.0)
