import pytest

from hatfreedom.orientation import HAT_DEFINITION, reorient


def test_hat_definition():
    assert HAT_DEFINITION == (7, 9, 6, 8, 5, 3, 3, 1, 4, 2, 11, 9, 0, 10)
    assert len(HAT_DEFINITION) == 14


def test_identity():
    assert reorient(HAT_DEFINITION, 0) == HAT_DEFINITION
    assert reorient(HAT_DEFINITION, 12) == HAT_DEFINITION
    assert reorient([], 5, True) == ()


@pytest.mark.parametrize("r", list(range(-25, 26, 3)))
def test_rotation_is_invertible(r):
    assert reorient(reorient(HAT_DEFINITION, r), -r) == HAT_DEFINITION


@pytest.mark.parametrize("r1,r2", [(2, -4), (-2, -2), (5, 11), (-13, 1)])
def test_rotations_compose(r1, r2):
    assert reorient(reorient(HAT_DEFINITION, r1), r2) == reorient(HAT_DEFINITION, r1 + r2)


def test_values_stay_on_the_clock():
    for r in range(-30, 30):
        for flip in (False, True):
            assert all(0 <= p < 12 for p in reorient(HAT_DEFINITION, r, flip))


def test_flip_mirrors_about_twelve():
    assert reorient((0, 1, 3, 6, 11), 0, True) == (0, 11, 9, 6, 1)
    assert reorient(reorient(HAT_DEFINITION, 0, True), 0, True) == HAT_DEFINITION


def test_flip_is_applied_before_rotation():
    # rotate-then-flip would give 9
    assert reorient((1,), 2, True) == (1,)
    assert reorient(HAT_DEFINITION, -2, True) == (3, 1, 4, 2, 5, 7, 7, 9, 6, 8, 11, 1, 10, 0)
