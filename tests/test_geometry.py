import math

import numpy as np
import pytest

import geometry as gm
from errors import NotANumberError


def test_rotation_is_counter_clockwise():
    v = gm.rotation(math.pi / 2) @ np.array([1.0, 0.0])
    assert tuple(v) == pytest.approx((0.0, 1.0), abs=1e-12)


def test_rotations_compose_by_adding_angles():
    a, b = 0.3, 1.1
    assert gm.rotation(a) @ gm.rotation(b) == pytest.approx(gm.rotation(a + b))


def test_distance_and_bearing():
    assert gm.distance((1.0, 1.0), (4.0, 5.0)) == pytest.approx(5.0)
    assert gm.bearing((1.0, 1.0), (4.0, 5.0)) == pytest.approx(math.atan2(4.0, 3.0))
    assert gm.bearing((0.0, 0.0), (0.0, -2.0)) == pytest.approx(-math.pi / 2)
    assert gm.bearing((0.0, 0.0), (-1.0, 0.0)) == pytest.approx(math.pi)


def test_clamp():
    assert gm.Geometry.clamp(1.5, -1.0, 1.0) == 1.0
    assert gm.Geometry.clamp(-3.0, -1.0, 1.0) == -1.0
    assert gm.Geometry.clamp(0.25, -1.0, 1.0) == 0.25


@pytest.mark.parametrize("ratio, expected", [
    (1.0 + 1e-12, 0.0),
    (-1.0 - 1e-12, math.pi),
    (0.5, math.acos(0.5)),
])
def test_safe_acos_clamps_into_domain(ratio, expected):
    assert gm.safe_acos(ratio) == pytest.approx(expected)


def test_safe_asin_clamps_into_domain():
    assert gm.safe_asin(1.0 + 1e-12) == pytest.approx(math.pi / 2)
    assert gm.safe_asin(-1.0 - 1e-12) == pytest.approx(-math.pi / 2)


@pytest.mark.parametrize("fn", [gm.safe_acos, gm.safe_asin])
def test_unclamped_out_of_domain_raises(fn):
    with pytest.raises(NotANumberError) as info:
        fn(1.0 + 1e-12, clamp=False)
    assert info.value.name in ("acos", "asin")
    assert isinstance(info.value, ArithmeticError)


def test_as_vec_returns_plain_floats():
    v = gm.as_vec(np.array([1, 2]))
    assert v == (1.0, 2.0)
    assert all(type(c) is float for c in v)


def test_as_finite_vec_accepts_ordinary_points():
    assert gm.as_finite_vec(np.array([3, -4])) == (3.0, -4.0)


@pytest.mark.parametrize("p", [
    (float("nan"), 100.0),
    (0.0, float("inf")),
    (float("-inf"), float("nan")),
])
def test_as_finite_vec_rejects_nan_and_inf(p):
    with pytest.raises(ValueError, match="target"):
        gm.as_finite_vec(p, "target")
