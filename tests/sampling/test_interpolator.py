from __future__ import annotations

import math

import numpy as np
import pytest

from polarize.common import settings
from polarize.common.errors import ValidationError
from polarize.core import CartesianUnit, PolarUnit, Scalar, SphericalUnit, Vector
from polarize.sampling import (
    cartesian45,
    cartesian90,
    cartesian360,
    polar_set,
    polar_set45,
    polar_set90,
    polar_set180,
    polar_set360,
    spherical_unit90,
    spherical_unit360,
)


def test_polar_set90_includes_upper_bound() -> None:
    units = polar_set90(Scalar(2.0), math.pi / 4)
    assert [u.theta for u in units] == pytest.approx([0.0, math.pi / 4, math.pi / 2])
    assert all(u.radius == 2.0 for u in units)
    assert all(isinstance(u, PolarUnit) for u in units)


def test_polar_set360_excludes_full_turn() -> None:
    units = polar_set360(Scalar(1.0), math.pi / 2)
    assert [u.theta for u in units] == pytest.approx([0.0, math.pi / 2, math.pi, 1.5 * math.pi])


def test_polar_set180_counts() -> None:
    assert len(polar_set180(Scalar(1.0), math.pi / 4)) == 5


def test_cartesian360_is_inclusive_double_loop() -> None:
    v = Vector(0.0, 3.0, 4.0)
    units = cartesian360(v, math.pi / 2)
    assert len(units) == 25
    assert all(isinstance(u, CartesianUnit) for u in units)
    # 全点が半径 |v| の球面上
    radii = [math.sqrt(u.x**2 + u.y**2 + u.z**2) for u in units]
    np.testing.assert_allclose(radii, 5.0)
    # 外側ループは theta
    assert units[0].y == pytest.approx(5.0)
    assert units[5].y == pytest.approx(0.0, abs=1e-12)


def test_cartesian90_first_units() -> None:
    units = cartesian90(Vector(1.0, 0.0, 0.0), math.pi / 2)
    assert len(units) == 4
    np.testing.assert_allclose([units[2].x, units[2].y, units[2].z], [1.0, 0.0, 0.0], atol=1e-12)
    np.testing.assert_allclose([units[3].x, units[3].y, units[3].z], [0.0, 0.0, 1.0], atol=1e-12)


def test_spherical_units_store_radius_then_angles() -> None:
    units = spherical_unit90(Scalar(7.0), math.pi / 2)
    assert units == [
        SphericalUnit(7.0, 0.0, 0.0),
        SphericalUnit(7.0, 0.0, math.pi / 2),
        SphericalUnit(7.0, math.pi / 2, 0.0),
        SphericalUnit(7.0, math.pi / 2, math.pi / 2),
    ]


def test_spherical_unit360_excludes_full_turn() -> None:
    units = spherical_unit360(Scalar(1.0), math.pi)
    assert [(u.theta, u.phi) for u in units] == [
        (0.0, 0.0),
        (0.0, math.pi),
        (math.pi, 0.0),
        (math.pi, math.pi),
    ]


def test_step_larger_than_range_yields_single_angle() -> None:
    assert polar_set45(Scalar(1.0), 1.0) == [PolarUnit(1.0, 0.0)]
    assert len(cartesian45(Vector(1.0, 0.0, 0.0), 10.0)) == 1


@pytest.mark.parametrize("step", [0.0, -0.1, float("nan"), float("inf")])
def test_invalid_step_raises(step: float) -> None:
    with pytest.raises(ValidationError):
        polar_set90(Scalar(1.0), step)
    with pytest.raises(ValidationError):
        cartesian90(Vector(1.0, 0.0, 0.0), step)
    with pytest.raises(ValidationError):
        spherical_unit90(Scalar(1.0), step)


def test_unknown_degrees_raise() -> None:
    with pytest.raises(ValidationError):
        polar_set(Scalar(1.0), 0.1, 30)


def test_sample_budget(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POLARIZE_MAX_SAMPLES", "10")
    settings.reload_from_env()
    with pytest.raises(ValidationError):
        cartesian360(Vector(1.0, 0.0, 0.0), math.pi / 2)
    # 上限内は通る
    assert len(polar_set360(Scalar(1.0), math.pi / 2)) == 4


@pytest.mark.parametrize("degrees", ["90", None, True, 90.5, float("nan"), [90]])
def test_non_numeric_degrees_raise_validation_error(degrees) -> None:  # noqa: ANN001 - テスト用
    with pytest.raises(ValidationError):
        polar_set(Scalar(1.0), 0.1, degrees)


def test_integral_float_degrees_accepted() -> None:
    assert polar_set(Scalar(1.0), math.pi / 4, 90.0) == polar_set90(Scalar(1.0), math.pi / 4)


def test_budget_checked_before_angles_are_listed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POLARIZE_MAX_SAMPLES", "1000")
    settings.reload_from_env()
    # 角度数 ≈ 6.3e9。列挙前に拒否される
    with pytest.raises(ValidationError):
        polar_set360(Scalar(1.0), 1e-9)
    with pytest.raises(ValidationError):
        spherical_unit360(Scalar(1.0), 1e-9)
