from __future__ import annotations

import logging

import numpy as np
import pytest

from polarize.common.errors import ValidationError
from polarize.core import Point3D
from polarize.sampling import fibonacci_lattice, fibonacci_lattice_array


def test_lattice_count_and_unit_distance(origin: Point3D) -> None:
    pts = fibonacci_lattice(origin, 10, 1)
    assert len(pts) == 11
    for p in pts:
        assert np.sqrt(p.x**2 + p.y**2 + p.z**2) == pytest.approx(1.0)


def test_lattice_translated_by_origin() -> None:
    center = Point3D(1.0, -2.0, 3.0)
    arr = fibonacci_lattice_array(center, 20, 1)
    dist = np.linalg.norm(arr - center.as_array(), axis=1)
    np.testing.assert_allclose(dist, 1.0)


def test_first_and_last_samples() -> None:
    arr = fibonacci_lattice_array(Point3D.origin(), 10, 1)
    # i=0: theta=0, cos(phi)=0.9
    np.testing.assert_allclose(arr[0], [np.sqrt(1 - 0.81), 0.9, 0.0], atol=1e-12)
    # 末尾は acos 引数がクランプされ南極に落ちる
    np.testing.assert_allclose(arr[-1], [0.0, -1.0, 0.0], atol=1e-12)
    assert not np.isnan(arr).any()


def test_fractional_step() -> None:
    assert fibonacci_lattice_array(Point3D.origin(), 2, 0.5).shape == (5, 3)


def test_zero_radius_is_empty_with_warning(caplog: pytest.LogCaptureFixture, origin: Point3D) -> None:
    with caplog.at_level(logging.WARNING, logger="polarize.sampling.lattice"):
        assert fibonacci_lattice(origin, 0) == []
    assert any("radius=0" in r.getMessage() for r in caplog.records)


def test_invalid_parameters(origin: Point3D) -> None:
    with pytest.raises(ValidationError):
        fibonacci_lattice(origin, -1.0)
    with pytest.raises(ValidationError):
        fibonacci_lattice(origin, 10, 0)
    with pytest.raises(ValidationError):
        fibonacci_lattice(origin, float("nan"))
