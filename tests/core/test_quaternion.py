from __future__ import annotations

import math

import numpy as np
import pytest

from polarize.common.errors import DomainError
from polarize.core import Quaternion


def test_hamilton_product_basis() -> None:
    i = Quaternion(0.0, 1.0, 0.0, 0.0)
    j = Quaternion(0.0, 0.0, 1.0, 0.0)
    k = Quaternion(0.0, 0.0, 0.0, 1.0)
    assert i.multiply(j) == k
    assert j.multiply(i) == Quaternion(0.0, 0.0, 0.0, -1.0)
    assert i.multiply(i) == Quaternion(-1.0, 0.0, 0.0, 0.0)


def test_hamilton_product_general() -> None:
    a = Quaternion(1.0, 2.0, 3.0, 4.0)
    b = Quaternion(5.0, 6.0, 7.0, 8.0)
    assert a.multiply(b) == Quaternion(-60.0, 12.0, 30.0, 24.0)


def test_add_and_scale() -> None:
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert q.add(1.0) == Quaternion(2.0, 2.0, 3.0, 4.0)
    assert q.add(q) == Quaternion(2.0, 4.0, 6.0, 8.0)
    assert q.multiply(0.5) == Quaternion(0.5, 1.0, 1.5, 2.0)


def test_normalize_already_unit_is_identity() -> None:
    q = Quaternion(0.0, 1.0, 0.0, 0.0)
    n = q.normalize()
    assert n.magnitude == 1.0
    assert n == q


def test_normalize_general() -> None:
    n = Quaternion(1.0, 1.0, 1.0, 1.0).normalize()
    np.testing.assert_allclose(n.as_array(), [0.5, 0.5, 0.5, 0.5])
    assert n.magnitude == pytest.approx(1.0)


def test_inverse_times_self_is_identity() -> None:
    q = Quaternion(1.0, 2.0, -3.0, 0.5)
    prod = q.multiply(q.inverse())
    np.testing.assert_allclose(prod.as_array(), Quaternion.identity().as_array(), atol=1e-12)


def test_conjugate() -> None:
    assert Quaternion(1.0, 2.0, 3.0, 4.0).conjugate() == Quaternion(1.0, -2.0, -3.0, -4.0)


def test_zero_magnitude_normalize_and_inverse_raise() -> None:
    zero = Quaternion(0.0, 0.0, 0.0, 0.0)
    with pytest.raises(DomainError):
        zero.normalize()
    with pytest.raises(DomainError):
        zero.inverse()
    # ArithmeticError としても捕捉できる
    with pytest.raises(ArithmeticError):
        zero.inverse()


def test_magnitude() -> None:
    assert Quaternion(1.0, 2.0, 2.0, 4.0).magnitude == pytest.approx(5.0)
    assert Quaternion.pure(3.0, 0.0, 4.0).magnitude == pytest.approx(5.0)
    half = math.pi / 6
    assert Quaternion(math.cos(half), math.sin(half), 0.0, 0.0).magnitude == pytest.approx(1.0)
