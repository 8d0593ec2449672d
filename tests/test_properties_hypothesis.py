import math

import numpy as np
import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import assume, given, strategies as st  # type: ignore

from polarize.convert import (
    to_axis_angle,
    to_cartesian_unit,
    to_polar_unit,
    to_quaternion,
    to_spherical_unit,
)
from polarize.core import AxisAngle, Point3D, PolarUnit, Quaternion, SphericalUnit, Vector
from polarize.rotate import rotate
from polarize.sampling import draw_line

coord = st.floats(-100, 100, allow_nan=False, allow_infinity=False)


@given(x=coord, y=coord, z=coord)
def test_normalize_unit_length(x, y, z):
    v = Vector(x, y, z)
    assume(v.length > 1e-6)
    n = v.normalize()
    assert n.length == 1.0
    assert math.sqrt(n.x**2 + n.y**2 + n.z**2) == pytest.approx(1.0)


@given(r=st.floats(0.01, 100), theta=st.floats(-3.1, 3.1))
def test_polar_round_trip(r, theta):
    back = to_polar_unit(to_cartesian_unit(PolarUnit(r, theta)))
    assert back.radius == pytest.approx(r)
    assert back.theta == pytest.approx(theta, abs=1e-9)


def _same_angle(a, b):
    # 2π を法として比較
    assert math.cos(a) == pytest.approx(math.cos(b), abs=1e-7)
    assert math.sin(a) == pytest.approx(math.sin(b), abs=1e-7)


@given(r=st.floats(0.01, 100), theta=st.floats(0.01, 3.13), phi=st.floats(-3.1, 3.1))
def test_spherical_round_trip_keeps_radius_and_zenith(r, theta, phi):
    s = to_spherical_unit(to_cartesian_unit(SphericalUnit(r, theta, phi)))
    assert s.radius == pytest.approx(r)
    assert s.theta == pytest.approx(theta, abs=1e-7)
    # 方位角は π/2 − φ に写り、もう 1 周で元に戻る
    _same_angle(s.phi, math.pi / 2 - phi)
    s2 = to_spherical_unit(to_cartesian_unit(s))
    assert s2.radius == pytest.approx(r)
    assert s2.theta == pytest.approx(theta, abs=1e-7)
    _same_angle(s2.phi, phi)


@given(
    w=st.floats(-1, 1), a=st.floats(-1, 1), b=st.floats(-1, 1), c=st.floats(-1, 1),
    x=coord, y=coord, z=coord,
)
def test_unit_quaternion_rotation_preserves_length(w, a, b, c, x, y, z):
    q = Quaternion(w, a, b, c)
    assume(q.magnitude > 1e-3)
    q = q.normalize()
    p = Point3D(x, y, z)
    out = rotate(p, q)
    before = math.sqrt(x * x + y * y + z * z)
    after = math.sqrt(out.x**2 + out.y**2 + out.z**2)
    assert after == pytest.approx(before, rel=1e-9, abs=1e-9)


axis_component = st.floats(-1, 1)


@given(ax=axis_component, ay=axis_component, az=axis_component, angle=st.floats(0.05, 3.0))
def test_axis_angle_round_trip(ax, ay, az, angle):
    assume(math.sqrt(ax * ax + ay * ay + az * az) > 1e-3)
    aa = AxisAngle(ax, ay, az, angle).normalize()
    back = to_axis_angle(to_quaternion(aa))
    assert back.angle == pytest.approx(angle, abs=1e-7)
    np.testing.assert_allclose([back.x, back.y, back.z], [aa.x, aa.y, aa.z], atol=1e-6)


@given(
    ax=axis_component, ay=axis_component, az=axis_component,
    angle=st.floats(1e-6, 2e-3, exclude_max=True),
)
def test_axis_angle_round_trip_near_identity(ax, ay, az, angle):
    # angle < 2ε では軸を s で割らない分岐を通る
    assume(math.sqrt(ax * ax + ay * ay + az * az) > 1e-3)
    aa = AxisAngle(ax, ay, az, angle).normalize()
    back = to_axis_angle(to_quaternion(aa))
    assert back.angle == pytest.approx(angle, abs=1e-8)
    axis = back.normalize()
    np.testing.assert_allclose([axis.x, axis.y, axis.z], [aa.x, aa.y, aa.z], atol=1e-9)



@given(n=st.integers(0, 50), x=coord, y=coord, z=coord)
def test_draw_line_endpoints(n, x, y, z):
    a = Point3D(0.0, 0.0, 0.0)
    b = Point3D(x, y, z)
    pts = draw_line(a, b, n)
    assert len(pts) == n + 1
    assert pts[0] == a
    if n > 0:
        assert pts[-1] == b
