"""
どこで: `polarize.convert.converter`
何を: 直交・極・球・軸角/四元数の相互変換（純関数群）。
なぜ: 座標表現の変換式を 1 箇所に固定し、回転/サンプラーから同じ規約で再利用するため。

変換式（theta は y 軸からの天頂角、phi は xz 平面の方位角）:

    極 → 直交:   x = r·sin θ,          y = 0,       z = r·cos θ
    球 → 直交:   x = r·sin θ·cos φ,    y = r·cos θ, z = r·sin θ·sin φ
    直交 → 極:   r = √(x²+z²),          θ = atan2(x, z)
    直交 → 球:   r = √(x²+y²+z²),       θ = acos(y/r), φ = atan2(x, z)
    四元数 → 軸角: angle = 2·acos(w),  s = √(1-w²),  axis = (x, y, z)/s（s < ε なら割らない）
    軸角 → 四元数: w = cos(angle/2),   (x, y, z) = axis·sin(angle/2)

注意:
- atan2 の引数順は `(x, z)`（角度の基準軸が z 軸になる）。入れ替えないこと。
- 球 → 直交 → 球 では r と θ は保存されるが、φ は `π/2 − φ`（2π を法として）に写る。
  直交 → 球 の φ が z 軸基準、球 → 直交 の φ が x 軸基準であるため。2 回適用すると元に戻る。
- 生の float を受け取る版（`cartesian_from_polar` 等）はオブジェクト版と同じ式で、
  ビット単位で同じ結果を返す。オブジェクト版はこれらに委譲する。
"""

from __future__ import annotations

import math

from polarize.common import settings as _settings
from polarize.core.points import Point2D, Point3D
from polarize.core.quaternion import Quaternion
from polarize.core.scalar import Scalar
from polarize.core.units import AxisAngle, CartesianUnit, PolarUnit, SphericalUnit
from polarize.core.vector import Vector


# ── 極/球 → 直交 ───────────────────
def cartesian_from_polar(radius: float, theta: float) -> CartesianUnit:
    """`(radius, theta)` → `CartesianUnit`（y=0）。"""
    x = radius * math.sin(theta)
    z = radius * math.cos(theta)
    return CartesianUnit.from_xyz(x, 0.0, z)


def cartesian_from_spherical(radius: float, theta: float, phi: float) -> CartesianUnit:
    """`(radius, theta, phi)` → `CartesianUnit`。"""
    x = radius * math.sin(theta) * math.cos(phi)
    y = radius * math.cos(theta)
    z = radius * math.sin(theta) * math.sin(phi)
    return CartesianUnit.from_xyz(x, y, z)


def cartesian_from_scalar(
    scalar: Scalar, theta: float, phi: float | None = None
) -> CartesianUnit:
    """スカラーの大きさを半径として直交へ。`phi` 省略時は極座標扱い。"""
    if phi is None:
        return cartesian_from_polar(scalar.magnitude, theta)
    return cartesian_from_spherical(scalar.magnitude, theta, phi)


def to_cartesian_unit(unit: PolarUnit | SphericalUnit) -> CartesianUnit:
    """極/球座標単位を `CartesianUnit` に変換する。

    Raises
    ------
    TypeError
        `PolarUnit` / `SphericalUnit` 以外を渡した場合。
    """
    if isinstance(unit, SphericalUnit):
        return cartesian_from_spherical(unit.radius, unit.theta, unit.phi)
    if isinstance(unit, PolarUnit):
        return cartesian_from_polar(unit.radius, unit.theta)
    raise TypeError(f"to_cartesian_unit は PolarUnit/SphericalUnit のみ受け付けます: got {unit!r}")


# ── 直交 → 極 ───────────────────────
def polar_from_xz(x: float, z: float) -> PolarUnit:
    """水平面上の `(x, z)` → `PolarUnit`。"""
    radius = math.sqrt(x * x + z * z)
    theta = math.atan2(x, z)
    return PolarUnit(radius, theta)


def polar_from_vector(point: CartesianUnit | Point2D, vector: Vector) -> PolarUnit:
    """角度は点から、半径は `vector.length` から取る。"""
    p2 = point.point2d if isinstance(point, CartesianUnit) else point
    return PolarUnit(vector.length, math.atan2(p2.x, p2.z))


def to_polar_unit(unit: CartesianUnit) -> PolarUnit:
    """`CartesianUnit` の水平面成分から `PolarUnit` を得る（y は無視）。"""
    return polar_from_xz(unit.point2d.x, unit.point2d.z)


# ── 直交 → 球 ───────────────────────
def spherical_from_xyz(x: float, y: float, z: float) -> SphericalUnit:
    """`(x, y, z)` → `SphericalUnit`。

    原点（r=0）は天頂角が定義できないため `SphericalUnit(0, 0, 0)` を返す。
    """
    radius = math.sqrt(x * x + y * y + z * z)
    if radius == 0.0:
        return SphericalUnit(0.0, 0.0, 0.0)
    theta = math.acos(_clamp_unit(y / radius))
    phi = math.atan2(x, z)
    return SphericalUnit(radius, theta, phi)


def spherical_from_vector(point: CartesianUnit | Point3D, vector: Vector) -> SphericalUnit:
    """角度は点から、半径は `vector.length` から取る。"""
    p3 = point.point3d if isinstance(point, CartesianUnit) else point
    radius = vector.length
    if radius == 0.0:
        return SphericalUnit(0.0, 0.0, 0.0)
    theta = math.acos(_clamp_unit(p3.y / radius))
    phi = math.atan2(p3.x, p3.z)
    return SphericalUnit(radius, theta, phi)


def to_spherical_unit(unit: CartesianUnit) -> SphericalUnit:
    p = unit.point3d
    return spherical_from_xyz(p.x, p.y, p.z)


# ── 四元数 ⇄ 軸角 ─────────────────────
def to_axis_angle(quaternion: Quaternion, *, epsilon: float | None = None) -> AxisAngle:
    """四元数 → 軸角。

    Parameters
    ----------
    quaternion : Quaternion
        単位四元数を想定。`w` は acos/sqrt の定義域 [-1, 1] にクランプする。
    epsilon : float | None
        `s = √(1-w²)` がこれ未満なら軸を `s` で割らず生の `(x, y, z)` を使う。
        省略時は設定値 `AXIS_ANGLE_EPSILON`（既定 0.001）。

    Notes
    -----
    恒等回転付近（angle≈0）で `s` による除算が発散するのを避けるための分岐。
    この分岐では軸は任意なので、生の成分（ほぼ 0）をそのまま返す。
    """
    eps = _settings.get().AXIS_ANGLE_EPSILON if epsilon is None else float(epsilon)
    w = _clamp_unit(quaternion.w)
    angle = 2.0 * math.acos(w)
    s = math.sqrt(1.0 - w * w)
    if s < eps:
        return AxisAngle(quaternion.x, quaternion.y, quaternion.z, angle)
    return AxisAngle(quaternion.x / s, quaternion.y / s, quaternion.z / s, angle)


def to_quaternion(axis_angle: AxisAngle) -> Quaternion:
    """軸角 → 四元数（軸は正規化しない。単位四元数が必要なら軸を先に正規化する）。"""
    half = axis_angle.angle / 2.0
    w = math.cos(half)
    s = math.sin(half)
    return Quaternion(w, axis_angle.x * s, axis_angle.y * s, axis_angle.z * s)


def _clamp_unit(v: float) -> float:
    return -1.0 if v < -1.0 else (1.0 if v > 1.0 else v)


__all__ = [
    "cartesian_from_polar",
    "cartesian_from_spherical",
    "cartesian_from_scalar",
    "to_cartesian_unit",
    "polar_from_xz",
    "polar_from_vector",
    "to_polar_unit",
    "spherical_from_xyz",
    "spherical_from_vector",
    "to_spherical_unit",
    "to_axis_angle",
    "to_quaternion",
]
