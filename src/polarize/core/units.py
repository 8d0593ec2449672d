"""
どこで: `polarize.core.units`
何を: 座標単位 `CartesianUnit` / `PolarUnit` / `SphericalUnit` と、回転用の `Delta` / `AxisAngle`。

角度の規約:
- theta（天頂角）は鉛直軸 y からの角度、phi（方位角）は水平面 xz 内の角度。単位はラジアン。
- `CartesianUnit` は 3D 点と、その水平面射影である 2D 点の組。
  `point2d.x == point3d.x` かつ `point2d.z == point3d.z` を生成時に保証する。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .points import Point2D, Point3D

if TYPE_CHECKING:
    from .quaternion import Quaternion


@dataclass(frozen=True, slots=True)
class CartesianUnit:
    """3D 点と水平面射影の組（値型・不変）。"""

    point3d: Point3D
    point2d: Point2D = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "point2d", Point2D(self.point3d.x, self.point3d.z))

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> "CartesianUnit":
        return cls(Point3D(float(x), float(y), float(z)))

    @property
    def x(self) -> float:
        return self.point3d.x

    @property
    def y(self) -> float:
        return self.point3d.y

    @property
    def z(self) -> float:
        return self.point3d.z


@dataclass(frozen=True, slots=True)
class PolarUnit:
    """2D 極座標 `(radius, theta)`（高さ成分なし）。"""

    radius: float
    theta: float

    def adjacent(self) -> float:
        """隣辺 `r·cos θ`（z 成分）。"""
        return self.radius * math.cos(self.theta)

    def opposite(self) -> float:
        """対辺 `r·sin θ`（x 成分）。"""
        return self.radius * math.sin(self.theta)

    def to_cartesian(self) -> CartesianUnit:
        from polarize.convert import to_cartesian_unit

        return to_cartesian_unit(self)


@dataclass(frozen=True, slots=True)
class SphericalUnit:
    """球座標 `(radius, theta, phi)`。"""

    radius: float
    theta: float
    phi: float

    def to_cartesian(self) -> CartesianUnit:
        from polarize.convert import to_cartesian_unit

        return to_cartesian_unit(self)


@dataclass(frozen=True, slots=True)
class Delta:
    """回転に逐次加える角度差分 `(theta, phi)`。"""

    theta: float = 0.0
    phi: float = 0.0


@dataclass(frozen=True, slots=True)
class AxisAngle:
    """軸角表現。軸 `(x, y, z)` は正規化されていなくてよい。"""

    x: float
    y: float
    z: float
    angle: float

    def normalize(self) -> "AxisAngle":
        """単位長の軸に正規化（角度はそのまま）。

        軸が 0 ベクトルの場合は割らずにそのまま返す（`Vector.normalize` と同じ退化方針）。
        """
        m = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        if m == 0.0:
            return self
        return AxisAngle(self.x / m, self.y / m, self.z / m, self.angle)

    def inverse(self) -> "AxisAngle":
        """軸のみ反転（角度は保持）。"""
        return AxisAngle(-self.x, -self.y, -self.z, self.angle)

    def negate(self) -> "AxisAngle":
        """軸と角度の両方を反転。"""
        return AxisAngle(-self.x, -self.y, -self.z, -self.angle)

    def to_quaternion(self) -> "Quaternion":
        from polarize.convert import to_quaternion

        return to_quaternion(self)


__all__ = [
    "CartesianUnit",
    "PolarUnit",
    "SphericalUnit",
    "Delta",
    "AxisAngle",
]
