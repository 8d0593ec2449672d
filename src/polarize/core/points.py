"""
どこで: `polarize.core.points`
何を: 不変の点型 `Point2D(x, z)` / `Point3D(x, y, z)` と、点列 ⇄ ndarray の変換。
なぜ: 変換・回転・サンプラーの入出力を、ホスト側の座標型に依存しない値型で統一するため。

規約:
- 2D 点は水平面（x, z）上の点。鉛直成分 y を持たない。
- 演算はすべて新インスタンスを返す純関数。
- `points_to_array` は `(N, 3)` float64 を返す（2D 点は y=0 で補う）。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from .vector import Vector


@dataclass(frozen=True, slots=True)
class Point2D:
    x: float
    z: float

    def add(self, other: "Point2D") -> "Point2D":
        return Point2D(self.x + other.x, self.z + other.z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.z], dtype=np.float64)


@dataclass(frozen=True, slots=True)
class Point3D:
    x: float
    y: float
    z: float

    @classmethod
    def origin(cls) -> "Point3D":
        return cls(0.0, 0.0, 0.0)

    def add(self, other: "Point3D") -> "Point3D":
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def multiply(self, other: "Point3D") -> "Point3D":
        """成分ごとの積。"""
        return Point3D(self.x * other.x, self.y * other.y, self.z * other.z)

    def move(self, vector: Vector) -> "Point3D":
        """ベクトル分だけ平行移動。"""
        return Point3D(self.x + vector.x, self.y + vector.y, self.z + vector.z)

    def differential(self, other: "Point3D") -> "Point3D":
        """差分 `other - self` を点として返す。"""
        return Point3D(other.x - self.x, other.y - self.y, other.z - self.z)

    def distance_vector(self, other: "Point3D") -> Vector:
        """`self` から `other` へのベクトル。"""
        return Vector(other.x - self.x, other.y - self.y, other.z - self.z)

    def draw_line(self, other: "Point3D", num_points: int) -> list["Point3D"]:
        """`self` → `other` の線分を等分割した点列（`polarize.sampling.draw_line`）。"""
        from polarize.sampling.line import draw_line

        return draw_line(self, other, num_points)

    def as_vector(self) -> Vector:
        return Vector(self.x, self.y, self.z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


def points_to_array(points: Iterable[Point3D | Point2D]) -> np.ndarray:
    """点列を `(N, 3)` の float64 配列に詰める。

    Parameters
    ----------
    points : Iterable[Point3D | Point2D]
        点列。`Point2D` は `(x, 0, z)` として格納する。

    Returns
    -------
    np.ndarray
        形状 `(N, 3)`。空入力は `(0, 3)`。
    """
    rows: list[tuple[float, float, float]] = []
    for p in points:
        if isinstance(p, Point3D):
            rows.append((p.x, p.y, p.z))
        elif isinstance(p, Point2D):
            rows.append((p.x, 0.0, p.z))
        else:
            raise TypeError(f"Point2D/Point3D 以外は配列化できません: got {p!r}")
    if not rows:
        return np.empty((0, 3), dtype=np.float64)
    return np.asarray(rows, dtype=np.float64)


def array_to_points(coords: np.ndarray | Sequence[Sequence[float]]) -> list[Point3D]:
    """`(N, 3)` 配列を `Point3D` のリストに戻す。"""
    arr = np.asarray(coords, dtype=np.float64)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"座標配列の形状が不正です: {arr.shape}")
    return [Point3D(float(x), float(y), float(z)) for x, y, z in arr]


__all__ = ["Point2D", "Point3D", "points_to_array", "array_to_points"]
