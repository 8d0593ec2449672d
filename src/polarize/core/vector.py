"""
どこで: `polarize.core.vector`
何を: 不変 3 次元ベクトル `Vector` と、ベクトル積から導く `ScalarTriple` / `Vertex`。

データモデル（不変条件）:
- `length` は生成時に `sqrt(x²+y²+z²)` としてキャッシュし、常にユークリッドノルムと一致する。
- 新しい成分を作る操作は必ず新インスタンスを返し、`length` を再計算する。
- 例外は `normalize()` のみで、元の長さが非 0 のとき `length = 1.0` を明示設定する。
  長さ 0 のベクトルの正規化は 0 ベクトルを返す（失敗させない）。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from polarize.common.errors import DomainError
from polarize.common.types import Vec3

from .quaternion import Quaternion


@dataclass(frozen=True, slots=True)
class Vector:
    """3 次元ベクトル（値型・不変）。等価性は成分のみで判定する。"""

    x: float
    y: float
    z: float
    length: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "length", math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        )

    @classmethod
    def zero(cls) -> "Vector":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, arr: np.ndarray | Vec3) -> "Vector":
        a = np.asarray(arr, dtype=np.float64).reshape(-1)
        if a.size != 3:
            raise ValueError(f"ベクトルは 3 成分である必要があります: got {a.size}")
        return cls(float(a[0]), float(a[1]), float(a[2]))

    # ── 算術（すべて純粋） ────────
    def add(self, other: "Vector | float") -> "Vector":
        """加算。float は全成分に加える。"""
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        s = float(other)
        return Vector(self.x + s, self.y + s, self.z + s)

    def multiply(self, other: "Vector | float") -> "Vector":
        """乗算。Vector は成分ごとの積、float はスケール。"""
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        s = float(other)
        return Vector(self.x * s, self.y * s, self.z * s)

    def inverse(self) -> "Vector":
        """全成分の符号反転。"""
        return Vector(-self.x, -self.y, -self.z)

    def normalize(self) -> "Vector":
        """単位ベクトルを返す。長さ 0 の場合は 0 ベクトル。"""
        if self.length == 0.0:
            return Vector(0.0, 0.0, 0.0)
        out = Vector(self.x / self.length, self.y / self.length, self.z / self.length)
        object.__setattr__(out, "length", 1.0)
        return out

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector") -> "Vector":
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.length * self.length

    def distance(self, other: "Vector") -> float:
        return math.sqrt(self.distance_squared(other))

    def distance_squared(self, other: "Vector") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def get_angle(self, other: "Vector") -> float:
        """2 ベクトルのなす角 `acos(dot / (|a||b|))` [rad]。

        丸め誤差で ±1 を僅かに超えた余弦はクランプする。

        Raises
        ------
        DomainError
            どちらかの長さが 0 の場合。
        """
        denom = self.length * other.length
        if denom == 0.0:
            raise DomainError("長さ 0 のベクトルとのなす角は定義されません")
        c = self.dot(other) / denom
        c = -1.0 if c < -1.0 else (1.0 if c > 1.0 else c)
        return math.acos(c)

    def rotate(self, quaternion: Quaternion) -> "Vector":
        """四元数で回転（能動回転 `q·p·q*`）。

        四元数は内部で正規化する（大きさ 0 は `DomainError`）。

        Notes
        -----
        点の回転 `polarize.rotate.rotate` は正規化せず `q*·p·q`（受動回転）を用いるため、
        同じ単位四元数でも回転の向きが逆になる。z 軸回り 90° の `q` で `(1, 0, 0)` は
        本メソッドでは `(0, 1, 0)`、`rotate.rotate` では `(0, -1, 0)` に移る。
        `rotate.rotate(p, q.conjugate())` が本メソッドと一致する。
        """
        q = quaternion.normalize()
        p = Quaternion.pure(self.x, self.y, self.z)
        r = q.multiply(p).multiply(q.conjugate())
        return Vector(r.x, r.y, r.z)

    def as_array(self) -> np.ndarray:
        """`[x, y, z]` の float64 配列。"""
        return np.array([self.x, self.y, self.z], dtype=np.float64)


class ScalarTriple:
    """3 ベクトルの巡回三重積。

    `∘` を成分ごとの積として
    `a·(b∘c)`, `b·(c∘a)`, `c·(a∘b)` を保持し、まとめて `Vector` でも参照できる。
    """

    __slots__ = ("product_a", "product_b", "product_c")

    def __init__(self, a: Vector, b: Vector, c: Vector) -> None:
        self.product_a = a.dot(b.multiply(c))
        self.product_b = b.dot(c.multiply(a))
        self.product_c = c.dot(a.multiply(b))

    @property
    def vector(self) -> Vector:
        return Vector(self.product_a, self.product_b, self.product_c)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"ScalarTriple({self.product_a}, {self.product_b}, {self.product_c})"


def vertex(a: Vector, b: Vector):
    """2 ベクトルの外積を頂点（`Point3D`）として返す。"""
    from .points import Point3D

    c = a.cross(b)
    return Point3D(c.x, c.y, c.z)


__all__ = ["Vector", "ScalarTriple", "vertex"]
