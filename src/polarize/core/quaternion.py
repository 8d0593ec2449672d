"""
どこで: `polarize.core.quaternion`
何を: 不変の四元数 `Quaternion(w, x, y, z)` と Hamilton 積・共役・逆元。
なぜ: 回転（`polarize.rotate`）と軸角変換（`polarize.convert`）の共通表現とするため。

規約:
- `w` が実部、`(x, y, z)` がベクトル部。純ベクトルは `w=0` で埋め込む。
- 大きさ 0 の正規化・逆元は `DomainError`（NaN/inf を返さない）。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from polarize.common.errors import DomainError


@dataclass(frozen=True, slots=True)
class Quaternion:
    """四元数（値型・不変）。"""

    w: float
    x: float
    y: float
    z: float

    @classmethod
    def identity(cls) -> "Quaternion":
        """恒等回転 `(1, 0, 0, 0)`。"""
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def pure(cls, x: float, y: float, z: float) -> "Quaternion":
        """3 ベクトルを `w=0` の純四元数として埋め込む。"""
        return cls(0.0, float(x), float(y), float(z))

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)

    def add(self, other: "Quaternion | float") -> "Quaternion":
        """加算。float は実部 `w` にのみ加える。"""
        if isinstance(other, Quaternion):
            return Quaternion(
                self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z
            )
        s = float(other)
        return Quaternion(self.w + s, self.x, self.y, self.z)

    def multiply(self, other: "Quaternion | float") -> "Quaternion":
        """乗算。float は全成分のスケール、Quaternion は Hamilton 積（非可換）。"""
        if not isinstance(other, Quaternion):
            s = float(other)
            return Quaternion(self.w * s, self.x * s, self.y * s, self.z * s)

        w1, x1, y1, z1 = self.w, self.x, self.y, self.z
        w2, x2, y2, z2 = other.w, other.x, other.y, other.z

        w = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2
        x = w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2
        y = w1 * y2 + y1 * w2 + z1 * x2 - x1 * z2
        z = w1 * z2 + z1 * w2 + x1 * y2 - y1 * x2
        return Quaternion(w, x, y, z)

    def normalize(self) -> "Quaternion":
        """単位四元数を返す。

        Raises
        ------
        DomainError
            大きさが 0 の場合。
        """
        m = self.magnitude
        if m == 0.0:
            raise DomainError("大きさ 0 の四元数は正規化できません")
        return Quaternion(self.w / m, self.x / m, self.y / m, self.z / m)

    def conjugate(self) -> "Quaternion":
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def inverse(self) -> "Quaternion":
        """逆元（共役 / 大きさ²）。

        Raises
        ------
        DomainError
            大きさが 0 の場合。
        """
        m2 = self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z
        if m2 == 0.0:
            raise DomainError("大きさ 0 の四元数の逆元は定義されません")
        return Quaternion(self.w / m2, -self.x / m2, -self.y / m2, -self.z / m2)

    def as_array(self) -> np.ndarray:
        """`[w, x, y, z]` の float64 配列。"""
        return np.array([self.w, self.x, self.y, self.z], dtype=np.float64)


__all__ = ["Quaternion"]
