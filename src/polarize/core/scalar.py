"""
どこで: `polarize.core.scalar`
何を: 1 次元の極座標的量 `Scalar(magnitude, origin)`。
なぜ: 角度サンプラーの半径や、回転の基準距離を「大きさ + 原点距離」として扱うため。

`origin` は座標原点からの参照距離で、すべての演算で変更せずに引き継ぐ。
"""

from __future__ import annotations

from dataclasses import dataclass

from polarize.common.errors import DomainError

from .quaternion import Quaternion


@dataclass(frozen=True, slots=True)
class Scalar:
    magnitude: float
    origin: float = 0.0

    def add(self, other: "Scalar | float") -> "Scalar":
        if isinstance(other, Scalar):
            return Scalar(self.magnitude + other.magnitude, self.origin)
        return Scalar(self.magnitude + float(other), self.origin)

    def multiply(self, other: "Scalar | Quaternion | float") -> "Scalar":
        """乗算。Quaternion の場合は実部 `w` との積。"""
        if isinstance(other, Scalar):
            return Scalar(self.magnitude * other.magnitude, self.origin)
        if isinstance(other, Quaternion):
            return Scalar(self.magnitude * other.w, self.origin)
        return Scalar(self.magnitude * float(other), self.origin)

    def normalize(self) -> "Scalar":
        """大きさを 1 に（0 は 0 のまま）。"""
        if self.magnitude == 0.0:
            return Scalar(0.0, self.origin)
        return Scalar(1.0, self.origin)

    def inverse(self) -> "Scalar":
        """逆数。

        Raises
        ------
        DomainError
            大きさがちょうど 0 の場合。
        """
        if self.magnitude == 0.0:
            raise DomainError("大きさ 0 のスカラーの逆数は計算できません")
        return Scalar(1.0 / self.magnitude, self.origin)

    def negate(self) -> "Scalar":
        return Scalar(-self.magnitude, self.origin)


__all__ = ["Scalar"]
