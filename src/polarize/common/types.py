"""
どこで: `polarize.common` の型定義。
何を: Vec3 やスカラー場などの軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

from typing import Callable

Vec3 = tuple[float, float, float]

# スカラー場 f(x) / f(x, y, z)
ScalarFn = Callable[[float], float]
ScalarField = Callable[[float, float, float], float]


__all__ = ["Vec3", "ScalarFn", "ScalarField"]
