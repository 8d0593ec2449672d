"""
どこで: `polarize.core.constants`
何を: 角度の定数（45°〜360° のラジアン値）と黄金比、簡易ノルム関数。
なぜ: サンプラー/回転の各所で同じ値を再計算・再定義しないため。
"""

from __future__ import annotations

import math

RADIAN_45 = math.pi / 4
RADIAN_90 = math.pi / 2
RADIAN_180 = math.pi
RADIAN_270 = math.pi * 1.5
RADIAN_360 = math.pi * 2

# 角度上限（度）→ ラジアン
RADIAN_BOUNDS: dict[int, float] = {
    45: RADIAN_45,
    90: RADIAN_90,
    180: RADIAN_180,
    270: RADIAN_270,
    360: RADIAN_360,
}

GOLDEN_RATIO = (1.0 + math.sqrt(5.0)) / 2.0


def magnitude_of(*components: float) -> float:
    """成分列のユークリッドノルム（`magnitude_of(x, z)` / `magnitude_of(x, y, z)`）。"""
    return math.sqrt(sum(c * c for c in components))


__all__ = [
    "RADIAN_45",
    "RADIAN_90",
    "RADIAN_180",
    "RADIAN_270",
    "RADIAN_360",
    "RADIAN_BOUNDS",
    "GOLDEN_RATIO",
    "magnitude_of",
]
