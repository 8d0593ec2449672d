"""
どこで: `polarize.sampling.lattice`
何を: フィボナッチ格子による球面上の方向サンプリング。
なぜ: 少ない点数で球面をほぼ均等に覆う、決定的な方向集合を得るため。

アルゴリズム（i = 0, step, 2·step, ... ≤ radius）:

    theta = 2π·i / φ                      (φ: 黄金比)
    phi   = acos(1 - 2·(i + 0.5) / radius)
    dir   = (cos theta · sin phi, cos phi, sin theta · sin phi)
    point = origin + dir

- `radius` は「格子の分割総数」であり、出力点は単位球面上（origin からの距離 1）。
- acos の引数は [-1, 1] にクランプする（末尾のサンプルで -1 を僅かに下回るため）。
- `radius == 0` は空リスト（警告ログ）、`radius < 0`・`step <= 0` は `ValidationError`。
"""

from __future__ import annotations

import logging

import numpy as np

from polarize.common.errors import ValidationError
from polarize.core.constants import GOLDEN_RATIO
from polarize.core.points import Point3D, array_to_points

from .validation import check_sample_budget, require_finite, require_positive_step, stepped_count

logger = logging.getLogger(__name__)


def fibonacci_lattice_array(origin: Point3D, radius: float, step: float = 1.0) -> np.ndarray:
    """フィボナッチ格子を `(N, 3)` float64 配列で返す。"""
    r = require_finite(radius, "radius")
    s = require_positive_step(step)
    if r < 0.0:
        raise ValidationError(f"radius は 0 以上である必要があります: got {radius!r}")
    if r == 0.0:
        logger.warning("fibonacci_lattice: radius=0 のため点を生成しません")
        return np.empty((0, 3), dtype=np.float64)

    n = stepped_count(0.0, r, s, inclusive=True)
    check_sample_budget(n, "fibonacci_lattice")

    i = np.arange(n, dtype=np.float64) * s
    theta = 2.0 * np.pi * i / GOLDEN_RATIO
    phi = np.arccos(np.clip(1.0 - 2.0 * (i + 0.5) / r, -1.0, 1.0))
    sin_phi = np.sin(phi)
    dirs = np.stack((np.cos(theta) * sin_phi, np.cos(phi), np.sin(theta) * sin_phi), axis=1)
    logger.debug("fibonacci_lattice: %d 点 (radius=%g, step=%g)", n, r, s)
    return dirs + origin.as_array()


def fibonacci_lattice(origin: Point3D, radius: float, step: float = 1.0) -> list[Point3D]:
    """フィボナッチ格子の点列（`origin` を中心とする単位球面上）。

    Parameters
    ----------
    origin : Point3D
        平行移動先（球の中心）。
    radius : float
        格子の走査上限（分割総数）。0 で空。
    step : float, default 1.0
        走査の刻み。正の有限値。

    Returns
    -------
    list[Point3D]
        生成順の点列。
    """
    return array_to_points(fibonacci_lattice_array(origin, radius, step))


__all__ = ["fibonacci_lattice", "fibonacci_lattice_array"]
