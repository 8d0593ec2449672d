"""
どこで: `polarize.sampling.line`
何を: 2 点間の直線を等分割した点列。
"""

from __future__ import annotations

import logging

import numpy as np

from polarize.core.points import Point3D, array_to_points

from .validation import check_sample_budget, require_count

logger = logging.getLogger(__name__)


def draw_line(a: Point3D, b: Point3D, num_points: int) -> list[Point3D]:
    """`a` から `b` へ `num_points` 等分した `num_points + 1` 点を返す。

    各点は `a + (b - a)·i/num_points`（i = 0..num_points）。先頭は `a`、末尾は `b`。
    `num_points == 0` は `[a]`。負数・非整数は `ValidationError`。
    """
    n = require_count(num_points, "num_points")
    if n == 0:
        return [a]
    check_sample_budget(n + 1, "draw_line")

    diff = a.differential(b).as_array()
    t = np.arange(n + 1, dtype=np.float64) / n
    coords = a.as_array() + t[:, None] * diff
    # 末尾は丸め誤差なしで b に一致させる
    coords[-1] = b.as_array()
    logger.debug("draw_line: %d 点 (%s -> %s)", n + 1, a, b)
    return array_to_points(coords)


__all__ = ["draw_line"]
