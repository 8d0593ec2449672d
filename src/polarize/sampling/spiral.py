"""
どこで: `polarize.sampling.spiral`
何を: 角度に比例して半径が伸びるアルキメデス螺旋（2D）と、円柱螺旋（ヘリックス, 3D）。
なぜ: 曲線に沿った点列を、開始点とパラメータだけから再現可能に生成するため。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from polarize.core.points import Point2D, Point3D

from .validation import check_sample_budget, require_finite, require_positive_step, stepped_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ArchimedeanSpiral:
    """アルキメデス螺旋 `r(a) = origin + step·a`。

    - 角度 `a` は `origin` から `theta` 未満まで `step` 刻みで走査する。
    - `radius` は終端角 `theta` での半径（`origin + step·theta`）。
    """

    origin: float
    step: float
    theta: float

    def __post_init__(self) -> None:
        require_finite(self.origin, "origin")
        require_positive_step(self.step)
        require_finite(self.theta, "theta")

    @property
    def radius(self) -> float:
        return self.origin + self.step * self.theta

    def radius_at(self, angle: float) -> float:
        return self.origin + self.step * angle

    def points(self, start: Point2D) -> list[Point2D]:
        """`start` を先頭に、各角度の螺旋上の点を `start` だけずらして返す。"""
        n = stepped_count(self.origin, self.theta, self.step, inclusive=False)
        check_sample_budget(n + 1, "archimedean_spiral")
        out = [start]
        for k in range(n):
            a = self.origin + k * self.step
            r = self.radius_at(a)
            out.append(Point2D(r * math.cos(a) + start.x, r * math.sin(a) + start.z))
        logger.debug("archimedean_spiral: %d 点", len(out))
        return out


@dataclass(frozen=True, slots=True)
class Helix:
    """円柱螺旋 `(r·cos t, r·sin t, distance·t)`。"""

    radius: float
    distance: float

    def point(self, t: float) -> Point3D:
        return Point3D(
            self.radius * math.cos(t),
            self.radius * math.sin(t),
            self.distance * t,
        )

    def points(self, start: float, stop: float, step: float) -> list[Point3D]:
        """`t = start, start+step, ... <= stop` の点列。"""
        s = require_positive_step(step)
        t0 = require_finite(start, "start")
        t1 = require_finite(stop, "stop")
        n = stepped_count(t0, t1, s, inclusive=True)
        check_sample_budget(n, "helix")
        return [self.point(t0 + k * s) for k in range(n)]


def archimedean_spiral(
    start: Point2D, *, origin: float = 0.0, step: float = 0.1, theta: float = 2.0 * math.pi
) -> list[Point2D]:
    """`ArchimedeanSpiral(origin, step, theta).points(start)` の関数版。"""
    return ArchimedeanSpiral(origin, step, theta).points(start)


def helix(
    *,
    radius: float = 1.0,
    distance: float = 0.1,
    start: float = 0.0,
    stop: float = 2.0 * math.pi,
    step: float = 0.1,
) -> list[Point3D]:
    """`Helix(radius, distance).points(start, stop, step)` の関数版。"""
    return Helix(radius, distance).points(start, stop, step)


__all__ = ["ArchimedeanSpiral", "Helix", "archimedean_spiral", "helix"]
