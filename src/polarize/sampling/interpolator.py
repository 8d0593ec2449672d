"""
どこで: `polarize.sampling.interpolator`
何を: 角度範囲（45°/90°/180°/270°/360°）を一定ステップで走査し、座標単位の集合を生成する。
なぜ: 円錐/球殻状の点集合を、固定半径と角度だけから再現可能な形で得るため。

走査規約:
- 角度は 0 から `step` 刻み。`k·step` で計算し、加算の誤差を累積させない。
- 上限は含む（`<=`）。ただし `polar_set360` / `spherical_unit360` は 0 と 2π の重複を避けて
  上限を含まない（`<`）。`cartesian360` は上限を含む。
- `cartesian*` / `spherical_unit*` は (theta, phi) の二重ループ（外側 theta）。
- 結果は生成順のリスト（重複は除去しない）。
- `step <= 0`・非有限は `ValidationError`。`step` が範囲より大きい場合は角度 0 のみ。
"""

from __future__ import annotations

import logging
import numbers

from polarize.convert.converter import cartesian_from_spherical
from polarize.common.errors import ValidationError
from polarize.core.constants import RADIAN_BOUNDS
from polarize.core.scalar import Scalar
from polarize.core.units import CartesianUnit, PolarUnit, SphericalUnit
from polarize.core.vector import Vector

from .validation import (
    check_sample_budget,
    require_positive_step,
    stepped_count,
)

logger = logging.getLogger(__name__)

# 上限を含まない（0 と重複する）範囲
_EXCLUSIVE_POLAR = {360}
_EXCLUSIVE_SPHERICAL = {360}


def _bound(degrees: int) -> tuple[int, float]:
    """角度上限（度）を `(度, ラジアン)` に解決する。

    45/90/180/270/360 以外（非数値・bool を含む）は `ValidationError`。
    """
    if isinstance(degrees, numbers.Real) and not isinstance(degrees, bool):
        key = int(degrees) if float(degrees).is_integer() else None
        if key in RADIAN_BOUNDS:
            return key, RADIAN_BOUNDS[key]
    raise ValidationError(
        f"degrees は {sorted(RADIAN_BOUNDS)} のいずれかである必要があります: got {degrees!r}"
    )


def _angles(
    step: float, degrees: int, *, exclusive: set[int], squared: bool, what: str
) -> list[float]:
    """`0, step, 2·step, ...` を上限まで列挙する（生成数の上限は列挙前に検査）。"""
    key, bound = _bound(degrees)
    n = stepped_count(0.0, bound, step, inclusive=key not in exclusive)
    check_sample_budget(n * n if squared else n, f"{what}{key}")
    return [k * step for k in range(n)]


def cartesian_set(vector: Vector, step: float, degrees: int = 360) -> list[CartesianUnit]:
    """`vector.length` を半径に、(theta, phi) を走査した直交座標単位の集合。"""
    s = require_positive_step(step)
    angles = _angles(s, degrees, exclusive=set(), squared=True, what="cartesian")
    r = vector.length
    out = [cartesian_from_spherical(r, i, j) for i in angles for j in angles]
    logger.debug("cartesian%s: %d 単位を生成 (step=%g)", degrees, len(out), s)
    return out


def polar_set(scalar: Scalar, step: float, degrees: int = 360) -> list[PolarUnit]:
    """`scalar.magnitude` を半径に、theta を走査した極座標単位の集合。"""
    s = require_positive_step(step)
    angles = _angles(s, degrees, exclusive=_EXCLUSIVE_POLAR, squared=False, what="polar_set")
    out = [PolarUnit(scalar.magnitude, i) for i in angles]
    logger.debug("polar_set%s: %d 単位を生成 (step=%g)", degrees, len(out), s)
    return out


def spherical_set(scalar: Scalar, step: float, degrees: int = 360) -> list[SphericalUnit]:
    """`scalar.magnitude` を半径に、(theta, phi) を走査した球座標単位の集合。"""
    s = require_positive_step(step)
    angles = _angles(
        s, degrees, exclusive=_EXCLUSIVE_SPHERICAL, squared=True, what="spherical_unit"
    )
    out = [SphericalUnit(scalar.magnitude, i, j) for i in angles for j in angles]
    logger.debug("spherical_unit%s: %d 単位を生成 (step=%g)", degrees, len(out), s)
    return out


# ── 範囲固定の薄いラッパ ───────────────
def cartesian45(vector: Vector, step: float) -> list[CartesianUnit]:
    return cartesian_set(vector, step, 45)


def cartesian90(vector: Vector, step: float) -> list[CartesianUnit]:
    return cartesian_set(vector, step, 90)


def cartesian180(vector: Vector, step: float) -> list[CartesianUnit]:
    return cartesian_set(vector, step, 180)


def cartesian270(vector: Vector, step: float) -> list[CartesianUnit]:
    return cartesian_set(vector, step, 270)


def cartesian360(vector: Vector, step: float) -> list[CartesianUnit]:
    return cartesian_set(vector, step, 360)


def polar_set45(scalar: Scalar, step: float) -> list[PolarUnit]:
    return polar_set(scalar, step, 45)


def polar_set90(scalar: Scalar, step: float) -> list[PolarUnit]:
    return polar_set(scalar, step, 90)


def polar_set180(scalar: Scalar, step: float) -> list[PolarUnit]:
    return polar_set(scalar, step, 180)


def polar_set270(scalar: Scalar, step: float) -> list[PolarUnit]:
    return polar_set(scalar, step, 270)


def polar_set360(scalar: Scalar, step: float) -> list[PolarUnit]:
    return polar_set(scalar, step, 360)


def spherical_unit45(scalar: Scalar, step: float) -> list[SphericalUnit]:
    return spherical_set(scalar, step, 45)


def spherical_unit90(scalar: Scalar, step: float) -> list[SphericalUnit]:
    return spherical_set(scalar, step, 90)


def spherical_unit180(scalar: Scalar, step: float) -> list[SphericalUnit]:
    return spherical_set(scalar, step, 180)


def spherical_unit270(scalar: Scalar, step: float) -> list[SphericalUnit]:
    return spherical_set(scalar, step, 270)


def spherical_unit360(scalar: Scalar, step: float) -> list[SphericalUnit]:
    return spherical_set(scalar, step, 360)


__all__ = [
    "cartesian_set",
    "polar_set",
    "spherical_set",
    "cartesian45",
    "cartesian90",
    "cartesian180",
    "cartesian270",
    "cartesian360",
    "polar_set45",
    "polar_set90",
    "polar_set180",
    "polar_set270",
    "polar_set360",
    "spherical_unit45",
    "spherical_unit90",
    "spherical_unit180",
    "spherical_unit270",
    "spherical_unit360",
]
