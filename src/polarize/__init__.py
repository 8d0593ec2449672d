"""
polarize: 座標幾何ツールキット

- 値型: `Vector` / `Quaternion` / `Scalar`、点 `Point2D` / `Point3D`、
  座標単位 `CartesianUnit` / `PolarUnit` / `SphericalUnit`、`Delta` / `AxisAngle`。
- 変換: `polarize.convert`（直交 ⇄ 極/球、四元数 ⇄ 軸角）。
- 回転: `polarize.rotate`（単軸・角度差分・四元数）。
- サンプリング: `polarize.sampling`（角度走査、フィボナッチ格子、螺旋、線分、台形則積分）。

すべて副作用のない純関数で、値型は生成後に変更されない。

使用例:
    import math

    from polarize import PolarUnit, convert
    convert.to_cartesian_unit(PolarUnit(2.0, math.pi / 2))  # -> x=2, y=0, z≈0
"""

from . import convert, rotate, sampling
from .common.errors import DomainError, PolarizeError, ValidationError
from .core import (
    AxisAngle,
    CartesianUnit,
    Delta,
    Point2D,
    Point3D,
    PolarUnit,
    Quaternion,
    Scalar,
    ScalarTriple,
    SphericalUnit,
    Vector,
    vertex,
)

__version__ = "0.1.0"

__all__ = [
    "convert",
    "rotate",
    "sampling",
    "DomainError",
    "PolarizeError",
    "ValidationError",
    "AxisAngle",
    "CartesianUnit",
    "Delta",
    "Point2D",
    "Point3D",
    "PolarUnit",
    "Quaternion",
    "Scalar",
    "ScalarTriple",
    "SphericalUnit",
    "Vector",
    "vertex",
]
