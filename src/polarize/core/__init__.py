"""
どこで: `polarize.core` パッケージ。
何を: 値型（Vector/Quaternion/Scalar）、点、座標単位、定数。
なぜ: 変換・回転・サンプラーが共有する不変データ型を 1 箇所に集約するため。
"""

from .constants import GOLDEN_RATIO, RADIAN_45, RADIAN_90, RADIAN_180, RADIAN_270, RADIAN_360
from .points import Point2D, Point3D, array_to_points, points_to_array
from .quaternion import Quaternion
from .scalar import Scalar
from .units import AxisAngle, CartesianUnit, Delta, PolarUnit, SphericalUnit
from .vector import ScalarTriple, Vector, vertex

__all__ = [
    "GOLDEN_RATIO",
    "RADIAN_45",
    "RADIAN_90",
    "RADIAN_180",
    "RADIAN_270",
    "RADIAN_360",
    "Point2D",
    "Point3D",
    "array_to_points",
    "points_to_array",
    "Quaternion",
    "Scalar",
    "AxisAngle",
    "CartesianUnit",
    "Delta",
    "PolarUnit",
    "SphericalUnit",
    "ScalarTriple",
    "Vector",
    "vertex",
]
