"""
どこで: `polarize.convert` パッケージ。
何を: 座標表現の相互変換関数を公開する。
"""

from .converter import (
    cartesian_from_polar,
    cartesian_from_scalar,
    cartesian_from_spherical,
    polar_from_vector,
    polar_from_xz,
    spherical_from_vector,
    spherical_from_xyz,
    to_axis_angle,
    to_cartesian_unit,
    to_polar_unit,
    to_quaternion,
    to_spherical_unit,
)

__all__ = [
    "cartesian_from_polar",
    "cartesian_from_scalar",
    "cartesian_from_spherical",
    "polar_from_vector",
    "polar_from_xz",
    "spherical_from_vector",
    "spherical_from_xyz",
    "to_axis_angle",
    "to_cartesian_unit",
    "to_polar_unit",
    "to_quaternion",
    "to_spherical_unit",
]
