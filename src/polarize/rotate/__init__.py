"""
どこで: `polarize.rotate` パッケージ。
何を: 点の回転演算子を公開する。
"""

from .rotator import (
    full_rotation,
    full_rotation_2d,
    rotate,
    rotate_2d,
    rotate_points,
    rotate_x,
    rotate_x_2d,
    rotate_y,
    rotate_z,
    rotate_z_2d,
)

__all__ = [
    "full_rotation",
    "full_rotation_2d",
    "rotate",
    "rotate_2d",
    "rotate_points",
    "rotate_x",
    "rotate_x_2d",
    "rotate_y",
    "rotate_z",
    "rotate_z_2d",
]
