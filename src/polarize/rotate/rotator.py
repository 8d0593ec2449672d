"""
どこで: `polarize.rotate.rotator`
何を: 点の回転（単軸回転・角度差分による合成回転・四元数回転）と、その 2D 版。
なぜ: 極/球座標での回転は角度差分で、直交座標での回転は四元数で、という使い分けを
     1 モジュールに集約するため。

設計:
- すべて純関数。入力点は変更せず新しい `Point3D` / `Point2D` を返す。
- 単軸回転は 2D 回転行列を残り 2 軸へ適用し、回転軸の成分はそのまま通す。
  - x 軸回り: (y, z) を `unit.theta` で回転
  - y 軸回り: (x, z) を `unit.phi` で回転
  - z 軸回り: (x, y) を `unit.theta` で回転
- 四元数回転は `q*·p·q`（p は点を埋め込んだ純四元数）。内部で正規化しない。
  単位四元数を渡すことが前提条件（非単位だと長さが |q|² 倍される）。
- 2D 版は鉛直成分 y を 0 に固定して 3D 版と同じ式を使う。
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numba import njit  # type: ignore[attr-defined]

from polarize.common import settings as _settings
from polarize.core.constants import magnitude_of
from polarize.core.points import Point2D, Point3D
from polarize.core.quaternion import Quaternion
from polarize.core.units import Delta, PolarUnit, SphericalUnit

logger = logging.getLogger(__name__)


# ── 3D: 単軸回転 ─────────────────────
def rotate_x(point: Point3D, unit: SphericalUnit) -> Point3D:
    """x 軸回りに `unit.theta` だけ回転。"""
    c, s = math.cos(unit.theta), math.sin(unit.theta)
    y = point.y * c - point.z * s
    z = point.y * s + point.z * c
    return Point3D(point.x, y, z)


def rotate_y(point: Point3D, unit: SphericalUnit) -> Point3D:
    """y 軸回りに `unit.phi` だけ回転。"""
    c, s = math.cos(unit.phi), math.sin(unit.phi)
    x = point.x * c - point.z * s
    z = point.x * s + point.z * c
    return Point3D(x, point.y, z)


def rotate_z(point: Point3D, unit: SphericalUnit) -> Point3D:
    """z 軸回りに `unit.theta` だけ回転。"""
    c, s = math.cos(unit.theta), math.sin(unit.theta)
    x = point.x * c - point.y * s
    y = point.x * s + point.y * c
    return Point3D(x, y, point.z)


# ── 3D: 角度差分による合成回転 ─────────
def full_rotation(point: Point3D, delta: Delta, unit: SphericalUnit) -> Point3D:
    """角度差分 `delta` を点の現在角へ加算して再構成する。

    - 新半径: `r' = unit.radius · cos(unit.theta + Δθ) · cos(unit.phi + Δφ)`
    - 新角度: 点の現在位置から求めた角度に差分を加える
      `θ' = atan2(x, z) + Δθ`, `φ' = atan2(√(x²+z²), y) + Δφ`
    - 直交へ戻す: `(r'·sin θ'·cos φ', r'·cos θ', r'·sin θ'·sin φ')`

    `unit` は半径と角度スケールのみを与え、回転の基準角は常に点側から取る。
    """
    r = unit.radius * math.cos(unit.theta + delta.theta) * math.cos(unit.phi + delta.phi)
    theta = math.atan2(point.x, point.z) + delta.theta
    phi = math.atan2(magnitude_of(point.x, point.z), point.y) + delta.phi

    x = r * math.sin(theta) * math.cos(phi)
    y = r * math.cos(theta)
    z = r * math.sin(theta) * math.sin(phi)
    return Point3D(x, y, z)


# ── 3D: 四元数回転 ───────────────────
def rotate(point: Point3D, quaternion: Quaternion) -> Point3D:
    """`q*·p·q` で点を回転する（前提: `quaternion` は単位四元数）。"""
    p = Quaternion.pure(point.x, point.y, point.z)
    r = quaternion.conjugate().multiply(p).multiply(quaternion)
    return Point3D(r.x, r.y, r.z)


# ── 2D（水平面 xz） ───────────────────
def rotate_x_2d(point: Point2D, unit: PolarUnit) -> Point2D:
    """2D 点を `unit.theta` で回転（z を基準軸とする向き）。"""
    c, s = math.cos(unit.theta), math.sin(unit.theta)
    x = point.z * c - point.x * s
    z = point.z * s + point.x * c
    return Point2D(x, z)


def rotate_z_2d(point: Point2D, unit: PolarUnit) -> Point2D:
    """2D 点を `unit.theta` で回転（x を基準軸とする向き）。"""
    c, s = math.cos(unit.theta), math.sin(unit.theta)
    x = point.x * c - point.z * s
    z = point.x * s + point.z * c
    return Point2D(x, z)


def full_rotation_2d(point: Point2D, unit: SphericalUnit) -> Point2D:
    """球座標単位の `theta` で水平面内の回転を行う。"""
    c, s = math.cos(unit.theta), math.sin(unit.theta)
    x = point.x * c - point.z * s
    z = point.x * s + point.z * c
    return Point2D(x, z)


def rotate_2d(point: Point2D, quaternion: Quaternion) -> Point2D:
    """2D 点を `(x, 0, z)` として四元数回転し、水平面成分を返す。"""
    p = Quaternion.pure(point.x, 0.0, point.z)
    r = quaternion.conjugate().multiply(p).multiply(quaternion)
    return Point2D(r.x, r.z)


# ── バッチ回転（ndarray） ──────────────
@njit(fastmath=False, cache=True)
def _rotate_points_njit(coords: np.ndarray, q: np.ndarray) -> np.ndarray:
    """`(N,3)` の各行に `q*·p·q` を適用する。"""
    w, qx, qy, qz = q[0], q[1], q[2], q[3]
    out = np.empty_like(coords)
    for i in range(coords.shape[0]):
        px, py, pz = coords[i, 0], coords[i, 1], coords[i, 2]
        # t = q* · p（p は純四元数）
        tw = qx * px + qy * py + qz * pz
        tx = w * px - qy * pz + qz * py
        ty = w * py - qz * px + qx * pz
        tz = w * pz - qx * py + qy * px
        # out = t · q
        out[i, 0] = tw * qx + tx * w + ty * qz - tz * qy
        out[i, 1] = tw * qy + ty * w + tz * qx - tx * qz
        out[i, 2] = tw * qz + tz * w + tx * qy - ty * qx
    return out


def _rotate_points_numpy(coords: np.ndarray, q: np.ndarray) -> np.ndarray:
    w, qx, qy, qz = q
    px, py, pz = coords[:, 0], coords[:, 1], coords[:, 2]
    tw = qx * px + qy * py + qz * pz
    tx = w * px - qy * pz + qz * py
    ty = w * py - qz * px + qx * pz
    tz = w * pz - qx * py + qy * px
    return np.stack(
        (
            tw * qx + tx * w + ty * qz - tz * qy,
            tw * qy + ty * w + tz * qx - tx * qz,
            tw * qz + tz * w + tx * qy - ty * qx,
        ),
        axis=1,
    )


def rotate_points(coords: np.ndarray, quaternion: Quaternion) -> np.ndarray:
    """点群 `(N, 3)` を `rotate()` と同じ規約（`q*·p·q`、正規化なし）で一括回転する。

    Parameters
    ----------
    coords : np.ndarray
        形状 `(N, 3)` の座標配列。float64 に変換して計算する。
    quaternion : Quaternion
        単位四元数（前提条件）。

    Returns
    -------
    np.ndarray
        形状 `(N, 3)` の新しい float64 配列（入力は変更しない）。
    """
    arr = np.asarray(coords, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"coords は形状 (N, 3) の配列である必要があります: got {arr.shape}")
    if arr.shape[0] == 0:
        return np.empty((0, 3), dtype=np.float64)
    q = quaternion.as_array()
    if _settings.get().USE_NUMBA:
        return _rotate_points_njit(np.ascontiguousarray(arr), q)
    logger.debug("rotate_points: numba 無効のため numpy 経路で %d 点を回転", arr.shape[0])
    return _rotate_points_numpy(arr, q)


__all__ = [
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "full_rotation",
    "rotate",
    "rotate_x_2d",
    "rotate_z_2d",
    "full_rotation_2d",
    "rotate_2d",
    "rotate_points",
]
