"""
どこで: `polarize.sampling.integral`
何を: 台形則による数値積分（1 次元・3 次元直方体）。
なぜ: 2 点間の距離に沿った量や、体積上のスカラー場の積分を近似するため。

3 次元版は各軸の端点で重みを 1/2 にする合成台形則（角 1/8、辺 1/4、面 1/2）。
"""

from __future__ import annotations

import numpy as np

from polarize.common.types import ScalarField, ScalarFn
from polarize.core.points import Point3D

from .validation import check_sample_budget, require_count, require_finite


def integrate(lower: float, upper: float, sub_intervals: int, fn: ScalarFn) -> float:
    """区間 `[lower, upper]` を `sub_intervals` 等分した台形則。

    `upper < lower` の場合は符号付きの値（向きを反映）になる。
    """
    n = require_count(sub_intervals, "sub_intervals", allow_zero=False)
    a = require_finite(lower, "lower")
    b = require_finite(upper, "upper")
    check_sample_budget(n + 1, "integrate")

    dx = (b - a) / n
    total = 0.5 * (fn(a) + fn(b))
    for i in range(1, n):
        total += fn(a + i * dx)
    return dx * total


def _trapezoid_weights(n: int) -> np.ndarray:
    w = np.ones(n + 1, dtype=np.float64)
    w[0] = 0.5
    w[-1] = 0.5
    return w


def integrate_volume(
    origin: Point3D,
    destination: Point3D,
    sub_intervals: int,
    fn: ScalarField,
    *,
    vectorized: bool = False,
) -> float:
    """`origin`〜`destination` を対角とする直方体上で `fn(x, y, z)` を積分する。

    Parameters
    ----------
    origin, destination : Point3D
        直方体の対角 2 点。
    sub_intervals : int
        各軸の分割数（正の整数）。評価点は `(n+1)³`。
    fn : Callable[[float, float, float], float]
        スカラー場。
    vectorized : bool, default False
        True のとき `fn` を格子配列 `(X, Y, Z)` で 1 回だけ呼ぶ（numpy ufunc 前提）。

    Returns
    -------
    float
        積分近似値。いずれかの軸幅が 0 なら 0。
    """
    n = require_count(sub_intervals, "sub_intervals", allow_zero=False)
    check_sample_budget((n + 1) ** 3, "integrate_volume")

    xs = np.linspace(origin.x, destination.x, n + 1)
    ys = np.linspace(origin.y, destination.y, n + 1)
    zs = np.linspace(origin.z, destination.z, n + 1)
    dx = (destination.x - origin.x) / n
    dy = (destination.y - origin.y) / n
    dz = (destination.z - origin.z) / n

    w = _trapezoid_weights(n)
    weights = w[:, None, None] * w[None, :, None] * w[None, None, :]

    if vectorized:
        X, Y, Z = np.meshgrid(xs, ys, zs, indexing="ij")
        values = np.asarray(fn(X, Y, Z), dtype=np.float64)
        values = np.broadcast_to(values, weights.shape)
    else:
        values = np.empty(weights.shape, dtype=np.float64)
        for i, x in enumerate(xs):
            for j, y in enumerate(ys):
                for k, z in enumerate(zs):
                    values[i, j, k] = fn(float(x), float(y), float(z))

    return float(np.sum(weights * values) * dx * dy * dz)


__all__ = ["integrate", "integrate_volume"]
