"""共通フィクスチャ。

- 乱数シード固定
- 設定の環境変数を毎テスト後に既定へ戻す
- 小さな点・単位の試料
"""

from __future__ import annotations

import math
from typing import Iterator

import numpy as np
import pytest

from polarize.common import settings
from polarize.core import Point3D, Quaternion, SphericalUnit


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture(autouse=True)
def reset_settings() -> Iterator[None]:
    yield
    settings.reload_from_env()


@pytest.fixture()
def env_no_numba(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("POLARIZE_USE_NUMBA", "0")
    settings.reload_from_env()
    yield
    monkeypatch.delenv("POLARIZE_USE_NUMBA", raising=False)
    settings.reload_from_env()


@pytest.fixture()
def origin() -> Point3D:
    return Point3D(0.0, 0.0, 0.0)


@pytest.fixture()
def quarter_turn_y() -> Quaternion:
    """y 軸回り 90° の単位四元数。"""
    half = math.pi / 4
    return Quaternion(math.cos(half), 0.0, math.sin(half), 0.0)


@pytest.fixture()
def unit_sphere_45() -> SphericalUnit:
    return SphericalUnit(1.0, math.pi / 4, math.pi / 4)
