"""
どこで: `polarize.common.settings`
何を: 数値計算まわりの環境変数を型付きで一元管理し、import 時に読み込む。
なぜ: 閾値やサンプル上限を各モジュールへ散らさず、テストから差し替えやすくするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_float, env_int


@dataclass
class _Settings:
    # 変換
    AXIS_ANGLE_EPSILON: float = 1e-3

    # バッチ回転
    USE_NUMBA: bool = True

    # サンプラー（0 で無制限）
    MAX_SAMPLES: int = 1_000_000


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int`、float は `env_float` を使用。
    - 負値は下限丸めを適用。
    """
    _settings.AXIS_ANGLE_EPSILON = env_float(
        "POLARIZE_AXIS_ANGLE_EPSILON", 1e-3, min_value=0.0
    )
    _settings.USE_NUMBA = env_bool("POLARIZE_USE_NUMBA", True)
    _settings.MAX_SAMPLES = (
        env_int("POLARIZE_MAX_SAMPLES", 1_000_000, min_value=0) or 0
    )


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
