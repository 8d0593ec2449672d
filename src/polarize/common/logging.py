"""
どこで: `polarize.common.logging`
何を: パッケージロガー `polarize` のレベル設定と、未設定時の最小ハンドラ適用。
なぜ: ライブラリ側はハンドラを持たず、利用側スクリプトが 1 回の呼び出しでサンプラーの
     デバッグ出力や退化入力の警告を確認できるようにするため。

各モジュールは `logging.getLogger(__name__)` を使い、`polarize.*` 階層に属する。
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "polarize"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str = "INFO") -> logging.Logger:
    """`polarize` ロガーのレベルを設定し、ルートが未設定なら 1 度だけ `basicConfig` を適用する。

    - ルートロガーにハンドラが既にあればハンドラ構成には触れない
    - ルートロガーのレベルは変更しない（パッケージ配下のみ）

    Returns
    -------
    logging.Logger
        パッケージロガー。
    """
    lvl = _resolve_level(level)
    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg.setLevel(lvl)
    if not logging.getLogger().handlers:
        logging.basicConfig(format=_FORMAT)
    return pkg


__all__ = ["PACKAGE_LOGGER", "setup_default_logging"]
