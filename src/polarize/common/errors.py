"""
どこで: `polarize.common.errors`
何を: 数値計算で送出する型付き例外。
なぜ: 呼び出し側が「算術的な前提違反」と「引数検証エラー」を区別して捕捉できるようにするため。
"""

from __future__ import annotations


class PolarizeError(Exception):
    """パッケージ内で送出する例外の基底。"""


class DomainError(PolarizeError, ArithmeticError):
    """算術的な前提違反（ゼロ大きさの逆数・正規化など）。

    `ArithmeticError` を継承するため、既存の `except ArithmeticError` でも捕捉できる。
    """


class ValidationError(PolarizeError, ValueError):
    """引数検証エラー（非正のステップ、負の分割数など）。

    ループへ入る前に送出し、無限ループやハングを起こさない。
    """


__all__ = ["PolarizeError", "DomainError", "ValidationError"]
