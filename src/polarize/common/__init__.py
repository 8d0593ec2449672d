"""
どこで: `polarize.common` パッケージ。
何を: 設定・例外・ロギングなど、数値コア以外の共通基盤。
なぜ: core/convert/rotate/sampling から再利用する土台を分離し、依存の向きを単純化するため。
"""

from .errors import DomainError, PolarizeError, ValidationError

__all__ = [
    "DomainError",
    "PolarizeError",
    "ValidationError",
]
