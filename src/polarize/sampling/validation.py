"""
どこで: `polarize.sampling.validation`
何を: サンプラー引数の検証ヘルパ（ステップ・分割数・生成数上限）。
なぜ: ループへ入る前に不正値を `ValidationError` で弾き、無限ループを構造的に防ぐため。
"""

from __future__ import annotations

import math
import numbers

from polarize.common import settings as _settings
from polarize.common.errors import ValidationError

# 丸め補正の上限（境界付近の ±1 程度のずれのみを想定）
_MAX_CORRECTION = 2


def require_positive_step(step: float, name: str = "step") -> float:
    """有限かつ正のステップを float で返す。"""
    try:
        s = float(step)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} は数値である必要があります: got {step!r}") from e
    if not math.isfinite(s) or s <= 0.0:
        raise ValidationError(f"{name} は正の有限値である必要があります: got {step!r}")
    return s


def require_count(count: int, name: str = "num_points", *, allow_zero: bool = True) -> int:
    """非負（`allow_zero=False` なら正）の整数を返す。bool と非整数値は拒否する。"""
    if isinstance(count, numbers.Integral) and not isinstance(count, bool):
        n = int(count)
    elif (
        isinstance(count, numbers.Real)
        and not isinstance(count, bool)
        and math.isfinite(float(count))
        and float(count).is_integer()
    ):
        # 2.0 のような整数値の float は許容
        n = int(count)
    else:
        raise ValidationError(f"{name} は整数である必要があります: got {count!r}")
    if n < 0 or (n == 0 and not allow_zero):
        lower = "0 以上" if allow_zero else "1 以上"
        raise ValidationError(f"{name} は {lower} である必要があります: got {n}")
    return n


def require_finite(value: float, name: str) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} は数値である必要があります: got {value!r}") from e
    if not math.isfinite(v):
        raise ValidationError(f"{name} は有限値である必要があります: got {value!r}")
    return v


def check_sample_budget(expected: int, what: str) -> None:
    """生成予定数が設定 `MAX_SAMPLES` を超える場合は生成前に拒否する（0 は無制限）。"""
    limit = _settings.get().MAX_SAMPLES
    if limit and expected > limit:
        raise ValidationError(
            f"{what}: 生成数 {expected} が上限 MAX_SAMPLES={limit} を超えます"
        )


def stepped_count(start: float, stop: float, step: float, *, inclusive: bool) -> int:
    """`start, start+step, ...` のうち `stop` 以下（未満）に収まる個数。

    個数は `floor((stop - start) / step) + 1` で直接求め、丸めによる境界の
    ずれだけを高々 `_MAX_CORRECTION` 回ずつ補正する（走査はしない）。

    Raises
    ------
    ValidationError
        範囲 / ステップが有限の個数に収まらない場合。
    """
    if stop < start or (stop == start and not inclusive):
        return 0
    ratio = (stop - start) / step
    if not math.isfinite(ratio):
        raise ValidationError(
            f"範囲 [{start!r}, {stop!r}] をステップ {step!r} で走査する個数が有限に収まりません"
        )
    n = int(math.floor(ratio)) + 1
    # 浮動小数の丸めで境界を越えた/取りこぼした分を補正
    for _ in range(_MAX_CORRECTION):
        if n > 0 and not _within(start + (n - 1) * step, stop, inclusive):
            n -= 1
    for _ in range(_MAX_CORRECTION):
        if _within(start + n * step, stop, inclusive):
            n += 1
    return n


def _within(v: float, stop: float, inclusive: bool) -> bool:
    return v <= stop if inclusive else v < stop


__all__ = [
    "require_positive_step",
    "require_count",
    "require_finite",
    "check_sample_budget",
    "stepped_count",
]
