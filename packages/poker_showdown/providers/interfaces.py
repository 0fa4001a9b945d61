"""
提供评估 5 张牌强度的接口。

- 使用 `HandEvaluator` 接口，实现 `evaluate5` 方法
- 返回 `EvalResult` 对象，包含规范化的五张牌、强度值与牌型名称
- 强度值 `Strength` 满足全序：可用 `<`/`==` 比较，也可用 `compare_strength` 三路比较
- 评估结果与输入顺序无关
"""

from collections.abc import Sequence
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Protocol

from poker_showdown.cards import Card


@dataclass(frozen=True)
class EvalResult:
    # 规范化（排序后）的五张牌短码，如 ('2c', 'Ah', 'Kd', ...)
    cards: tuple[str, ...]
    # 一个"可比较"的强度值（不暴露三方类型）
    strength: Any
    # 牌型名称，如 "Full house"；评估器给不出时为 None
    label: str | None = None


class HandEvaluator(Protocol):
    def evaluate5(self, cards: Sequence[Card]) -> EvalResult: ...


@total_ordering
class Strength:
    __slots__ = ("_impl",)

    def __init__(self, impl):
        self._impl = impl

    def __lt__(self, other):
        if not isinstance(other, Strength):
            return NotImplemented
        return self._impl < other._impl

    def __eq__(self, other):
        if not isinstance(other, Strength):
            return NotImplemented
        return self._impl == other._impl

    def __hash__(self):
        return hash(self._impl)

    def __repr__(self):
        return f"<Strength {self._impl!r}>"


def compare_strength(a: Strength, b: Strength) -> int:
    """Three-way comparison: negative if a < b, zero if tied, positive if a > b."""
    if a == b:
        return 0
    return -1 if a < b else 1


class EvaluationError(Exception):
    """评估器统一异常类型"""

    def __init__(self, error_type: str, detail: Any = None, original: str = None):
        self.error_type = error_type
        self.detail = detail
        self.original = original
        super().__init__(f"{error_type}: {detail or original or 'evaluation failed'}")


def canon5(cards: Sequence[Card]) -> tuple[str, ...]:
    """Validate a 5-card hand and return its sorted short codes (cache key)."""
    if len(cards) != 5:
        raise EvaluationError("hand_size", detail={"count": len(cards)})
    codes = tuple(sorted(c.code for c in cards))
    if len(set(codes)) != 5:
        raise EvaluationError("duplicate_card", detail={"cards": codes})
    return codes
