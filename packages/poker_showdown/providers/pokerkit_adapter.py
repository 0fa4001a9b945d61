"""
PokerKit 适配器

使用 PokerKit 库评估 5 张牌的强度。
"""

import functools
from collections.abc import Sequence

from poker_showdown.cards import Card

from .interfaces import EvalResult, EvaluationError, HandEvaluator, Strength, canon5


def _label_of(hand) -> str | None:
    # str(hand) 形如 "Straight flush (AsKsQsJsTs)"
    label = str(hand).partition(" (")[0].strip()
    return label or None


class PokerKitEvaluator(HandEvaluator):
    def __init__(self):
        # 延迟导入，隔离依赖
        from pokerkit import StandardHighHand

        self._StandardHighHand = StandardHighHand

    @functools.lru_cache(maxsize=4096)
    def _eval_cached(self, canon: tuple[str, ...]) -> EvalResult:
        """
        canon: 5 张牌的规范化元组（已排序、去重校验过）
        注意：from_game 需要 hole + board；对五张高牌评估来说分界不影响结果。
        """
        try:
            hole = "".join(canon[:2])
            board = "".join(canon[2:])
            hand = self._StandardHighHand.from_game(hole, board)
            return EvalResult(cards=canon, strength=Strength(hand), label=_label_of(hand))
        except Exception as e:
            raise EvaluationError("pokerkit_error", original=str(e))

    def evaluate5(self, cards: Sequence[Card]) -> EvalResult:
        return self._eval_cached(canon5(cards))
