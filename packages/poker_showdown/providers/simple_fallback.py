"""
纯 Python 的五张牌评估器，不依赖 PokerKit。

强度为 (牌型序号, 比较用点数...) 元组；牌型名称与 PokerKit 保持一致。
"""

from collections import Counter
from collections.abc import Sequence

from poker_showdown.cards import Card

from .interfaces import EvalResult, HandEvaluator, Strength, canon5

CATEGORIES = (
    "High card",
    "One pair",
    "Two pair",
    "Three of a kind",
    "Straight",
    "Flush",
    "Full house",
    "Four of a kind",
    "Straight flush",
)
_CATEGORY_ORDER = {name: i for i, name in enumerate(CATEGORIES)}


def _straight_top(ranks_desc: list[int]) -> int | None:
    # ranks_desc: 去重后降序的点数
    if len(ranks_desc) != 5:
        return None
    if ranks_desc == [14, 5, 4, 3, 2]:
        return 5  # wheel
    if ranks_desc[0] - ranks_desc[4] == 4:
        return ranks_desc[0]
    return None


def score5(cards: Sequence[Card]) -> tuple[str, tuple[int, ...]]:
    """Return (category name, tiebreak ranks) for exactly five distinct cards."""
    counts = Counter(int(c.rank) for c in cards)
    # 先按张数、再按点数降序：葫芦 -> (三条点, 对子点)，两对 -> (大对, 小对, 踢脚)
    groups = sorted(counts.items(), key=lambda kv: (kv[1], kv[0]), reverse=True)
    shape = [n for _, n in groups]
    ordered = tuple(r for r, _ in groups)

    is_flush = len({c.suit for c in cards}) == 1
    top = _straight_top(sorted(counts, reverse=True))

    if is_flush and top is not None:
        return "Straight flush", (top,)
    if shape == [4, 1]:
        return "Four of a kind", ordered
    if shape == [3, 2]:
        return "Full house", ordered
    if is_flush:
        return "Flush", ordered
    if top is not None:
        return "Straight", (top,)
    if shape == [3, 1, 1]:
        return "Three of a kind", ordered
    if shape == [2, 2, 1]:
        return "Two pair", ordered
    if shape == [2, 1, 1, 1]:
        return "One pair", ordered
    return "High card", ordered


class SimpleFallbackEvaluator(HandEvaluator):
    def evaluate5(self, cards):
        canon = canon5(cards)
        label, tiebreak = score5(cards)
        return EvalResult(
            cards=canon,
            strength=Strength((_CATEGORY_ORDER[label], tiebreak)),
            label=label,
        )
