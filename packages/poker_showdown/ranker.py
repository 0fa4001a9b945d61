"""Round ranking: classify, sort by strength, assign dense standings, present."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import cmp_to_key

from .errors import Unclassified
from .hand import Hand
from .providers.interfaces import HandEvaluator, compare_strength

_LOG = logging.getLogger(__name__)


def _compare_hands(a: Hand, b: Hand) -> int:
    return compare_strength(a.category, b.category)


def presentation_key(hand: Hand) -> tuple[int, int]:
    """Final display order: standing first, then owner id."""
    return (hand.standing, hand.owner_id)


def assign_standings(hands_desc: Sequence[Hand]) -> None:
    """Dense, tie-aware standings over hands sorted strongest first (1, 1, 2 not 1, 1, 3)."""
    prev: Hand | None = None
    for hand in hands_desc:
        if prev is None:
            hand.standing = 1
        elif compare_strength(hand.category, prev.category) == 0:
            hand.standing = prev.standing
        else:
            hand.standing = prev.standing + 1
        prev = hand


class RoundRanker:
    def __init__(self, evaluator: HandEvaluator | None = None):
        self.evaluator = evaluator

    def classify(self, hands: Sequence[Hand]) -> None:
        """Attach a category to every hand that has none yet."""
        if self.evaluator is None:
            return
        for hand in hands:
            # 不满 5 张的牌交给 rank_round 报 Unclassified
            if hand.is_classified or not hand.is_complete:
                continue
            result = self.evaluator.evaluate5(hand.cards)
            hand.category = result.strength
            hand.label = result.label

    def rank_round(self, hands: Sequence[Hand]) -> list[Hand]:
        self.classify(hands)
        for hand in hands:
            if hand.owner_id is None:
                raise Unclassified(message="hand has no owner id")
            if not hand.is_classified:
                raise Unclassified(hand.owner_id)
            if not hand.is_complete:
                raise Unclassified(hand.owner_id, message=f"hand {hand.owner_id} holds {len(hand.cards)} cards")

        ordered = sorted(hands, key=cmp_to_key(_compare_hands), reverse=True)
        assign_standings(ordered)
        ranked = sorted(ordered, key=presentation_key)
        _LOG.debug("ranked round: %s", [(h.standing, h.owner_id) for h in ranked])
        return ranked


__all__ = ["RoundRanker", "assign_standings", "presentation_key"]
