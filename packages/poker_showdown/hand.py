# packages/poker_showdown/hand.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .cards import Card

HAND_SIZE = 5


@dataclass
class Hand:
    owner_id: int | None = None
    cards: list[Card] = field(default_factory=list)
    # 由评估器写入；可比较的强度值（见 providers.interfaces.Strength）
    category: Any | None = None
    label: str | None = None
    # 由 RoundRanker 写入；1 为最好，允许并列
    standing: int | None = None

    def add_card(self, card: Card) -> None:
        if len(self.cards) >= HAND_SIZE:
            raise ValueError(f"hand already holds {HAND_SIZE} cards")
        self.cards.append(card)

    @property
    def is_complete(self) -> bool:
        return len(self.cards) == HAND_SIZE

    @property
    def is_classified(self) -> bool:
        return self.category is not None

    def codes(self) -> list[str]:
        return [c.code for c in self.cards]

    def __str__(self) -> str:
        return f"{self.owner_id} {' '.join(self.codes())}"


__all__ = ["HAND_SIZE", "Hand"]
