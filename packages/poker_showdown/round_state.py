"""Round-scoped duplicate tracking for owner ids and cards."""

from __future__ import annotations

from dataclasses import dataclass, field

from .cards import Card


@dataclass
class RoundState:
    """Owner ids and cards already used in the current round.

    Single writer only: lines of one round are parsed sequentially.
    `reset()` must run between rounds.
    """

    owner_ids: set[int] = field(default_factory=set)
    cards: set[Card] = field(default_factory=set)

    def has_owner(self, owner_id: int) -> bool:
        return owner_id in self.owner_ids

    def has_card(self, card: Card) -> bool:
        return card in self.cards

    def register_owner(self, owner_id: int) -> None:
        self.owner_ids.add(owner_id)

    def register_card(self, card: Card) -> None:
        self.cards.add(card)

    def reset(self) -> None:
        self.owner_ids.clear()
        self.cards.clear()


__all__ = ["RoundState"]
