"""
Hand parser: "<playerId> <card> <card> <card> <card> <card>" -> Hand.

Cards are created in input order. Duplicate owner ids and duplicate cards are
detected across the whole round through the shared `RoundState`.

Commit modes:
- partial (default): each token is registered as soon as it validates, so a
  failing line keeps the tokens validated before the failure registered;
  the failing token and everything after it are never registered.
- atomic: the line is registered only when every token validates.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from .cards import Card, parse_card_token
from .errors import DuplicateCard, DuplicateOwner, EmptyInput, InvalidOwnerId, WrongTokenCount
from .hand import HAND_SIZE, Hand
from .round_state import RoundState

_LOG = logging.getLogger(__name__)

TOKEN_COUNT = HAND_SIZE + 1
_OWNER_RE = re.compile(r"[+-]?[0-9]+")


def parse_owner_id(token: str) -> int:
    if not _OWNER_RE.fullmatch(token):
        raise InvalidOwnerId(token)
    return int(token)


class HandParser:
    def __init__(self, round_state: RoundState | None = None, *, atomic: bool = False):
        self.round_state = round_state if round_state is not None else RoundState()
        self.atomic = atomic

    def reset_round(self) -> None:
        self.round_state.reset()

    def parse(self, line: str | None) -> Hand:
        if line is None or not line.strip():
            raise EmptyInput()

        tokens = line.split()
        if len(tokens) != TOKEN_COUNT:
            raise WrongTokenCount(len(tokens))

        state = self.round_state
        owner_id = parse_owner_id(tokens[0])
        if state.has_owner(owner_id):
            raise DuplicateOwner(owner_id)
        if not self.atomic:
            state.register_owner(owner_id)

        hand = Hand()
        pending: set[Card] = set()
        for token in tokens[1:]:
            card = parse_card_token(token)
            if state.has_card(card) or card in pending:
                raise DuplicateCard(token)
            if self.atomic:
                pending.add(card)
            else:
                state.register_card(card)
            hand.add_card(card)

        if self.atomic:
            # 整行校验通过后一次性提交
            state.register_owner(owner_id)
            for card in hand.cards:
                state.register_card(card)

        hand.owner_id = owner_id
        _LOG.debug("parsed hand owner=%s cards=%s", owner_id, hand.codes())
        return hand

    def parse_lines(self, lines: Iterable[str]) -> list[Hand]:
        return [self.parse(line) for line in lines]


__all__ = ["HandParser", "TOKEN_COUNT", "parse_owner_id"]
