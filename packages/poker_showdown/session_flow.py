# packages/poker_showdown/session_flow.py
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .config import ShowdownConfig
from .errors import ValidationError
from .hand import Hand
from .parser import HandParser
from .providers.interfaces import HandEvaluator
from .providers.selector import get_evaluator, make_evaluator
from .ranker import RoundRanker
from .round_state import RoundState
from .session_types import Rejection, RoundView

_LOG = logging.getLogger(__name__)


class RoundSession:
    """
    一轮一轮地驱动解析与排名：
    - submit(line) 解析并收下一手牌（错误直接抛给调用方）
    - finish() 为本轮排名，然后清空本轮的去重状态
    """

    def __init__(
        self,
        config: ShowdownConfig | None = None,
        evaluator: HandEvaluator | None = None,
    ):
        self.config = config or ShowdownConfig.build()
        if evaluator is None:
            if self.config.evaluator:
                evaluator = make_evaluator(self.config.evaluator)
            else:
                evaluator = get_evaluator()
        self.state = RoundState()
        self.parser = HandParser(self.state, atomic=self.config.atomic_parse)
        self.ranker = RoundRanker(evaluator)
        self.hands: list[Hand] = []
        self.round_no = 0

    def submit(self, line: str) -> Hand:
        hand = self.parser.parse(line)
        self.hands.append(hand)
        return hand

    def finish(self) -> list[Hand]:
        try:
            ranked = self.ranker.rank_round(self.hands)
        finally:
            self.reset()
        self.round_no += 1
        return ranked

    def reset(self) -> None:
        self.state.reset()
        self.hands = []


def play_round(session: RoundSession, lines: Iterable[str]) -> RoundView:
    """Submit every line, collecting rejected lines instead of aborting, then rank."""
    rejected: list[Rejection] = []
    for line_no, line in enumerate(lines, start=1):
        try:
            session.submit(line)
        except ValidationError as e:
            _LOG.warning("round %d line %d rejected: %s", session.round_no + 1, line_no, e)
            rejected.append(Rejection(line_no, line, e.error_type, e.message))
    hands = session.finish()
    return RoundView(round_no=session.round_no, hands=tuple(hands), rejected=tuple(rejected))


def split_rounds(lines: Iterable[str]) -> Iterator[list[str]]:
    """Group input lines into rounds; blank lines separate rounds, '#' lines are comments."""
    current: list[str] = []
    for raw in lines:
        line = raw.strip()
        if line.startswith("#"):
            continue
        if not line:
            if current:
                yield current
                current = []
            continue
        current.append(line)
    if current:
        yield current


__all__ = ["RoundSession", "play_round", "split_rounds"]
