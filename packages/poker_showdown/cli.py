"""
Rank poker hands round by round.

Usage examples:

  # One hand per line, rounds separated by blank lines
  poker-showdown hands.txt

  # Read stdin, abort on the first invalid line
  printf '1 AH 2C 3D 4S 5H\\n2 KH KD 9C 9S 2H\\n' | poker-showdown --strict

Output: a "Round N" header, then "standing owner_id label cards" per hand.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace

from .config import ShowdownConfig
from .errors import ValidationError
from .hand import Hand
from .providers.selector import EVALUATORS
from .session_flow import RoundSession, play_round, split_rounds

_LOG = logging.getLogger(__name__)


def format_hand(hand: Hand) -> str:
    label = hand.label or "-"
    return f"{hand.standing} {hand.owner_id} {label} {' '.join(hand.codes())}"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="poker-showdown", description=__doc__.splitlines()[1])
    ap.add_argument("file", nargs="?", help="input file (default: stdin)")
    ap.add_argument("--strict", action="store_true", help="abort on the first invalid line")
    ap.add_argument("--evaluator", choices=EVALUATORS, default=None, help="override POKER_EVAL")
    ap.add_argument("--atomic", action="store_true", help="roll back round state on a failed line")
    ap.add_argument("--log-level", default="WARNING")
    return ap.parse_args(argv)


def _run_strict(session: RoundSession, lines: list[str]) -> list[Hand]:
    for line_no, line in enumerate(lines, start=1):
        try:
            session.submit(line)
        except ValidationError:
            session.reset()
            _LOG.error("round %d line %d rejected: %r", session.round_no + 1, line_no, line)
            raise
    return session.finish()


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    cfg = ShowdownConfig.build()
    if args.evaluator:
        cfg = replace(cfg, evaluator=args.evaluator)
    if args.atomic:
        cfg = replace(cfg, atomic_parse=True)
    session = RoundSession(cfg)

    if args.file:
        with open(args.file, encoding="utf-8") as f:
            raw = f.read().splitlines()
    else:
        raw = sys.stdin.read().splitlines()

    for lines in split_rounds(raw):
        if args.strict:
            try:
                hands = _run_strict(session, lines)
            except ValidationError as e:
                print(f"error: {e}", file=sys.stderr)
                return 1
            round_no = session.round_no
        else:
            view = play_round(session, lines)
            hands, round_no = list(view.hands), view.round_no
        print(f"Round {round_no}")
        for hand in hands:
            print(format_hand(hand))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
