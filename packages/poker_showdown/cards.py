# packages/poker_showdown/cards.py
"""
牌面模型与牌面文本解析。

- `Rank` 按强度升序（2..A，取值 2..14）
- `Suit` 无大小之分
- 文本识别使用声明式的 (label, value) 表，按表顺序做前缀匹配，先匹配者胜
- 规则：若某个 label 是另一个 label 的前缀，它必须排在后面（例如 "ten" 在 "t" 之前）
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from .errors import InvalidCardToken


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(Enum):
    CLUBS = "c"
    DIAMONDS = "d"
    HEARTS = "h"
    SPADES = "s"


RANK_CODES: dict[Rank, str] = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# 匹配顺序即表顺序：全称优先，其次 "10"，最后单字符简写
RANK_LABELS: tuple[tuple[str, Rank], ...] = (
    ("ace", Rank.ACE),
    ("king", Rank.KING),
    ("queen", Rank.QUEEN),
    ("jack", Rank.JACK),
    ("ten", Rank.TEN),
    ("nine", Rank.NINE),
    ("eight", Rank.EIGHT),
    ("seven", Rank.SEVEN),
    ("six", Rank.SIX),
    ("five", Rank.FIVE),
    ("four", Rank.FOUR),
    ("three", Rank.THREE),
    ("two", Rank.TWO),
    ("10", Rank.TEN),
    ("a", Rank.ACE),
    ("k", Rank.KING),
    ("q", Rank.QUEEN),
    ("j", Rank.JACK),
    ("t", Rank.TEN),
    ("9", Rank.NINE),
    ("8", Rank.EIGHT),
    ("7", Rank.SEVEN),
    ("6", Rank.SIX),
    ("5", Rank.FIVE),
    ("4", Rank.FOUR),
    ("3", Rank.THREE),
    ("2", Rank.TWO),
)

SUIT_LABELS: tuple[tuple[str, Suit], ...] = (
    ("clubs", Suit.CLUBS),
    ("diamonds", Suit.DIAMONDS),
    ("hearts", Suit.HEARTS),
    ("spades", Suit.SPADES),
    ("c", Suit.CLUBS),
    ("d", Suit.DIAMONDS),
    ("h", Suit.HEARTS),
    ("s", Suit.SPADES),
    ("♣", Suit.CLUBS),
    ("♦", Suit.DIAMONDS),
    ("♥", Suit.HEARTS),
    ("♠", Suit.SPADES),
)


def check_label_order(table) -> None:
    """Raise ValueError if an earlier label would shadow a later one."""
    labels = [label for label, _ in table]
    for i, earlier in enumerate(labels):
        for later in labels[i + 1 :]:
            if later.startswith(earlier):
                raise ValueError(f"label {earlier!r} shadows {later!r}; list the longer label first")


check_label_order(RANK_LABELS)
check_label_order(SUIT_LABELS)


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    @property
    def code(self) -> str:
        """Short code such as 'Ah' or 'Tc'."""
        return RANK_CODES[self.rank] + self.suit.value

    def __str__(self) -> str:
        return self.code


def match_prefix(text: str, table):
    """Return (value, rest) for the first label that prefixes `text`, else (None, text)."""
    for label, value in table:
        if text.startswith(label):
            return value, text[len(label) :]
    return None, text


def parse_card_token(token: str) -> Card:
    """Parse a rank+suit token, rank first, both case-insensitive.

    Accepts 'Ah', 'ah', '10h', 'TenSpades', 'AceHearts'. The suit label must
    directly follow the rank label; anything after the suit label is ignored.
    """
    text = token.lower()
    rank, rest = match_prefix(text, RANK_LABELS)
    if rank is None:
        raise InvalidCardToken(token)
    suit, _ = match_prefix(rest, SUIT_LABELS)
    if suit is None:
        raise InvalidCardToken(token)
    return Card(rank, suit)


__all__ = [
    "Card",
    "RANK_CODES",
    "RANK_LABELS",
    "Rank",
    "SUIT_LABELS",
    "Suit",
    "check_label_order",
    "match_prefix",
    "parse_card_token",
]
