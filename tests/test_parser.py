import logging

import pytest
from poker_showdown.cards import Card, Rank, Suit, parse_card_token
from poker_showdown.errors import (
    DuplicateCard,
    DuplicateOwner,
    EmptyInput,
    InvalidCardToken,
    InvalidOwnerId,
    ValidationError,
    WrongTokenCount,
)
from poker_showdown.parser import HandParser
from poker_showdown.round_state import RoundState


@pytest.fixture
def parser():
    return HandParser(RoundState())


def test_parse_basic_hand_keeps_input_order(parser):
    hand = parser.parse("1 AH 2C 3D 4S 5H")
    assert hand.owner_id == 1
    assert hand.cards == [
        Card(Rank.ACE, Suit.HEARTS),
        Card(Rank.TWO, Suit.CLUBS),
        Card(Rank.THREE, Suit.DIAMONDS),
        Card(Rank.FOUR, Suit.SPADES),
        Card(Rank.FIVE, Suit.HEARTS),
    ]
    assert hand.category is None and hand.standing is None


def test_parse_is_case_insensitive():
    a = HandParser().parse("1 AH 2C 3D 4S 5H")
    b = HandParser().parse("1 ah 2c 3d 4s 5h")
    c = HandParser().parse("1 AceHearts TwoClubs ThreeDiamonds FourSpades FiveHearts")
    assert a.cards == b.cards == c.cards


def test_runs_of_whitespace_split_tokens(parser):
    hand = parser.parse("  7\tKH   KD 9C\t9S 2H  ")
    assert hand.owner_id == 7
    assert hand.codes() == ["Kh", "Kd", "9c", "9s", "2h"]


@pytest.mark.parametrize("line", [None, "", "   ", "\t\n"])
def test_empty_input(parser, line):
    with pytest.raises(EmptyInput):
        parser.parse(line)


@pytest.mark.parametrize(
    "line,count",
    [("1 AH 2C 3D 4S", 5), ("1 AH 2C 3D 4S 5H 6H", 7), ("1", 1)],
)
def test_wrong_token_count(parser, line, count):
    with pytest.raises(WrongTokenCount) as ei:
        parser.parse(line)
    assert ei.value.detail == count


@pytest.mark.parametrize("token", ["notanumber", "1.5", "1_000", "0x1", "A1"])
def test_invalid_owner_id(parser, token):
    with pytest.raises(InvalidOwnerId) as ei:
        parser.parse(f"{token} AH 2C 3D 4S 5H")
    assert ei.value.detail == token


def test_signed_owner_ids_are_integers(parser):
    assert parser.parse("-3 AH 2C 3D 4S 5H").owner_id == -3
    assert parser.parse("+4 KH KC KD KS QH").owner_id == 4


def test_duplicate_owner_in_same_round(parser):
    parser.parse("1 AH 2C 3D 4S 5H")
    with pytest.raises(DuplicateOwner) as ei:
        parser.parse("1 KH KC KD KS QH")
    assert ei.value.detail == 1


def test_duplicate_owner_compares_integer_values(parser):
    parser.parse("7 AH 2C 3D 4S 5H")
    with pytest.raises(DuplicateOwner):
        parser.parse("007 KH KC KD KS QH")


def test_duplicate_card_within_line(parser):
    with pytest.raises(DuplicateCard) as ei:
        parser.parse("1 AH AH 2C 3D 4S")
    assert ei.value.detail == "AH"


def test_duplicate_card_across_hands_and_notations(parser):
    parser.parse("1 AH 2C 3D 4S 5H")
    with pytest.raises(DuplicateCard) as ei:
        parser.parse("2 KH KC KD AceHearts QH")
    assert ei.value.detail == "AceHearts"


def test_invalid_card_token(parser):
    with pytest.raises(InvalidCardToken) as ei:
        parser.parse("1 AH 2C ZZ 4S 5H")
    assert ei.value.detail == "ZZ"


def test_all_errors_are_validation_errors(parser):
    for line in ["", "1 2", "x AH 2C 3D 4S 5H", "1 AH AH 2C 3D 4S"]:
        with pytest.raises(ValidationError):
            parser.parse(line)


def test_partial_commit_keeps_tokens_before_failure():
    state = RoundState()
    p = HandParser(state)
    with pytest.raises(InvalidCardToken):
        p.parse("1 AH 2C ZZ 4S 5H")
    # 失败前已校验的 token 保留，失败 token 之后的不登记
    assert state.has_owner(1)
    assert state.has_card(parse_card_token("AH"))
    assert state.has_card(parse_card_token("2C"))
    assert not state.has_card(parse_card_token("4S"))
    assert not state.has_card(parse_card_token("5H"))
    with pytest.raises(DuplicateCard):
        p.parse("2 AH KC KD KS QH")
    assert p.parse("3 4S 5H KC KD KS").owner_id == 3


def test_atomic_mode_registers_nothing_on_failure():
    state = RoundState()
    p = HandParser(state, atomic=True)
    with pytest.raises(InvalidCardToken):
        p.parse("1 AH 2C ZZ 4S 5H")
    assert state.owner_ids == set()
    assert state.cards == set()
    hand = p.parse("1 AH 2C 3D 4S 5H")
    assert hand.owner_id == 1
    assert state.has_owner(1) and len(state.cards) == 5


def test_atomic_mode_still_detects_duplicates_within_line():
    p = HandParser(atomic=True)
    with pytest.raises(DuplicateCard):
        p.parse("1 AH ah 2C 3D 4S")
    assert p.round_state.cards == set()


def test_reset_round_allows_reuse():
    p = HandParser()
    p.parse("1 AH 2C 3D 4S 5H")
    p.reset_round()
    hand = p.parse("1 AH 2C 3D 4S 5H")
    assert hand.owner_id == 1


def test_separate_round_states_do_not_interfere():
    p1, p2 = HandParser(), HandParser()
    p1.parse("1 AH 2C 3D 4S 5H")
    assert p2.parse("1 AH 2C 3D 4S 5H").owner_id == 1


def test_parse_lines_and_debug_log(caplog):
    caplog.set_level(logging.DEBUG, logger="poker_showdown.parser")
    hands = HandParser().parse_lines(["1 AH 2C 3D 4S 5H", "2 KH KC KD KS QH"])
    assert [h.owner_id for h in hands] == [1, 2]
    assert any("owner=2" in r.getMessage() for r in caplog.records)
