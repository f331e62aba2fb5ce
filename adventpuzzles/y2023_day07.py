"""Camel cards: ranking hands and totalling the winnings of their bids."""

import re
from dataclasses import dataclass
from enum import IntEnum
from functools import cmp_to_key
from itertools import groupby

_HAND = re.compile(r"(\w{5}) (\d+)", re.ASCII)
_JOKER = "J"

_RANKS = {card: rank for rank, card in enumerate("23456789TJQKA", start=2)}
_JOKER_RANKS = {card: rank for rank, card in enumerate("J23456789TQKA", start=1)}


class HandType(IntEnum):
    """Kinds of hand, weakest first."""

    HIGH = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


@dataclass(frozen=True)
class Hand:
    """A hand of cards with the bid placed on it."""

    cards: str
    bid: int


def duplicates(cards):
    """Return the lengths of runs of equal adjacent cards longer than one."""
    runs = (len(list(run)) for _, run in groupby(cards))
    return [length for length in runs if length > 1]


_SINGLE_GROUP = {
    2: HandType.ONE_PAIR,
    3: HandType.THREE_OF_A_KIND,
    4: HandType.FOUR_OF_A_KIND,
    5: HandType.FIVE_OF_A_KIND,
}


def _classify(cards, ranks):
    ordered = sorted(cards, key=lambda card: -ranks.get(card, 0))
    groups = sorted(duplicates(ordered))
    if len(groups) == 1:
        return _SINGLE_GROUP.get(groups[0], HandType.HIGH)
    if len(groups) == 2:
        if groups[1] == 2:
            return HandType.TWO_PAIR
        if groups[1] == 3:
            return HandType.FULL_HOUSE
    return HandType.HIGH


def type_of_hand(cards):
    """Return the kind of hand, with ``J`` as an ordinary jack."""
    return _classify(cards, _RANKS)


_JOKER_UPGRADES = {
    (HandType.HIGH, 1): HandType.ONE_PAIR,
    (HandType.HIGH, 2): HandType.THREE_OF_A_KIND,
    (HandType.HIGH, 3): HandType.FOUR_OF_A_KIND,
    (HandType.HIGH, 4): HandType.FIVE_OF_A_KIND,
    (HandType.HIGH, 5): HandType.FIVE_OF_A_KIND,
    (HandType.ONE_PAIR, 1): HandType.THREE_OF_A_KIND,
    (HandType.ONE_PAIR, 2): HandType.FOUR_OF_A_KIND,
    (HandType.ONE_PAIR, 3): HandType.FIVE_OF_A_KIND,
    (HandType.THREE_OF_A_KIND, 1): HandType.FOUR_OF_A_KIND,
    (HandType.THREE_OF_A_KIND, 2): HandType.FIVE_OF_A_KIND,
}


def type_of_hand_with_jokers(cards):
    """Return the best kind of hand when every ``J`` is a wildcard."""
    others = [card for card in cards if card != _JOKER]
    jokers = len(cards) - len(others)
    base = _classify(others, _JOKER_RANKS)
    if jokers == 0:
        return base
    if base is HandType.TWO_PAIR:
        return HandType.FULL_HOUSE
    if base is HandType.FOUR_OF_A_KIND:
        return HandType.FIVE_OF_A_KIND
    return _JOKER_UPGRADES.get((base, jokers), base)


def _hand_key(cards, jokers):
    if jokers:
        return type_of_hand_with_jokers(cards), [_JOKER_RANKS.get(c, 0) for c in cards]
    return type_of_hand(cards), [_RANKS.get(c, 0) for c in cards]


def compare_hands(a, b, jokers=False):
    """Return 1, 0 or -1 as hand ``a`` is stronger, equal or weaker than ``b``."""
    key_a = _hand_key(a.cards, jokers)
    key_b = _hand_key(b.cards, jokers)
    return (key_a > key_b) - (key_a < key_b)


def _parse_hand(line):
    match = _HAND.search(line)
    if match is None:
        raise ValueError(f"invalid hand: {line!r}")
    return Hand(match[1], int(match[2]))


def total_winnings(hand_lines, jokers=False):
    """Sum each bid times the rank of its hand, the weakest hand ranking 1."""
    hands = sorted(
        map(_parse_hand, hand_lines),
        key=cmp_to_key(lambda a, b: compare_hands(a, b, jokers)),
    )
    return sum(hand.bid * rank for rank, hand in enumerate(hands, start=1))


def solve(text):
    """Return the answers to both parts for the given puzzle input."""
    lines = [line for line in text.splitlines() if line]
    return total_winnings(lines, False), total_winnings(lines, True)