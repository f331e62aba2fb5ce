"""Scratchcards: points for winning numbers and copies won."""

import re
from dataclasses import dataclass, field
from functools import cache

_CARD = re.compile(r"Card\s+(\d+):(.*)\|(.*)", re.ASCII)
_NUMBER = re.compile(r"\d+", re.ASCII)


@dataclass
class Card:
    """A scratchcard with its winning numbers and the numbers on it."""

    number: int
    winning_numbers: list = field(default_factory=list)
    numbers_you_have: list = field(default_factory=list)


def _numbers(text):
    return [int(match) for match in _NUMBER.findall(text)]


def _match_card(text):
    match = _CARD.search(text)
    if match is None:
        raise ValueError(f"invalid card: {text!r}")
    return match


def numbers_on_card(card):
    """Return the winning numbers and the numbers you have on a card line."""
    match = _match_card(card)
    return _numbers(match[2]), _numbers(match[3])


def point_total_for_card(card):
    """Return the points for a card line: 1 for the first match, doubled for each further one."""
    winning, had = numbers_on_card(card)
    matches = sum(1 for number in had if number in winning)
    return 2 ** (matches - 1) if matches else 0


def point_total_for_cards(cards):
    """Sum the points of all card lines."""
    return sum(point_total_for_card(card) for card in cards)


def parse_card(text):
    """Parse a card line into a :class:`Card`."""
    match = _match_card(text)
    return Card(int(match[1]), _numbers(match[2]), _numbers(match[3]))


def parse_cards(lines):
    """Return the cards of ``lines`` keyed by card number."""
    return {card.number: card for card in map(parse_card, lines)}


def matches_for_card(card):
    """Return how many of the numbers you have are winning numbers."""
    return sum(1 for number in card.numbers_you_have if number in card.winning_numbers)


def _card_counter(cards):
    """Return a function counting a card plus every copy it wins, by card number."""

    @cache
    def count(number):
        card = cards.get(number)
        if card is None:
            return 1
        return _count_card(card, count)

    return count


def _count_card(card, count):
    won = range(card.number + 1, card.number + matches_for_card(card) + 1)
    return 1 + sum(count(number) for number in won)


def total_cards_for_card(card, cards):
    """Return the card itself plus every copy it wins, recursively."""
    return _count_card(card, _card_counter(cards))


def total_cards(lines):
    """Return the total number of cards held after all copies are won."""
    cards = parse_cards(lines)
    count = _card_counter(cards)
    return sum(_count_card(card, count) for card in cards.values())


def solve(text):
    """Return the answers to both parts for the given puzzle input."""
    lines = [line for line in text.splitlines() if line]
    return point_total_for_cards(lines), total_cards(lines)