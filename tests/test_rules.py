"""Tests covering the 15-point combination rules."""

from __future__ import annotations

import pytest

from escoba import rules
from escoba.cards import Card, Suit, iter_full_deck

CARDS = {(card.suit, card.rank): card for card in iter_full_deck()}


def card(suit: Suit, rank: int) -> Card:
    return CARDS[(suit, rank)]


@pytest.mark.parametrize(
    ("played", "candidates", "expected"),
    [
        (card(Suit.GOLD, 5), [card(Suit.CUPS, 10)], True),
        (card(Suit.GOLD, 5), [card(Suit.CUPS, 4), card(Suit.SWORDS, 6)], True),
        (card(Suit.GOLD, 1), [card(Suit.CUPS, 1), card(Suit.SWORDS, 3), card(Suit.CLUBS, 10)], True),
        (card(Suit.GOLD, 5), [card(Suit.CUPS, 9)], False),
        (card(Suit.GOLD, 5), [card(Suit.CUPS, 10), card(Suit.CLUBS, 1)], False),
        (card(Suit.GOLD, 10), [], False),
        (card(Suit.GOLD, 10), None, False),
    ],
)
def test_is_valid_combination(played: Card, candidates: list[Card] | None, expected: bool) -> None:
    assert rules.is_valid_combination(played, candidates) is expected


def test_duplicates_are_counted_once() -> None:
    five = card(Suit.CUPS, 5)

    assert rules.is_valid_combination(card(Suit.GOLD, 10), [five, five])
    assert not rules.is_valid_combination(card(Suit.GOLD, 5), [five, five])
    assert rules.combination_sum(card(Suit.GOLD, 5), [five, five, five]) == 10


def test_validation_is_order_independent() -> None:
    played = card(Suit.GOLD, 2)
    subset = [card(Suit.CUPS, 3), card(Suit.SWORDS, 4), card(Suit.CLUBS, 6)]

    assert rules.is_valid_combination(played, subset)
    assert rules.is_valid_combination(played, list(reversed(subset)))


def test_missing_played_card_is_not_a_capture() -> None:
    assert not rules.is_valid_combination(None, [card(Suit.CUPS, 10)])


def test_find_captures_lists_every_subset() -> None:
    table = [
        card(Suit.CUPS, 4),
        card(Suit.SWORDS, 6),
        card(Suit.CLUBS, 10),
        card(Suit.GOLD, 1),
        card(Suit.CUPS, 9),
    ]

    captures = rules.find_captures(card(Suit.GOLD, 5), table)

    assert captures == [
        (card(Suit.CLUBS, 10),),
        (card(Suit.CUPS, 4), card(Suit.SWORDS, 6)),
        (card(Suit.GOLD, 1), card(Suit.CUPS, 9)),
    ]
    assert all(rules.is_valid_combination(card(Suit.GOLD, 5), subset) for subset in captures)


def test_find_captures_with_no_options() -> None:
    assert rules.find_captures(card(Suit.GOLD, 5), [card(Suit.CUPS, 1)]) == []
    assert rules.find_captures(card(Suit.GOLD, 5), []) == []
