from __future__ import annotations

import pytest

from escoba import rules
from escoba.cards import Card, Suit, iter_full_deck
from escoba.state import Player, Trick

DECK = list(iter_full_deck())
CARDS = {(card.suit, card.rank): card for card in DECK}


def card(suit: Suit, rank: int) -> Card:
    return CARDS[(suit, rank)]


def _player_with(cards: list[Card], *, sweeps: int = 0, name: str = "Juan") -> Player:
    player = Player(name)
    if cards:
        player.add_trick(Trick(list(cards)))
    for _ in range(sweeps):
        player.add_trick(Trick([], sweep=True))
    return player


def _non_scoring(count: int) -> list[Card]:
    """Return ``count`` cards that are neither gold nor sevens."""

    pool = [c for c in DECK if not c.is_gold and not c.is_seven]
    return pool[:count]


def test_all_sevens_outranks_majority_of_sevens() -> None:
    sevens = [card(suit, 7) for suit in Suit]
    score = rules.score_player(_player_with(sevens))

    assert score.sevens_points == 2
    assert score.seven_of_gold_points == 1
    assert score.total == 3


@pytest.mark.parametrize(("count", "expected"), [(0, 0), (2, 0), (3, 1), (4, 2)])
def test_sevens_tiers(count: int, expected: int) -> None:
    sevens = [card(suit, 7) for suit in (Suit.CUPS, Suit.SWORDS, Suit.CLUBS, Suit.GOLD)][:count]
    score = rules.score_player(_player_with(sevens + _non_scoring(1)))

    assert score.sevens_points == expected


@pytest.mark.parametrize(("count", "expected"), [(5, 0), (6, 1), (9, 1), (10, 2)])
def test_gold_tiers(count: int, expected: int) -> None:
    gold = [card(Suit.GOLD, rank) for rank in (1, 2, 3, 4, 5, 6, 8, 9, 10, 7)][:count]
    score = rules.score_player(_player_with(gold))

    assert score.gold_count == count
    assert score.gold_points == expected


def test_seven_of_gold_scores_a_point() -> None:
    score = rules.score_player(_player_with([card(Suit.GOLD, 7), card(Suit.CUPS, 1)]))

    assert score.seven_of_gold_points == 1
    assert score.sevens_points == 0
    assert score.gold_points == 0


@pytest.mark.parametrize(
    ("count", "majority", "lopsided"),
    [(20, 0, 0), (21, 1, 0), (30, 1, 0), (31, 1, 2)],
)
def test_card_count_criteria(count: int, majority: int, lopsided: int) -> None:
    pool = [c for c in DECK if not c.is_seven][:count]
    gold_in_pool = len([c for c in pool if c.is_gold])
    score = rules.score_player(_player_with(pool))

    assert score.card_count == count
    assert score.card_majority_points == majority
    assert score.lopsided_points == lopsided
    assert score.total == majority + lopsided + score.gold_points
    assert score.gold_count == gold_in_pool


def test_sweeps_score_one_point_each() -> None:
    score = rules.score_player(_player_with(_non_scoring(2), sweeps=3))

    assert score.sweep_points == 3
    assert score.total == 3
    assert not score.lost_outright


def test_player_without_tricks_loses_outright() -> None:
    score = rules.score_player(Player("María"), player_index=1)

    assert score.lost_outright
    assert score.player_index == 1
    assert score.name == "María"
    assert score.total == 0
    assert score.trick_count == 0


def test_final_scores_follow_seating_order() -> None:
    winner = _player_with(_non_scoring(3), sweeps=1, name="Juan")
    loser = Player("María")

    scores = rules.final_scores([winner, loser])

    assert [score.player_index for score in scores] == [0, 1]
    assert [score.name for score in scores] == ["Juan", "María"]
    assert scores[0].sweep_points == 1
    assert scores[1].lost_outright
