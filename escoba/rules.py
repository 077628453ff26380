"""Rule utilities and constants for Escoba."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import TYPE_CHECKING, Final, Iterable, Sequence

from .cards import CARDS_PER_SUIT, NUM_CARDS, Card

if TYPE_CHECKING:
    from .state import Player

__all__ = [
    "TARGET_SUM",
    "TOTAL_SEVENS",
    "EscobaError",
    "CardNotInHand",
    "CardNotOnTable",
    "PlayerScore",
    "combination_sum",
    "is_valid_combination",
    "find_captures",
    "score_player",
    "final_scores",
]

TARGET_SUM: Final[int] = 15
TOTAL_SEVENS: Final[int] = 4
# Holding more than this leaves the opponent with fewer than 10 cards.
LOPSIDED_CARD_COUNT: Final[int] = NUM_CARDS - 10


class EscobaError(RuntimeError):
    """Base class for rule engine contract violations."""


class CardNotInHand(EscobaError):
    """Raised when a player plays a card they are not holding."""


class CardNotOnTable(EscobaError):
    """Raised when removing a card that is not face up on the table."""


def _distinct(cards: Iterable[Card]) -> list[Card]:
    seen: set[int] = set()
    unique: list[Card] = []
    for card in cards:
        if card.id in seen:
            continue
        seen.add(card.id)
        unique.append(card)
    return unique


def combination_sum(played: Card, candidates: Iterable[Card] | None) -> int:
    """Return the points of ``played`` plus each distinct candidate card."""

    total = played.rank
    if candidates is None:
        return total
    return total + sum(card.rank for card in _distinct(candidates))


def is_valid_combination(played: Card | None, candidates: Iterable[Card] | None) -> bool:
    """Return ``True`` when ``played`` and ``candidates`` add up to 15.

    Duplicate entries in ``candidates`` are counted once. A capture always
    needs at least one table card, so an empty selection is never valid.
    """

    if played is None or candidates is None:
        return False
    unique = _distinct(candidates)
    if not unique:
        return False
    return combination_sum(played, unique) == TARGET_SUM


def find_captures(played: Card, table: Sequence[Card]) -> list[tuple[Card, ...]]:
    """Enumerate every subset of ``table`` that ``played`` can capture.

    Subsets are returned smallest first, each preserving table order.
    """

    needed = TARGET_SUM - played.rank
    if needed <= 0:
        return []
    cards = _distinct(table)
    captures: list[tuple[Card, ...]] = []
    for size in range(1, len(cards) + 1):
        for subset in combinations(cards, size):
            if sum(card.rank for card in subset) == needed:
                captures.append(subset)
    return captures


@dataclass(frozen=True, slots=True)
class PlayerScore:
    """Per-player scoring breakdown captured at the end of a game."""

    player_index: int
    name: str
    trick_count: int
    card_count: int
    gold_count: int
    sevens_count: int
    sweep_points: int
    gold_points: int
    seven_of_gold_points: int
    sevens_points: int
    card_majority_points: int
    lopsided_points: int
    lost_outright: bool

    @property
    def total(self) -> int:
        return (
            self.sweep_points
            + self.gold_points
            + self.seven_of_gold_points
            + self.sevens_points
            + self.card_majority_points
            + self.lopsided_points
        )


def _gold_points(gold_count: int) -> int:
    if gold_count == CARDS_PER_SUIT:
        return 2
    if gold_count > CARDS_PER_SUIT // 2:
        return 1
    return 0


def _sevens_points(sevens_count: int) -> int:
    if sevens_count == TOTAL_SEVENS:
        return 2
    if sevens_count >= TOTAL_SEVENS - 1:
        return 1
    return 0


def score_player(player: "Player", player_index: int = 0) -> PlayerScore:
    """Evaluate every scoring criterion for ``player`` independently."""

    card_count = player.card_count
    gold_count = player.gold_count
    sevens_count = player.sevens_count
    return PlayerScore(
        player_index=player_index,
        name=player.name,
        trick_count=player.trick_count,
        card_count=card_count,
        gold_count=gold_count,
        sevens_count=sevens_count,
        sweep_points=player.sweeps,
        gold_points=_gold_points(gold_count),
        seven_of_gold_points=1 if player.has_seven_of_gold else 0,
        sevens_points=_sevens_points(sevens_count),
        card_majority_points=1 if card_count > NUM_CARDS // 2 else 0,
        lopsided_points=2 if card_count > LOPSIDED_CARD_COUNT else 0,
        lost_outright=player.trick_count == 0,
    )


def final_scores(players: Sequence["Player"]) -> list[PlayerScore]:
    """Return the scoring breakdown for each player in seating order."""

    return [score_player(player, idx) for idx, player in enumerate(players)]
