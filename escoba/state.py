"""Core game state data structures for Escoba."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .cards import Card, Deck
from .rules import CardNotInHand, CardNotOnTable

NUM_PLAYERS = 2


@dataclass(slots=True)
class EscobaConfig:
    """Runtime configuration for a single Escoba game."""

    player_names: tuple[str, str] = ("Juan", "María")
    hand_size: int = 3
    table_size: int = 4
    total_plays: int = 36
    validate_captures: bool = True

    def __post_init__(self) -> None:
        if len(self.player_names) != NUM_PLAYERS:
            raise ValueError("Escoba is played by exactly two players")
        if self.hand_size <= 0 or self.table_size < 0 or self.total_plays <= 0:
            raise ValueError("hand size and play count must be positive, table size non-negative")


@dataclass(slots=True)
class Trick:
    """Cards captured in one move, the played card first."""

    cards: List[Card] = field(default_factory=list)
    sweep: bool = False

    def add_card(self, card: Card) -> None:
        self.cards.append(card)

    def mark_sweep(self) -> None:
        self.sweep = True

    def copy(self) -> "Trick":
        """Return a detached copy of the trick."""

        return Trick(cards=list(self.cards), sweep=self.sweep)

    def __len__(self) -> int:
        return len(self.cards)

    @property
    def gold_count(self) -> int:
        return sum(1 for card in self.cards if card.is_gold)

    @property
    def sevens_count(self) -> int:
        return sum(1 for card in self.cards if card.is_seven)

    @property
    def has_seven_of_gold(self) -> bool:
        return any(card.is_gold and card.is_seven for card in self.cards)


class Table:
    """Face-up cards that can be captured, in the order they were placed."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: List[Card] = list(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def place(self, card: Card) -> None:
        self._cards.append(card)

    def remove(self, card: Card) -> None:
        try:
            self._cards.remove(card)
        except ValueError:
            raise CardNotOnTable(f"{card.label()} is not on the table") from None

    def clear(self) -> list[Card]:
        """Empty the table returning the cards that were on it."""

        cards, self._cards = self._cards, []
        return cards

    def snapshot(self) -> list[Card]:
        return list(self._cards)

    def is_empty(self) -> bool:
        return not self._cards


class Player:
    """A seated player with a hand and the tricks they have won.

    ``hand`` and ``tricks`` always return copies; statistics are folded over
    the stored tricks on every call.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._hand: List[Card] = []
        self._tricks: List[Trick] = []

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, hand={self._hand!r}, tricks={self._tricks!r})"

    @property
    def hand(self) -> list[Card]:
        return list(self._hand)

    @property
    def tricks(self) -> list[Trick]:
        return [trick.copy() for trick in self._tricks]

    def receive_card(self, card: Card) -> None:
        self._hand.append(card)

    def play_card(self, card: Card) -> None:
        try:
            self._hand.remove(card)
        except ValueError:
            raise CardNotInHand(f"{self.name} is not holding {card.label()}") from None

    def add_trick(self, trick: Trick) -> None:
        self._tricks.append(trick.copy())

    def is_empty(self) -> bool:
        return not self._hand

    @property
    def trick_count(self) -> int:
        return len(self._tricks)

    @property
    def sweeps(self) -> int:
        return sum(1 for trick in self._tricks if trick.sweep)

    @property
    def card_count(self) -> int:
        return sum(len(trick) for trick in self._tricks)

    @property
    def gold_count(self) -> int:
        return sum(trick.gold_count for trick in self._tricks)

    @property
    def sevens_count(self) -> int:
        return sum(trick.sevens_count for trick in self._tricks)

    @property
    def has_seven_of_gold(self) -> bool:
        return any(trick.has_seven_of_gold for trick in self._tricks)


@dataclass(slots=True)
class EscobaState:
    """Mutable state of one game: seats, table, deck and turn bookkeeping."""

    players: List[Player]
    table: Table = field(default_factory=Table)
    deck: Deck = field(default_factory=Deck)
    turn_index: int = 0
    last_winner: int | None = None
    rounds_played: int = 0

    def __post_init__(self) -> None:
        if len(self.players) != NUM_PLAYERS:
            raise ValueError("Escoba is played by exactly two players")

    @property
    def current_player(self) -> Player:
        return self.players[self.turn_index]

    @property
    def opponent(self) -> Player:
        return self.players[1 - self.turn_index]

    def advance_turn(self) -> None:
        self.turn_index = 1 - self.turn_index

    def both_hands_empty(self) -> bool:
        return all(player.is_empty() for player in self.players)


def new_game_state(config: EscobaConfig, deck_cards: Sequence[Card] | None = None) -> EscobaState:
    """Return an undealt game state for ``config``.

    ``deck_cards`` fixes the deck order, which is handy for scripted games.
    """

    players = [Player(name) for name in config.player_names]
    deck = Deck(deck_cards)
    return EscobaState(players=players, deck=deck)
