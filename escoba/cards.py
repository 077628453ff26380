"""Card abstractions and the 40-card Spanish deck used by Escoba."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Protocol

NUM_CARDS = 40
CARDS_PER_SUIT = 10

SEVEN = 7

RANK_NAMES = (
    "As",
    "Dos",
    "Tres",
    "Cuatro",
    "Cinco",
    "Seis",
    "Siete",
    "Sota",
    "Caballo",
    "Rey",
)


class Suit(str, Enum):
    """Enumeration of the four Spanish suits in deck construction order."""

    GOLD = "oros"
    CUPS = "copas"
    SWORDS = "espadas"
    CLUBS = "bastos"


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a physical card.

    ``rank`` doubles as the point value used for 15-point combinations;
    ranks 8, 9 and 10 are the sota, caballo and rey. Two cards are equal
    only when they share the same ``id``.
    """

    id: int
    suit: Suit = field(compare=False)
    rank: int = field(compare=False)

    @property
    def name(self) -> str:
        if 1 <= self.rank <= CARDS_PER_SUIT:
            return RANK_NAMES[self.rank - 1]
        return "<No definido>"

    @property
    def is_gold(self) -> bool:
        return self.suit is Suit.GOLD

    @property
    def is_seven(self) -> bool:
        return self.rank == SEVEN

    def label(self) -> str:
        """Create a description such as ``Siete de oros (7)``."""

        return f"{self.name} de {self.suit.value} ({self.rank})"


def iter_full_deck() -> Iterable[Card]:
    """Yield the 40 cards of a fresh deck in id order."""

    card_id = 1
    for suit in Suit:
        for rank in range(1, CARDS_PER_SUIT + 1):
            yield Card(id=card_id, suit=suit, rank=rank)
            card_id += 1


class ShuffleSource(Protocol):
    """Anything able to permute a list in place, e.g. ``random.Random``."""

    def shuffle(self, x: List[Card]) -> None:  # pragma: no cover - protocol only
        ...


class Deck:
    """Draw-once deck with a cursor marking the next undrawn card."""

    def __init__(self, cards: Iterable[Card] | None = None) -> None:
        self._cards: List[Card] = list(iter_full_deck() if cards is None else cards)
        self._cursor = 0

    def __len__(self) -> int:
        return self.remaining()

    def remaining(self) -> int:
        return len(self._cards) - self._cursor

    def is_empty(self) -> bool:
        return self.remaining() == 0

    def shuffle(self, rng: ShuffleSource) -> None:
        """Permute the undrawn cards in place; drawn positions are untouched."""

        undrawn = self._cards[self._cursor :]
        rng.shuffle(undrawn)
        self._cards[self._cursor :] = undrawn

    def draw(self) -> Card | None:
        """Return the next card or ``None`` once the deck is exhausted."""

        if self._cursor >= len(self._cards):
            return None
        card = self._cards[self._cursor]
        self._cursor += 1
        return card

    def peek_remaining(self) -> list[Card]:
        """Return a detached copy of the undrawn cards in draw order."""

        return list(self._cards[self._cursor :])

    def copy(self) -> "Deck":
        """Return a detached deck holding only the undrawn cards."""

        return Deck(self.peek_remaining())

    def describe(self) -> str:
        return "\n".join(card.label() for card in self._cards[self._cursor :])
