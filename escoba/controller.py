"""Game flow controller driving a complete two-player Escoba game."""

from __future__ import annotations

import random
from enum import Enum
from typing import Protocol, Sequence

from . import rules
from .cards import Card, Deck, ShuffleSource
from .logging_utils import get_logger
from .rules import PlayerScore
from .state import EscobaConfig, EscobaState, Player, Trick, new_game_state

logger = get_logger(__name__)

__all__ = ["GamePhase", "GameView", "GameController"]


class GamePhase(str, Enum):
    """High-level phases of a game, in the order they are visited."""

    DEALING_INITIAL = "dealing_initial"
    PLAYING = "playing"
    REDEAL_CHECK = "redeal_check"
    FINAL_ASSIGN = "final_assign"
    SCORING = "scoring"
    DONE = "done"


class GameView(Protocol):
    """Input/output collaborator consulted by the controller.

    ``request_card`` must return a card from ``player.hand``.
    ``request_table_subset`` returns the table cards to capture with
    ``played``, or an empty sequence to leave ``played`` on the table.
    """

    def request_card(self, player: Player) -> Card:  # pragma: no cover - protocol only
        ...

    def request_table_subset(
        self, table: Sequence[Card], played: Card
    ) -> Sequence[Card]:  # pragma: no cover - protocol only
        ...

    def notify_sweep(self, player_name: str) -> None:  # pragma: no cover - protocol only
        ...

    def notify_round_state(
        self, table: Sequence[Card], player: Player, deck: Deck, round_index: int
    ) -> None:  # pragma: no cover - protocol only
        ...

    def notify_final_result(
        self, players: Sequence[Player], scores: Sequence[PlayerScore]
    ) -> None:  # pragma: no cover - protocol only
        ...


class GameController:
    """Owns one game's state and advances it through every phase."""

    def __init__(
        self,
        view: GameView,
        config: EscobaConfig | None = None,
        *,
        rng: ShuffleSource | None = None,
        deck_cards: Sequence[Card] | None = None,
    ) -> None:
        self.view = view
        self.config = config or EscobaConfig()
        self.rng: ShuffleSource = rng if rng is not None else random.Random()
        self.state: EscobaState = new_game_state(self.config, deck_cards)
        self.phase = GamePhase.DEALING_INITIAL

    def run(self) -> list[PlayerScore]:
        """Play a full game and return the final scoring breakdown."""

        self.deal_initial()
        while self.state.rounds_played < self.config.total_plays:
            self.play_turn()
        self.assign_leftovers()
        scores = self.score()
        self.view.notify_final_result(self.state.players, scores)
        self.phase = GamePhase.DONE
        return scores

    def deal_initial(self) -> None:
        """Shuffle, deal each player a hand and lay out the opening table."""

        self.phase = GamePhase.DEALING_INITIAL
        deck = self.state.deck
        deck.shuffle(self.rng)
        self._deal_hands()
        for _ in range(self.config.table_size):
            card = deck.draw()
            if card is None:
                break
            self.state.table.place(card)
        logger.debug(
            "initial deal done: %d card(s) on table, %d left in deck",
            len(self.state.table),
            deck.remaining(),
        )
        self.phase = GamePhase.PLAYING

    def play_turn(self) -> Trick | None:
        """Run a single play for the player whose turn it is."""

        state = self.state
        self.phase = GamePhase.PLAYING
        player = state.current_player
        self.view.notify_round_state(
            state.table.snapshot(), player, state.deck.copy(), state.rounds_played
        )

        played = self.view.request_card(player)
        selection = self.view.request_table_subset(state.table.snapshot(), played)
        trick = self.process_move(player, played, selection)
        state.rounds_played += 1

        self.phase = GamePhase.REDEAL_CHECK
        if state.both_hands_empty() and not state.deck.is_empty():
            self.redeal()

        state.advance_turn()
        self.phase = GamePhase.PLAYING
        return trick

    def process_move(
        self, player: Player, played: Card, selection: Sequence[Card] | None
    ) -> Trick | None:
        """Apply ``played`` with the table cards in ``selection``.

        Returns the stored trick, or ``None`` when the card stays on the table.
        """

        table = self.state.table
        captured = list(dict.fromkeys(selection or ()))
        if captured and self.config.validate_captures and not self._is_capture(played, captured):
            logger.warning(
                "%s: %s does not make %d with %s, leaving it on the table",
                player.name,
                played.label(),
                rules.TARGET_SUM,
                ", ".join(card.label() for card in captured),
            )
            captured = []
        elif captured and not self.config.validate_captures:
            absent = [card for card in captured if card not in table]
            if absent:
                logger.warning(
                    "%s: ignoring %s, not on the table",
                    player.name,
                    ", ".join(card.label() for card in absent),
                )
                captured = [card for card in captured if card in table]

        if not captured:
            player.play_card(played)
            table.place(played)
            logger.debug("%s leaves %s on the table", player.name, played.label())
            return None

        trick = Trick()
        trick.add_card(played)
        for card in captured:
            trick.add_card(card)

        player.play_card(played)
        for card in captured:
            table.remove(card)

        if table.is_empty():
            trick.mark_sweep()
            logger.info("escoba for %s", player.name)
            self.view.notify_sweep(player.name)

        player.add_trick(trick)
        self.state.last_winner = self.state.players.index(player)
        logger.debug("%s captures %d card(s)", player.name, len(trick))
        return trick

    def redeal(self) -> None:
        """Give each player a fresh hand while the deck lasts."""

        self._deal_hands()
        logger.debug("re-deal done, %d card(s) left in deck", self.state.deck.remaining())

    def assign_leftovers(self) -> Trick | None:
        """Hand the remaining table cards to the last player who captured.

        The resulting trick never counts as a sweep.
        """

        self.phase = GamePhase.FINAL_ASSIGN
        state = self.state
        if state.last_winner is None or state.table.is_empty():
            return None
        trick = Trick(cards=state.table.clear())
        winner = state.players[state.last_winner]
        winner.add_trick(trick)
        logger.info("%s takes the %d card(s) left on the table", winner.name, len(trick))
        return trick

    def score(self) -> list[PlayerScore]:
        self.phase = GamePhase.SCORING
        return rules.final_scores(self.state.players)

    def _deal_hands(self) -> None:
        deck = self.state.deck
        for _ in range(self.config.hand_size):
            for player in self.state.players:
                card = deck.draw()
                if card is None:
                    return
                player.receive_card(card)

    def _is_capture(self, played: Card, captured: Sequence[Card]) -> bool:
        table = self.state.table
        if any(card not in table for card in captured):
            return False
        return rules.is_valid_combination(played, captured)
