"""Keyboard-driven ``GameView`` implementation on top of a Rich console."""

from __future__ import annotations

from typing import Callable, Sequence

from rich.console import Console

from ..cards import Card, Deck
from ..rules import TARGET_SUM, PlayerScore, find_captures, is_valid_combination
from ..state import Player
from .render import describe_card, format_card, render_cards, render_final_result, render_state


def parse_card_choice(text: str, hand_size: int) -> int | None:
    """Return the hand index typed in ``text`` or ``None`` when invalid."""

    try:
        index = int(text.strip())
    except ValueError:
        return None
    if 0 <= index < hand_size:
        return index
    return None


def parse_table_selection(text: str, table: Sequence[Card]) -> tuple[list[Card], list[str]]:
    """Map whitespace separated indices onto ``table`` cards.

    Non-numeric tokens, out of range indices and repeated cards are skipped;
    a message is returned for each token that was ignored.
    """

    selected: list[Card] = []
    ignored: list[str] = []
    for part in text.split():
        try:
            index = int(part)
        except ValueError:
            ignored.append(f"'{part}' is not a number, ignored.")
            continue
        if not 0 <= index < len(table):
            ignored.append(f"Index {index} out of range, ignored.")
            continue
        card = table[index]
        if card not in selected:
            selected.append(card)
    return selected, ignored


class ConsoleView:
    """Interactive view that reads choices line by line from the keyboard."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        reader: Callable[[str], str] | None = None,
        hints: bool = False,
    ) -> None:
        self.console = console or Console()
        self._reader = reader or self.console.input
        self.hints = hints

    def notify_round_state(
        self, table: Sequence[Card], player: Player, deck: Deck, round_index: int
    ) -> None:
        self.console.rule("Current game state")
        self.console.print(render_state(table, player, deck, round_index))

    def request_card(self, player: Player) -> Card:
        hand = player.hand
        if not hand:
            raise ValueError(f"{player.name} has no cards to play")
        last = len(hand) - 1
        while True:
            answer = self._reader(f"Choose the card to play (0-{last}): ")
            index = parse_card_choice(answer, len(hand))
            if index is not None:
                return hand[index]
            self.console.print(f"[red]❌ Invalid option. Enter a number between 0 and {last}.[/red]")

    def request_table_subset(self, table: Sequence[Card], played: Card) -> list[Card]:
        if not table:
            self.console.print("The table is empty. Your card stays on the table.")
            return []

        self.console.print(f"\nYou played {format_card(played)} {describe_card(played)}")
        self.console.print(
            f"Which cards do you take? They must add up to {TARGET_SUM - played.rank} "
            f"to make {TARGET_SUM}."
        )
        self.console.print(render_cards(table))
        if self.hints:
            self._print_hints(table, played)

        answer = self._reader("Card indices separated by spaces (enter to take nothing): ")
        selected, ignored = parse_table_selection(answer, table)
        for message in ignored:
            self.console.print(f"[yellow]{message}[/yellow]")

        if not selected:
            self.console.print("⚠️ You take nothing. Your card stays on the table.")
            return []

        summary = " + ".join(describe_card(card) for card in [played, *selected])
        self.console.print(f"🤔 Checking: {summary}")
        if is_valid_combination(played, selected):
            self.console.print("[green]✅ Valid play![/green]")
            return selected
        self.console.print(
            f"[red]🪲 The sum is not {TARGET_SUM}. Your card stays on the table.[/red]"
        )
        return []

    def notify_sweep(self, player_name: str) -> None:
        self.console.print(f"\n🎉 ESCOBA for {player_name.upper()}! 🎉")
        self.console.print("The table has been swept clean.")

    def notify_final_result(
        self, players: Sequence[Player], scores: Sequence[PlayerScore]
    ) -> None:
        self.console.rule("Final result")
        self.console.print(render_final_result(scores))

    def _print_hints(self, table: Sequence[Card], played: Card) -> None:
        captures = find_captures(played, table)
        if not captures:
            self.console.print("[dim]No capture is possible with this card.[/dim]")
            return
        for subset in captures:
            indices = " ".join(str(table.index(card)) for card in subset)
            cards = " ".join(format_card(card) for card in subset)
            self.console.print(f"[dim]Hint:[/dim] {indices}  ({cards})")
