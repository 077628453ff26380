"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..cards import Card, Deck, Suit
from ..rules import PlayerScore
from ..state import Player

_SUIT_STYLES = {
    Suit.GOLD: ("⛀", "bold yellow"),
    Suit.CUPS: ("♥", "bold red"),
    Suit.SWORDS: ("⚔", "bold blue"),
    Suit.CLUBS: ("♣", "bold green"),
}

_FACE_LETTERS = {8: "S", 9: "C", 10: "R"}


def format_card(card: Card) -> str:
    """Return a Rich-rendered short label for ``card``."""

    symbol, style = _SUIT_STYLES[card.suit]
    face = _FACE_LETTERS.get(card.rank, str(card.rank))
    return f"[{style}]{face}{symbol}[/{style}]"


def describe_card(card: Card) -> str:
    _, style = _SUIT_STYLES[card.suit]
    return f"[{style}]{card.label()}[/{style}]"


def render_cards(cards: Sequence[Card], *, empty_label: str = "(empty)") -> RenderableType:
    """Return a one-row grid of cards with their selection index above."""

    if not cards:
        return Text(empty_label, style="dim")
    grid = Table(box=box.ROUNDED, show_header=True, header_style="cyan")
    for idx, _ in enumerate(cards):
        grid.add_column(f"[{idx}]", justify="center")
    grid.add_row(*(format_card(card) for card in cards))
    return grid


def render_state(
    table: Sequence[Card],
    player: Player,
    deck: Deck,
    round_index: int,
) -> RenderableType:
    """Return a Rich panel describing the table and the active player."""

    header = Text.from_markup(
        f"[cyan]Round[/cyan]: {round_index + 1}  "
        f"[cyan]Deck[/cyan]: {deck.remaining()} card(s)"
    )
    stats = Text.from_markup(
        f"[bold yellow]{player.name}[/bold yellow] - "
        f"escobas: {player.sweeps} - tricks: {player.trick_count} - "
        f"cards won: {player.card_count}"
    )
    components: list[RenderableType] = [
        header,
        Panel(render_cards(table), title="Table", border_style="green", box=box.SQUARE),
        stats,
        Panel(render_cards(player.hand), title="Hand", border_style="yellow", box=box.SQUARE),
    ]
    return Panel(Group(*components), title="Escoba", padding=(0, 1), border_style="cyan")


def score_lines(score: PlayerScore) -> list[str]:
    """Return the point breakdown lines awarded to ``score``'s player."""

    lines: list[str] = []
    if score.sweep_points:
        lines.append(f"{score.sweep_points} point(s) - escobas")
    if score.gold_points == 2:
        lines.append("2 points - every gold card")
    elif score.gold_points == 1:
        lines.append(f"1 point - most gold cards ({score.gold_count})")
    if score.seven_of_gold_points:
        lines.append('1 point - seven of gold ("guindis")')
    if score.sevens_points == 2:
        lines.append("2 points - every seven")
    elif score.sevens_points == 1:
        lines.append(f"1 point - most sevens ({score.sevens_count})")
    if score.card_majority_points:
        lines.append("1 point - most cards")
    if score.lopsided_points:
        lines.append("2 points - opponent kept fewer than 10 cards")
    return lines


def render_final_result(scores: Sequence[PlayerScore]) -> RenderableType:
    """Return the end-of-game summary table."""

    table = Table(title="Final Result", box=box.DOUBLE_EDGE)
    table.add_column("Player", justify="center")
    table.add_column("Tricks", justify="right")
    table.add_column("Cards", justify="right")
    table.add_column("Breakdown", justify="left")
    table.add_column("Points", justify="right")

    for score in scores:
        breakdown = "\n".join(score_lines(score)) or "—"
        if score.lost_outright:
            breakdown = "[bold red]Loses the game: no tricks won[/bold red]"
        table.add_row(
            score.name,
            str(score.trick_count),
            str(score.card_count),
            breakdown,
            str(score.total),
        )
    return table
