"""Typer entry-point wiring for the Escoba CLI."""

from __future__ import annotations

import random

import typer
from rich.console import Console

from ..controller import GameController
from ..logging_utils import LOG_LEVEL, setup_logging
from ..state import EscobaConfig
from .console import ConsoleView

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def build_controller(
    *,
    player_one: str = "Juan",
    player_two: str = "María",
    seed: int | None = None,
    hints: bool = False,
    view_console: Console | None = None,
) -> GameController:
    """Assemble a controller wired to an interactive console view."""

    config = EscobaConfig(player_names=(player_one, player_two))
    view = ConsoleView(view_console or console, hints=hints)
    return GameController(view, config, rng=random.Random(seed))


@app.command()
def play(
    seed: int | None = typer.Option(None, help="Random seed for reproducible deals (omit for randomness)."),
    player_one: str = typer.Option("Juan", help="Name of the first player."),
    player_two: str = typer.Option("María", help="Name of the second player."),
    hints: bool = typer.Option(False, "--hints/--no-hints", help="Show every valid capture for the chosen card."),
    log_level: str = typer.Option(LOG_LEVEL, help="Logging level (DEBUG, INFO, WARNING, ERROR)."),
) -> None:
    """Play a two-player game of Escoba at the keyboard."""

    if player_one == player_two:
        raise typer.BadParameter("Players need different names.")

    setup_logging(log_level)
    controller = build_controller(
        player_one=player_one,
        player_two=player_two,
        seed=seed,
        hints=hints,
    )
    try:
        controller.run()
    except (KeyboardInterrupt, EOFError):
        console.print("\n[dim]Game abandoned.[/dim]")
        raise typer.Exit(code=1)


def main() -> None:
    """Entry-point for ``python -m escoba.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
