"""Console front-end for playing Escoba at the keyboard."""

from .console import ConsoleView

__all__ = ["ConsoleView"]
