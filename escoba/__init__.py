"""Top-level package for the Escoba rules engine."""

from . import cards, controller, rules, state

__all__ = [
    "cards",
    "controller",
    "rules",
    "state",
]
