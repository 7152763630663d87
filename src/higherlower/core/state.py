"""Immutable game state representation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from higherlower.core.card import Card


class GameStatus(Enum):
    """Lifecycle of a single game."""

    IDLE = "idle"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class Guess(Enum):
    """Player prediction about the next card."""

    HIGHER = "higher"
    LOWER = "lower"


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a game.

    ``deck`` holds the cards not yet revealed, front first.
    ``cards_played`` counts revealed cards including ``current_card``.
    """

    deck: tuple[Card, ...]
    current_card: Optional[Card]
    score: int
    best_score: int
    status: GameStatus
    cards_played: int

    def copy_with(self, **changes) -> "GameState":  # type: ignore
        """Create a new state with specified changes."""
        current = {
            "deck": self.deck,
            "current_card": self.current_card,
            "score": self.score,
            "best_score": self.best_score,
            "status": self.status,
            "cards_played": self.cards_played,
        }
        current.update(changes)
        return GameState(**current)


@dataclass(frozen=True)
class GuessResult:
    """Outcome of one guess."""

    correct: bool
    next_card: Card
    new_state: GameState
