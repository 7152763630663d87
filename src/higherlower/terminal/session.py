"""Interactive play session."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from higherlower.core import game
from higherlower.core.state import GameState
from higherlower.terminal.display import StateRenderer, welcome_text
from higherlower.terminal.input import HumanPlayer

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Configuration for a play session."""

    seed: Optional[int] = None
    show_rules: bool = True
    color: bool = True
    debug: bool = False

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)


@dataclass(frozen=True)
class SessionSummary:
    """What a finished session leaves behind."""

    games_played: int
    best_score: int
    seed: int


class PlaySession:
    """Runs consecutive games and keeps the best score for the process lifetime."""

    def __init__(self, config: SessionConfig, human_input: Optional[HumanPlayer] = None):
        """Initialize session."""
        self.config = config
        self.seed = config.seed
        self.rng = random.Random(self.seed)

        self.renderer = StateRenderer(use_color=config.color)
        self.human_input = human_input or HumanPlayer()

        self.best_score = 0
        self.games_played = 0
        self.state: GameState = game.new_game(self.best_score)

    def play_game(self, output_fn: Callable[[str], None] = print) -> Optional[GameState]:
        """Play one game to the end.

        Args:
            output_fn: Function to output text (default: print)

        Returns:
            Final state, or None if the player quit mid-game
        """
        self.state = game.start(self.best_score, rng=self.rng)
        self.games_played += 1
        logger.debug(f"Starting game {self.games_played}")

        output_fn("Deck shuffled! Let's play!")

        while not game.is_terminal(self.state):
            output_fn("")
            output_fn(self.renderer.render(self.state, self.config.debug))

            result = self.human_input.get_guess()

            if result.quit:
                self.best_score = self.state.best_score
                return None

            if result.error:
                output_fn(result.error)
                continue

            outcome = game.guess(self.state, result.guess)
            self.state = outcome.new_state
            output_fn(self.renderer.render_result(outcome))

        self.best_score = self.state.best_score

        output_fn("")
        output_fn(self.renderer.render_game_over(self.state))
        return self.state

    def run(self, output_fn: Callable[[str], None] = print) -> SessionSummary:
        """Play games until the player stops.

        Args:
            output_fn: Function to output text (default: print)

        Returns:
            SessionSummary with games played and best score
        """
        if self.config.show_rules:
            output_fn(welcome_text())
            output_fn("")
            output_fn(f"Seed: {self.seed} (use --seed {self.seed} to replay)")
            output_fn("")

        while True:
            final = self.play_game(output_fn)
            if final is None:
                break

            output_fn("")
            again = self.human_input.get_yes_no("Play again? [Y/n]: ", default=True)
            if not again:
                break

        return SessionSummary(
            games_played=self.games_played,
            best_score=self.best_score,
            seed=self.seed,
        )
